# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Union, cast

import pendulum

type DateLike = Union[datetime.date, datetime.datetime]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def python_to_pendulum_local(python_value: datetime.datetime) -> pendulum.DateTime:
    """Naive values are read as local wall time; aware values keep their zone."""
    return pendulum.instance(python_value, tz="local")


def local_date(value: DateLike) -> pendulum.Date:
    """Return the local calendar date of a timestamp, or the date itself."""
    if isinstance(value, datetime.datetime):
        return python_to_pendulum_local(value).in_tz("local").date()
    return pendulum.date(value.year, value.month, value.day)


def start_of_local_day(value: DateLike) -> pendulum.DateTime:
    day = local_date(value)
    return pendulum.datetime(day.year, day.month, day.day, tz="local")


def today_local() -> pendulum.DateTime:
    return pendulum.today("local")


def date_key(value: DateLike) -> str:
    """Local calendar date as 'YYYY-MM-DD'."""
    return local_date(value).format("YYYY-MM-DD")


def compact_date_key(value: DateLike) -> str:
    """Local calendar date as 'YYYYMMDD'."""
    return local_date(value).format("YYYYMMDD")


def shift_exact(
    value: pendulum.DateTime, delta: datetime.timedelta
) -> pendulum.DateTime:
    # Only time units are added so pendulum treats the shift as elapsed time
    # rather than wall-clock days.
    return value.add(
        seconds=delta.days * 86400 + delta.seconds, microseconds=delta.microseconds
    )


def minutes_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    return round((end - start).total_seconds() / 60)


def format_duration(minutes: int) -> str:
    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))


def datetime_from_value_optional(
    value: Union[None, str, datetime.date, datetime.datetime],
) -> Optional[pendulum.DateTime]:
    """
    Coerce a stored timestamp into a pendulum.DateTime.

    YAML resolves unquoted timestamps to datetime/date objects on its own, so
    stored values may arrive as ISO strings or as already-parsed values. Bare
    dates become local midnight.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return datetime_from_str(value)
    if isinstance(value, datetime.datetime):
        return python_to_pendulum_local(value)
    return start_of_local_day(value)


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")
