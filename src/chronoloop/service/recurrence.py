# SPDX-License-Identifier: MIT

"""
Occurrence expansion for recurring calendar events.

A recurring event is expanded into one dated copy per occurrence that falls
inside a closed viewing window. Candidates come from a dateutil rrule built
on the event's own start (the anchor) as local wall-clock time, so the
anchor's time of day is kept on every occurrence and day arithmetic follows
the local calendar.
"""

import calendar
import datetime
import logging
from copy import deepcopy
from typing import Any, Iterator, Optional

import pendulum
from dateutil.rrule import DAILY, MONTHLY, SU, WEEKLY, YEARLY, rrule

from chronoloop.model.event import CalendarEvent
from chronoloop.model.recurrence_rule import (
    EXPANDABLE_KINDS,
    RecurrenceKind,
    RecurrenceRule,
)
from chronoloop.time import (
    compact_date_key,
    date_key,
    python_to_pendulum_local,
    shift_exact,
)

logger = logging.getLogger(__name__)


def expand_occurrences(
    events: list[CalendarEvent],
    window_start: pendulum.DateTime,
    window_end: pendulum.DateTime,
) -> list[CalendarEvent]:
    """
    Expand events over the closed window [window_start, window_end].

    Non-recurring events (including unknown or custom rule kinds) are passed
    through unchanged when their start lies inside the window. Recurring
    events yield one deep-copied occurrence per matching date, with an id of
    the form "<source id>-YYYYMMDD". The source events are never mutated.
    """
    expanded: list[CalendarEvent] = []
    for event in events:
        rule = event["recurrence"]
        if not is_recurring(rule):
            if window_start <= event["start_time"] <= window_end:
                expanded.append(event)
            continue
        expanded += expand_event(event, window_start, window_end)
    return expanded


def is_recurring(rule: Optional[RecurrenceRule]) -> bool:
    if rule is None:
        return False
    kind = rule.get("kind", RecurrenceKind.NONE)
    if kind in EXPANDABLE_KINDS:
        return True
    if kind not in (RecurrenceKind.NONE, RecurrenceKind.CUSTOM):
        logger.debug("unknown recurrence kind %r treated as none", kind)
    return False


def expand_event(
    event: CalendarEvent,
    window_start: pendulum.DateTime,
    window_end: pendulum.DateTime,
) -> list[CalendarEvent]:
    rule = event["recurrence"]
    if rule is None:
        return []

    anchor = event["start_time"].in_tz("local")
    duration: Optional[datetime.timedelta] = None
    if event["end_time"] is not None:
        duration = event["end_time"] - event["start_time"]

    end_date = rule.get("end_date")
    until = window_end if end_date is None else min(window_end, end_date)
    exceptions = exception_keys(rule)
    max_occurrences = as_int(rule.get("max_occurrences"))

    occurrences: list[CalendarEvent] = []
    generated = 0
    for candidate in iter_candidates(anchor, rule, until):
        if candidate > window_end:
            break
        if end_date is not None and candidate >= end_date:
            break
        if max_occurrences is not None and generated >= max_occurrences:
            break
        # Excluded dates still count towards max_occurrences
        generated += 1
        if candidate < window_start or date_key(candidate) in exceptions:
            continue
        occurrences.append(make_occurrence(event, candidate, duration))

    logger.debug(
        "expanded event %s into %d occurrences", event["id"], len(occurrences)
    )
    return occurrences


def make_occurrence(
    event: CalendarEvent,
    start: pendulum.DateTime,
    duration: Optional[datetime.timedelta],
) -> CalendarEvent:
    occurrence = deepcopy(event)
    occurrence["id"] = f"{event['id']}-{compact_date_key(start)}"
    occurrence["cloned_from_id"] = event["id"]
    occurrence["start_time"] = start
    occurrence["end_time"] = (
        shift_exact(start, duration) if duration is not None else None
    )
    return occurrence


def as_int(value: Any) -> Optional[int]:
    """Read a stored rule number, or None when it is not a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def exception_keys(rule: RecurrenceRule) -> set[str]:
    keys: set[str] = set()
    for exception in rule.get("exceptions") or []:
        if isinstance(exception, str):
            keys.add(exception[:10])
        elif isinstance(exception, datetime.date):
            keys.add(date_key(exception))
        else:
            logger.debug("ignoring recurrence exception %r", exception)
    return keys


def normalized_interval(rule: RecurrenceRule) -> int:
    interval = as_int(rule.get("interval"))
    if interval is None:
        return 1
    return max(1, interval)


def weekdays(rule: RecurrenceRule) -> list[int]:
    """Valid days_of_week entries, 0 = Sunday through 6 = Saturday."""
    days_of_week = rule.get("days_of_week")
    if not isinstance(days_of_week, (list, tuple)):
        return []
    days = {as_int(day) for day in days_of_week}
    return sorted(day for day in days if day is not None and 0 <= day <= 6)


def weekday_index(value: datetime.date) -> int:
    """Day of week with 0 = Sunday through 6 = Saturday."""
    return value.isoweekday() % 7


def wall_clock(value: pendulum.DateTime) -> datetime.datetime:
    local = value.in_tz("local")
    return datetime.datetime(
        local.year, local.month, local.day, local.hour, local.minute, local.second
    )


def iter_candidates(
    anchor: pendulum.DateTime, rule: RecurrenceRule, until: pendulum.DateTime
) -> Iterator[pendulum.DateTime]:
    """
    Yield candidate occurrence starts in increasing order up to `until`.

    The rrule runs on naive local wall-clock times and every candidate is
    localized again afterwards. Weeks start on Sunday, so a weekly rule
    emits every listed weekday of the anchor's week (none before the anchor)
    and then skips `interval` whole weeks. Monthly and yearly rules skip
    months that lack the requested day instead of clamping.
    """
    options = rrule_options(anchor, rule)
    if options is None:
        return

    dates = rrule(
        dtstart=wall_clock(anchor),
        until=wall_clock(until),
        interval=normalized_interval(rule),
        wkst=SU,
        cache=False,
        **options,
    )
    for value in dates:
        # rrule drops microseconds from dtstart
        yield python_to_pendulum_local(value).set(microsecond=anchor.microsecond)


def rrule_options(
    anchor: pendulum.DateTime, rule: RecurrenceRule
) -> Optional[dict[str, Any]]:
    """
    Map a rule onto rrule keyword arguments.

    Returns None for rules that can never match a date, since rrule would
    otherwise search up to datetime.MAXYEAR before giving up.
    """
    match rule["kind"]:
        case RecurrenceKind.DAILY:
            return {"freq": DAILY}
        case RecurrenceKind.WEEKLY:
            days = weekdays(rule) or [weekday_index(anchor)]
            # rrule counts weekdays from Monday = 0
            return {"freq": WEEKLY, "byweekday": [(day - 1) % 7 for day in days]}
        case RecurrenceKind.MONTHLY:
            day_of_month = as_int(rule.get("day_of_month")) or anchor.day
            if not 1 <= day_of_month <= 31:
                return None
            return {"freq": MONTHLY, "bymonthday": day_of_month}
        case RecurrenceKind.YEARLY:
            month_of_year = as_int(rule.get("month_of_year")) or anchor.month
            day_of_month = as_int(rule.get("day_of_month")) or anchor.day
            if not 1 <= month_of_year <= 12:
                return None
            # 2024 is a leap year, so Feb 29 stays possible
            if not 1 <= day_of_month <= calendar.monthrange(2024, month_of_year)[1]:
                return None
            return {
                "freq": YEARLY,
                "bymonth": month_of_year,
                "bymonthday": day_of_month,
            }
    return None
