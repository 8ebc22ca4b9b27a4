# SPDX-License-Identifier: MIT

from typing import Literal

import pendulum

from chronoloop.time import DateLike, start_of_local_day

WindowScale = Literal["day", "week", "month", "year"]


def view_window(
    reference: DateLike, scale: WindowScale
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Get the closed local window of the given scale around a reference date.

    Weeks run Monday through Sunday. The end is the last microsecond of the
    final day so the window can be handed straight to the expander.
    """
    day = start_of_local_day(reference)

    if scale == "day":
        start = day
        end = day.end_of("day")
    elif scale == "week":
        start = day.subtract(days=day.isoweekday() - 1)
        end = start.add(days=6).end_of("day")
    elif scale == "month":
        start = day.start_of("month")
        end = day.end_of("month")
    else:  # scale == "year"
        start = day.start_of("year")
        end = day.end_of("year")

    return start, end
