# SPDX-License-Identifier: MIT

import datetime
from typing import NotRequired, Optional, TypedDict, Union

import pendulum


class RecurrenceKind:
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"


# Kinds the expander knows how to walk. Anything else, custom included,
# is treated as a non-recurring entity.
EXPANDABLE_KINDS = (
    RecurrenceKind.DAILY,
    RecurrenceKind.WEEKLY,
    RecurrenceKind.MONTHLY,
    RecurrenceKind.YEARLY,
)

type ExceptionDate = Union[str, datetime.date]


class RecurrenceRule(TypedDict):
    kind: str
    interval: int
    days_of_week: NotRequired[Optional[list[int]]]
    day_of_month: NotRequired[Optional[int]]
    month_of_year: NotRequired[Optional[int]]
    end_date: NotRequired[Optional[pendulum.DateTime]]
    exceptions: NotRequired[Optional[list[ExceptionDate]]]
    max_occurrences: NotRequired[Optional[int]]
