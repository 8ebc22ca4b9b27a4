# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

from chronoloop.model.timeline_item import TimelineItem
from chronoloop.time import DateLike, local_date

DEFAULT_ITEM_DURATION = 30

WorkloadIntensity = Literal["none", "light", "moderate", "heavy", "overloaded"]

# Inclusive upper bound in minutes for each bucket, checked in order
INTENSITY_THRESHOLDS: list[tuple[int, WorkloadIntensity]] = [
    (0, "none"),
    (120, "light"),
    (240, "moderate"),
    (360, "heavy"),
]


class DayWorkload(TypedDict):
    day: pendulum.Date
    minutes: int
    item_count: int
    intensity: WorkloadIntensity


def item_minutes(item: TimelineItem) -> int:
    duration = item.get("duration")
    return duration if duration is not None else DEFAULT_ITEM_DURATION


def daily_workload(items: list[TimelineItem], day: DateLike) -> int:
    """Total minutes of items whose start falls on the same local calendar day."""
    target = local_date(day)
    return sum(
        item_minutes(item) for item in items if local_date(item["start_time"]) == target
    )


def intensity_bucket(minutes: int) -> WorkloadIntensity:
    for upper_bound, intensity in INTENSITY_THRESHOLDS:
        if minutes <= upper_bound:
            return intensity
    return "overloaded"


def workload_by_day(
    items: list[TimelineItem], start: DateLike, end: DateLike
) -> list[DayWorkload]:
    """
    Aggregate workload for every local day in [start, end].

    Items are bucketed once by local start date, so the cost is one pass over
    the items plus one record per day.
    """
    totals: dict[pendulum.Date, list[int]] = {}
    for item in items:
        bucket = totals.setdefault(local_date(item["start_time"]), [0, 0])
        bucket[0] += item_minutes(item)
        bucket[1] += 1

    first_day = local_date(start)
    last_day = local_date(end)
    workloads: list[DayWorkload] = []
    day = first_day
    while day <= last_day:
        minutes, item_count = totals.get(day, [0, 0])
        workloads.append(
            {
                "day": day,
                "minutes": minutes,
                "item_count": item_count,
                "intensity": intensity_bucket(minutes),
            }
        )
        day = day.add(days=1)
    return workloads
