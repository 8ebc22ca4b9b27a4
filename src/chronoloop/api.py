# SPDX-License-Identifier: MIT

"""Pure timeline functions exposed to the surrounding application."""

from chronoloop.service.conflict import detect_conflicts
from chronoloop.service.recurrence import expand_occurrences
from chronoloop.service.rollover import rollover_stale_tasks
from chronoloop.service.timeline import build_timeline
from chronoloop.service.workload import daily_workload, intensity_bucket

__all__ = [
    "build_timeline",
    "daily_workload",
    "detect_conflicts",
    "expand_occurrences",
    "intensity_bucket",
    "rollover_stale_tasks",
]
