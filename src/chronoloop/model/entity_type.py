# SPDX-License-Identifier: MIT

from typing import Literal


class EntityType:
    TASK = "task"
    EVENT = "event"
    GOAL = "goal"
    REMINDER = "reminder"
    TIMEBLOCK = "timeblock"
    PROJECT = "project"


# Timeline categories are the schedulable subset of entity types
TimelineCategory = Literal["task", "event", "goal", "reminder", "timeblock"]
