# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict, Union

import pendulum

from chronoloop.model.entity_type import TimelineCategory
from chronoloop.model.event import CalendarEvent
from chronoloop.model.goal import Goal
from chronoloop.model.reminder import Reminder
from chronoloop.model.task import Task
from chronoloop.model.time_block import TimeBlock

type SourceEntity = Union[Task, CalendarEvent, Goal, Reminder, TimeBlock]


class TimelineItem(TypedDict):
    """
    Render-ready view of any schedulable entity.

    Built fresh on every normalization pass and never persisted.
    `original_item` refers back to the source entity so callers can act on
    it; the timeline item does not own it.
    """

    id: str
    title: str
    description: Optional[str]
    start_time: pendulum.DateTime
    end_time: Optional[pendulum.DateTime]
    duration: Optional[int]
    category: TimelineCategory
    color: str
    project: Optional[str]
    priority: Optional[str]
    status: Optional[str]
    tags: Optional[list[str]]
    notes: Optional[str]
    is_auto_rolled: bool
    original_item: SourceEntity


class ConflictCandidate(TypedDict):
    id: NotRequired[Optional[str]]
    start_time: NotRequired[Optional[pendulum.DateTime]]
    end_time: NotRequired[Optional[pendulum.DateTime]]
