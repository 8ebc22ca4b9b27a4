# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from chronoloop.model.entity_id import EntityId
from chronoloop.model.linked_items import LinkedItems
from chronoloop.model.recurrence_rule import RecurrenceRule


class CalendarEvent(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    cloned_from_id: Optional[EntityId]
    title: str
    description: Optional[str]
    location: Optional[str]
    project: Optional[str]
    priority: Optional[str]
    tags: Optional[list[str]]
    color: Optional[str]
    start_time: pendulum.DateTime
    end_time: Optional[pendulum.DateTime]
    all_day: bool
    recurrence: Optional[RecurrenceRule]
    linked_items: LinkedItems
    created: pendulum.DateTime
    updated: pendulum.DateTime
