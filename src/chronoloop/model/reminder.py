# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from chronoloop.model.entity_id import EntityId


class Reminder(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: str
    description: Optional[str]
    reminder_time: pendulum.DateTime
    completed: bool
    priority: Optional[str]
    tags: Optional[list[str]]
    created: pendulum.DateTime
    updated: pendulum.DateTime
