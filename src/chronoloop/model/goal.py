# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from chronoloop.model.entity_id import EntityId
from chronoloop.model.linked_items import LinkedItems


class Goal(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: str
    description: Optional[str]
    category: Optional[str]
    status: Optional[str]
    target_value: Optional[float]
    current_value: float
    unit: Optional[str]
    deadline: Optional[pendulum.DateTime]
    priority: Optional[str]
    tags: Optional[list[str]]
    is_habit: bool
    streak_count: int
    last_completed_date: Optional[pendulum.DateTime]
    linked_items: LinkedItems
    created: pendulum.DateTime
    updated: pendulum.DateTime
