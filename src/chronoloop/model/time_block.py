# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from chronoloop.model.entity_id import EntityId


class TimeBlock(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: str
    description: Optional[str]
    start_time: pendulum.DateTime
    end_time: Optional[pendulum.DateTime]
    duration: Optional[int]
    color: Optional[str]
    project: Optional[str]
    notes: Optional[str]
    is_auto_rolled: bool
    created: pendulum.DateTime
    updated: pendulum.DateTime
