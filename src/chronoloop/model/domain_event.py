# SPDX-License-Identifier: MIT

from typing import Any, TypedDict

import pendulum

from chronoloop.model.entity_id import EntityId


class DomainEventKind:
    TASK_COMPLETED = "task_completed"
    GOAL_PROGRESSED = "goal_progressed"


class DomainEvent(TypedDict):
    kind: str
    entity_id: EntityId
    occurred: pendulum.DateTime
    payload: dict[str, Any]
