# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from chronoloop.model.entity_id import EntityId
from chronoloop.model.linked_items import LinkedItems
from chronoloop.model.subtask import Subtask


class TaskStatus:
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Task(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: str
    description: Optional[str]
    status: str
    priority: Optional[str]
    project: Optional[str]
    tags: Optional[list[str]]
    color: Optional[str]
    start_date: Optional[pendulum.DateTime]
    due_date: Optional[pendulum.DateTime]
    estimated_duration: Optional[int]
    is_auto_rolled: bool
    subtasks: list[Subtask]
    linked_items: LinkedItems
    created: pendulum.DateTime
    updated: pendulum.DateTime
