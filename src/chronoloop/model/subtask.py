# SPDX-License-Identifier: MIT

from typing import TypedDict

from chronoloop.model.entity_id import EntityId


class Subtask(TypedDict):
    id: EntityId
    title: str
    completed: bool
    subtasks: list["Subtask"]
