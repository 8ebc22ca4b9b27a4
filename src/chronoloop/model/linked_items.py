# SPDX-License-Identifier: MIT

from typing import TypedDict

from chronoloop.model.entity_id import EntityId


class LinkedItems(TypedDict):
    tasks: list[EntityId]
    goals: list[EntityId]
    reminders: list[EntityId]
    events: list[EntityId]
