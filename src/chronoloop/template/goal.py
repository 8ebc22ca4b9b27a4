# SPDX-License-Identifier: MIT

from chronoloop.model.entity_type import EntityType
from chronoloop.model.goal import Goal
from chronoloop.template.linked_items import get_linked_items_template
from chronoloop.time import now_utc


def get_goal_template() -> Goal:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.GOAL,
        "title": "",
        "description": None,
        "category": None,
        "status": None,
        "target_value": None,
        "current_value": 0,
        "unit": None,
        "deadline": None,
        "priority": None,
        "tags": None,
        "is_habit": False,
        "streak_count": 0,
        "last_completed_date": None,
        "linked_items": get_linked_items_template(),
        "created": now,
        "updated": now,
    }
