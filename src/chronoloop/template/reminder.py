# SPDX-License-Identifier: MIT

from chronoloop.model.entity_type import EntityType
from chronoloop.model.reminder import Reminder
from chronoloop.time import now_utc


def get_reminder_template() -> Reminder:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.REMINDER,
        "title": "",
        "description": None,
        "reminder_time": now,
        "completed": False,
        "priority": None,
        "tags": None,
        "created": now,
        "updated": now,
    }
