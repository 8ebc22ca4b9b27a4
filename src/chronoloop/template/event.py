# SPDX-License-Identifier: MIT

from chronoloop.model.entity_type import EntityType
from chronoloop.model.event import CalendarEvent
from chronoloop.template.linked_items import get_linked_items_template
from chronoloop.time import now_utc


def get_event_template() -> CalendarEvent:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.EVENT,
        "cloned_from_id": None,
        "title": "",
        "description": None,
        "location": None,
        "project": None,
        "priority": None,
        "tags": None,
        "color": None,
        "start_time": now,
        "end_time": None,
        "all_day": False,
        "recurrence": None,
        "linked_items": get_linked_items_template(),
        "created": now,
        "updated": now,
    }
