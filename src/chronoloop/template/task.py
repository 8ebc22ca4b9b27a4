# SPDX-License-Identifier: MIT

from chronoloop.model.entity_type import EntityType
from chronoloop.model.task import Task, TaskStatus
from chronoloop.template.linked_items import get_linked_items_template
from chronoloop.time import now_utc


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.TASK,
        "title": "",
        "description": None,
        "status": TaskStatus.TODO,
        "priority": None,
        "project": None,
        "tags": None,
        "color": None,
        "start_date": None,
        "due_date": None,
        "estimated_duration": None,
        "is_auto_rolled": False,
        "subtasks": [],
        "linked_items": get_linked_items_template(),
        "created": now,
        "updated": now,
    }
