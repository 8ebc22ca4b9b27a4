# SPDX-License-Identifier: MIT

from chronoloop.model.entity_type import EntityType
from chronoloop.model.project import Project
from chronoloop.time import now_utc


def get_project_template() -> Project:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.PROJECT,
        "name": "",
        "color": None,
        "description": None,
        "created": now,
        "updated": now,
    }
