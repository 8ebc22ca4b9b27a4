# SPDX-License-Identifier: MIT

from chronoloop.model.entity_type import EntityType
from chronoloop.model.time_block import TimeBlock
from chronoloop.time import now_utc


def get_time_block_template() -> TimeBlock:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.TIMEBLOCK,
        "title": "",
        "description": None,
        "start_time": now,
        "end_time": now.add(minutes=30),
        "duration": None,
        "color": None,
        "project": None,
        "notes": None,
        "is_auto_rolled": False,
        "created": now,
        "updated": now,
    }
