# SPDX-License-Identifier: MIT

from chronoloop.model.linked_items import LinkedItems


def get_linked_items_template() -> LinkedItems:
    return {"tasks": [], "goals": [], "reminders": [], "events": []}
