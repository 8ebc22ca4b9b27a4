# SPDX-License-Identifier: MIT

from chronoloop.model.recurrence_rule import RecurrenceKind, RecurrenceRule


def get_recurrence_rule_template() -> RecurrenceRule:
    return {
        "kind": RecurrenceKind.NONE,
        "interval": 1,
        "days_of_week": None,
        "day_of_month": None,
        "month_of_year": None,
        "end_date": None,
        "exceptions": None,
        "max_occurrences": None,
    }
