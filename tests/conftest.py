# SPDX-License-Identifier: MIT

from typing import Any

import pendulum
import pytest

from chronoloop import configuration
from chronoloop.model.event import CalendarEvent
from chronoloop.model.goal import Goal
from chronoloop.model.reminder import Reminder
from chronoloop.model.task import Task
from chronoloop.model.time_block import TimeBlock
from chronoloop.template.event import get_event_template
from chronoloop.template.goal import get_goal_template
from chronoloop.template.recurrence_rule import get_recurrence_rule_template
from chronoloop.template.reminder import get_reminder_template
from chronoloop.template.task import get_task_template
from chronoloop.template.time_block import get_time_block_template
from chronoloop.view import state as view_state


def local(*args: int) -> pendulum.DateTime:
    return pendulum.datetime(*args, tz="local")


def make_task(id: str = "task-1", **fields: Any) -> Task:
    task = get_task_template()
    task["id"] = id
    task["title"] = fields.pop("title", id)
    task.update(fields)  # type: ignore[typeddict-item]
    return task


def make_event(id: str = "event-1", **fields: Any) -> CalendarEvent:
    event = get_event_template()
    event["id"] = id
    event["title"] = fields.pop("title", id)
    event.update(fields)  # type: ignore[typeddict-item]
    return event


def make_rule(kind: str, interval: int = 1, **fields: Any) -> dict[str, Any]:
    rule: dict[str, Any] = dict(get_recurrence_rule_template())
    rule["kind"] = kind
    rule["interval"] = interval
    rule.update(fields)
    return rule


def make_goal(id: str = "goal-1", **fields: Any) -> Goal:
    goal = get_goal_template()
    goal["id"] = id
    goal["title"] = fields.pop("title", id)
    goal.update(fields)  # type: ignore[typeddict-item]
    return goal


def make_reminder(id: str = "reminder-1", **fields: Any) -> Reminder:
    reminder = get_reminder_template()
    reminder["id"] = id
    reminder["title"] = fields.pop("title", id)
    reminder.update(fields)  # type: ignore[typeddict-item]
    return reminder


def make_time_block(id: str = "block-1", **fields: Any) -> TimeBlock:
    time_block = get_time_block_template()
    time_block["id"] = id
    time_block["title"] = fields.pop("title", id)
    time_block.update(fields)  # type: ignore[typeddict-item]
    return time_block


@pytest.fixture
def data_path(tmp_path, monkeypatch):
    """A data directory that the app-wide DATA_PATH points at for one test."""
    monkeypatch.setattr(configuration, "DATA_PATH", configuration.DATA_PATH)
    configuration.set_data_path(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_view_state():
    yield
    view_state.set_show_header(True)
    view_state.set_use_color(True)
