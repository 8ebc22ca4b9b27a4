# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Optional, cast

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from chronoloop import configuration
from chronoloop.model.event import CalendarEvent
from chronoloop.model.goal import Goal
from chronoloop.model.project import Project
from chronoloop.model.reminder import Reminder
from chronoloop.model.task import Task
from chronoloop.model.time_block import TimeBlock
from chronoloop.template.event import get_event_template
from chronoloop.template.goal import get_goal_template
from chronoloop.template.linked_items import get_linked_items_template
from chronoloop.template.project import get_project_template
from chronoloop.template.recurrence_rule import get_recurrence_rule_template
from chronoloop.template.reminder import get_reminder_template
from chronoloop.template.task import get_task_template
from chronoloop.template.time_block import get_time_block_template
from chronoloop.time import datetime_from_value_optional

logger = logging.getLogger(__name__)

TASK_DATETIME_FIELDS = ["start_date", "due_date", "created", "updated"]
EVENT_DATETIME_FIELDS = ["start_time", "end_time", "created", "updated"]
GOAL_DATETIME_FIELDS = ["deadline", "last_completed_date", "created", "updated"]
REMINDER_DATETIME_FIELDS = ["reminder_time", "created", "updated"]
TIME_BLOCK_DATETIME_FIELDS = ["start_time", "end_time", "created", "updated"]
PROJECT_DATETIME_FIELDS = ["created", "updated"]


class SnapshotRepository:
    """
    Read-only view of the entity files kept by the surrounding application.

    Each entity kind lives in its own directory with one YAML document per
    entity. The first call for a kind loads every file and keeps the result,
    so one repository instance always hands out one consistent snapshot;
    call `refresh` to pick up changes on disk.
    """

    def __init__(self, data_path: Optional[Path] = None) -> None:
        self._data_path = data_path
        self._cache: dict[str, list[dict[str, Any]]] = {}

    def __directory(self, kind: str) -> Path:
        if self._data_path is not None:
            return self._data_path / kind
        return configuration.DATA_PATH / kind

    def refresh(self) -> None:
        self._cache.clear()

    def list_tasks(self) -> list[Task]:
        return cast(
            list[Task],
            self.__list("tasks", get_task_template, TASK_DATETIME_FIELDS),
        )

    def list_projects(self) -> list[Project]:
        return cast(
            list[Project],
            self.__list("projects", get_project_template, PROJECT_DATETIME_FIELDS),
        )

    def list_goals(self) -> list[Goal]:
        return cast(
            list[Goal],
            self.__list("goals", get_goal_template, GOAL_DATETIME_FIELDS),
        )

    def list_reminders(self) -> list[Reminder]:
        return cast(
            list[Reminder],
            self.__list("reminders", get_reminder_template, REMINDER_DATETIME_FIELDS),
        )

    def list_calendar_events(self) -> list[CalendarEvent]:
        return cast(
            list[CalendarEvent],
            self.__list("events", get_event_template, EVENT_DATETIME_FIELDS),
        )

    def list_time_blocks(self) -> list[TimeBlock]:
        return cast(
            list[TimeBlock],
            self.__list(
                "time_blocks", get_time_block_template, TIME_BLOCK_DATETIME_FIELDS
            ),
        )

    def __list(
        self,
        kind: str,
        get_template: Callable[[], Any],
        datetime_fields: list[str],
    ) -> list[dict[str, Any]]:
        if kind not in self._cache:
            self._cache[kind] = self.__load_kind(kind, get_template, datetime_fields)
        return deepcopy(self._cache[kind])

    def __load_kind(
        self,
        kind: str,
        get_template: Callable[[], Any],
        datetime_fields: list[str],
    ) -> list[dict[str, Any]]:
        directory = self.__directory(kind)
        if not directory.is_dir():
            logger.debug("no %s directory at %s", kind, directory)
            return []

        entities: list[dict[str, Any]] = []
        for file_path in sorted(directory.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            try:
                raw_entity = load(file_path.read_text(), Loader=Loader)
            except YAMLError as e:
                logger.warning("skipping unreadable %s file %s: %s", kind, file_path, e)
                continue
            if not isinstance(raw_entity, dict):
                logger.warning("skipping %s file %s: not a mapping", kind, file_path)
                continue

            entity: dict[str, Any] = dict(get_template())
            entity.update(raw_entity)
            if entity["id"] is None:
                entity["id"] = file_path.stem
            try:
                self.__convert_for_deserialization(entity, datetime_fields)
            except ValueError as e:
                raise ValueError(f"{file_path}: {e}") from e
            entities.append(entity)

        logger.debug("loaded %d %s from %s", len(entities), kind, directory)
        return entities

    def __convert_for_deserialization(
        self, entity: dict[str, Any], datetime_fields: list[str]
    ) -> None:
        for field in datetime_fields:
            entity[field] = datetime_from_value_optional(entity.get(field))

        if "linked_items" in entity:
            linked_items = get_linked_items_template()
            linked_items.update(entity["linked_items"] or {})
            entity["linked_items"] = linked_items

        if entity.get("recurrence") is not None:
            recurrence = dict(get_recurrence_rule_template())
            recurrence.update(entity["recurrence"])
            recurrence["end_date"] = datetime_from_value_optional(
                recurrence["end_date"]
            )
            entity["recurrence"] = recurrence
