# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Callable, Optional

import pendulum

from chronoloop.model.domain_event import DomainEvent, DomainEventKind
from chronoloop.model.entity_id import EntityId
from chronoloop.model.task import Task, TaskStatus
from chronoloop.time import now_utc

logger = logging.getLogger(__name__)

type Subscriber = Callable[[DomainEvent], None]


class EventLog:
    """
    Append-only record of domain events with explicit subscribers.

    Cross-entity side effects (a completed task advancing a goal) happen only
    through handlers registered here, so every cascade is visible in the log.
    Dispatch is synchronous and in registration order.
    """

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []
        self._subscribers: dict[str, list[Subscriber]] = {}

    @property
    def events(self) -> list[DomainEvent]:
        return list(self._events)

    def subscribe(self, kind: str, subscriber: Subscriber) -> None:
        self._subscribers.setdefault(kind, []).append(subscriber)

    def emit(
        self,
        kind: str,
        entity_id: EntityId,
        payload: Optional[dict[str, Any]] = None,
        occurred: Optional[pendulum.DateTime] = None,
    ) -> DomainEvent:
        event: DomainEvent = {
            "kind": kind,
            "entity_id": entity_id,
            "occurred": occurred or now_utc(),
            "payload": payload or {},
        }
        self._events.append(event)
        logger.debug("emitted %s for %s", kind, entity_id)
        for subscriber in self._subscribers.get(kind, []):
            subscriber(event)
        return event

    def of_kind(self, kind: str) -> list[DomainEvent]:
        return [event for event in self._events if event["kind"] == kind]


def complete_task(
    task: Task, log: EventLog, now: Optional[pendulum.DateTime] = None
) -> Task:
    """Return a completed copy of the task and emit task_completed."""
    completed_at = now or now_utc()
    completed_task = deepcopy(task)
    if task["status"] == TaskStatus.COMPLETED:
        return completed_task

    completed_task["status"] = TaskStatus.COMPLETED
    completed_task["updated"] = completed_at
    log.emit(
        DomainEventKind.TASK_COMPLETED,
        str(task["id"]),
        {"project": task["project"], "title": task["title"]},
        completed_at,
    )
    return completed_task
