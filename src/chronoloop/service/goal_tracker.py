# SPDX-License-Identifier: MIT

import logging

from chronoloop.model.domain_event import DomainEvent, DomainEventKind
from chronoloop.model.entity_id import EntityId
from chronoloop.model.goal import Goal
from chronoloop.service.event_log import EventLog
from chronoloop.time import local_date

logger = logging.getLogger(__name__)


class GoalTracker:
    """
    Keep goal progress in step with completed tasks.

    Subscribes to task_completed. Every goal linking the completed task gains
    one unit of progress; habit goals also extend their streak once per local
    day, restarting it at 1 when a day was skipped. Each update is announced
    as goal_progressed.
    """

    def __init__(self, goals: list[Goal], log: EventLog) -> None:
        self._goals: dict[EntityId, Goal] = {
            str(goal["id"]): goal for goal in goals
        }
        self._log = log
        log.subscribe(DomainEventKind.TASK_COMPLETED, self.on_task_completed)

    @property
    def goals(self) -> list[Goal]:
        return list(self._goals.values())

    def get_goal(self, id: EntityId) -> Goal:
        return self._goals[id]

    def on_task_completed(self, event: DomainEvent) -> None:
        task_id = event["entity_id"]
        for goal_id, goal in self._goals.items():
            if task_id not in goal["linked_items"]["tasks"]:
                continue

            goal["current_value"] += 1
            if goal["is_habit"]:
                self.__advance_streak(goal, event)
            goal["updated"] = event["occurred"]

            logger.debug("goal %s progressed by task %s", goal_id, task_id)
            self._log.emit(
                DomainEventKind.GOAL_PROGRESSED,
                goal_id,
                {
                    "task_id": task_id,
                    "current_value": goal["current_value"],
                    "streak_count": goal["streak_count"],
                },
                event["occurred"],
            )

    def __advance_streak(self, goal: Goal, event: DomainEvent) -> None:
        completed_day = local_date(event["occurred"])
        last_completed = goal["last_completed_date"]
        if last_completed is not None:
            last_day = local_date(last_completed)
            if last_day == completed_day:
                return
            if last_day == completed_day.subtract(days=1):
                goal["streak_count"] += 1
            else:
                goal["streak_count"] = 1
        else:
            goal["streak_count"] = 1
        goal["last_completed_date"] = event["occurred"]
