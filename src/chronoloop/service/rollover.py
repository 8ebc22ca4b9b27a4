# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

import pendulum

from chronoloop.model.task import Task, TaskStatus
from chronoloop.time import local_date, start_of_local_day, today_local

logger = logging.getLogger(__name__)


def is_stale(task: Task, today: pendulum.Date) -> bool:
    return (
        task["status"] != TaskStatus.COMPLETED
        and task["due_date"] is not None
        and local_date(task["due_date"]) < today
    )


def rollover_stale_tasks(
    tasks: list[Task], today: Optional[pendulum.DateTime] = None
) -> list[Task]:
    """
    Move overdue incomplete tasks to today's local midnight.

    Rolled tasks are returned as new records flagged with is_auto_rolled;
    tasks due today or later, tasks without a due date and completed tasks
    are returned as-is. The input list and its tasks are not modified.
    """
    midnight = start_of_local_day(today) if today is not None else today_local()
    today_date = local_date(midnight)

    rolled_count = 0
    result: list[Task] = []
    for task in tasks:
        if is_stale(task, today_date):
            rolled_task = deepcopy(task)
            rolled_task["due_date"] = midnight
            rolled_task["is_auto_rolled"] = True
            result.append(rolled_task)
            rolled_count += 1
            logger.debug("rolled task %s over to %s", task["id"], today_date)
        else:
            result.append(task)

    if rolled_count:
        logger.info("rolled over %d stale tasks", rolled_count)
    return result
