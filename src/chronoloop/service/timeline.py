# SPDX-License-Identifier: MIT

from typing import Optional

from chronoloop.color import (
    DEFAULT_COLOR,
    GOAL_COLOR,
    REMINDER_COLOR,
    get_project_color,
)
from chronoloop.model.entity_type import EntityType
from chronoloop.model.event import CalendarEvent
from chronoloop.model.goal import Goal
from chronoloop.model.reminder import Reminder
from chronoloop.model.task import Task
from chronoloop.model.time_block import TimeBlock
from chronoloop.model.timeline_item import TimelineItem
from chronoloop.time import minutes_between

DEFAULT_TASK_DURATION = 30
DEFAULT_EVENT_DURATION = 60
GOAL_DURATION = 30
REMINDER_DURATION = 15
DEFAULT_TIME_BLOCK_DURATION = 30


def build_timeline(
    tasks: Optional[list[Task]] = None,
    expanded_events: Optional[list[CalendarEvent]] = None,
    goals: Optional[list[Goal]] = None,
    reminders: Optional[list[Reminder]] = None,
    time_blocks: Optional[list[TimeBlock]] = None,
) -> list[TimelineItem]:
    """
    Normalize every schedulable entity into one timeline sorted by start time.

    Events must already be expanded for the viewing window. Items starting
    at the same moment keep the input order: tasks, events, goals, reminders,
    then time blocks.
    """
    items: list[TimelineItem] = []

    for task in tasks or []:
        if task["due_date"] is not None:
            items.append(task_to_timeline_item(task))

    for event in expanded_events or []:
        items.append(event_to_timeline_item(event))

    for goal in goals or []:
        if goal["deadline"] is not None:
            items.append(goal_to_timeline_item(goal))

    for reminder in reminders or []:
        items.append(reminder_to_timeline_item(reminder))

    for time_block in time_blocks or []:
        items.append(time_block_to_timeline_item(time_block))

    # list.sort is stable, so ties keep the insertion order above
    items.sort(key=lambda item: item["start_time"])
    return items


def task_to_timeline_item(task: Task) -> TimelineItem:
    if task["due_date"] is None:
        raise ValueError(f"task {task['id']} has no due date")
    # A zero estimate counts as unestimated
    duration = task["estimated_duration"] or DEFAULT_TASK_DURATION
    return {
        "id": str(task["id"]),
        "title": task["title"],
        "description": task["description"],
        "start_time": task["due_date"],
        "end_time": None,
        "duration": duration,
        "category": EntityType.TASK,
        "color": task["color"] or get_project_color(task["project"]),
        "project": task["project"],
        "priority": task["priority"],
        "status": task["status"],
        "tags": task["tags"],
        "notes": None,
        "is_auto_rolled": task["is_auto_rolled"],
        "original_item": task,
    }


def event_to_timeline_item(event: CalendarEvent) -> TimelineItem:
    end_time = event["end_time"]
    duration = (
        minutes_between(event["start_time"], end_time)
        if end_time is not None
        else DEFAULT_EVENT_DURATION
    )
    return {
        "id": str(event["id"]),
        "title": event["title"],
        "description": event["description"],
        "start_time": event["start_time"],
        "end_time": end_time,
        "duration": duration,
        "category": EntityType.EVENT,
        "color": event["color"] or get_project_color(event["project"]),
        "project": event["project"],
        "priority": event["priority"],
        "status": None,
        "tags": event["tags"],
        "notes": None,
        "is_auto_rolled": False,
        "original_item": event,
    }


def goal_to_timeline_item(goal: Goal) -> TimelineItem:
    if goal["deadline"] is None:
        raise ValueError(f"goal {goal['id']} has no deadline")
    return {
        "id": str(goal["id"]),
        "title": goal["title"],
        "description": goal["description"],
        "start_time": goal["deadline"],
        "end_time": None,
        "duration": GOAL_DURATION,
        "category": EntityType.GOAL,
        "color": GOAL_COLOR,
        "project": None,
        "priority": goal["priority"],
        "status": goal["status"],
        "tags": goal["tags"],
        "notes": None,
        "is_auto_rolled": False,
        "original_item": goal,
    }


def reminder_to_timeline_item(reminder: Reminder) -> TimelineItem:
    return {
        "id": str(reminder["id"]),
        "title": reminder["title"],
        "description": reminder["description"],
        "start_time": reminder["reminder_time"],
        "end_time": None,
        "duration": REMINDER_DURATION,
        "category": EntityType.REMINDER,
        "color": REMINDER_COLOR,
        "project": None,
        "priority": reminder["priority"],
        "status": "completed" if reminder["completed"] else None,
        "tags": reminder["tags"],
        "notes": None,
        "is_auto_rolled": False,
        "original_item": reminder,
    }


def time_block_to_timeline_item(time_block: TimeBlock) -> TimelineItem:
    # A stored duration is a manual override and wins over end - start
    duration = time_block["duration"]
    if duration is None:
        duration = (
            minutes_between(time_block["start_time"], time_block["end_time"])
            if time_block["end_time"] is not None
            else DEFAULT_TIME_BLOCK_DURATION
        )
    return {
        "id": str(time_block["id"]),
        "title": time_block["title"],
        "description": time_block["description"],
        "start_time": time_block["start_time"],
        "end_time": time_block["end_time"],
        "duration": duration,
        "category": EntityType.TIMEBLOCK,
        "color": time_block["color"] or DEFAULT_COLOR,
        "project": time_block["project"],
        "priority": None,
        "status": None,
        "tags": None,
        "notes": time_block["notes"],
        "is_auto_rolled": time_block["is_auto_rolled"],
        "original_item": time_block,
    }


def filter_timeline(
    items: list[TimelineItem],
    query: Optional[str] = None,
    project: Optional[str] = None,
    category: Optional[str] = None,
    status: Optional[str] = None,
) -> list[TimelineItem]:
    """
    Narrow a timeline the way the calendar filters do.

    `query` is a case-insensitive substring match on title and description;
    the other filters are exact matches. None disables a filter.
    """
    lowered_query = query.lower() if query else None
    filtered: list[TimelineItem] = []
    for item in items:
        if lowered_query is not None:
            haystack = item["title"].lower()
            if item["description"] is not None:
                haystack += "\n" + item["description"].lower()
            if lowered_query not in haystack:
                continue
        if project is not None and item["project"] != project:
            continue
        if category is not None and item["category"] != category:
            continue
        if status is not None and item["status"] != status:
            continue
        filtered.append(item)
    return filtered
