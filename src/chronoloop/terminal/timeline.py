# SPDX-License-Identifier: MIT

import datetime
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from chronoloop import configuration
from chronoloop.model.timeline_item import TimelineItem
from chronoloop.repository.configuration import CONFIGURATION_REPO
from chronoloop.repository.snapshot import SnapshotRepository
from chronoloop.service.conflict import detect_conflicts
from chronoloop.service.recurrence import expand_occurrences
from chronoloop.service.rollover import rollover_stale_tasks
from chronoloop.service.timeline import build_timeline, filter_timeline
from chronoloop.service.window import WindowScale, view_window
from chronoloop.service.workload import workload_by_day
from chronoloop.terminal.parse import parse_datetime
from chronoloop.time import (
    datetime_to_display_local_date_str,
    shift_exact,
    start_of_local_day,
)
from chronoloop.view.views.conflict import conflicts_view
from chronoloop.view.views.rollover import rollover_view
from chronoloop.view.views.timeline import timeline_view
from chronoloop.view.views.workload import workload_view

DATETIME_HELP = "valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, today, yesterday, tomorrow, or day offset like 1, -1"
SCALES = ["day", "week", "month", "year"]


def parse_scale(scale_param: Optional[str]) -> Optional[WindowScale]:
    if scale_param is None:
        return None
    if scale_param not in SCALES:
        raise typer.BadParameter(f"scale must be one of {', '.join(SCALES)}")
    return scale_param  # type: ignore[return-value]


def resolve_scale(scale: Optional[WindowScale]) -> WindowScale:
    if scale is not None:
        return scale
    return parse_scale(CONFIGURATION_REPO.get_config()["default_scale"]) or "week"


def open_snapshot() -> SnapshotRepository:
    if not configuration.DATA_PATH.is_dir():
        Console().print(
            f"[red]No data directory found at {configuration.DATA_PATH}[/red]"
        )
        raise typer.Exit(1)
    return SnapshotRepository(configuration.DATA_PATH)


def load_timeline(
    snapshot: SnapshotRepository,
    window_start: pendulum.DateTime,
    window_end: pendulum.DateTime,
    rollover: bool = True,
) -> list[TimelineItem]:
    """Build the timeline for one window from one consistent snapshot."""
    tasks = snapshot.list_tasks()
    if rollover:
        tasks = rollover_stale_tasks(tasks)
    events = expand_occurrences(
        snapshot.list_calendar_events(), window_start, window_end
    )
    items = build_timeline(
        tasks,
        events,
        snapshot.list_goals(),
        snapshot.list_reminders(),
        snapshot.list_time_blocks(),
    )
    return [item for item in items if window_start <= item["start_time"] <= window_end]


def longest_span(snapshot: SnapshotRepository) -> datetime.timedelta:
    """Longest start-to-end span of any stored event or time block, at least a day."""
    longest = datetime.timedelta(days=1)
    for entity in [*snapshot.list_calendar_events(), *snapshot.list_time_blocks()]:
        if entity["end_time"] is None:
            continue
        span = entity["end_time"] - entity["start_time"]
        longest = max(longest, datetime.timedelta(seconds=span.total_seconds()))
    return longest


def window_label(start: pendulum.DateTime, end: pendulum.DateTime) -> str:
    first = datetime_to_display_local_date_str(start)
    last = datetime_to_display_local_date_str(end)
    return first if first == last else f"{first} - {last}"


def timeline(
    day: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--day", "-d", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    scale: Annotated[
        Optional[str],
        typer.Option("--scale", help="day, week, month or year"),
    ] = None,
    query: Annotated[Optional[str], typer.Option("--query", "-q")] = None,
    project: Annotated[Optional[str], typer.Option("--project", "-p")] = None,
    category: Annotated[Optional[str], typer.Option("--category", "-c")] = None,
    status: Annotated[Optional[str], typer.Option("--status")] = None,
    rollover: Annotated[
        bool,
        typer.Option(
            "--rollover/--no-rollover",
            help="move overdue incomplete tasks to today before building",
        ),
    ] = True,
) -> None:
    """Show every scheduled item in a calendar window."""
    window_start, window_end = view_window(
        day or pendulum.today("local"), resolve_scale(parse_scale(scale))
    )
    items = load_timeline(open_snapshot(), window_start, window_end, rollover)
    items = filter_timeline(items, query, project, category, status)
    timeline_view(window_label(window_start, window_end), items)


def workload(
    day: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--day", "-d", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    scale: Annotated[
        Optional[str],
        typer.Option("--scale", help="day, week, month or year"),
    ] = None,
    rollover: Annotated[bool, typer.Option("--rollover/--no-rollover")] = True,
) -> None:
    """Show scheduled minutes and intensity per day."""
    window_start, window_end = view_window(
        day or pendulum.today("local"), resolve_scale(parse_scale(scale))
    )
    items = load_timeline(open_snapshot(), window_start, window_end, rollover)
    workload_view(
        window_label(window_start, window_end),
        workload_by_day(items, window_start, window_end),
    )


def conflicts(
    start: Annotated[
        pendulum.DateTime,
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ],
    end: Annotated[
        pendulum.DateTime,
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ],
    id: Annotated[
        Optional[str],
        typer.Option("--id", help="id of the item being checked, excluded from results"),
    ] = None,
) -> None:
    """List items overlapping a proposed time range."""
    snapshot = open_snapshot()
    # Reach back far enough to include anything still running at `start`
    window_start = shift_exact(start_of_local_day(start), -longest_span(snapshot))
    window_end = end.in_tz("local").end_of("day")
    items = load_timeline(snapshot, window_start, window_end, rollover=False)
    conflicts_view(
        start,
        end,
        detect_conflicts(items, {"id": id, "start_time": start, "end_time": end}),
    )


def rollover() -> None:
    """Preview which overdue tasks roll over to today."""
    tasks = open_snapshot().list_tasks()
    rolled_tasks = rollover_stale_tasks(tasks)
    rollover_view(
        [
            (original, rolled)
            for original, rolled in zip(tasks, rolled_tasks)
            if rolled is not original
        ]
    )
