# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from chronoloop.model.timeline_item import TimelineItem
from chronoloop.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_time_str,
    format_duration,
)
from chronoloop.view.state import get_use_color
from chronoloop.view.views.header import header


def timeline_row(item: TimelineItem) -> list[Text | str]:
    start = datetime_to_display_local_datetime_str(item["start_time"])
    end = (
        datetime_to_display_local_time_str(item["end_time"])
        if item["end_time"] is not None
        else ""
    )
    title = Text(item["title"])
    if get_use_color():
        title.stylize(item["color"])
    if item["is_auto_rolled"]:
        title.append(" (rolled)", style="italic bright_black")
    duration = item["duration"]
    return [
        start,
        end,
        item["category"],
        title,
        format_duration(duration) if duration is not None else "",
        item["project"] or "",
        item["status"] or "",
    ]


def timeline_table(items: list[TimelineItem]) -> Table:
    table = Table(box=box.SIMPLE)
    for column in ["start", "end", "category", "title", "duration", "project", "status"]:
        table.add_column(column)
    for item in items:
        table.add_row(*timeline_row(item))
    return table


def timeline_view(window_label: str, items: list[TimelineItem]) -> None:
    header("timeline", window_label)
    Console().print(timeline_table(items))
