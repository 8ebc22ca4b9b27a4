# SPDX-License-Identifier: MIT

import pendulum
from rich.console import Console

from chronoloop.model.timeline_item import TimelineItem
from chronoloop.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_time_str,
)
from chronoloop.view.views.header import header
from chronoloop.view.views.timeline import timeline_table


def conflicts_view(
    start: pendulum.DateTime, end: pendulum.DateTime, conflicts: list[TimelineItem]
) -> None:
    window_label = (
        f"{datetime_to_display_local_datetime_str(start)}"
        f" - {datetime_to_display_local_time_str(end)}"
    )
    header("conflicts", window_label)

    console = Console()
    if not conflicts:
        console.print("[green]No conflicts[/green]")
        return
    console.print(f"[red]{len(conflicts)} conflicting item(s)[/red]")
    console.print(timeline_table(conflicts))
