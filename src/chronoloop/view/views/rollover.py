# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from chronoloop.model.task import Task
from chronoloop.time import datetime_to_display_local_date_str
from chronoloop.view.views.header import header


def rollover_view(rolled: list[tuple[Task, Task]]) -> None:
    """Show each stale task with its old and new due date.

    Args:
        rolled: Pairs of (original task, rolled task)
    """
    header("rollover")

    console = Console()
    if not rolled:
        console.print("[green]No stale tasks[/green]")
        return

    table = Table(box=box.SIMPLE)
    for column in ["title", "project", "status", "was due", "now due"]:
        table.add_column(column)
    for original, rolled_task in rolled:
        table.add_row(
            rolled_task["title"],
            rolled_task["project"] or "",
            rolled_task["status"],
            datetime_to_display_local_date_str(original["due_date"])  # type: ignore[arg-type]
            if original["due_date"] is not None
            else "",
            datetime_to_display_local_date_str(rolled_task["due_date"])  # type: ignore[arg-type]
            if rolled_task["due_date"] is not None
            else "",
        )
    console.print(table)
