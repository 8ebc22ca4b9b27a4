# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from chronoloop.color import INTENSITY_COLORS
from chronoloop.service.workload import DayWorkload
from chronoloop.time import format_duration
from chronoloop.view.state import get_use_color
from chronoloop.view.views.header import header

# One bar cell per half hour, capped at the overloaded threshold
BAR_CELL_MINUTES = 30
BAR_MAX_CELLS = 13


def workload_bar(workload: DayWorkload) -> Text:
    cells = min(BAR_MAX_CELLS, -(-workload["minutes"] // BAR_CELL_MINUTES))
    style = INTENSITY_COLORS[workload["intensity"]] if get_use_color() else ""
    return Text("#" * cells, style=style)


def workload_view(window_label: str, workloads: list[DayWorkload]) -> None:
    header("workload", window_label)

    table = Table(box=box.SIMPLE)
    table.add_column("day")
    table.add_column("items", justify="right")
    table.add_column("total", justify="right")
    table.add_column("load")
    table.add_column("intensity")

    for workload in workloads:
        table.add_row(
            workload["day"].format("YYYY-MM-DD ddd"),
            str(workload["item_count"]),
            format_duration(workload["minutes"]),
            workload_bar(workload),
            workload["intensity"],
        )

    Console().print(table)
