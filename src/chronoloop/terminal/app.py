# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from chronoloop import configuration as app_configuration
from chronoloop.terminal import configuration, timeline
from chronoloop.terminal.custom_typer import OrderedAliasedTyperGroup
from chronoloop.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="chronoloop - timeline, workload and conflicts for your schedule",
    no_args_is_help=True,
)
app.command(name="timeline, tl")(timeline.timeline)
app.command(name="workload, w")(timeline.workload)
app.command(name="conflicts, cf")(timeline.conflicts)
app.command(name="rollover, r")(timeline.rollover)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Render items without their colors"),
    ] = False,
    data_path: Annotated[
        Optional[Path],
        typer.Option("--data-path", help="Read entities from this directory"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    chronoloop - timeline, workload and conflicts for your schedule

    Global options that apply to all commands.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    if no_header:
        view_state.set_show_header(False)
    if no_color:
        view_state.set_use_color(False)
    if data_path is not None:
        app_configuration.set_data_path(data_path)


def run() -> None:
    app()
