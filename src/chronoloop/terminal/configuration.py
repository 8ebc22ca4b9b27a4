# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from chronoloop import configuration
from chronoloop.repository.configuration import CONFIGURATION_REPO
from chronoloop.terminal.custom_typer import AliasedTyperGroup
from chronoloop.terminal.timeline import SCALES

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("default_scale", config["default_scale"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "use_color",
        "✓ Enabled" if config["use_color"] else "✗ Disabled",
    )

    console.print(table)


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding the entity folders"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="use the platform default")
    ] = False,
    default_scale: Annotated[
        Optional[str],
        typer.Option("--default-scale", help="day, week, month or year"),
    ] = None,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    use_color: Annotated[Optional[bool], typer.Option("--color/--no-color")] = None,
) -> None:
    """Update configuration settings."""
    if default_scale is not None and default_scale not in SCALES:
        raise typer.BadParameter(f"default scale must be one of {', '.join(SCALES)}")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        default_scale=default_scale,
        show_header=show_header,
        use_color=use_color,
    )
    CONFIGURATION_REPO.flush()
    view()
