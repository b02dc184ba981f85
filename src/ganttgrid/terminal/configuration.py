# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console
from rich.table import Table

from ganttgrid import configuration
from ganttgrid.model.granularity_type import Granularity
from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.terminal.custom_typer import AliasedTyperGroup
from ganttgrid.terminal.parse import parse_granularity, parse_hex_color

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("default_granularity", config["default_granularity"])
    table.add_row(
        "show_current_day",
        "✓ Enabled" if config["show_current_day"] else "✗ Disabled",
    )
    table.add_row("row_height", str(config["row_height"]))
    table.add_row("default_row_color", config["default_row_color"])
    table.add_row("interval_shade_percent", str(config["interval_shade_percent"]))
    table.add_row("auto_months_threshold", str(config["auto_months_threshold"]))
    table.add_row("left_column_width", str(config["left_column_width"]))

    console.print(table)
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the application header above views",
        ),
    ] = None,
    default_granularity: Annotated[
        Optional[str],
        typer.Option(
            "--default-granularity",
            parser=parse_granularity,
            help="Granularity used when none is given: weeks, intervals, or months",
        ),
    ] = None,
    show_current_day: Annotated[
        Optional[bool],
        typer.Option(
            "--show-current-day/--no-show-current-day",
            help="Show the current-day marker by default",
        ),
    ] = None,
    row_height: Annotated[
        Optional[int],
        typer.Option(
            "--row-height",
            min=1,
            help="Height of one task row in layout units (milestone connectors)",
        ),
    ] = None,
    default_row_color: Annotated[
        Optional[str],
        typer.Option(
            "--default-row-color",
            parser=parse_hex_color,
            help="Hex color for tasks without a color",
        ),
    ] = None,
    interval_shade_percent: Annotated[
        Optional[int],
        typer.Option(
            "--interval-shade-percent",
            min=-100,
            max=100,
            help="Shade applied to row colors for interval fills (negative darkens)",
        ),
    ] = None,
    auto_months_threshold: Annotated[
        Optional[int],
        typer.Option(
            "--auto-months-threshold",
            min=1,
            help="Projects spanning more months than this always use months granularity",
        ),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width",
            min=10,
            help="Width of the task label column in the chart",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        default_granularity=cast(Optional[Granularity], default_granularity),
        show_current_day=show_current_day,
        row_height=row_height,
        default_row_color=default_row_color,
        interval_shade_percent=interval_shade_percent,
        auto_months_threshold=auto_months_threshold,
        left_column_width=left_column_width,
    )
    view()
