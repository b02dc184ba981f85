# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional, cast

import pendulum
import typer

from ganttgrid.model.geometry import Geometry
from ganttgrid.model.granularity_type import Granularity
from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.repository.snapshot import SnapshotError, SnapshotRepository
from ganttgrid.service.geometry import compute_geometry, resolve_granularity
from ganttgrid.terminal.parse import parse_date, parse_granularity
from ganttgrid.view.views.category import category_legend_view
from ganttgrid.view.views.gantt import gantt_view
from ganttgrid.view.views.geometry import geometry_view
from ganttgrid.view.views.milestone import milestone_table_view

SnapshotArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="Snapshot file (YAML or JSON) with project, tasks, intervals, milestones and categories",
    ),
]
GranularityOption = Annotated[
    Optional[str],
    typer.Option(
        "--granularity",
        "-g",
        parser=parse_granularity,
        help="Time granularity: weeks, intervals, or months (defaults to config)",
    ),
]
CurrentDayOption = Annotated[
    Optional[bool],
    typer.Option(
        "--current-day/--no-current-day",
        help="Show the current-day marker (defaults to config)",
    ),
]
TodayOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--today",
        "-t",
        parser=parse_date,
        help="Date used as today (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
    ),
]
AutoMonthsOption = Annotated[
    bool,
    typer.Option(
        "--auto-months/--no-auto-months",
        help="Switch long projects to months granularity",
    ),
]


def _build_geometry(
    snapshot_path: Path,
    granularity: Optional[str],
    current_day: Optional[bool],
    today: Optional[pendulum.Date],
    auto_months: bool,
) -> Geometry:
    config = CONFIGURATION_REPO.get_config()

    try:
        snapshot = SnapshotRepository(snapshot_path).get_snapshot()
    except SnapshotError as e:
        raise typer.BadParameter(str(e), param_hint="SNAPSHOT")

    requested = cast(Granularity, granularity or config["default_granularity"])
    if auto_months:
        requested = resolve_granularity(
            requested,
            snapshot["project"]["start_date"],
            snapshot["project"]["end_date"],
            config["auto_months_threshold"],
        )

    return compute_geometry(
        snapshot,
        granularity=requested,
        show_current_day=(
            current_day if current_day is not None else config["show_current_day"]
        ),
        today=today,
        row_height=config["row_height"],
        default_color=config["default_row_color"],
        shade_percent=config["interval_shade_percent"],
    )


def render(
    snapshot_path: SnapshotArgument,
    granularity: GranularityOption = None,
    current_day: CurrentDayOption = None,
    today: TodayOption = None,
    auto_months: AutoMonthsOption = True,
    left_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-width",
            "-lw",
            min=10,
            help="Width of left column for task names (defaults to config)",
        ),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
            min=30,
            help="Total chart width (defaults to terminal width)",
        ),
    ] = None,
) -> None:
    """Display the project timeline as a gantt chart with milestones and categories."""
    geometry = _build_geometry(snapshot_path, granularity, current_day, today, auto_months)
    config = CONFIGURATION_REPO.get_config()

    gantt_view(
        geometry,
        left_column_width=(
            left_width if left_width is not None else config["left_column_width"]
        ),
        width=width,
    )
    category_legend_view(geometry["categories"])
    if geometry["milestones"]:
        milestone_table_view(geometry["milestones"])


def geometry(
    snapshot_path: SnapshotArgument,
    granularity: GranularityOption = None,
    current_day: CurrentDayOption = None,
    today: TodayOption = None,
    auto_months: AutoMonthsOption = True,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            dir_okay=False,
            help="Write the geometry to this file instead of printing it",
        ),
    ] = None,
) -> None:
    """Print the computed timeline geometry as YAML."""
    geometry_view(
        _build_geometry(snapshot_path, granularity, current_day, today, auto_months),
        output,
    )


def milestones(
    snapshot_path: SnapshotArgument,
) -> None:
    """Display the numbered milestones of a project."""
    geometry = _build_geometry(snapshot_path, None, False, None, False)
    milestone_table_view(geometry["milestones"])
