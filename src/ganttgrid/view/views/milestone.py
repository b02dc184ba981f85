# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table

from ganttgrid.color import MILESTONE_COLOR
from ganttgrid.model.geometry import MilestoneMarker
from ganttgrid.time import date_to_display_str


def milestone_table_view(milestones: list[MilestoneMarker]) -> None:
    """Print the numbered milestones with their date and task."""
    console = Console()

    if not milestones:
        console.print("\n[dim]No milestones to display[/dim]\n")
        return

    table = Table(title="Milestones", title_justify="left")
    table.add_column("Number", style=f"bold {MILESTONE_COLOR}", justify="right")
    table.add_column("Description")
    table.add_column("Date", style="cyan")
    table.add_column("Task", style="magenta")

    for marker in milestones:
        table.add_row(
            str(marker["sequence_number"]),
            marker["label"],
            date_to_display_str(marker["date"]),
            marker["task_name"],
        )

    console.print(table)
