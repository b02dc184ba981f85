# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from ganttgrid.color import CURRENT_DAY_COLOR, MILESTONE_COLOR
from ganttgrid.model.geometry import Geometry, HeaderBucket, RowCell
from ganttgrid.time import date_to_display_str
from ganttgrid.view.views.header import header

# Narrowest timeline drawn, regardless of terminal width
MIN_TIMELINE_WIDTH = 20

Cell: TypeAlias = tuple[str, Optional[str]]


def gantt_view(
    geometry: Geometry,
    left_column_width: int = 30,
    width: Optional[int] = None,
) -> None:
    """
    Draw the geometry of a project timeline as a gantt chart.

    The timeline area spans the terminal width minus the label column. Every
    shape is placed by converting its percentage offsets into character
    columns, so the chart mirrors the computed geometry exactly.

    Args:
        geometry: Geometry from compute_geometry
        left_column_width: Width of the label column (defaults to 30)
        width: Total chart width (defaults to the terminal width)
    """
    start = geometry["project_start"].format("YYYY-MM-DD")
    end = geometry["project_end"].format("YYYY-MM-DD")
    header(geometry["project_title"] or "[untitled project]", f"{start} to {end}")

    console = Console()

    if not geometry["rows"]:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    total_width = width if width is not None else console.width
    timeline_width = max(MIN_TIMELINE_WIDTH, total_width - left_column_width)

    console.print(
        f"\n[bold]{geometry['day_count']} days[/bold] by {geometry['granularity']}\n"
    )

    chart_elements: list[Text] = []

    for header_row in (geometry["header_groups"], geometry["header_buckets"]):
        chart_elements.append(
            _build_header_row(header_row, timeline_width, left_column_width)
        )

    separator = Text("─" * left_column_width, style="dim")
    separator.append("┼", style="dim")
    separator.append("─" * (timeline_width - 1), style="dim")
    chart_elements.append(separator)

    current_day_column: Optional[int] = None
    if geometry["current_day"] is not None:
        current_day_column = _to_column(geometry["current_day"]["left"], timeline_width)

    headers_by_first_row = {
        cell["row_index"]: cell
        for cell in geometry["rows"]
        if cell["kind"] == "merged_parent_header"
    }

    for cell in geometry["rows"]:
        if cell["kind"] == "merged_parent_header":
            continue
        chart_elements.append(
            _build_task_row(
                cell,
                headers_by_first_row.get(cell["row_index"]),
                geometry,
                timeline_width,
                left_column_width,
                current_day_column,
            )
        )

    if geometry["milestones"]:
        chart_elements.append(
            _build_milestone_row(
                geometry, timeline_width, left_column_width, current_day_column
            )
        )

    if geometry["current_day"] is not None and current_day_column is not None:
        label = Text(" " * left_column_width)
        date_label = date_to_display_str(geometry["current_day"]["date"])
        offset = min(current_day_column, max(0, timeline_width - len(date_label)))
        label.append(" " * offset)
        label.append(date_label, style=f"bold {CURRENT_DAY_COLOR}")
        chart_elements.append(label)

    chart = Group(*chart_elements)
    console.print(Padding(chart, (0, 0, 1, 0)))


def _to_column(percent: float, timeline_width: int) -> int:
    """Convert a percentage offset into a character column of the timeline."""
    column = int(percent / 100 * timeline_width)
    return min(max(column, 0), timeline_width - 1)


def _to_columns(left: float, width: float, timeline_width: int) -> tuple[int, int]:
    """Convert a (left, width) span into a half-open column range, at least one column wide."""
    start = _to_column(left, timeline_width)
    end = round((left + width) / 100 * timeline_width)
    return start, min(max(end, start + 1), timeline_width)


def _fit(text: str, width: int) -> str:
    """Truncate with an ellipsis, or pad, text to exactly width characters."""
    if width <= 0:
        return ""
    if len(text) > width:
        if width <= 3:
            return text[:width]
        return text[: width - 3] + "..."
    return text.ljust(width)


def _cells_to_text(cells: list[Cell], row: Optional[Text] = None) -> Text:
    if row is None:
        row = Text()
    for char, style in cells:
        row.append(char, style=style)
    return row


def _build_header_row(
    buckets: list[HeaderBucket],
    timeline_width: int,
    left_column_width: int,
) -> Text:
    """
    Build one header row with a divider at the start of every bucket.

    Zero-width buckets (interval boundary ticks) are drawn as a tick followed
    by their label.
    """
    cells: list[Cell] = [(" ", None)] * timeline_width

    for bucket in buckets:
        if bucket["width"] > 0:
            start, end = _to_columns(bucket["left"], bucket["width"], timeline_width)
        else:
            start = _to_column(bucket["left"], timeline_width)
            end = timeline_width
        cells[start] = ("│", "dim")
        label = bucket["label"][: max(0, end - start - 1)]
        for offset, char in enumerate(label, start=start + 1):
            cells[offset] = (char, "bold" if bucket["width"] > 0 else "dim")

    row = Text(" " * left_column_width)
    return _cells_to_text(cells, row)


def _build_left_column(
    cell: RowCell,
    parent: Optional[RowCell],
    has_subtasks: bool,
    left_column_width: int,
) -> Text:
    """
    Format the label column of a timeline row.

    With subtasks present the column is split in two: the parent column shows
    the merged parent label on its first child row only, and the child column
    shows the subtask name. Standalone rows put their name in the parent column.
    """
    style = f"black on {cell['color']}"

    left = Text()

    if not has_subtasks:
        left.append(_fit(f" {cell['label']}", left_column_width), style=style)
        return left

    parent_width = left_column_width // 2
    child_width = left_column_width - parent_width

    if cell["kind"] == "standalone":
        left.append(_fit(f" {cell['label']}", parent_width), style=f"bold {style}")
        left.append(" " * child_width, style=style)
    else:
        parent_label = f" {parent['label']}" if parent is not None else ""
        parent_style = f"bold black on {parent['color']}" if parent is not None else style
        left.append(_fit(parent_label, parent_width), style=parent_style)
        left.append(_fit(f" {cell['label']}", child_width), style=style)
    return left


def _build_task_row(
    cell: RowCell,
    parent: Optional[RowCell],
    geometry: Geometry,
    timeline_width: int,
    left_column_width: int,
    current_day_column: Optional[int],
) -> Text:
    """
    Build a task row: label column, interval bars, connectors and day marker.

    Milestone connectors pass through every row at or below the row of their
    task, ending at that row's top edge.
    """
    row = _build_left_column(
        cell, parent, geometry["has_subtasks"], left_column_width
    )
    cells: list[Cell] = [(" ", None)] * timeline_width

    for shape in geometry["intervals"]:
        if shape["row_index"] != cell["row_index"]:
            continue
        start, end = _to_columns(shape["left"], shape["width"], timeline_width)
        style = f"bold {shape['border_color']} on {shape['fill_color']}"
        for column in range(start, end):
            cells[column] = ("━", style)

    for marker in geometry["milestones"]:
        if cell["row_index"] < marker["row_index"]:
            continue
        column = _to_column(marker["left"], timeline_width)
        if cells[column][1] is None:
            cells[column] = ("┆", MILESTONE_COLOR)

    if current_day_column is not None and cells[current_day_column][1] is None:
        cells[current_day_column] = ("│", CURRENT_DAY_COLOR)

    return _cells_to_text(cells, row)


def _build_milestone_row(
    geometry: Geometry,
    timeline_width: int,
    left_column_width: int,
    current_day_column: Optional[int],
) -> Text:
    """Build the milestone lane with the sequence number of every marker."""
    row = Text()
    row.append(_fit(" Milestones", left_column_width), style="bold black on light_yellow3")
    cells: list[Cell] = [(" ", None)] * timeline_width

    if current_day_column is not None:
        cells[current_day_column] = ("│", CURRENT_DAY_COLOR)

    for marker in geometry["milestones"]:
        number = str(marker["sequence_number"])
        start = min(
            _to_column(marker["left"], timeline_width),
            max(0, timeline_width - len(number)),
        )
        for offset, char in enumerate(number, start=start):
            cells[offset] = (char, f"bold black on {MILESTONE_COLOR}")

    return _cells_to_text(cells, row)
