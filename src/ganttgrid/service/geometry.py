# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from ganttgrid.color import DEFAULT_ROW_COLOR, INTERVAL_SHADE_PERCENT, normalize_hex_color
from ganttgrid.model.geometry import (
    CategoryLegendEntry,
    CurrentDayMarker,
    Geometry,
    RowCell,
)
from ganttgrid.model.granularity_type import Granularity
from ganttgrid.model.row_plan import RowPlan
from ganttgrid.model.snapshot import Snapshot
from ganttgrid.service.calendar import clamp_range, count_months, enumerate_days
from ganttgrid.service.coordinate import date_to_percent
from ganttgrid.service.header import build_header
from ganttgrid.service.interval import place_intervals
from ganttgrid.service.milestone import DEFAULT_ROW_HEIGHT, annotate_milestones
from ganttgrid.service.row_layout import plan_rows
from ganttgrid.time import today_local

logger = logging.getLogger(__name__)

# Projects spanning more calendar months than this are shown month by month
AUTO_MONTHS_THRESHOLD = 6


def resolve_granularity(
    requested: Granularity,
    start: pendulum.Date,
    end: pendulum.Date,
    threshold: int = AUTO_MONTHS_THRESHOLD,
) -> Granularity:
    """Force "months" granularity for projects longer than threshold months."""
    if requested != "months" and count_months(start, end) > threshold:
        logger.debug(
            "Project spans more than %d months, using months granularity", threshold
        )
        return "months"
    return requested


def build_row_cells(plan: RowPlan) -> list[RowCell]:
    cells: list[RowCell] = []
    for entry in plan["entries"]:
        row_span = 1
        if entry["kind"] == "merged_parent_header":
            row_span = entry["child_count"]
        cells.append(
            {
                "kind": entry["kind"],
                "task_id": entry["task"]["id"],
                "label": entry["task"]["name"],
                "color": entry["resolved_color"],
                "row_span": row_span,
                "row_index": entry["row_index"],
            }
        )
    return cells


def build_current_day_marker(
    days: list[pendulum.Date], today: pendulum.Date
) -> Optional[CurrentDayMarker]:
    if not days or today < days[0] or today > days[-1]:
        return None
    return {"left": date_to_percent(days, today), "date": today}


def compute_geometry(
    snapshot: Snapshot,
    granularity: Granularity = "weeks",
    show_current_day: bool = False,
    today: Optional[pendulum.Date] = None,
    row_height: int = DEFAULT_ROW_HEIGHT,
    default_color: str = DEFAULT_ROW_COLOR,
    shade_percent: float = INTERVAL_SHADE_PERCENT,
) -> Geometry:
    """
    Compute the render-agnostic geometry of a project timeline.

    The computation is a pure function of its arguments: the row plan is built
    first, then headers, interval shapes and milestone markers are placed on
    the shared day axis. A reversed project range is clamped to one day.

    Args:
        snapshot: Project, tasks, intervals, milestones and categories
        granularity: "weeks", "intervals" or "months"
        show_current_day: Whether to emit the current-day marker
        today: The current day (defaults to today in the local timezone)
        row_height: Height of one row in layout units, for milestone connectors
        default_color: Color for top-level tasks without a color
        shade_percent: Shade applied to row colors for interval fills

    Returns:
        The geometry descriptor
    """
    project = snapshot["project"]
    start, end = clamp_range(project["start_date"], project["end_date"])
    days = enumerate_days(start, end)

    plan = plan_rows(snapshot["tasks"], default_color)
    header_groups, header_buckets = build_header(
        granularity, start, end, days, snapshot["intervals"]
    )
    intervals = place_intervals(
        snapshot["intervals"], plan, days, snapshot["categories"], shade_percent
    )
    milestones = annotate_milestones(snapshot["milestones"], plan, days, row_height)

    current_day: Optional[CurrentDayMarker] = None
    if show_current_day:
        current_day = build_current_day_marker(
            days, today if today is not None else today_local()
        )

    categories: list[CategoryLegendEntry] = [
        {
            "id": category["id"],
            "label": category.get("name") or category["id"],
            "color": normalize_hex_color(category["color"]),
        }
        for category in snapshot["categories"]
    ]

    return {
        "project_title": project.get("title"),
        "project_start": start,
        "project_end": end,
        "granularity": granularity,
        "day_count": len(days),
        "row_count": plan["row_count"],
        "has_subtasks": plan["has_subtasks"],
        "header_groups": header_groups,
        "header_buckets": header_buckets,
        "rows": build_row_cells(plan),
        "intervals": intervals,
        "milestones": milestones,
        "current_day": current_day,
        "categories": categories,
    }
