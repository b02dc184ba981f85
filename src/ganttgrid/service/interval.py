# SPDX-License-Identifier: MIT

import logging

import pendulum

from ganttgrid.color import INTERVAL_SHADE_PERCENT, normalize_hex_color, shade
from ganttgrid.model.category import Category
from ganttgrid.model.entity_id import EntityId
from ganttgrid.model.geometry import IntervalShape
from ganttgrid.model.interval import Interval
from ganttgrid.model.row_plan import RowPlan, TimelineRow
from ganttgrid.service.coordinate import find_day_index
from ganttgrid.service.row_layout import timeline_rows

logger = logging.getLogger(__name__)


def resolve_interval_indices(
    days: list[pendulum.Date],
    start_date: pendulum.Date,
    end_date: pendulum.Date,
) -> tuple[int, int]:
    """
    Resolve the first and last day bucket covered by an interval.

    Dates outside the axis clamp to the nearest boundary: a start that cannot
    be found goes to index 0 if it precedes the axis, else to the last index;
    an end that cannot be found goes to the last index if it follows the axis,
    else to 0. The end index is never smaller than the start index.

    Args:
        days: Ordered day buckets of the axis (at least one)
        start_date: First day of the interval
        end_date: Last day of the interval (inclusive)

    Returns:
        Tuple of (start_index, end_index)
    """
    last_index = len(days) - 1

    start_index = find_day_index(days, start_date)
    if start_index is None:
        start_index = 0 if start_date < days[0] else last_index

    end_index = find_day_index(days, end_date)
    if end_index is None:
        end_index = last_index if end_date > days[-1] else 0

    if start_date < days[0] or end_date > days[-1]:
        logger.debug(
            "Interval %s..%s clamped to axis %s..%s",
            start_date,
            end_date,
            days[0],
            days[-1],
        )

    return start_index, max(start_index, end_index)


def place_interval(
    interval: Interval,
    row: TimelineRow,
    days: list[pendulum.Date],
    categories_by_id: dict[EntityId, Category],
    shade_percent: float = INTERVAL_SHADE_PERCENT,
) -> IntervalShape:
    """
    Compute the shape of one interval on its row.

    The fill is the row color shaded by shade_percent. The border uses the
    interval's category color, falling back to the fill.
    """
    start_index, end_index = resolve_interval_indices(
        days, interval["start_date"], interval["end_date"]
    )
    total = len(days)

    fill_color = shade(row["resolved_color"], shade_percent)
    border_color = fill_color
    category_id = interval.get("category_id")
    if category_id is not None and category_id in categories_by_id:
        border_color = normalize_hex_color(
            categories_by_id[category_id]["color"], fill_color
        )

    return {
        "row_index": row["row_index"],
        "task_id": row["task"]["id"],
        "left": start_index / total * 100,
        "width": (end_index - start_index + 1) / total * 100,
        "fill_color": fill_color,
        "border_color": border_color,
        "start_date": interval["start_date"],
        "end_date": interval["end_date"],
    }


def place_intervals(
    intervals: list[Interval],
    plan: RowPlan,
    days: list[pendulum.Date],
    categories: list[Category],
    shade_percent: float = INTERVAL_SHADE_PERCENT,
) -> list[IntervalShape]:
    """
    Compute shapes for every interval whose task owns a timeline row.

    Shapes are ordered by row, then by input order within a row. Intervals
    of tasks without a row (unknown tasks, parents rendered as merged
    headers) are skipped.

    Args:
        intervals: Intervals of the snapshot
        plan: Row plan from plan_rows
        days: Ordered day buckets of the axis
        categories: Categories of the snapshot
        shade_percent: Shade applied to the row color for the fill

    Returns:
        List of interval shapes
    """
    rows_by_task_id = {row["task"]["id"]: row for row in timeline_rows(plan)}
    categories_by_id = {category["id"]: category for category in categories}

    shapes: list[IntervalShape] = []
    for interval in intervals:
        row = rows_by_task_id.get(interval["task_id"])
        if row is None:
            logger.debug(
                "Interval of task %s skipped: task has no timeline row",
                interval["task_id"],
            )
            continue
        shapes.append(
            place_interval(interval, row, days, categories_by_id, shade_percent)
        )

    shapes.sort(key=lambda shape: shape["row_index"])
    return shapes
