# SPDX-License-Identifier: MIT

import logging

import pendulum

from ganttgrid.model.geometry import MilestoneMarker
from ganttgrid.model.milestone import Milestone
from ganttgrid.model.row_plan import RowPlan
from ganttgrid.service.coordinate import date_to_percent
from ganttgrid.service.row_layout import entry_by_task_id

logger = logging.getLogger(__name__)

# Height of one task row in layout units; connectors are multiples of it
DEFAULT_ROW_HEIGHT = 41


def connector_height(row_count: int, row_index: int, row_height: int) -> int:
    """
    Length of the line from the milestone lane up to the top edge of a row.

    The milestone lane sits directly below the last row, so the line crosses
    every row from row_index to the bottom and stops at the top border of
    row row_index.
    """
    return (row_count - row_index) * row_height


def annotate_milestones(
    milestones: list[Milestone],
    plan: RowPlan,
    days: list[pendulum.Date],
    row_height: int = DEFAULT_ROW_HEIGHT,
) -> list[MilestoneMarker]:
    """
    Number milestones by date and compute their marker geometry.

    Milestones whose task is not in the row plan (including those without a
    task) are dropped before numbering. The rest are sorted by date; ties keep
    their input order. A milestone on a merged parent header points at the
    header's first child row.

    Args:
        milestones: Milestones of the snapshot
        plan: Row plan from plan_rows
        days: Ordered day buckets of the axis
        row_height: Height of one row in layout units

    Returns:
        Markers ordered by sequence number, numbered from 1
    """
    entries = entry_by_task_id(plan)

    linked: list[Milestone] = []
    for milestone in milestones:
        task_id = milestone.get("task_id")
        if task_id is None or task_id not in entries:
            logger.debug(
                "Milestone %r dropped: task %s is not in the row plan",
                milestone["title"],
                task_id,
            )
            continue
        linked.append(milestone)

    linked.sort(key=lambda m: m["date"])

    markers: list[MilestoneMarker] = []
    for sequence_number, milestone in enumerate(linked, start=1):
        task_id = milestone["task_id"]
        assert task_id is not None
        entry = entries[task_id]
        markers.append(
            {
                "left": date_to_percent(days, milestone["date"]),
                "connector_height": connector_height(
                    plan["row_count"], entry["row_index"], row_height
                ),
                "sequence_number": sequence_number,
                "label": milestone["title"],
                "date": milestone["date"],
                "task_id": task_id,
                "task_name": entry["task"]["name"],
                "row_index": entry["row_index"],
            }
        )

    return markers
