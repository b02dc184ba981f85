# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from ganttgrid.color import DEFAULT_ROW_COLOR, normalize_hex_color
from ganttgrid.model.entity_id import EntityId
from ganttgrid.model.row_plan import (
    ChildRow,
    MergedParentHeader,
    RowPlan,
    RowPlanEntry,
    StandaloneRow,
    TimelineRow,
)
from ganttgrid.model.task import Task

logger = logging.getLogger(__name__)


def partition_tasks(tasks: list[Task]) -> dict[Optional[EntityId], list[Task]]:
    """
    Group tasks by parent_task_id, each group sorted by display_order.

    Tasks without a parent are stored under the None key. Sorting is stable,
    so tasks with equal display_order keep their input order.
    """
    partitions: dict[Optional[EntityId], list[Task]] = {}
    for task in tasks:
        parent_id = task.get("parent_task_id") or None
        partitions.setdefault(parent_id, []).append(task)

    for siblings in partitions.values():
        siblings.sort(key=lambda t: t["display_order"])

    return partitions


def resolve_task_color(task: Task, fallback: str) -> str:
    color = task.get("color")
    if not color:
        return fallback
    return normalize_hex_color(color, fallback)


def plan_rows(tasks: list[Task], default_color: str = DEFAULT_ROW_COLOR) -> RowPlan:
    """
    Arrange tasks into the ordered row plan shared by every placement step.

    Top-level tasks without children become one standalone row. A top-level
    task with children becomes a merged header entry spanning its children,
    followed by one child row per subtask; the parent owns no timeline row.
    Subtasks inherit the parent's resolved color unless they set their own.

    Subtasks of missing tasks and subtasks nested below another subtask get
    no row.

    Args:
        tasks: All tasks of the snapshot
        default_color: Color for top-level tasks without a valid color

    Returns:
        The row plan, entries in display order
    """
    partitions = partition_tasks(tasks)
    default_color = normalize_hex_color(default_color)

    entries: list[RowPlanEntry] = []
    row_index = 0

    for task in partitions.get(None, []):
        color = resolve_task_color(task, default_color)
        children = partitions.get(task["id"], [])

        if not children:
            standalone: StandaloneRow = {
                "kind": "standalone",
                "task": task,
                "resolved_color": color,
                "row_index": row_index,
            }
            entries.append(standalone)
            row_index += 1
            continue

        header: MergedParentHeader = {
            "kind": "merged_parent_header",
            "task": task,
            "resolved_color": color,
            "row_index": row_index,
            "child_count": len(children),
        }
        entries.append(header)

        for child in children:
            child_row: ChildRow = {
                "kind": "child",
                "task": child,
                "resolved_color": resolve_task_color(child, color),
                "row_index": row_index,
                "parent_id": task["id"],
            }
            entries.append(child_row)
            row_index += 1

    placed_ids = {entry["task"]["id"] for entry in entries}
    for task in tasks:
        if task["id"] not in placed_ids:
            logger.debug(
                "Task %s has no row: parent %s is missing or is itself a subtask",
                task["id"],
                task.get("parent_task_id"),
            )

    return {
        "entries": entries,
        "row_count": row_index,
        "has_subtasks": any(entry["kind"] == "child" for entry in entries),
    }


def timeline_rows(plan: RowPlan) -> list[TimelineRow]:
    """Entries that own a timeline row (standalone and child rows), in row order."""
    rows: list[TimelineRow] = []
    for entry in plan["entries"]:
        if entry["kind"] == "standalone" or entry["kind"] == "child":
            rows.append(entry)
    return rows


def entry_by_task_id(plan: RowPlan) -> dict[EntityId, RowPlanEntry]:
    return {entry["task"]["id"]: entry for entry in plan["entries"]}


def row_index_by_task_id(plan: RowPlan) -> dict[EntityId, int]:
    """Row index of every planned task; a merged header maps to its first child row."""
    return {
        task_id: entry["row_index"] for task_id, entry in entry_by_task_id(plan).items()
    }
