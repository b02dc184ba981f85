# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict, Union

from ganttgrid.model.entity_id import EntityId
from ganttgrid.model.task import Task


class StandaloneRow(TypedDict):
    kind: Literal["standalone"]
    task: Task
    resolved_color: str
    row_index: int


class MergedParentHeader(TypedDict):
    """Label cell of a parent task, spanning the rows of its children.

    row_index is the index of the first child row; the header owns no
    timeline row of its own.
    """

    kind: Literal["merged_parent_header"]
    task: Task
    resolved_color: str
    row_index: int
    child_count: int


class ChildRow(TypedDict):
    kind: Literal["child"]
    task: Task
    resolved_color: str
    row_index: int
    parent_id: EntityId


RowPlanEntry: TypeAlias = Union[StandaloneRow, MergedParentHeader, ChildRow]
TimelineRow: TypeAlias = Union[StandaloneRow, ChildRow]


class RowPlan(TypedDict):
    entries: list[RowPlanEntry]
    row_count: int
    has_subtasks: bool
