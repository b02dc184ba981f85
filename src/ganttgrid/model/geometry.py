# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from ganttgrid.model.entity_id import EntityId
from ganttgrid.model.granularity_type import Granularity


class HeaderBucket(TypedDict):
    label: str
    left: float
    width: float


class RowCell(TypedDict):
    kind: Literal["standalone", "merged_parent_header", "child"]
    task_id: EntityId
    label: str
    color: str
    row_span: int
    row_index: int


class IntervalShape(TypedDict):
    row_index: int
    task_id: EntityId
    left: float
    width: float
    fill_color: str
    border_color: str
    start_date: pendulum.Date
    end_date: pendulum.Date


class MilestoneMarker(TypedDict):
    left: float
    connector_height: int
    sequence_number: int
    label: str
    date: pendulum.Date
    task_id: EntityId
    task_name: str
    row_index: int


class CurrentDayMarker(TypedDict):
    left: float
    date: pendulum.Date


class CategoryLegendEntry(TypedDict):
    id: EntityId
    label: str
    color: str


class Geometry(TypedDict):
    project_title: Optional[str]
    project_start: pendulum.Date
    project_end: pendulum.Date
    granularity: Granularity
    day_count: int
    row_count: int
    has_subtasks: bool
    header_groups: list[HeaderBucket]
    header_buckets: list[HeaderBucket]
    rows: list[RowCell]
    intervals: list[IntervalShape]
    milestones: list[MilestoneMarker]
    current_day: Optional[CurrentDayMarker]
    categories: list[CategoryLegendEntry]
