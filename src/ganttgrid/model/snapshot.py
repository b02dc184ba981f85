# SPDX-License-Identifier: MIT

from typing import TypedDict

from ganttgrid.model.category import Category
from ganttgrid.model.interval import Interval
from ganttgrid.model.milestone import Milestone
from ganttgrid.model.project import Project
from ganttgrid.model.task import Task


class Snapshot(TypedDict):
    project: Project
    tasks: list[Task]
    intervals: list[Interval]
    milestones: list[Milestone]
    categories: list[Category]
