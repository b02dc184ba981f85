# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from ganttgrid.model.entity_id import EntityId


class Task(TypedDict):
    id: EntityId
    parent_task_id: Optional[EntityId]
    display_order: float
    color: Optional[str]
    name: str
