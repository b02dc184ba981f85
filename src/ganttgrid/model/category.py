# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from ganttgrid.model.entity_id import EntityId


class Category(TypedDict):
    id: EntityId
    color: str
    name: Optional[str]
