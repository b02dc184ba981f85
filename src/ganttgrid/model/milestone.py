# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from ganttgrid.model.entity_id import EntityId


class Milestone(TypedDict):
    id: Optional[EntityId]
    task_id: Optional[EntityId]
    date: pendulum.Date
    title: str
