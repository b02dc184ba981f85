# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from ganttgrid.model.entity_id import EntityId


class Interval(TypedDict):
    id: Optional[EntityId]
    task_id: EntityId
    start_date: pendulum.Date
    end_date: pendulum.Date
    category_id: Optional[EntityId]
