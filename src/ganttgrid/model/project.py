# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from ganttgrid.model.entity_id import EntityId


class Project(TypedDict):
    id: Optional[EntityId]
    title: Optional[str]
    start_date: pendulum.Date
    end_date: pendulum.Date
