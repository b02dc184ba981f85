# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from ganttgrid import time
from ganttgrid.model.category import Category
from ganttgrid.model.entity_id import EntityId
from ganttgrid.model.interval import Interval
from ganttgrid.model.milestone import Milestone
from ganttgrid.model.project import Project
from ganttgrid.model.snapshot import Snapshot
from ganttgrid.model.task import Task


class SnapshotError(ValueError):
    """Raised when a snapshot file cannot be read or is missing required fields."""


def _entity_id(value: Any) -> EntityId:
    # YAML turns bare numeric ids into ints
    return str(value)


def _entity_id_optional(value: Any) -> Optional[EntityId]:
    if value is None or value == "":
        return None
    return _entity_id(value)


def _color_optional(value: Any) -> Optional[str]:
    # Unquoted all-digit hex colors like 123456 load as ints
    if value is None or value == "":
        return None
    return str(value)


def _display_order(value: Any) -> float:
    """Keep integral orders as int and fractional ones as float so they sort numerically."""
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValueError(f"display_order must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    order = float(value)
    return int(order) if order.is_integer() else order


class SnapshotRepository:
    """Read-only access to a snapshot stored as one YAML (or JSON) document."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._snapshot: Optional[Snapshot] = None

    @property
    def snapshot(self) -> Snapshot:
        if self._snapshot is None:
            self.__load_data()
        if self._snapshot is None:
            raise SnapshotError(f"{self.path}: snapshot could not be loaded")
        return self._snapshot

    def __load_data(self) -> None:
        try:
            raw_snapshot = load(self.path.read_text(), Loader=Loader)
        except (OSError, YAMLError, ValueError) as e:
            raise SnapshotError(f"{self.path}: {e}") from e

        if not isinstance(raw_snapshot, dict) or not isinstance(
            raw_snapshot.get("project"), dict
        ):
            raise SnapshotError(f"{self.path}: a 'project' mapping is required")

        try:
            self._snapshot = {
                "project": self.__convert_project_for_deserialization(
                    raw_snapshot["project"]
                ),
                "tasks": [
                    self.__convert_task_for_deserialization(raw_task)
                    for raw_task in raw_snapshot.get("tasks") or []
                ],
                "intervals": [
                    self.__convert_interval_for_deserialization(raw_interval)
                    for raw_interval in raw_snapshot.get("intervals") or []
                ],
                "milestones": [
                    self.__convert_milestone_for_deserialization(raw_milestone)
                    for raw_milestone in raw_snapshot.get("milestones") or []
                ],
                "categories": [
                    self.__convert_category_for_deserialization(raw_category)
                    for raw_category in raw_snapshot.get("categories") or []
                ],
            }
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotError(f"{self.path}: invalid snapshot entry: {e}") from e

    def __convert_project_for_deserialization(self, raw: dict[str, Any]) -> Project:
        return {
            "id": _entity_id_optional(raw.get("id")),
            "title": raw.get("title"),
            "start_date": time.date_from_value(raw["start_date"]),
            "end_date": time.date_from_value(raw["end_date"]),
        }

    def __convert_task_for_deserialization(self, raw: dict[str, Any]) -> Task:
        return {
            "id": _entity_id(raw["id"]),
            "parent_task_id": _entity_id_optional(raw.get("parent_task_id")),
            "display_order": _display_order(raw.get("display_order")),
            "color": _color_optional(raw.get("color")),
            "name": str(raw.get("name") or ""),
        }

    def __convert_interval_for_deserialization(self, raw: dict[str, Any]) -> Interval:
        return {
            "id": _entity_id_optional(raw.get("id")),
            "task_id": _entity_id(raw["task_id"]),
            "start_date": time.date_from_value(raw["start_date"]),
            "end_date": time.date_from_value(raw["end_date"]),
            "category_id": _entity_id_optional(raw.get("category_id")),
        }

    def __convert_milestone_for_deserialization(
        self, raw: dict[str, Any]
    ) -> Milestone:
        return {
            "id": _entity_id_optional(raw.get("id")),
            "task_id": _entity_id_optional(raw.get("task_id")),
            "date": time.date_from_value(raw["date"]),
            "title": str(raw.get("title") or ""),
        }

    def __convert_category_for_deserialization(self, raw: dict[str, Any]) -> Category:
        return {
            "id": _entity_id(raw["id"]),
            "color": str(raw.get("color") or ""),
            "name": raw.get("name"),
        }

    def get_snapshot(self) -> Snapshot:
        return deepcopy(self.snapshot)
