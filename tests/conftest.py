# SPDX-License-Identifier: MIT

from collections.abc import Iterator
from pathlib import Path
from typing import Optional

import pendulum
import pytest

from ganttgrid import configuration
from ganttgrid.initialize import initialize
from ganttgrid.model.category import Category
from ganttgrid.model.interval import Interval
from ganttgrid.model.milestone import Milestone
from ganttgrid.model.snapshot import Snapshot
from ganttgrid.model.task import Task
from ganttgrid.repository.configuration import CONFIGURATION_REPO


def make_task(
    id: str,
    name: Optional[str] = None,
    display_order: float = 0,
    parent_task_id: Optional[str] = None,
    color: Optional[str] = None,
) -> Task:
    return {
        "id": id,
        "parent_task_id": parent_task_id,
        "display_order": display_order,
        "color": color,
        "name": name if name is not None else id,
    }


def make_interval(
    task_id: str,
    start_date: str,
    end_date: str,
    category_id: Optional[str] = None,
) -> Interval:
    return {
        "id": None,
        "task_id": task_id,
        "start_date": pendulum.parse(start_date).date(),
        "end_date": pendulum.parse(end_date).date(),
        "category_id": category_id,
    }


def make_milestone(task_id: Optional[str], date: str, title: str) -> Milestone:
    return {
        "id": None,
        "task_id": task_id,
        "date": pendulum.parse(date).date(),
        "title": title,
    }


def make_category(id: str, color: str, name: Optional[str] = None) -> Category:
    return {"id": id, "color": color, "name": name}


def make_snapshot(
    start_date: str = "2024-01-01",
    end_date: str = "2024-01-31",
    tasks: Optional[list[Task]] = None,
    intervals: Optional[list[Interval]] = None,
    milestones: Optional[list[Milestone]] = None,
    categories: Optional[list[Category]] = None,
) -> Snapshot:
    return {
        "project": {
            "id": "p",
            "title": "Demo",
            "start_date": pendulum.parse(start_date).date(),
            "end_date": pendulum.parse(end_date).date(),
        },
        "tasks": tasks or [],
        "intervals": intervals or [],
        "milestones": milestones or [],
        "categories": categories or [],
    }


@pytest.fixture
def january_days() -> list[pendulum.Date]:
    start = pendulum.date(2024, 1, 1)
    return [start.add(days=offset) for offset in range(31)]


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration at a temporary directory and create the config file."""
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    CONFIGURATION_REPO.reload()
    initialize()
    yield config_path
    CONFIGURATION_REPO.reload()


SNAPSHOT_YAML = """\
project: {start_date: 2024-01-01, end_date: 2024-03-31, title: Demo}
tasks:
  - {id: a, name: Design, display_order: 1, color: "#3b82f6"}
  - {id: a1, name: Wireframes, display_order: 1, parent_task_id: a}
  - {id: a2, name: Mockups, display_order: 2, parent_task_id: a}
  - {id: b, name: Build, display_order: 2}
intervals:
  - {task_id: a1, start_date: 2024-01-03, end_date: 2024-01-12, category_id: c}
  - {task_id: b, start_date: 2024-02-01, end_date: 2024-03-15}
milestones:
  - {task_id: a1, date: 2024-01-12, title: Sign-off}
  - {task_id: b, date: 2024-03-15, title: Launch}
  - {task_id: missing, date: 2024-02-01, title: Orphan}
categories:
  - {id: c, color: "#ef4444", name: Review}
"""


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.yaml"
    path.write_text(SNAPSHOT_YAML)
    return path
