# SPDX-License-Identifier: MIT

import pendulum
import pytest
from conftest import (
    make_category,
    make_interval,
    make_milestone,
    make_snapshot,
    make_task,
)

from ganttgrid.color import DEFAULT_ROW_COLOR
from ganttgrid.service.geometry import (
    build_current_day_marker,
    compute_geometry,
    resolve_granularity,
)


@pytest.fixture
def snapshot():
    return make_snapshot(
        tasks=[
            make_task("p", name="Design", display_order=1, color="#3b82f6"),
            make_task("c1", name="Wireframes", display_order=1, parent_task_id="p"),
            make_task("s", name="Build", display_order=2),
        ],
        intervals=[
            make_interval("c1", "2023-12-25", "2024-01-05", category_id="review"),
            make_interval("s", "2024-01-10", "2024-01-20"),
        ],
        milestones=[
            make_milestone("s", "2024-01-10", "first"),
            make_milestone("c1", "2024-01-10", "second"),
            make_milestone("ghost", "2024-01-01", "dangling"),
        ],
        categories=[
            make_category("review", "#EF4444", "Review"),
            make_category("misc", "not a color"),
        ],
    )


def test_compute_geometry_for_january(snapshot):
    geometry = compute_geometry(snapshot)

    assert geometry["day_count"] == 31
    assert geometry["granularity"] == "weeks"
    assert [g["label"] for g in geometry["header_groups"]] == ["January 2024"]
    assert geometry["row_count"] == 2
    assert geometry["has_subtasks"]
    assert [(r["kind"], r["task_id"], r["row_span"]) for r in geometry["rows"]] == [
        ("merged_parent_header", "p", 1),
        ("child", "c1", 1),
        ("standalone", "s", 1),
    ]
    assert geometry["current_day"] is None


def test_compute_geometry_places_intervals_and_milestones(snapshot):
    geometry = compute_geometry(snapshot)

    first = geometry["intervals"][0]
    assert first["task_id"] == "c1"
    assert first["left"] == 0.0
    assert first["width"] == pytest.approx(5 / 31 * 100)
    assert first["fill_color"] == "#0036aa"
    assert first["border_color"] == "#ef4444"

    assert [(m["sequence_number"], m["label"]) for m in geometry["milestones"]] == [
        (1, "first"),
        (2, "second"),
    ]
    assert geometry["milestones"][0]["connector_height"] == 41


def test_compute_geometry_categories_legend(snapshot):
    geometry = compute_geometry(snapshot)

    assert geometry["categories"] == [
        {"id": "review", "label": "Review", "color": "#ef4444"},
        {"id": "misc", "label": "misc", "color": DEFAULT_ROW_COLOR},
    ]


def test_compute_geometry_current_day(snapshot):
    today = pendulum.date(2024, 1, 15)

    geometry = compute_geometry(snapshot, show_current_day=True, today=today)

    assert geometry["current_day"] == {"left": pytest.approx(14 / 31 * 100), "date": today}
    assert compute_geometry(snapshot, today=today)["current_day"] is None


def test_current_day_marker_outside_range(january_days):
    assert build_current_day_marker(january_days, pendulum.date(2024, 2, 1)) is None
    assert build_current_day_marker(january_days, pendulum.date(2023, 12, 31)) is None


def test_compute_geometry_clamps_reversed_project():
    geometry = compute_geometry(
        make_snapshot(start_date="2024-01-10", end_date="2024-01-01")
    )

    assert geometry["day_count"] == 1
    assert geometry["project_start"] == geometry["project_end"] == pendulum.date(
        2024, 1, 10
    )
    assert geometry["rows"] == []


def test_compute_geometry_does_not_mutate_snapshot(snapshot):
    before = repr(snapshot)
    compute_geometry(snapshot, granularity="intervals")
    assert repr(snapshot) == before


def test_compute_geometry_is_deterministic(snapshot):
    today = pendulum.date(2024, 1, 3)
    assert compute_geometry(
        snapshot, "months", True, today
    ) == compute_geometry(snapshot, "months", True, today)


def test_resolve_granularity_switches_long_projects_to_months():
    start = pendulum.date(2024, 1, 1)

    assert resolve_granularity("weeks", start, pendulum.date(2024, 7, 31)) == "months"
    assert resolve_granularity("intervals", start, pendulum.date(2024, 6, 30)) == (
        "intervals"
    )
    assert resolve_granularity("weeks", start, pendulum.date(2024, 3, 1), 2) == "months"
