# SPDX-License-Identifier: MIT

from conftest import make_task

from ganttgrid.color import DEFAULT_ROW_COLOR
from ganttgrid.service.row_layout import (
    partition_tasks,
    plan_rows,
    row_index_by_task_id,
    timeline_rows,
)


def test_partition_tasks_sorts_by_display_order_stably():
    tasks = [
        make_task("b", display_order=2),
        make_task("a", display_order=1),
        make_task("c", display_order=1),
        make_task("x", display_order=0, parent_task_id="b"),
        make_task("y", parent_task_id=""),
    ]

    partitions = partition_tasks(tasks)

    assert [t["id"] for t in partitions[None]] == ["y", "a", "c", "b"]
    assert [t["id"] for t in partitions["b"]] == ["x"]


def test_childless_tasks_are_standalone_rows():
    plan = plan_rows([make_task("a", display_order=2), make_task("b", display_order=1)])

    assert [(e["kind"], e["task"]["id"], e["row_index"]) for e in plan["entries"]] == [
        ("standalone", "b", 0),
        ("standalone", "a", 1),
    ]
    assert plan["row_count"] == 2
    assert not plan["has_subtasks"]


def test_parent_with_children_becomes_merged_header():
    tasks = [
        make_task("p", display_order=1, color="#3B82F6"),
        make_task("c2", display_order=2, parent_task_id="p", color="#ff0000"),
        make_task("c1", display_order=1, parent_task_id="p"),
        make_task("s", display_order=0),
    ]

    plan = plan_rows(tasks)

    assert [(e["kind"], e["task"]["id"], e["row_index"]) for e in plan["entries"]] == [
        ("standalone", "s", 0),
        ("merged_parent_header", "p", 1),
        ("child", "c1", 1),
        ("child", "c2", 2),
    ]
    assert plan["row_count"] == 3
    assert plan["has_subtasks"]

    header = plan["entries"][1]
    assert header["kind"] == "merged_parent_header"
    assert header["child_count"] == 2

    colors = {e["task"]["id"]: e["resolved_color"] for e in plan["entries"]}
    assert colors == {
        "s": DEFAULT_ROW_COLOR,
        "p": "#3b82f6",
        "c1": "#3b82f6",
        "c2": "#ff0000",
    }


def test_header_row_spans_sum_to_subtask_count():
    tasks = [
        make_task("p1", display_order=1),
        make_task("p1a", parent_task_id="p1"),
        make_task("p1b", parent_task_id="p1"),
        make_task("p2", display_order=2),
        make_task("p2a", parent_task_id="p2"),
        make_task("s", display_order=3),
    ]

    plan = plan_rows(tasks)

    spans = sum(
        e["child_count"] for e in plan["entries"] if e["kind"] == "merged_parent_header"
    )
    assert spans == 3
    assert [row["task"]["id"] for row in timeline_rows(plan)] == [
        "p1a",
        "p1b",
        "p2a",
        "s",
    ]
    assert row_index_by_task_id(plan)["p2"] == 2


def test_orphans_and_grandchildren_get_no_row():
    tasks = [
        make_task("p"),
        make_task("c", parent_task_id="p"),
        make_task("g", parent_task_id="c"),
        make_task("o", parent_task_id="ghost"),
    ]

    plan = plan_rows(tasks)

    assert [e["task"]["id"] for e in plan["entries"]] == ["p", "c"]
    assert plan["row_count"] == 1


def test_invalid_colors_use_default():
    plan = plan_rows([make_task("a", color="blue")], default_color="#123456")

    assert plan["entries"][0]["resolved_color"] == "#123456"


def test_empty_task_list():
    plan = plan_rows([])

    assert plan["entries"] == []
    assert plan["row_count"] == 0
    assert not plan["has_subtasks"]


def test_non_string_colors_never_raise():
    task = make_task("a")
    task["color"] = 123456  # type: ignore[typeddict-item]

    plan = plan_rows([task, make_task("b", color="123456")])

    assert plan["entries"][0]["resolved_color"] == DEFAULT_ROW_COLOR
    assert plan["entries"][1]["resolved_color"] == "#123456"


def test_fractional_display_order_sorts_numerically():
    plan = plan_rows(
        [
            make_task("a", display_order=1.5),
            make_task("b", display_order=1),
            make_task("c", display_order=2),
        ]
    )

    assert [e["task"]["id"] for e in plan["entries"]] == ["b", "a", "c"]
