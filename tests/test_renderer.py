"""Tests for report rendering and writing."""

from datetime import datetime
from pathlib import Path

import pytest

from task_aggregator.report.renderer import (
    ReportWriteError,
    header_slug,
    render_report,
    render_task,
    summary_line,
    task_link_target,
    write_report,
)
from task_aggregator.storage.models import Task


def make_task(
    text: str,
    date: datetime | None,
    complete: bool = False,
    source_path: str = "notes.md",
    header: str = "",
) -> Task:
    return Task(
        date=date,
        complete=complete,
        source_path=source_path,
        section_header=header,
        text=text,
    )


@pytest.mark.parametrize(
    "header, slug",
    [
        ("Meeting notes", "Meeting-notes"),
        ("2022-05-01 Monday", "2022-05-01-Monday"),
        ("  Week 3: Plan & Review!  ", "Week-3-Plan-Review"),
        ("snake_case header", "snake-case-header"),
        ("Café überall", "Café-überall"),
        ("x² and ½ cup", "x-and-cup"),
        ("---", ""),
        ("", ""),
    ],
)
def test_header_slug(header, slug):
    assert header_slug(header) == slug


def test_link_target_without_header_is_bare_path():
    assert task_link_target("notes/a.md", "") == "notes/a.md"


def test_link_target_with_header():
    assert task_link_target("notes/a.md", "To Do") == "notes/a.md#To-Do"


def test_render_task_plain_and_linked():
    task = make_task("buy milk", None, complete=True, header="Errands")

    assert render_task(task, link_to_source=False) == "- [x] buy milk"
    assert render_task(task) == "- [x] [buy milk](notes.md#Errands)"


def test_render_groups_by_day():
    tasks = [
        make_task("buy milk", datetime(2023, 1, 2), complete=True),
        make_task("call mom", datetime(2023, 1, 2, 18, 30)),
        make_task("file taxes", datetime(2023, 1, 5)),
    ]

    assert render_report(tasks, link_to_source=False) == (
        "# 2023-01-02\n"
        "\n"
        "- [x] buy milk\n"
        "- [ ] call mom\n"
        "\n"
        "# 2023-01-05\n"
        "\n"
        "- [ ] file taxes\n"
    )


def test_render_linked_report():
    tasks = [make_task("task A", datetime(2022, 5, 1), source_path="plan.md", header="2022-05-01")]

    assert render_report(tasks) == "# 2022-05-01\n\n- [ ] [task A](plan.md#2022-05-01)\n"


def test_render_undated_tasks_without_header():
    tasks = [make_task("orphan", None), make_task("dated", datetime(2023, 1, 1))]

    assert render_report(tasks, link_to_source=False) == (
        "- [ ] orphan\n"
        "\n"
        "# 2023-01-01\n"
        "\n"
        "- [ ] dated\n"
    )


def test_render_pads_years_below_1000():
    tasks = [make_task("old", datetime(999, 5, 1))]

    assert render_report(tasks, link_to_source=False) == "# 0999-05-01\n\n- [ ] old\n"


def test_render_empty():
    assert render_report([]) == ""


def test_summary_line():
    tasks = [make_task("a", None, complete=True), make_task("b", None)]
    assert summary_line(tasks, "TASKS.md") == (
        "1 completed out of 2 total tasks, writing to file 'TASKS.md'"
    )


def test_write_report_replaces_content(tmp_path: Path):
    output = tmp_path / "TASKS.md"
    output.write_text("old content that is longer than the new one\n", encoding="utf-8")

    write_report("# 2023-01-01\n", output)

    assert output.read_text(encoding="utf-8") == "# 2023-01-01\n"


def test_write_report_failure(tmp_path: Path):
    with pytest.raises(ReportWriteError):
        write_report("text", tmp_path / "missing-dir" / "TASKS.md")
