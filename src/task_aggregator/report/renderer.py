"""Render aggregated tasks as a markdown report."""

import logging
from pathlib import Path

from ..storage.models import Task
from .aggregator import count_completed

logger = logging.getLogger(__name__)


class ReportWriteError(Exception):
    """The report file could not be created or written."""


def header_slug(header: str) -> str:
    """Turn a section header into a link anchor, e.g. "Week 3: Plan" -> "Week-3-Plan"."""
    # Letters and decimal digits only; superscripts and fractions separate words
    words = "".join(c if c.isalpha() or c.isdecimal() else " " for c in header)
    return "-".join(words.split())


def task_link_target(source_path: str, header: str) -> str:
    """Link to the task's file, anchored at its section header when it has one."""
    slug = header_slug(header)
    if not slug:
        return source_path
    return f"{source_path}#{slug}"


def render_task(task: Task, link_to_source: bool = True) -> str:
    check = "x" if task.complete else " "
    if link_to_source:
        target = task_link_target(task.source_path, task.section_header)
        return f"- [{check}] [{task.text}]({target})"
    return f"- [{check}] {task.text}"


def render_report(tasks: list[Task], link_to_source: bool = True) -> str:
    """Render date-sorted tasks grouped under one header per day.

    Args:
        tasks: Tasks already ordered by day
        link_to_source: Render each task as a link back to its file

    Returns:
        The markdown document. Undated tasks are listed first, without a
        header.
    """
    lines: list[str] = []
    last_day = None
    for task in tasks:
        if task.date is not None:
            day = task.day.isoformat()
            if day != last_day:
                # Blank line before each date header except at the top
                if lines:
                    lines.append("")
                lines.append(f"# {day}")
                lines.append("")
                last_day = day

        lines.append(render_task(task, link_to_source))

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def summary_line(tasks: list[Task], output_filename: str) -> str:
    return (
        f"{count_completed(tasks)} completed out of {len(tasks)} total tasks, "
        f"writing to file '{output_filename}'"
    )


def write_report(content: str, output_path: Path) -> None:
    """Replace the report file's contents with the rendered document."""
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise ReportWriteError(f"Cannot write report to {output_path}: {e}") from e

    logger.info(f"Wrote {len(content)} characters to {output_path}")
