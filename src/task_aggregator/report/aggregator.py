"""Merge tasks from all files into one chronological list."""

from typing import Iterable

from ..storage.models import Task


def aggregate_tasks(task_lists: Iterable[list[Task]]) -> list[Task]:
    """Concatenate per-file task lists and order them by day.

    Python's sort is stable, so tasks on the same day keep the order they
    were found in: discovery order across files, then top to bottom within
    a file.
    """
    tasks = [task for tasks in task_lists for task in tasks]
    return sorted(tasks, key=lambda t: t.day)


def count_completed(tasks: Iterable[Task]) -> int:
    return sum(1 for task in tasks if task.complete)
