"""Task ordering for the task list."""

import math
from collections.abc import Iterable

from lifemanager.models.records import Task, TaskStatus


def _sort_key(task: Task) -> tuple[bool, bool, float]:
    # done last, then dated before undated, then soonest due first;
    # timestamp() reads naive due dates as local time
    due = task.due_date
    return (
        task.status == TaskStatus.DONE,
        due is None,
        due.timestamp() if due is not None else math.inf,
    )


def order_tasks(tasks: Iterable[Task]) -> list[Task]:
    """
    Order tasks for display.

    Open tasks come before done ones. Within each group tasks are sorted
    by due date and time ascending, and tasks without a due date come
    after those with one. Ties keep their input order.
    """
    return sorted(tasks, key=_sort_key)


def pending_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [t for t in order_tasks(tasks) if t.status != TaskStatus.DONE]


def completed_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [t for t in order_tasks(tasks) if t.status == TaskStatus.DONE]


def count_pending(tasks: Iterable[Task]) -> int:
    return sum(1 for t in tasks if t.status != TaskStatus.DONE)


def toggled_status(status: TaskStatus) -> TaskStatus:
    """The other side of the todo <-> done transition."""
    return TaskStatus.TODO if status == TaskStatus.DONE else TaskStatus.DONE
