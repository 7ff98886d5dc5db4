"""
Structural checks run once before any placement is attempted.
"""

from typing import Iterable
from ..utils.slot_utils import to_wall_clock


class InvalidScheduleInput(ValueError):
    """The whole scheduling request is unusable; nothing was placed."""


def occurrence_ids(task) -> Iterable[str]:
    """Every "<taskId>-<n>" id a recurring task can emit; nothing for other tasks."""
    pattern = getattr(task, "recurring", None)
    if pattern is None:
        return []
    return [f"{task.id}-{index}" for index in range(1, pattern.count + 1)]


def validate_schedule_inputs(tasks: Iterable, window) -> None:
    """
    Raise InvalidScheduleInput when the window is empty or inverted, when two
    tasks share an id, or when a task id equals an occurrence id of a recurring
    task. Per-task problems (bad durations, unplaceable tasks) are not errors
    here; the engine reports them as conflicts.
    """
    tasks = list(tasks)
    tz = window.tz
    start = to_wall_clock(window.start, tz)
    end = to_wall_clock(window.end, tz)
    if start >= end:
        raise InvalidScheduleInput(f"Time window must start before it ends ({start.isoformat()} >= {end.isoformat()})")

    seen = set()
    for task in tasks:
        if task.id in seen:
            raise InvalidScheduleInput(f"Duplicate task id: {task.id}")
        seen.add(task.id)

    # Occurrence ids of distinct tasks never clash with each other, only with a task id
    for task in tasks:
        for event_id in occurrence_ids(task):
            if event_id in seen:
                raise InvalidScheduleInput(f"Task id {event_id} collides with an occurrence of recurring task {task.id}")
