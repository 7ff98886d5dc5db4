"""
Placement order policies: the sequence in which the engine consumes tasks.
"""

from typing import Iterable, List
from ...models import PlacementOrderPolicy
from ...schemas import FixedStartTask, RecurringTask


def placement_rank(task) -> tuple:
    """
    Fixed-start tasks first, recurring next, everything else last.
    Within a group, longest first to reduce fragmentation.
    """
    if isinstance(task, FixedStartTask):
        group = 0
    elif isinstance(task, RecurringTask):
        group = 1
    else:
        group = 2
    return (group, -(task.estimated_minutes or 0))


def order_tasks(tasks: Iterable, policy: PlacementOrderPolicy) -> List:
    if policy == PlacementOrderPolicy.AS_GIVEN:
        return list(tasks)
    if policy == PlacementOrderPolicy.FIXED_THEN_RECURRING_THEN_LONGEST:
        # sorted() is stable, so equal-rank tasks keep their input order
        return sorted(tasks, key=placement_rank)
    raise ValueError(f"Unknown placement order policy: {policy}")
