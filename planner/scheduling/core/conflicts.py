"""
Conflict reporting for tasks and occurrences the engine could not place.
"""

import logging
from datetime import datetime
from typing import Iterator, List, Optional

from ...models import ConflictReason
from ...schemas import Conflict

logger = logging.getLogger(__name__)


def describe_conflict(reason: ConflictReason, task, minutes: Optional[int] = None) -> str:
    if reason == ConflictReason.INVALID_DURATION:
        return f"'{task.title}' has an invalid estimated duration ({task.estimated_minutes})"
    if reason == ConflictReason.OUTSIDE_WINDOW:
        return f"'{task.title}' falls outside the scheduling window"
    return f"No free {minutes}-minute slot for '{task.title}' inside the scheduling window"


def describe_overrun(task) -> str:
    return f"'{task.title}' starts inside the scheduling window but runs past its end"


class ConflictReporter:
    """Collects conflicts in the order they were found. Reporting never raises."""

    def __init__(self):
        self.conflicts: List[Conflict] = []

    def report(self, subject_id: str, task, reason: ConflictReason,
               suggested_start: Optional[datetime] = None, minutes: Optional[int] = None,
               message: Optional[str] = None) -> Conflict:
        conflict = Conflict(
            subject_id=subject_id,
            task_id=task.id,
            title=task.title,
            reason=reason,
            suggested_start=suggested_start,
            message=message or describe_conflict(reason, task, minutes),
        )
        self.conflicts.append(conflict)
        if suggested_start:
            logger.warning(f"⚠️ {subject_id}: {conflict.message} (earliest possible {suggested_start.isoformat()})")
        else:
            logger.warning(f"⚠️ {subject_id}: {conflict.message}")
        return conflict

    def for_task(self, task_id: str) -> List[Conflict]:
        return [conflict for conflict in self.conflicts if conflict.task_id == task_id]

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def __iter__(self) -> Iterator[Conflict]:
        return iter(self.conflicts)

    def __len__(self) -> int:
        return len(self.conflicts)
