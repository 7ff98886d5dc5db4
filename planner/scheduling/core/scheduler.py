"""
Placement engine: decides where every task of a scheduling run goes.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from ...config import SUGGESTION_HORIZON_DAYS
from ...models import ConflictReason
from ...schemas import FixedStartTask, RecurringTask, OneTimeTask, ScheduledEvent, ScheduleResult
from ...services.recurrence import expand_occurrences, build_rrule
from .constants import CONFLICT_BUFFER
from .conflicts import ConflictReporter, describe_overrun
from .ledger import OccupancyLedger
from .time_slot import TimeSlot
from .time_window import TimeWindowModel
from ..utils.slot_utils import to_wall_clock, end_after

logger = logging.getLogger(__name__)

# ================================
# INITIALIZATION & SETUP
# ================================

class PlacementEngine:
    """
    Greedy first-fit scheduler for one run.

    The engine owns its ledger, seeded from the caller's busy intervals, and
    feeds every placed non-parallel event back into it. Tasks that cannot be
    placed become conflicts; nothing here raises for a single bad task.
    """
    def __init__(self, window, busy: Iterable = (), suggestion_horizon_days: int = SUGGESTION_HORIZON_DAYS):
        self.tz = window.tz
        self.window = TimeWindowModel.from_window(window)
        self.ledger = OccupancyLedger(
            TimeSlot(to_wall_clock(interval.start, self.tz), to_wall_clock(interval.end, self.tz), interval.label)
            for interval in busy
        )
        self.reporter = ConflictReporter()
        self.events: List[ScheduledEvent] = []
        self.suggestion_horizon = timedelta(days=suggestion_horizon_days)

    def run(self, tasks: Iterable) -> ScheduleResult:
        """Place tasks in the given order and return everything placed plus the conflicts."""
        for task in tasks:
            self.place(task)
        return ScheduleResult(events=self.events, conflicts=self.reporter.conflicts)

# ================================
# CORE PLACEMENT LOGIC
# ================================

    def place(self, task):
        """Route a task to the branch for its placement mode."""
        duration = task.duration_minutes
        if duration is None:
            self.reporter.report(task.id, task, ConflictReason.INVALID_DURATION)
            return

        if isinstance(task, FixedStartTask):
            self._place_fixed(task, duration)
        elif isinstance(task, RecurringTask):
            self._place_recurring(task, duration)
        elif isinstance(task, OneTimeTask):
            self._place_one_time(task, duration)
        else:
            raise TypeError(f"Unsupported task type: {type(task).__name__}")

    def _place_fixed(self, task: FixedStartTask, duration: int):
        """Fixed starts are authoritative: no work-hours or ledger check, only the window bound."""
        start = to_wall_clock(task.fixed_start, self.tz)
        end = end_after(start, duration)
        if not self.window.contains(start, end):
            message = describe_overrun(task) if self.window.contains_instant(start) else None
            self.reporter.report(task.id, task, ConflictReason.OUTSIDE_WINDOW, message=message)
            return
        self._emit(task, task.id, start, end)

    def _place_recurring(self, task: RecurringTask, duration: int):
        """
        Take each occurrence at the slot its rule dictates or drop it.
        A busy occurrence, or one outside the day's work hours, is not moved to another time.
        """
        descriptor = build_rrule(task.recurring)
        for occurrence in expand_occurrences(task.recurring, self.window):
            subject_id = f"{task.id}-{occurrence.index}"
            end = end_after(occurrence.start, duration)

            if not occurrence.within_window or not self.window.contains(occurrence.start, end):
                self.reporter.report(subject_id, task, ConflictReason.OUTSIDE_WINDOW)
                continue

            blocked = not task.allow_parallel and self.ledger.overlaps(occurrence.start, end)
            if blocked or not self.window.within_work_hours(occurrence.start, end):
                suggestion = self.suggest_start(duration, task.allow_parallel, start_at=occurrence.start)
                self.reporter.report(subject_id, task, ConflictReason.NO_FREE_SLOT, suggestion, duration)
                continue

            self._emit(task, subject_id, occurrence.start, end, descriptor)

    def _place_one_time(self, task: OneTimeTask, duration: int):
        start = self.find_next_slot(duration, task.allow_parallel)
        if start is None:
            suggestion = self.suggest_start(duration, task.allow_parallel)
            self.reporter.report(task.id, task, ConflictReason.NO_FREE_SLOT, suggestion, duration)
            return
        self._emit(task, task.id, start, end_after(start, duration))

    def _emit(self, task, event_id: str, start: datetime, end: datetime, descriptor: Optional[str] = None):
        event = ScheduledEvent(
            id=event_id,
            task_id=task.id,
            title=task.title,
            start=start,
            end=end,
            category=task.category,
            recurrence_descriptor=descriptor,
            allow_parallel=task.allow_parallel,
            notes=task.notes,
        )
        self.events.append(event)

        # Parallel tasks neither block nor are blocked
        if not task.allow_parallel:
            self.ledger.insert(start, end, event_id)
        logger.debug(f"Placed {event_id} '{task.title}' {start.isoformat()} -> {end.isoformat()}")
        return event

# ================================
# SLOT SEARCH
# ================================

    def find_next_slot(self, duration: int, allow_parallel: bool, window: TimeWindowModel = None,
                       start_at: datetime = None) -> Optional[datetime]:
        """
        Earliest start at or after `start_at` (default: window start) where the task
        fits inside one work day and, unless parallel, does not overlap the ledger.

        Every step moves `current` strictly forward, so the search ends once it
        passes the window end (or the suggestion horizon for an open window).
        """
        window = window or self.window
        current = start_at or window.start
        horizon = current + self.suggestion_horizon if window.end is None else None

        while True:
            if window.is_past_end(current) or (horizon is not None and current >= horizon):
                return None

            current = window.clamp_to_work_hours(current)
            if window.is_past_end(current):
                return None

            if not window.fits_within_day(current, duration):
                current = window.next_day_work_start(current)
                continue

            candidate_end = end_after(current, duration)
            if not window.contains(current, candidate_end):
                # Only the window end can be exceeded here, and later starts only make it worse
                return None

            if not allow_parallel:
                blocking = self.ledger.first_overlap(current, candidate_end)
                if blocking is not None:
                    current = blocking.end + CONFLICT_BUFFER
                    continue

            return current

    def suggest_start(self, duration: int, allow_parallel: bool, start_at: datetime = None) -> Optional[datetime]:
        """Where the same search would land with no window end. Informational only."""
        workday = self.window.workday_minutes()
        if workday is not None and duration > workday:
            return None
        return self.find_next_slot(duration, allow_parallel, window=self.window.relaxed(), start_at=start_at)

    def __repr__(self):
        return f"PlacementEngine({self.window}, {len(self.ledger)} busy, {len(self.events)} placed)"
