"""
Time window model: the bounded horizon plus the daily work-hours clamp.
"""

from datetime import datetime, time, timedelta
from typing import Optional
from ..utils.slot_utils import to_wall_clock, at_clock, end_after


class TimeWindowModel:
    """
    Answers "is this instant inside an eligible work period?" and
    "what is the next eligible instant at or after it?".

    All instants are naive wall-clock datetimes in one zone. `end=None` means an
    unbounded window, which is only used to compute conflict suggestions.
    """
    def __init__(self, start: datetime, end: Optional[datetime], work_start: time = None, work_end: time = None):
        self.start = start
        self.end = end
        self.work_start = work_start
        self.work_end = work_end

    @classmethod
    def from_window(cls, window) -> "TimeWindowModel":
        tz = window.tz
        work_hours = window.work_hours
        return cls(
            start=to_wall_clock(window.start, tz),
            end=to_wall_clock(window.end, tz),
            work_start=work_hours.start if work_hours else None,
            work_end=work_hours.end if work_hours else None,
        )

    @property
    def has_work_hours(self) -> bool:
        return self.work_start is not None and self.work_end is not None

    def relaxed(self) -> "TimeWindowModel":
        """Same window with the end bound removed."""
        return TimeWindowModel(self.start, None, self.work_start, self.work_end)

    def is_past_end(self, t: datetime) -> bool:
        return self.end is not None and t >= self.end

    def contains(self, start: datetime, end: datetime) -> bool:
        if start < self.start:
            return False
        return self.end is None or end <= self.end

    def contains_instant(self, t: datetime) -> bool:
        return t >= self.start and not self.is_past_end(t)

# ================================
# WORK HOURS
# ================================

    def day_work_start(self, t: datetime) -> datetime:
        if not self.has_work_hours:
            return at_clock(t, time.min)
        return at_clock(t, self.work_start)

    def day_work_end(self, t: datetime) -> Optional[datetime]:
        """End of the eligible period on t's day; the window end when there are no work hours."""
        if not self.has_work_hours:
            return self.end
        return at_clock(t, self.work_end)

    def next_day_work_start(self, t: datetime) -> datetime:
        return self.day_work_start(t + timedelta(days=1))

    def clamp_to_work_hours(self, t: datetime) -> datetime:
        if not self.has_work_hours:
            return t
        day_start = self.day_work_start(t)
        if t < day_start:
            return day_start
        if t >= self.day_work_end(t):
            return self.next_day_work_start(t)
        return t

    def fits_within_day(self, start: datetime, duration_minutes: int) -> bool:
        limit = self.day_work_end(start)
        if limit is None:
            return True
        return end_after(start, duration_minutes) <= limit

    def within_work_hours(self, start: datetime, end: datetime) -> bool:
        """True when [start, end) sits inside the work hours of start's day."""
        if not self.has_work_hours:
            return True
        return start >= self.day_work_start(start) and end <= self.day_work_end(start)

    def workday_minutes(self) -> Optional[int]:
        """Length of one work day in minutes, None without work hours."""
        if not self.has_work_hours:
            return None
        return (self.work_end.hour * 60 + self.work_end.minute) - (self.work_start.hour * 60 + self.work_start.minute)

    def __repr__(self):
        hours = f"{self.work_start.strftime('%H:%M')}-{self.work_end.strftime('%H:%M')}" if self.has_work_hours else "all day"
        return f"TimeWindowModel({self.start.isoformat()} -> {self.end.isoformat() if self.end else 'open'}, {hours})"
