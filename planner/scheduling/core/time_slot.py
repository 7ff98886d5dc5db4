"""
Time slot representation for the occupancy ledger.
"""

from datetime import datetime, timedelta
from typing import Optional


class TimeSlot:
    """
    One occupied interval [start, end) in the ledger:
    - an imported busy interval (label comes from the calendar source)
    - a task placed earlier in the same run (label is the event id)
    """
    __slots__ = ("start", "end", "label")

    def __init__(self, start: datetime, end: datetime, label: Optional[str] = None):
        self.start = start
        self.end = end
        self.label = label

    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps(self, start: datetime, end: datetime) -> bool:
        # Half-open: touching endpoints are not an overlap
        return start < self.end and end > self.start

    def __repr__(self):
        span = f"{self.start.strftime('%Y-%m-%d %I:%M %p')} - {self.end.strftime('%I:%M %p')}"
        if self.label:
            return f"TimeSlot({span}, {self.label})"
        return f"TimeSlot({span})"
