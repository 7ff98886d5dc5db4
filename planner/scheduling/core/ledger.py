"""
Occupancy ledger: the busy intervals a scheduling run must not collide with.
"""

from datetime import datetime
from typing import Iterable, Iterator, List, Optional
from .time_slot import TimeSlot


class OccupancyLedger:
    """
    Append-only list of occupied intervals owned by a single scheduling run.
    Intervals are never merged; the engine only ever asks overlap questions.
    """
    def __init__(self, intervals: Iterable[TimeSlot] = ()):
        self.slots: List[TimeSlot] = list(intervals)

    def overlaps(self, start: datetime, end: datetime) -> bool:
        return any(slot.overlaps(start, end) for slot in self.slots)

    def first_overlap(self, start: datetime, end: datetime) -> Optional[TimeSlot]:
        """First interval (in insertion order) that overlaps [start, end)."""
        for slot in self.slots:
            if slot.overlaps(start, end):
                return slot
        return None

    def insert(self, start: datetime, end: datetime, label: Optional[str] = None) -> TimeSlot:
        slot = TimeSlot(start, end, label)
        self.slots.append(slot)
        return slot

    def __iter__(self) -> Iterator[TimeSlot]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def __repr__(self):
        return f"OccupancyLedger({len(self.slots)} intervals)"
