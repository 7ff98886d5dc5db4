"""
Recurrence expansion for recurring tasks.

Produces the candidate start instants of a DAILY / WEEKLY / MONTHLY rule inside a
time window. Whether a candidate is actually free is decided by the placement
engine, never here.
"""

from datetime import datetime, time, timedelta
from typing import Iterator, List, NamedTuple, Optional
from dateutil.relativedelta import relativedelta, MO

from ..models import Frequency, Weekday
from ..scheduling.core.constants import FALLBACK_DAY_START, DEFAULT_WEEKLY_DAYS
from ..scheduling.core.time_window import TimeWindowModel
from ..scheduling.utils.slot_utils import at_clock


class Occurrence(NamedTuple):
    index: int             # 1-based position in the rule, used for "<taskId>-<index>" ids
    start: datetime
    within_window: bool


def occurrence_clock(pattern, window: TimeWindowModel) -> time:
    """Wall-clock time every occurrence starts at."""
    if pattern.start_time is not None:
        return pattern.start_time
    if window.has_work_hours:
        return window.work_start
    return FALLBACK_DAY_START


def recurrence_anchor(pattern, window: TimeWindowModel) -> datetime:
    """Window start delayed by the rule's week offset, at the occurrence clock time."""
    base = window.start + relativedelta(weeks=pattern.start_week_offset)
    return at_clock(base, occurrence_clock(pattern, window))


def expand_occurrences(pattern, window: TimeWindowModel) -> Iterator[Occurrence]:
    """
    Yield up to `pattern.count` occurrences of a recurring rule.

    DAILY and MONTHLY candidates that fall before the window start still use up
    their place in the count and are yielded with within_window=False.
    WEEKLY candidates before the window start are skipped without counting.
    For every frequency the first candidate at or past the window end is yielded
    (within_window=False) and expansion stops there.
    """
    if pattern.freq == Frequency.WEEKLY:
        yield from _expand_weekly(pattern, window)
        return

    if pattern.freq == Frequency.DAILY:
        step = lambda k: relativedelta(days=k)
    elif pattern.freq == Frequency.MONTHLY:
        step = lambda k: relativedelta(months=k)
    else:
        raise ValueError(f"Unsupported recurrence frequency: {pattern.freq}")

    anchor = recurrence_anchor(pattern, window)
    for k in range(pattern.count):
        # relativedelta clamps the day-of-month (Jan 31 + 1 month -> Feb 28/29)
        candidate = anchor + step(k)
        if window.is_past_end(candidate):
            yield Occurrence(k + 1, candidate, False)
            return
        yield Occurrence(k + 1, candidate, window.contains_instant(candidate))


def _expand_weekly(pattern, window: TimeWindowModel) -> Iterator[Occurrence]:
    clock = occurrence_clock(pattern, window)
    days = pattern.by_day or [Weekday(code) for code in DEFAULT_WEEKLY_DAYS]
    anchor = recurrence_anchor(pattern, window)
    # Monday of the anchor's week
    week_cursor = (anchor + relativedelta(weekday=MO(-1))).date()

    produced = 0
    while produced < pattern.count:
        for day in days:
            if produced >= pattern.count:
                break
            candidate = at_clock(datetime.combine(week_cursor, time.min) + timedelta(days=day.weekday_number), clock)
            if candidate < window.start:
                continue
            if window.is_past_end(candidate):
                yield Occurrence(produced + 1, candidate, False)
                return
            produced += 1
            yield Occurrence(produced, candidate, True)
        week_cursor += timedelta(weeks=1)

# --- RRULE descriptors ---

def create_rrule_string(freq: str, count: Optional[int] = None, byday: Optional[List[str]] = None) -> str:
    """
    Create an RRULE string for a recurrence pattern

    Examples:
        create_rrule_string("DAILY", count=10)                # Daily for 10 occurrences
        create_rrule_string("WEEKLY", byday=["MO", "WE"])     # Mon and Wed
    """
    parts = [f"FREQ={freq}"]

    if count:
        parts.append(f"COUNT={count}")

    if byday:
        parts.append(f"BYDAY={','.join(byday)}")

    return ";".join(parts)


def build_rrule(pattern) -> str:
    """Recurrence descriptor attached to every event a recurring task produces."""
    return create_rrule_string(
        pattern.freq.value,
        count=pattern.count,
        byday=[day.value for day in pattern.by_day],
    )
