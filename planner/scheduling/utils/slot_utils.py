"""
Wall-clock helpers shared by the window model, the expander and the engine.
"""

from datetime import datetime, time, timedelta


def to_wall_clock(moment: datetime, tz) -> datetime:
    """
    Express an instant as naive local wall-clock time in the window's zone.
    Naive datetimes are taken to already be wall-clock time in that zone.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(tz).replace(tzinfo=None)


def localize(moment: datetime, tz) -> datetime:
    """Attach the window's zone to a naive wall-clock datetime (pytz aware)."""
    if moment.tzinfo is not None:
        return moment.astimezone(tz)
    return tz.localize(moment)


def at_clock(moment: datetime, clock: time) -> datetime:
    """Same calendar day as moment, at the given wall-clock time."""
    return datetime.combine(moment.date(), clock)


def end_after(start: datetime, minutes: int) -> datetime:
    return start + timedelta(minutes=minutes)
