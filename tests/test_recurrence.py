from datetime import datetime, time

import pytest
from dateutil import rrule

from planner.models import Frequency
from planner.schemas import RecurringPattern
from planner.scheduling.core.time_window import TimeWindowModel
from planner.services.recurrence import expand_occurrences, build_rrule, create_rrule_string


def work_window(start=datetime(2024, 1, 1), end=datetime(2024, 1, 15)):
    return TimeWindowModel(start, end, time(9, 0), time(17, 0))


def starts(occurrences):
    return [(o.index, o.start, o.within_window) for o in occurrences]


def test_daily_uses_work_start_and_counts_each_day():
    pattern = RecurringPattern(freq="DAILY", count=3)
    assert starts(expand_occurrences(pattern, work_window())) == [
        (1, datetime(2024, 1, 1, 9), True),
        (2, datetime(2024, 1, 2, 9), True),
        (3, datetime(2024, 1, 3, 9), True),
    ]


def test_daily_candidate_before_window_start_consumes_count():
    pattern = RecurringPattern(freq="DAILY", count=3, start_time="09:00")
    window = work_window(start=datetime(2024, 1, 1, 10))
    assert starts(expand_occurrences(pattern, window)) == [
        (1, datetime(2024, 1, 1, 9), False),
        (2, datetime(2024, 1, 2, 9), True),
        (3, datetime(2024, 1, 3, 9), True),
    ]


def test_daily_stops_at_first_candidate_past_window_end():
    pattern = RecurringPattern(freq="DAILY", count=10)
    occurrences = list(expand_occurrences(pattern, work_window(end=datetime(2024, 1, 8))))

    assert len(occurrences) == 8
    assert all(o.within_window for o in occurrences[:7])
    assert occurrences[-1] == (8, datetime(2024, 1, 8, 9), False)


def test_weekly_visits_days_in_weekday_order():
    pattern = RecurringPattern(freq="WEEKLY", count=3, by_day=["WE", "MO"])
    assert starts(expand_occurrences(pattern, work_window())) == [
        (1, datetime(2024, 1, 1, 9), True),
        (2, datetime(2024, 1, 3, 9), True),
        (3, datetime(2024, 1, 8, 9), True),
    ]


def test_weekly_defaults_to_monday():
    pattern = RecurringPattern(freq="WEEKLY", count=2)
    assert [o.start for o in expand_occurrences(pattern, work_window())] == [
        datetime(2024, 1, 1, 9),
        datetime(2024, 1, 8, 9),
    ]


def test_weekly_skips_days_before_window_start_without_counting():
    # Window opens on Wednesday; Monday of that week is skipped, not consumed
    pattern = RecurringPattern(freq="WEEKLY", count=2, by_day=["MO", "FR"])
    window = work_window(start=datetime(2024, 1, 3))
    assert starts(expand_occurrences(pattern, window)) == [
        (1, datetime(2024, 1, 5, 9), True),
        (2, datetime(2024, 1, 8, 9), True),
    ]


def test_weekly_terminates_mid_week_at_window_end():
    pattern = RecurringPattern(freq="WEEKLY", count=3, by_day=["MO", "WE"])
    window = work_window(end=datetime(2024, 1, 8))
    assert starts(expand_occurrences(pattern, window)) == [
        (1, datetime(2024, 1, 1, 9), True),
        (2, datetime(2024, 1, 3, 9), True),
        (3, datetime(2024, 1, 8, 9), False),
    ]


def test_start_week_offset_delays_the_anchor():
    pattern = RecurringPattern(freq="WEEKLY", count=2, by_day=["MO"], start_week_offset=1)
    window = work_window(end=datetime(2024, 1, 22))
    assert [o.start for o in expand_occurrences(pattern, window)] == [
        datetime(2024, 1, 8, 9),
        datetime(2024, 1, 15, 9),
    ]


def test_monthly_keeps_day_of_month_clamped_to_month_length():
    pattern = RecurringPattern(freq="MONTHLY", count=3, start_time="10:00")
    window = TimeWindowModel(datetime(2024, 1, 31), datetime(2024, 6, 1))
    assert [o.start for o in expand_occurrences(pattern, window)] == [
        datetime(2024, 1, 31, 10),
        datetime(2024, 2, 29, 10),
        datetime(2024, 3, 31, 10),
    ]


def test_fallback_clock_without_work_hours_or_start_time():
    pattern = RecurringPattern(freq="DAILY", count=1)
    window = TimeWindowModel(datetime(2024, 1, 1), datetime(2024, 1, 2))
    assert [o.start for o in expand_occurrences(pattern, window)] == [datetime(2024, 1, 1, 9)]


def test_rrule_descriptor_matches_expansion():
    pattern = RecurringPattern(freq="WEEKLY", count=3, by_day=["MO", "WE"])
    descriptor = build_rrule(pattern)
    assert descriptor == "FREQ=WEEKLY;COUNT=3;BYDAY=MO,WE"

    expected = list(rrule.rrulestr(descriptor, dtstart=datetime(2024, 1, 1, 9)))
    assert expected == [o.start for o in expand_occurrences(pattern, work_window())]


def test_create_rrule_string_omits_empty_parts():
    assert create_rrule_string("DAILY") == "FREQ=DAILY"
    assert create_rrule_string(Frequency.MONTHLY.value, count=4) == "FREQ=MONTHLY;COUNT=4"


def test_pattern_defaults_and_validation():
    pattern = RecurringPattern()
    assert pattern.freq == Frequency.WEEKLY
    assert pattern.count == 12
    assert pattern.start_week_offset == 0

    with pytest.raises(ValueError):
        RecurringPattern(count=0)
    with pytest.raises(ValueError):
        RecurringPattern(start_week_offset=-1)
    with pytest.raises(ValueError):
        RecurringPattern(by_day=["XX"])
