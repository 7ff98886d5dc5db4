from datetime import datetime

import pytest

from planner.schemas import TimeWindow, WorkHours


@pytest.fixture
def work_week():
    """2024-01-01 (a Monday) to 2024-01-08, 09:00-17:00 work hours."""
    return TimeWindow(
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 8),
        work_hours=WorkHours(start="09:00", end="17:00"),
        timezone="UTC",
    )


@pytest.fixture
def two_work_weeks():
    return TimeWindow(
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 15),
        work_hours=WorkHours(start="09:00", end="17:00"),
        timezone="UTC",
    )
