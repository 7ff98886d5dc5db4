"""
Constants shared by the placement engine.
"""

from datetime import time, timedelta

# Gap left after a conflicting interval before the next search candidate
CONFLICT_BUFFER = timedelta(minutes=15)

# Shortest duration a task may be placed with
MIN_TASK_MINUTES = 5

# Clock time recurring occurrences use when neither start_time nor work hours are set
FALLBACK_DAY_START = time(9, 0)

# Recurrence defaults when a rule omits them
DEFAULT_RECURRENCE_COUNT = 12
DEFAULT_WEEKLY_DAYS = ("MO",)
