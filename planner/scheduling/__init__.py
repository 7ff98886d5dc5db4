"""
Task placement core

Greedy first-fit placement of one-time, fixed and recurring tasks onto a bounded
calendar window, with work-hours clamping and busy-interval avoidance.
The engine itself lives in `planner.scheduling.core.scheduler`.
"""

from .core.time_slot import TimeSlot
from .core.ledger import OccupancyLedger
from .core.time_window import TimeWindowModel
from .core.constants import CONFLICT_BUFFER, MIN_TASK_MINUTES

# Version for future API compatibility
__version__ = "1.0.0"
