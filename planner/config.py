"""
Runtime settings for the planner, read from the environment (.env supported).
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Order in which the engine consumes tasks when the caller does not pick one
PLACEMENT_ORDER_POLICY = os.getenv("PLACEMENT_ORDER_POLICY", "fixed_then_recurring_then_longest")

# Zone used when a time window arrives without one
DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE", "UTC")

# How far past the window end a conflict suggestion may look
SUGGESTION_HORIZON_DAYS = int(os.getenv("SUGGESTION_HORIZON_DAYS", "366"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
