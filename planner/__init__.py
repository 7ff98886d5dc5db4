"""Planner: calendar placement for one-time, fixed and recurring tasks."""

__version__ = "1.0.0"
