"""Roster generation engine."""

from .base import BaseRosterGenerator, RosterResult
from .greedy import GreedyRosterGenerator, generate_month_schedule, month_days
from .orchestrator import Orchestrator, build_month_schedule

__all__ = [
    "BaseRosterGenerator",
    "RosterResult",
    "GreedyRosterGenerator",
    "generate_month_schedule",
    "month_days",
    "Orchestrator",
    "build_month_schedule",
]
