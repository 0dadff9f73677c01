"""Services for roster logic."""

from .availability import DayRoster, build_day_roster, can_assign
from .constraints import ValidationResult, check_constraints, is_legal
from .history import HistoryIndex
from .requirements import CoveragePolicy, CoverageRequirement, KitchenCoveragePolicy, build_requirements_for_day
from .scoring import fairness_order, role_preference_score, sort_by_role_preference

__all__ = [
    "DayRoster",
    "build_day_roster",
    "can_assign",
    "ValidationResult",
    "check_constraints",
    "is_legal",
    "HistoryIndex",
    "CoveragePolicy",
    "CoverageRequirement",
    "KitchenCoveragePolicy",
    "build_requirements_for_day",
    "fairness_order",
    "role_preference_score",
    "sort_by_role_preference",
]
