"""Daily coverage requirements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

import pandas as pd


@dataclass(frozen=True)
class CoverageRequirement:
    """Headcount needed per working shift on a given day."""

    morning: int
    afternoon: int

    @property
    def total(self) -> int:
        return self.morning + self.afternoon


class CoveragePolicy(ABC):
    """Strategy mapping a calendar date to its required coverage."""

    @abstractmethod
    def required_coverage(self, day: date) -> CoverageRequirement:
        pass


class KitchenCoveragePolicy(CoveragePolicy):
    """
    Fixed kitchen policy.

    Friday, Saturday and Sunday need two morning cooks and one afternoon cook;
    every other day needs one of each.
    """

    busy_days = ("Friday", "Saturday", "Sunday")
    weekday_requirement = CoverageRequirement(morning=1, afternoon=1)
    busy_day_requirement = CoverageRequirement(morning=2, afternoon=1)

    def required_coverage(self, day: date) -> CoverageRequirement:
        day_name = pd.Timestamp(day).day_name()
        if day_name in self.busy_days:
            return self.busy_day_requirement
        return self.weekday_requirement


DEFAULT_POLICY = KitchenCoveragePolicy()


def build_requirements_for_day(day: date, policy: CoveragePolicy | None = None) -> CoverageRequirement:
    """
    Build shift requirements for a specific day.

    Args:
        day: Calendar date
        policy: Coverage strategy (default: KitchenCoveragePolicy)

    Returns:
        CoverageRequirement for this day
    """
    return (policy or DEFAULT_POLICY).required_coverage(day)
