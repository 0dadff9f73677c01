"""Base roster generator interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from kitchen_roster.domain.models import Employee, ShiftAssignment


@dataclass
class RosterResult:
    """Assignments for the target month plus the run's diagnostic log."""

    assignments: List[ShiftAssignment] = field(default_factory=list)
    log: List[str] = field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        return [line for line in self.log if line.startswith("[WARNING]")]


class BaseRosterGenerator(ABC):
    """
    Abstract base class for month roster generators.

    Implementations own no state across calls; each call to ``generate``
    starts from the supplied history.
    """

    name: str | None = None  # Override in subclasses

    @abstractmethod
    def generate(
        self,
        year: int,
        month: int,
        employees: Sequence[Employee],
        history: Iterable[ShiftAssignment] = (),
    ) -> RosterResult:
        """
        Generate Morning/Afternoon assignments for every day of a month.

        Args:
            year: Target year
            month: Target month (1-12)
            employees: Roster of employees
            history: Prior assignments (typically the previous month)

        Returns:
            RosterResult with in-month assignments and diagnostic log

        Raises:
            ValueError: If the input is malformed
        """
        pass

    def get_name(self) -> str:
        return self.name or type(self).__name__
