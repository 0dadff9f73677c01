"""Orchestrator - runs a roster generator for a month and validates the result."""

from __future__ import annotations

from typing import Iterable, Sequence

from kitchen_roster.config import RosterConfig
from kitchen_roster.domain.models import Employee, ShiftAssignment
from kitchen_roster.services.requirements import CoveragePolicy
from kitchen_roster.validator import validate_assignments

from .base import BaseRosterGenerator, RosterResult
from .greedy import GreedyRosterGenerator


class Orchestrator:
    """
    Runs a generator and checks the merged roster.

    The generator produces assignments for the month; the orchestrator then
    re-validates them together with the history, so a defective generator
    fails loudly instead of returning an illegal roster.
    """

    def __init__(self, generator: BaseRosterGenerator | None = None):
        self.generator = generator or GreedyRosterGenerator()

    def build_schedule(
        self,
        year: int,
        month: int,
        employees: Sequence[Employee],
        history: Iterable[ShiftAssignment] = (),
    ) -> RosterResult:
        """
        Build and validate the roster for a month.

        Args:
            year: Target year
            month: Target month (1-12)
            employees: Roster of employees
            history: Prior assignments

        Returns:
            RosterResult from the generator

        Raises:
            ValueError: If the input is malformed or the roster breaks a hard rule
        """
        employees = list(employees)
        history = list(history)
        cfg = getattr(self.generator, "cfg", None) or RosterConfig()
        name = self.generator.get_name()
        period = f"{year}-{str(month).zfill(2)}"

        print(f"[INFO] Orchestrator: Building roster for {period}")
        print(f"[INFO] Generator: {name}, employees: {len(employees)}, history: {len(history)}")

        result = self.generator.generate(year, month, employees, history)

        print("[INFO] Validating complete roster...")
        validate_assignments(result.assignments, employees, history, cfg)

        understaffed = len(result.warnings)
        if understaffed:
            print(f"[WARN] {understaffed} understaffed day(s) in {period}")
        print(f"[OK] Orchestrator: Generated {len(result.assignments)} assignments")
        return result


def build_month_schedule(
    year: int,
    month: int,
    employees: Sequence[Employee],
    history: Iterable[ShiftAssignment] = (),
    cfg: RosterConfig | None = None,
    coverage_policy: CoveragePolicy | None = None,
) -> RosterResult:
    """
    Convenience function to build a validated month roster with the greedy generator.

    Args:
        year: Target year
        month: Target month (1-12)
        employees: Roster of employees
        history: Prior assignments
        cfg: Optional RosterConfig
        coverage_policy: Optional coverage strategy

    Returns:
        RosterResult
    """
    orchestrator = Orchestrator(GreedyRosterGenerator(cfg, coverage_policy))
    return orchestrator.build_schedule(year, month, employees, history)
