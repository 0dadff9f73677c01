"""Greedy day-by-day month roster generator."""

from __future__ import annotations

import calendar
import random
import uuid
from datetime import date
from typing import Dict, Iterable, List, Sequence

import pandas as pd

from kitchen_roster.config import RosterConfig
from kitchen_roster.domain.models import WORKING_SHIFTS, Employee, ShiftAssignment, ShiftType
from kitchen_roster.services.constraints import check_constraints
from kitchen_roster.services.history import HistoryIndex
from kitchen_roster.services.requirements import CoveragePolicy, KitchenCoveragePolicy
from kitchen_roster.services.scoring import fairness_order, sort_by_role_preference

from .base import BaseRosterGenerator, RosterResult


ASSIGNMENT_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_DNS, "kitchen-roster.assignments")


def assignment_id(employee_id: str, day: date) -> str:
    # One assignment per employee per day, so this is unique within a roster
    return str(uuid.uuid5(ASSIGNMENT_NAMESPACE, f"{employee_id}:{day.isoformat()}"))


def month_days(year: int, month: int) -> List[date]:
    last = calendar.monthrange(year, month)[1]
    return [ts.date() for ts in pd.date_range(date(year, month, 1), date(year, month, last), freq="D")]


def _check_inputs(year, month, employees, history) -> None:
    if isinstance(year, bool) or not isinstance(year, int) or not 1 <= year <= 9999:
        raise ValueError(f"Invalid year: {year!r}")
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month!r} (expected 1-12)")

    seen = set()
    for emp in employees:
        if not isinstance(emp, Employee):
            raise ValueError(f"Expected Employee, got {type(emp).__name__}")
        if emp.id in seen:
            raise ValueError(f"Duplicate employee id: {emp.id}")
        seen.add(emp.id)

    for assignment in history:
        if not isinstance(assignment, ShiftAssignment):
            raise ValueError(f"Expected ShiftAssignment in history, got {type(assignment).__name__}")


class GreedyRosterGenerator(BaseRosterGenerator):
    """
    Single-pass greedy generator.

    For each day of the month, candidates are ordered by recent workload, then
    by role preference for the shift, and the first ones passing every
    constraint are committed. Unfilled slots are logged, never retried.
    """

    name = "greedy"

    def __init__(self, cfg: RosterConfig | None = None, coverage_policy: CoveragePolicy | None = None):
        self.cfg = cfg or RosterConfig()
        self.coverage_policy = coverage_policy or KitchenCoveragePolicy()

    def generate(
        self,
        year: int,
        month: int,
        employees: Sequence[Employee],
        history: Iterable[ShiftAssignment] = (),
    ) -> RosterResult:
        employees = list(employees)
        history = list(history)
        _check_inputs(year, month, employees, history)

        cfg = self.cfg
        index = HistoryIndex(history)
        rng = random.Random(cfg.seed) if cfg.seed is not None else None
        result = RosterResult()

        def log(msg: str) -> None:
            if len(result.log) < cfg.max_log_entries:
                result.log.append(msg)

        for day in month_days(year, month):
            coverage = self.coverage_policy.required_coverage(day)
            needed = {ShiftType.MORNING: coverage.morning, ShiftType.AFTERNOON: coverage.afternoon}
            candidates = fairness_order(employees, day, index, cfg.fairness_window_days, rng)

            assigned_today = set()
            filled: Dict[ShiftType, int] = {}
            for shift_type in WORKING_SHIFTS:
                count = 0
                for emp in sort_by_role_preference(candidates, shift_type):
                    if count >= needed[shift_type]:
                        break
                    if emp.id in assigned_today:
                        continue
                    if not check_constraints(emp, day, shift_type, index, cfg).valid:
                        continue
                    index.add_shift(
                        ShiftAssignment(
                            id=assignment_id(emp.id, day),
                            date=day,
                            employee_id=emp.id,
                            shift_type=shift_type,
                        )
                    )
                    assigned_today.add(emp.id)
                    count += 1
                filled[shift_type] = count

            if sum(filled.values()) < coverage.total:
                log(
                    f"[WARNING] Understaffed {day.isoformat()}: "
                    f"morning {filled[ShiftType.MORNING]}/{coverage.morning}, "
                    f"afternoon {filled[ShiftType.AFTERNOON]}/{coverage.afternoon}"
                )

        result.assignments = index.assignments_in_month(year, month)
        return result


def generate_month_schedule(
    year: int,
    month: int,
    employees: Sequence[Employee],
    history: Iterable[ShiftAssignment] = (),
    cfg: RosterConfig | None = None,
    coverage_policy: CoveragePolicy | None = None,
) -> RosterResult:
    """Convenience wrapper around :class:`GreedyRosterGenerator`."""
    return GreedyRosterGenerator(cfg, coverage_policy).generate(year, month, employees, history)
