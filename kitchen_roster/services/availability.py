"""Day roster view and interactive assignment checks for manual edits."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Sequence, Tuple

from kitchen_roster.config import RosterConfig
from kitchen_roster.domain.models import Employee, ShiftAssignment, ShiftType, parse_date

from .constraints import ValidationResult, check_constraints
from .history import HistoryIndex


@dataclass
class DayRoster:
    """Who works, who is off, and who could be added on one day."""

    day: date
    morning: List[Employee] = field(default_factory=list)
    afternoon: List[Employee] = field(default_factory=list)
    off: List[Employee] = field(default_factory=list)
    available: List[Tuple[Employee, ValidationResult]] = field(default_factory=list)

    @property
    def assignable(self) -> List[Employee]:
        return [emp for emp, check in self.available if check.valid]


def can_assign(
    employee: Employee,
    day: date,
    shift_type: ShiftType,
    assignments: Iterable[ShiftAssignment],
    cfg: RosterConfig | None = None,
) -> ValidationResult:
    """
    Check a single manual edit against existing assignments.

    ``assignments`` should include the previous month so that rolling-window
    and streak rules see across the month boundary.
    """
    return check_constraints(employee, parse_date(day), shift_type, HistoryIndex(assignments), cfg)


def build_day_roster(
    day: date,
    employees: Sequence[Employee],
    assignments: Iterable[ShiftAssignment],
    shift_type: ShiftType = ShiftType.MORNING,
    cfg: RosterConfig | None = None,
) -> DayRoster:
    """
    Split the roster for ``day`` into morning, afternoon and off lists.

    Every employee without a working shift that day (vacation and sick leave
    included) is also checked for ``shift_type`` and listed in ``available``
    with the check result.
    """
    day = parse_date(day)
    index = HistoryIndex(assignments)
    roster = DayRoster(day=day)

    for emp in employees:
        assignment = index.assignment_for(emp.id, day)
        if assignment is not None and assignment.shift_type == ShiftType.MORNING:
            roster.morning.append(emp)
        elif assignment is not None and assignment.shift_type == ShiftType.AFTERNOON:
            roster.afternoon.append(emp)
        else:
            roster.off.append(emp)

    roster.available = [
        (emp, check_constraints(emp, day, shift_type, index, cfg)) for emp in roster.off
    ]
    return roster
