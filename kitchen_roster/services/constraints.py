"""Constraint checking for individual shift assignments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from kitchen_roster.config import RosterConfig
from kitchen_roster.domain.models import Employee, Role, ShiftType, parse_shift_type

from .history import HistoryIndex


ON_VACATION = "on_vacation"
ROLE_EXCLUDES_AFTERNOON = "role_excludes_afternoon"
ALREADY_ASSIGNED = "already_assigned"
AFTERNOON_TO_MORNING = "afternoon_to_morning_turnaround"
MAX_CONSECUTIVE_DAYS = "max_consecutive_days"
INSUFFICIENT_REST = "insufficient_rest"
ISOLATED_DAY_OFF = "isolated_day_off"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid


VALID = ValidationResult(True)


def consecutive_days_before(employee_id: str, day: date, index: HistoryIndex, limit: int) -> int:
    """Length of the unbroken working streak ending on ``day - 1``, capped at ``limit``."""
    streak = 0
    cursor = day - timedelta(days=1)
    while streak < limit and index.worked_on(employee_id, cursor):
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def check_constraints(
    employee: Employee,
    day: date,
    shift_type: ShiftType,
    index: HistoryIndex,
    cfg: RosterConfig | None = None,
) -> ValidationResult:
    """
    Check whether an employee can take a shift on a given day.

    Rules are evaluated in order and the first violation is reported:
    vacation, role exclusivity, one shift per day, no afternoon-to-morning
    turnaround, max consecutive working days, rolling minimum rest, and no
    isolated single day off. The index is only read.

    Args:
        employee: Employee to check
        day: Target calendar date
        shift_type: MORNING or AFTERNOON
        index: History index with prior and already-committed assignments
        cfg: RosterConfig with labor limits (default limits when omitted)

    Returns:
        ValidationResult with ``valid`` and, when invalid, a reason code

    Raises:
        ValueError: If shift_type is not a working shift
    """
    cfg = cfg or RosterConfig()
    shift_type = parse_shift_type(shift_type)
    if not shift_type.is_working:
        raise ValueError(f"Only working shifts can be validated, got {shift_type.value}")
    emp_id = employee.id

    # 1. Vacation block
    if employee.is_on_vacation(day):
        return ValidationResult(False, ON_VACATION)

    # 2. Role exclusivity
    if employee.role == Role.COOK_MORNING and shift_type == ShiftType.AFTERNOON:
        return ValidationResult(False, ROLE_EXCLUDES_AFTERNOON)

    # 3. One assignment per day, of any type
    if index.assignment_for(emp_id, day) is not None:
        return ValidationResult(False, ALREADY_ASSIGNED)

    previous_day = day - timedelta(days=1)

    # 4. No afternoon followed by morning
    if shift_type == ShiftType.MORNING:
        previous = index.assignment_for(emp_id, previous_day)
        if previous is not None and previous.shift_type == ShiftType.AFTERNOON:
            return ValidationResult(False, AFTERNOON_TO_MORNING)

    # 5. Max consecutive working days
    limit = cfg.max_consecutive_days
    if consecutive_days_before(emp_id, day, index, limit) >= limit:
        return ValidationResult(False, MAX_CONSECUTIVE_DAYS)

    # 6. Rolling minimum rest; the window includes ``day`` itself and leave
    # entries take a slot like any other assignment
    window_start = day - timedelta(days=cfg.rolling_window_days - 1)
    existing = index.count_assignments_between(emp_id, window_start, day)
    if existing + 1 > cfg.max_worked_in_window:
        return ValidationResult(False, INSUFFICIENT_REST)

    # 7. Worked two days ago but not yesterday: a lone day off
    if not index.worked_on(emp_id, previous_day) and index.worked_on(emp_id, day - timedelta(days=2)):
        return ValidationResult(False, ISOLATED_DAY_OFF)

    return VALID


def is_legal(
    employee: Employee,
    day: date,
    shift_type: ShiftType,
    index: HistoryIndex,
    cfg: RosterConfig | None = None,
) -> ValidationResult:
    """Alias of :func:`check_constraints` for interactive callers."""
    return check_constraints(employee, day, shift_type, index, cfg)
