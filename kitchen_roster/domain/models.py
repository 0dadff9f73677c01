"""Domain models for kitchen roster generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import FrozenSet, Iterable, Optional


class Role(str, Enum):
    """Kitchen roles relevant to shift allocation."""

    COOK_MORNING = "COOK_MORNING"  # morning-only cook
    COOK_ROTATING = "COOK_ROTATING"  # afternoon-rotating cook
    HEAD_CHEF = "HEAD_CHEF"
    OTHER = "OTHER"


class ShiftType(str, Enum):
    """Category of a single day's assignment for one employee."""

    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    VACATION = "VACATION"
    SICK_LEAVE = "SICK_LEAVE"

    @property
    def is_working(self) -> bool:
        return self in (ShiftType.MORNING, ShiftType.AFTERNOON)


WORKING_SHIFTS = (ShiftType.MORNING, ShiftType.AFTERNOON)


def parse_role(value) -> Role:
    if isinstance(value, Role):
        return value
    if value is None or not str(value).strip():
        raise ValueError("Role is required")
    try:
        return Role(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Unknown role: {value!r}") from None


def parse_shift_type(value) -> ShiftType:
    if isinstance(value, ShiftType):
        return value
    if value is None or not str(value).strip():
        raise ValueError("Shift type is required")
    try:
        return ShiftType(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Unknown shift type: {value!r}") from None


def parse_date(value) -> date:
    """Accept a ``date`` or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, date):
        # datetime is a date subclass; keep the calendar day only
        return date(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise ValueError(f"Invalid calendar date: {value!r}") from None
    raise ValueError(f"Invalid calendar date: {value!r}")


@dataclass(frozen=True)
class Employee:
    """Employee supplied to the engine as read-only input."""

    id: str
    role: Role
    vacation_dates: FrozenSet[date] = field(default_factory=frozenset)
    vacation_days_total: int = 0  # annual entitlement, display only
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.id is None or not str(self.id).strip():
            raise ValueError("Employee id is required")
        object.__setattr__(self, "id", str(self.id))
        try:
            role = parse_role(self.role)
        except ValueError as e:
            raise ValueError(f"Employee {self.id}: {e}") from None
        object.__setattr__(self, "role", role)

        dates: Iterable = self.vacation_dates or ()
        if isinstance(dates, (str, date)):
            raise ValueError(f"Employee {self.id}: vacation_dates must be a collection of dates")
        object.__setattr__(self, "vacation_dates", frozenset(parse_date(d) for d in dates))

        if int(self.vacation_days_total) < 0:
            raise ValueError(f"Employee {self.id}: vacation_days_total cannot be negative")
        object.__setattr__(self, "vacation_days_total", int(self.vacation_days_total))

    def is_on_vacation(self, day: date) -> bool:
        return day in self.vacation_dates

    def __repr__(self) -> str:
        return f"<Employee(id={self.id!r}, role='{self.role.value}')>"


@dataclass(frozen=True)
class ShiftAssignment:
    """One employee's assignment for one calendar day."""

    id: str
    date: date
    employee_id: str
    shift_type: ShiftType

    def __post_init__(self) -> None:
        if self.employee_id is None or not str(self.employee_id).strip():
            raise ValueError(f"Assignment {self.id}: employee_id is required")
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "employee_id", str(self.employee_id))
        object.__setattr__(self, "date", parse_date(self.date))
        object.__setattr__(self, "shift_type", parse_shift_type(self.shift_type))

    @property
    def is_working(self) -> bool:
        return self.shift_type.is_working

    def __repr__(self) -> str:
        return (
            f"<ShiftAssignment(date={self.date.isoformat()}, emp={self.employee_id!r}, "
            f"type={self.shift_type.value})>"
        )
