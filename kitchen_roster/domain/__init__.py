"""Domain models."""

from .models import (
    WORKING_SHIFTS,
    Employee,
    Role,
    ShiftAssignment,
    ShiftType,
    parse_date,
    parse_role,
    parse_shift_type,
)

__all__ = [
    "Employee",
    "Role",
    "ShiftAssignment",
    "ShiftType",
    "WORKING_SHIFTS",
    "parse_date",
    "parse_role",
    "parse_shift_type",
]
