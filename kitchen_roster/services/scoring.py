"""Candidate ordering: role preference and fairness."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from kitchen_roster.domain.models import Employee, Role, ShiftType, parse_shift_type

from .history import HistoryIndex


ROLE_PREFERENCE: Dict[ShiftType, Dict[Role, int]] = {
    ShiftType.MORNING: {
        Role.COOK_MORNING: 2,
        Role.COOK_ROTATING: 1,
        Role.HEAD_CHEF: 0,
        Role.OTHER: 0,
    },
    ShiftType.AFTERNOON: {
        Role.COOK_ROTATING: 2,
        Role.HEAD_CHEF: 1,
        Role.COOK_MORNING: -1,
        Role.OTHER: -1,
    },
}


def role_preference_score(employee: Employee, shift_type: ShiftType) -> int:
    """
    Score how well an employee's role suits a shift type.

    Higher score = better candidate. Used only for ordering; a low score never
    excludes an employee.

    Raises:
        ValueError: If shift_type is not a working shift
    """
    table = ROLE_PREFERENCE.get(parse_shift_type(shift_type))
    if table is None:
        raise ValueError(f"Cannot score non-working shift type {shift_type}")
    return table[employee.role]


def sort_by_role_preference(candidates: Sequence[Employee], shift_type: ShiftType) -> List[Employee]:
    # sorted() is stable, so the incoming order breaks ties
    return sorted(candidates, key=lambda e: role_preference_score(e, shift_type), reverse=True)


def recent_shift_count(employee_id: str, day: date, index: HistoryIndex, window_days: int = 7) -> int:
    """Working shifts in the trailing window ``(day - window_days, day]``."""
    return index.count_worked_between(
        employee_id,
        day - timedelta(days=window_days - 1),
        day + timedelta(days=1),
    )


def fairness_order(
    employees: Sequence[Employee],
    day: date,
    index: HistoryIndex,
    window_days: int = 7,
    rng: Optional[random.Random] = None,
) -> List[Employee]:
    """
    Order employees so those with fewer recent shifts come first.

    Ties are broken by a key drawn from ``rng`` (one draw per employee, in
    roster order) or, without ``rng``, by roster order.
    """
    if rng is not None:
        tiebreak = [rng.random() for _ in employees]
    else:
        tiebreak = list(range(len(employees)))

    keyed = [
        (recent_shift_count(emp.id, day, index, window_days), tiebreak[pos], pos, emp)
        for pos, emp in enumerate(employees)
    ]
    keyed.sort(key=lambda k: (k[0], k[1], k[2]))
    return [k[3] for k in keyed]
