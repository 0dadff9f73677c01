"""Run-scoped lookup index over shift assignments."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, Iterator, List, Optional

from kitchen_roster.domain.models import ShiftAssignment


class HistoryIndex:
    """
    Append-only index of assignments, viewed by date and by employee.

    Seeded from persisted history and extended in place as a generator commits
    new assignments. Holds no validation logic of its own.
    """

    def __init__(self, assignments: Iterable[ShiftAssignment] = ()):
        self._by_date: Dict[date, List[ShiftAssignment]] = defaultdict(list)
        self._by_employee: Dict[str, List[ShiftAssignment]] = defaultdict(list)
        self._count = 0
        for assignment in assignments:
            self.add_shift(assignment)

    def add_shift(self, assignment: ShiftAssignment) -> None:
        self._by_date[assignment.date].append(assignment)
        self._by_employee[assignment.employee_id].append(assignment)
        self._count += 1

    def shifts_on(self, day: date) -> List[ShiftAssignment]:
        return list(self._by_date.get(day, ()))

    def shifts_of(self, employee_id: str) -> List[ShiftAssignment]:
        return list(self._by_employee.get(str(employee_id), ()))

    def assignment_for(self, employee_id: str, day: date) -> Optional[ShiftAssignment]:
        """Return the employee's assignment on ``day``, if any."""
        employee_id = str(employee_id)
        for assignment in self._by_date.get(day, ()):
            if assignment.employee_id == employee_id:
                return assignment
        return None

    def worked_on(self, employee_id: str, day: date) -> bool:
        assignment = self.assignment_for(employee_id, day)
        return assignment is not None and assignment.is_working

    def count_worked_between(self, employee_id: str, start: date, end: date) -> int:
        """Count working shifts with ``start <= date < end``."""
        return sum(
            1
            for a in self._by_employee.get(str(employee_id), ())
            if a.is_working and start <= a.date < end
        )

    def count_assignments_between(self, employee_id: str, start: date, end: date) -> int:
        """Count assignments of any type, leave included, with ``start <= date < end``."""
        return sum(1 for a in self._by_employee.get(str(employee_id), ()) if start <= a.date < end)

    def assignments_in_month(self, year: int, month: int) -> List[ShiftAssignment]:
        first = date(year, month, 1)
        next_first = (first + timedelta(days=32)).replace(day=1)
        return [a for a in self if first <= a.date < next_first]

    def __iter__(self) -> Iterator[ShiftAssignment]:
        for day in sorted(self._by_date):
            yield from self._by_date[day]

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"<HistoryIndex(assignments={self._count}, days={len(self._by_date)})>"
