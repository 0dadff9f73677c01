from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Sequence

import pandas as pd

from .config import RosterConfig
from .domain.models import Employee, Role, ShiftAssignment, ShiftType


ASSIGNMENT_COLUMNS = ["id", "date", "employee_id", "shift_type"]


def assignments_to_frame(assignments: Iterable[ShiftAssignment]) -> pd.DataFrame:
    rows = [
        {
            "id": a.id,
            "date": pd.Timestamp(a.date),
            "employee_id": a.employee_id,
            "shift_type": a.shift_type.value,
        }
        for a in assignments
    ]
    return pd.DataFrame(rows, columns=ASSIGNMENT_COLUMNS)


def _merge_history(history: Iterable[ShiftAssignment], assignments: Sequence[ShiftAssignment]) -> List[ShiftAssignment]:
    # In-month history entries are returned by the generator too; count them once
    seen = set()
    merged = []
    for a in list(history) + list(assignments):
        if a in seen:
            continue
        seen.add(a)
        merged.append(a)
    return merged


def _max_streak_touching(worked: Sequence[date], targets: set) -> int:
    longest = 0
    run: List[date] = []
    for d in sorted(worked):
        if run and d - run[-1] == timedelta(days=1):
            run.append(d)
        else:
            run = [d]
        if targets.intersection(run):
            longest = max(longest, len(run))
    return longest


def _max_window_count(worked: Sequence[date], first_target: date, window_days: int) -> int:
    daily = pd.Series(1, index=pd.to_datetime(sorted(worked))).resample("D").sum()
    rolling = daily.rolling(window_days, min_periods=1).sum()
    touching = rolling[rolling.index >= pd.Timestamp(first_target)]
    return int(touching.max()) if not touching.empty else 0


def validate_assignments(
    assignments: Sequence[ShiftAssignment],
    employees: Sequence[Employee],
    history: Iterable[ShiftAssignment] = (),
    cfg: RosterConfig | None = None,
) -> None:
    """
    Validate a generated roster against the hard labor rules.

    History is consulted so streaks and rolling windows crossing the month
    boundary are checked; only violations touching ``assignments`` are
    reported.

    Raises:
        ValueError: On the first violated rule
    """
    cfg = cfg or RosterConfig()
    emp_lookup: Dict[str, Employee] = {e.id: e for e in employees}

    unknown = {a.employee_id for a in assignments} - set(emp_lookup)
    if unknown:
        raise ValueError(f"Assignments reference unknown employee ids: {sorted(unknown)}")

    combined = _merge_history(history, assignments)
    by_emp_date: Dict[str, Dict[date, List[ShiftAssignment]]] = defaultdict(lambda: defaultdict(list))
    for a in combined:
        by_emp_date[a.employee_id][a.date].append(a)

    # 1. One assignment per employee per day
    for a in assignments:
        if len(by_emp_date[a.employee_id][a.date]) > 1:
            raise ValueError(f"Employee {a.employee_id} has more than one assignment on {a.date}")

    for a in assignments:
        if not a.is_working:
            continue
        emp = emp_lookup[a.employee_id]

        # 2. Vacation
        if emp.is_on_vacation(a.date):
            raise ValueError(f"Employee {emp.id} is assigned {a.shift_type.value} on vacation day {a.date}")

        # 3. Role exclusivity
        if emp.role == Role.COOK_MORNING and a.shift_type == ShiftType.AFTERNOON:
            raise ValueError(f"Morning-only cook {emp.id} is assigned AFTERNOON on {a.date}")

        # 4. Afternoon followed by morning
        if a.shift_type == ShiftType.MORNING:
            previous = by_emp_date[a.employee_id].get(a.date - timedelta(days=1), [])
            if any(p.shift_type == ShiftType.AFTERNOON for p in previous):
                raise ValueError(f"Employee {emp.id} works MORNING on {a.date} after an AFTERNOON shift")

    # 5 and 6. Streaks and rolling windows, per employee
    targets_by_emp: Dict[str, set] = defaultdict(set)
    for a in assignments:
        if a.is_working:
            targets_by_emp[a.employee_id].add(a.date)

    for emp_id, targets in targets_by_emp.items():
        worked = [d for d, day_assigns in by_emp_date[emp_id].items() if any(x.is_working for x in day_assigns)]

        streak = _max_streak_touching(worked, targets)
        if streak > cfg.max_consecutive_days:
            raise ValueError(
                f"Employee {emp_id} works {streak} consecutive days (max {cfg.max_consecutive_days})"
            )

        in_window = _max_window_count(worked, min(targets), cfg.rolling_window_days)
        if in_window > cfg.max_worked_in_window:
            raise ValueError(
                f"Employee {emp_id} works {in_window} days in a {cfg.rolling_window_days}-day window "
                f"(max {cfg.max_worked_in_window})"
            )


def summarize_employees(assignments: Sequence[ShiftAssignment], employees: Sequence[Employee]) -> pd.DataFrame:
    """
    Per-employee month summary, one row per employee in roster order.

    Columns: role, total assignments, a count per shift type, and the vacation
    balance. ``vacation_taken`` is the number of booked vacation dates and
    ``vacation_pending`` what remains of ``vacation_days_total``. Assignments
    of employees not in the roster are ignored.
    """
    df = assignments_to_frame(assignments)
    ids = [e.id for e in employees]
    type_columns = [t.value for t in ShiftType]

    if df.empty:
        counts = pd.DataFrame(0, index=ids, columns=type_columns)
    else:
        counts = (
            df.groupby(["employee_id", "shift_type"])
            .size()
            .unstack(fill_value=0)
            .reindex(index=ids, columns=type_columns, fill_value=0)
        )
    counts.columns = [c.lower() for c in type_columns]

    summary = pd.DataFrame({"role": [e.role.value for e in employees]}, index=ids)
    summary["total"] = counts.sum(axis=1).astype(int)
    summary = summary.join(counts.astype(int))
    summary["vacation_taken"] = [len(e.vacation_dates) for e in employees]
    summary["vacation_pending"] = [e.vacation_days_total - len(e.vacation_dates) for e in employees]
    summary.index.name = "employee_id"
    return summary


def summarize_assignments(
    assignments: Sequence[ShiftAssignment],
    employees: Sequence[Employee] | None = None,
) -> str:
    df = assignments_to_frame(assignments)
    if df.empty:
        return "No assignments."

    working = df[df["shift_type"].isin([ShiftType.MORNING.value, ShiftType.AFTERNOON.value])].copy()
    if working.empty:
        return "No working assignments."
    working["date"] = working["date"].dt.strftime("%Y-%m-%d")

    coverage = working.groupby(["date", "shift_type"]).size().unstack(fill_value=0)
    days = working.groupby("employee_id").size().sort_values(ascending=False)

    lines = ["Coverage per day per shift:"]
    lines.append(coverage.to_string())
    lines.append("")
    lines.append("Worked days per employee:")
    lines.append(days.to_string())
    if employees:
        lines.append("")
        lines.append("Monthly summary per employee:")
        lines.append(summarize_employees(assignments, employees).to_string())
    return "\n".join(lines)
