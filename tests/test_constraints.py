"""Tests for the per-assignment constraint validator."""

from datetime import date, timedelta

import pytest

from kitchen_roster.config import RosterConfig
from kitchen_roster.domain.models import Employee, Role, ShiftType
from kitchen_roster.services.constraints import (
    AFTERNOON_TO_MORNING,
    ALREADY_ASSIGNED,
    INSUFFICIENT_REST,
    ISOLATED_DAY_OFF,
    MAX_CONSECUTIVE_DAYS,
    ON_VACATION,
    ROLE_EXCLUDES_AFTERNOON,
    check_constraints,
    is_legal,
)
from kitchen_roster.services.history import HistoryIndex


DAY = date(2025, 9, 10)


@pytest.fixture
def cook():
    return Employee(id="c1", role=Role.COOK_ROTATING)


def test_clean_history_is_valid(cook):
    result = check_constraints(cook, DAY, ShiftType.MORNING, HistoryIndex())
    assert result.valid
    assert result.reason is None
    assert bool(result)


def test_vacation_blocks():
    emp = Employee(id="c1", role=Role.COOK_ROTATING, vacation_dates=[DAY])
    result = check_constraints(emp, DAY, ShiftType.AFTERNOON, HistoryIndex())
    assert not result.valid
    assert result.reason == ON_VACATION


def test_morning_only_cook_cannot_take_afternoon():
    emp = Employee(id="m1", role=Role.COOK_MORNING)
    assert check_constraints(emp, DAY, ShiftType.AFTERNOON, HistoryIndex()).reason == ROLE_EXCLUDES_AFTERNOON
    assert check_constraints(emp, DAY, ShiftType.MORNING, HistoryIndex()).valid


def test_head_chef_can_take_afternoon():
    emp = Employee(id="h1", role=Role.HEAD_CHEF)
    assert check_constraints(emp, DAY, ShiftType.AFTERNOON, HistoryIndex()).valid


@pytest.mark.parametrize("existing", [ShiftType.MORNING, ShiftType.VACATION, ShiftType.SICK_LEAVE])
def test_one_assignment_per_day(cook, make_shift, existing):
    index = HistoryIndex([make_shift("c1", DAY, existing)])
    assert check_constraints(cook, DAY, ShiftType.AFTERNOON, index).reason == ALREADY_ASSIGNED


def test_first_failing_rule_is_reported(make_shift):
    emp = Employee(id="m1", role=Role.COOK_MORNING, vacation_dates=[DAY])
    index = HistoryIndex([make_shift("m1", DAY)])
    assert check_constraints(emp, DAY, ShiftType.AFTERNOON, index).reason == ON_VACATION


def test_afternoon_then_morning_turnaround(cook, make_shift):
    index = HistoryIndex([make_shift("c1", DAY - timedelta(days=1), ShiftType.AFTERNOON)])
    assert check_constraints(cook, DAY, ShiftType.MORNING, index).reason == AFTERNOON_TO_MORNING
    # The turnaround rule only applies to morning requests
    assert check_constraints(cook, DAY, ShiftType.AFTERNOON, index).valid


def test_morning_then_morning_is_fine(cook, make_shift):
    index = HistoryIndex([make_shift("c1", DAY - timedelta(days=1), ShiftType.MORNING)])
    assert check_constraints(cook, DAY, ShiftType.MORNING, index).valid


def test_seventh_consecutive_day_rejected(cook, worked_days):
    index = HistoryIndex(worked_days("c1", DAY, range(1, 7)))
    assert check_constraints(cook, DAY, ShiftType.MORNING, index).reason == MAX_CONSECUTIVE_DAYS


def test_sixth_consecutive_day_allowed(cook, worked_days):
    index = HistoryIndex(worked_days("c1", DAY, range(1, 6)))
    assert check_constraints(cook, DAY, ShiftType.MORNING, index).valid


def test_streak_is_configurable(cook, worked_days):
    index = HistoryIndex(worked_days("c1", DAY, range(1, 4)))
    cfg = RosterConfig(max_consecutive_days=3)
    assert check_constraints(cook, DAY, ShiftType.MORNING, index, cfg).reason == MAX_CONSECUTIVE_DAYS


def test_vacation_breaks_streak(cook, worked_days, make_shift):
    history = worked_days("c1", DAY, [1, 2, 3, 5, 6, 7]) + [make_shift("c1", DAY - timedelta(days=4), ShiftType.VACATION)]
    assert check_constraints(cook, DAY, ShiftType.MORNING, HistoryIndex(history)).valid


# Five on, two off, walking back from yesterday: 20 worked days in the 27 before DAY
TWENTY_IN_WINDOW = [1, 2, 3, 4, 5, 8, 9, 10, 11, 12, 15, 16, 17, 18, 19, 22, 23, 24, 25, 26]


def test_rolling_rest_rejects_twenty_first_day(cook, worked_days):
    index = HistoryIndex(worked_days("c1", DAY, TWENTY_IN_WINDOW))
    assert check_constraints(cook, DAY, ShiftType.MORNING, index).reason == INSUFFICIENT_REST


def test_rolling_rest_allows_twentieth_day(cook, worked_days):
    offsets = [k for k in TWENTY_IN_WINDOW if k != 26]
    index = HistoryIndex(worked_days("c1", DAY, offsets))
    assert check_constraints(cook, DAY, ShiftType.MORNING, index).valid


def test_rolling_window_excludes_day_28_back(cook, worked_days):
    offsets = [k for k in TWENTY_IN_WINDOW if k != 26] + [28]
    index = HistoryIndex(worked_days("c1", DAY, offsets))
    assert check_constraints(cook, DAY, ShiftType.MORNING, index).valid


def test_rolling_rest_counts_leave_entries(cook, worked_days):
    """Vacation and sick leave in the window fill it like worked days."""
    mornings = worked_days("c1", DAY, TWENTY_IN_WINDOW[:14])
    leave = worked_days("c1", DAY, TWENTY_IN_WINDOW[14:17], ShiftType.VACATION)
    leave += worked_days("c1", DAY, TWENTY_IN_WINDOW[17:], ShiftType.SICK_LEAVE)
    index = HistoryIndex(mornings + leave)

    result = check_constraints(cook, DAY, ShiftType.MORNING, index)
    assert not result.valid
    assert result.reason == INSUFFICIENT_REST


def test_rolling_rest_allows_nineteen_entries_with_leave(cook, worked_days):
    mornings = worked_days("c1", DAY, TWENTY_IN_WINDOW[:14])
    leave = worked_days("c1", DAY, TWENTY_IN_WINDOW[14:19], ShiftType.VACATION)
    index = HistoryIndex(mornings + leave)
    assert check_constraints(cook, DAY, ShiftType.MORNING, index).valid


def test_isolated_day_off_rejected(cook, make_shift):
    # worked day 1, off day 2, attempt day 3
    index = HistoryIndex([make_shift("c1", date(2025, 9, 1))])
    result = check_constraints(cook, date(2025, 9, 3), ShiftType.MORNING, index)
    assert result.reason == ISOLATED_DAY_OFF


def test_two_days_off_then_work_allowed(cook, make_shift):
    index = HistoryIndex([make_shift("c1", date(2025, 9, 1))])
    assert check_constraints(cook, date(2025, 9, 4), ShiftType.MORNING, index).valid


def test_leave_day_counts_as_day_off_for_isolated_rule(cook, make_shift):
    index = HistoryIndex(
        [
            make_shift("c1", date(2025, 9, 1)),
            make_shift("c1", date(2025, 9, 2), ShiftType.SICK_LEAVE),
        ]
    )
    assert check_constraints(cook, date(2025, 9, 3), ShiftType.AFTERNOON, index).reason == ISOLATED_DAY_OFF


def test_check_does_not_mutate_index(cook, worked_days):
    index = HistoryIndex(worked_days("c1", DAY, [1, 2]))
    before = list(index)
    is_legal(cook, DAY, ShiftType.MORNING, index)
    assert list(index) == before


def test_leave_type_request_rejected(cook):
    with pytest.raises(ValueError, match="working shifts"):
        check_constraints(cook, DAY, ShiftType.VACATION, HistoryIndex())


def test_string_shift_type_accepted(cook):
    assert check_constraints(cook, DAY, "afternoon", HistoryIndex()).valid
