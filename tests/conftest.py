"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta

import pytest

from kitchen_roster.domain.models import Employee, Role, ShiftAssignment, ShiftType


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def make_shift():
    """Factory for history assignments with predictable ids."""

    def _make(employee_id, day, shift_type=ShiftType.MORNING):
        return ShiftAssignment(
            id=f"hist-{employee_id}-{day.isoformat()}",
            date=day,
            employee_id=employee_id,
            shift_type=shift_type,
        )

    return _make


@pytest.fixture
def worked_days(make_shift):
    """Build MORNING history for ``employee_id`` on ``day - k`` for each offset k."""

    def _build(employee_id, day, offsets, shift_type=ShiftType.MORNING):
        return [make_shift(employee_id, day - timedelta(days=k), shift_type) for k in offsets]

    return _build


@pytest.fixture
def full_kitchen():
    """Six morning cooks and four rotating cooks: enough for every day of a month."""
    morning = [Employee(id=f"m{i}", role=Role.COOK_MORNING) for i in range(1, 7)]
    rotating = [Employee(id=f"r{i}", role=Role.COOK_ROTATING) for i in range(1, 5)]
    return morning + rotating


@pytest.fixture
def september():
    return [date(2025, 9, 1) + timedelta(days=i) for i in range(30)]
