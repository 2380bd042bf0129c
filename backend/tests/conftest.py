import os
import sys
from pathlib import Path

import pytest
from datetime import datetime, time

backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ["SEED_DEFAULT_STAFF"] = "false"

from roster import Day, Role, Shift, StaffMember


@pytest.fixture
def at():
    """Factory for a concrete datetime on the given weekday (week of Monday 2024-01-15)."""
    def _at(day: Day, hour: int, minute: int = 0) -> datetime:
        return datetime(2024, 1, 15 + list(Day).index(day), hour, minute)
    return _at


@pytest.fixture
def make_staff():
    """Factory to create StaffMember objects."""
    def _make_staff(
        username: str,
        role: Role,
        shifts: list[Shift] = None,
        full_name: str = None,
        password_hash: str = None,
    ) -> StaffMember:
        return StaffMember(
            username=username,
            full_name=full_name or username.title(),
            role=role,
            shifts=frozenset(shifts or []),
            password_hash=password_hash,
        )
    return _make_staff


@pytest.fixture
def every_day():
    """Factory for one shift per day of the week at the same times."""
    def _every_day(start: time, end: time, skip: Day = None) -> list[Shift]:
        return [Shift(day, start, end) for day in Day if day != skip]
    return _every_day


@pytest.fixture
def compliant_staff(make_staff, every_day):
    """Morning nurse, afternoon nurse and a doctor with one hour every day."""
    return [
        make_staff("nurse1", Role.NURSE, every_day(time(8), time(16)), full_name="Jane Doe"),
        make_staff("nurse2", Role.NURSE, every_day(time(14), time(22)), full_name="Sarah Johnson"),
        make_staff("doctor", Role.DOCTOR, every_day(time(9), time(10)), full_name="John Smith"),
    ]
