"""Standard shift patterns and the default staff roster."""

import logging
from datetime import time
from typing import Optional

from .shifts import Day, Shift
from .staff import Role, StaffMember

logger = logging.getLogger(__name__)

MORNING_SHIFT_START = time(8, 0)
MORNING_SHIFT_END = time(16, 0)
AFTERNOON_SHIFT_START = time(14, 0)
AFTERNOON_SHIFT_END = time(22, 0)
DOCTOR_SHIFT_START = time(10, 0)
DOCTOR_SHIFT_END = time(11, 0)


def standard_nurse_shifts(kind: str = "morning") -> frozenset[Shift]:
    """Morning (8am-4pm) or afternoon (2pm-10pm) shifts for all seven days."""
    if kind == "morning":
        start, end = MORNING_SHIFT_START, MORNING_SHIFT_END
    elif kind == "afternoon":
        start, end = AFTERNOON_SHIFT_START, AFTERNOON_SHIFT_END
    else:
        raise ValueError(f"Unknown nurse shift kind: {kind}")
    return frozenset(Shift(day, start, end) for day in Day)


def standard_doctor_shifts() -> frozenset[Shift]:
    """One hour per day, every day."""
    return frozenset(Shift(day, DOCTOR_SHIFT_START, DOCTOR_SHIFT_END) for day in Day)


def default_staff(admin_username: str = "admin", admin_password_hash: Optional[str] = None) -> list[StaffMember]:
    """An administrator plus a compliant nurse/doctor roster."""
    staff = [
        StaffMember(
            username=admin_username,
            full_name="Admin User",
            role=Role.MANAGER,
            password_hash=admin_password_hash,
            details={"department": "Administration"},
        ),
        StaffMember(
            username="nurse1",
            full_name="Jane Doe",
            role=Role.NURSE,
            shifts=standard_nurse_shifts("morning"),
            details={"qualification": "Registered Nurse"},
        ),
        StaffMember(
            username="nurse2",
            full_name="Sarah Johnson",
            role=Role.NURSE,
            shifts=standard_nurse_shifts("afternoon"),
            details={"qualification": "Registered Nurse"},
        ),
        StaffMember(
            username="doctor1",
            full_name="John Smith",
            role=Role.DOCTOR,
            shifts=standard_doctor_shifts(),
            details={"specialization": "General Practice"},
        ),
    ]
    logger.info(f"Generated {len(staff)} default staff members")
    return staff
