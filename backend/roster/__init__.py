"""Staff roster model: shifts, staff members and the in-memory directory."""

from .shifts import Day, Instant, Shift, covers, current_instant, is_on_duty
from .staff import Role, StaffMember
from .directory import ActionLog, DuplicateStaff, StaffDirectory, StaffNotFound
from .defaults import default_staff, standard_doctor_shifts, standard_nurse_shifts

__all__ = [
    "Day",
    "Instant",
    "Shift",
    "covers",
    "current_instant",
    "is_on_duty",
    "Role",
    "StaffMember",
    "ActionLog",
    "DuplicateStaff",
    "StaffDirectory",
    "StaffNotFound",
    "default_staff",
    "standard_doctor_shifts",
    "standard_nurse_shifts",
]
