"""Type definitions for the compliance module."""

from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import Optional

from roster.shifts import Day
from roster.staff import Role, StaffMember


class ViolationType(str, Enum):
    """Types of staffing compliance violations."""
    NO_NURSES_REGISTERED = "NO_NURSES_REGISTERED"
    NO_DOCTORS_REGISTERED = "NO_DOCTORS_REGISTERED"
    MISSING_MORNING_COVERAGE = "MISSING_MORNING_COVERAGE"
    MISSING_AFTERNOON_COVERAGE = "MISSING_AFTERNOON_COVERAGE"
    NO_DOCTOR_COVERAGE = "NO_DOCTOR_COVERAGE"
    NURSE_OVER_HOURS = "NURSE_OVER_HOURS"


@dataclass(frozen=True)
class Violation:
    """A single compliance violation."""
    rule_type: ViolationType
    message: str
    day: Optional[Day] = None
    staff_name: Optional[str] = None
    details: dict = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "rule_type": self.rule_type.value,
            "day": self.day.value if self.day else None,
            "staff_name": self.staff_name,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class ComplianceRules:
    """Staffing regulations the roster is checked against."""

    # Required nurse shifts, each needed every day
    morning_shift_start: time = time(8, 0)
    morning_shift_end: time = time(16, 0)
    afternoon_shift_start: time = time(14, 0)
    afternoon_shift_end: time = time(22, 0)

    # Nurse hours per calendar day
    nurse_max_daily_hours: int = 8


@dataclass
class ComplianceContext:
    """Context for running compliance validation."""
    rules: ComplianceRules
    staff: tuple[StaffMember, ...]

    @property
    def nurses(self) -> list[StaffMember]:
        return [s for s in self.staff if s.role == Role.NURSE]

    @property
    def doctors(self) -> list[StaffMember]:
        return [s for s in self.staff if s.role == Role.DOCTOR]


@dataclass(frozen=True)
class ComplianceResult:
    """Result of compliance validation: compliant, or the first violation found."""
    violation: Optional[Violation] = None

    @property
    def is_compliant(self) -> bool:
        return self.violation is None

    @property
    def message(self) -> str:
        return self.violation.message if self.violation else "Roster is compliant"

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "is_compliant": self.is_compliant,
            "violation": self.violation.to_dict() if self.violation else None,
            "message": self.message,
        }
