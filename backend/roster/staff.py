"""Staff members and their roles."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional

from .shifts import Day, Instant, Shift, is_on_duty


class Role(str, Enum):
    """Role tag carried by every staff member."""
    DOCTOR = "DOCTOR"
    NURSE = "NURSE"
    MANAGER = "MANAGER"
    OTHER = "OTHER"


@dataclass(frozen=True)
class StaffMember:
    """
    A staff member and the set of shifts they are rostered for.

    Instances are immutable; shift changes produce a new member.
    """
    username: str
    full_name: str
    role: Role
    shifts: frozenset[Shift] = frozenset()
    password_hash: Optional[str] = field(default=None, compare=False, repr=False)
    details: dict = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        if not isinstance(self.shifts, frozenset):
            object.__setattr__(self, "shifts", frozenset(self.shifts))

    def with_shift(self, shift: Shift) -> "StaffMember":
        return replace(self, shifts=self.shifts | {shift})

    def without_shift(self, shift: Shift) -> "StaffMember":
        return replace(self, shifts=self.shifts - {shift})

    def with_shifts(self, shifts: Iterable[Shift]) -> "StaffMember":
        """Replace the whole shift set."""
        return replace(self, shifts=frozenset(shifts))

    def is_on_duty(self, instant: Instant) -> bool:
        return is_on_duty(self.shifts, instant)

    def shifts_on(self, day: Day) -> list[Shift]:
        return sorted((s for s in self.shifts if s.day == day), key=lambda s: (s.start, s.end))

    def hours_on_day(self, day: Day) -> int:
        """Total whole hours of shifts starting on the given day."""
        return sum(s.hours for s in self.shifts_on(day))

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "full_name": self.full_name,
            "role": self.role.value,
            "shifts": [
                s.to_dict()
                for s in sorted(self.shifts, key=lambda s: (list(Day).index(s.day), s.start, s.end))
            ],
            "details": dict(self.details),
        }
