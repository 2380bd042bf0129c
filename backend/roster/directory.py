"""In-memory staff collection and action log."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from utils.time import local_now

from .staff import Role, StaffMember


class StaffNotFound(KeyError):
    """No staff member with the given username."""


class DuplicateStaff(ValueError):
    """A staff member with the given username already exists."""


@dataclass(frozen=True)
class ActionLog:
    """A record of one permitted action."""
    action: str
    username: str
    details: str = ""
    timestamp: datetime = field(default_factory=local_now)

    def to_dict(self) -> dict:
        return {
            "action": self.action,
            "username": self.username,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class StaffDirectory:
    """
    Staff members keyed by username, kept in insertion order.

    Members are immutable values; every update stores a replacement.
    """

    def __init__(self, staff: Optional[list[StaffMember]] = None):
        self._staff: dict[str, StaffMember] = {}
        self.logs: list[ActionLog] = []
        for member in staff or []:
            self.add(member)

    def __len__(self) -> int:
        return len(self._staff)

    def __contains__(self, username: str) -> bool:
        return username in self._staff

    def find(self, username: str) -> Optional[StaffMember]:
        return self._staff.get(username)

    def get(self, username: str) -> StaffMember:
        try:
            return self._staff[username]
        except KeyError:
            raise StaffNotFound(username) from None

    def add(self, member: StaffMember) -> StaffMember:
        if member.username in self._staff:
            raise DuplicateStaff(member.username)
        self._staff[member.username] = member
        return member

    def replace(self, member: StaffMember) -> StaffMember:
        self.get(member.username)
        self._staff[member.username] = member
        return member

    def remove(self, username: str) -> StaffMember:
        member = self.get(username)
        del self._staff[username]
        return member

    def snapshot(self) -> tuple[StaffMember, ...]:
        """Stable copy of the roster for a single compliance check."""
        return tuple(self._staff.values())

    def by_role(self, role: Role) -> list[StaffMember]:
        return [s for s in self._staff.values() if s.role == role]

    def log_action(self, action: str, username: str, details: str = "") -> ActionLog:
        entry = ActionLog(action=action, username=username, details=details)
        self.logs.append(entry)
        return entry

    def logs_for_staff(self, username: str) -> list[ActionLog]:
        return [log for log in self.logs if log.username == username]

    def logs_for_action(self, action: str) -> list[ActionLog]:
        return [log for log in self.logs if log.action == action]
