"""Staff-management operations, each gated by the authorization check."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from auth.capabilities import Capability
from auth.gate import AuthorizationGate, GateResult
from auth.token_hash import hash_password
from compliance import ComplianceResult, ComplianceRules, check_compliance
from roster import Instant, Role, Shift, StaffDirectory, StaffMember, current_instant
from utils.time import local_now

logger = logging.getLogger(__name__)


class ActionDenied(Exception):
    """Raised when the authorization gate refuses an action."""

    def __init__(self, result: GateResult):
        super().__init__(result.message)
        self.result = result


class RosterService:
    """
    Applies staff and shift changes to a directory on behalf of an actor.

    The gate runs before any change is made; a refused check raises
    ActionDenied and leaves the directory untouched.
    """

    def __init__(
        self,
        directory: StaffDirectory,
        gate: Optional[AuthorizationGate] = None,
        rules: Optional[ComplianceRules] = None,
        clock: Callable[[], datetime] = local_now,
    ):
        self.directory = directory
        self.gate = gate or AuthorizationGate(clock=clock)
        self.rules = rules or ComplianceRules()
        self.clock = clock

    def _authorize(self, actor: Optional[StaffMember], action: Capability) -> StaffMember:
        result = self.gate.check(actor, action, self.clock())
        if not result.allowed:
            raise ActionDenied(result)
        return actor

    def _record(self, action: str, actor: StaffMember, details: str) -> None:
        self.directory.log_action(action, actor.username, details)
        logger.info(f"{action} by {actor.username}: {details}")

    def list_staff(self) -> list[StaffMember]:
        return list(self.directory.snapshot())

    def add_staff(
        self,
        actor: Optional[StaffMember],
        member: StaffMember,
        password: Optional[str] = None,
    ) -> StaffMember:
        """Add a member, hashing the initial password once the actor is authorized."""
        actor = self._authorize(actor, Capability.ADD_STAFF)
        if password:
            member = replace(member, password_hash=hash_password(password))
        self.directory.add(member)
        self._record("ADD_STAFF", actor, f"Added staff member {member.full_name} ({member.role.value})")
        return member

    def update_staff(
        self,
        actor: Optional[StaffMember],
        username: str,
        full_name: Optional[str] = None,
        role: Optional[Role] = None,
        details: Optional[dict] = None,
    ) -> StaffMember:
        actor = self._authorize(actor, Capability.MODIFY_STAFF)
        current = self.directory.get(username)
        updated = StaffMember(
            username=current.username,
            full_name=full_name or current.full_name,
            role=role or current.role,
            shifts=current.shifts,
            password_hash=current.password_hash,
            details=details if details is not None else current.details,
        )
        self.directory.replace(updated)
        self._record("UPDATE_STAFF", actor, f"Updated staff member {updated.full_name} ({updated.role.value})")
        return updated

    def remove_staff(self, actor: Optional[StaffMember], username: str) -> StaffMember:
        actor = self._authorize(actor, Capability.MODIFY_STAFF)
        removed = self.directory.remove(username)
        self._record("REMOVE_STAFF", actor, f"Removed staff member {removed.full_name}")
        return removed

    def add_shift(self, actor: Optional[StaffMember], username: str, shift: Shift) -> StaffMember:
        actor = self._authorize(actor, Capability.MODIFY_STAFF)
        updated = self.directory.replace(self.directory.get(username).with_shift(shift))
        self._record("ADD_SHIFT", actor, f"Added shift {shift} for {updated.full_name}")
        return updated

    def remove_shift(self, actor: Optional[StaffMember], username: str, shift: Shift) -> StaffMember:
        actor = self._authorize(actor, Capability.MODIFY_STAFF)
        updated = self.directory.replace(self.directory.get(username).without_shift(shift))
        self._record("REMOVE_SHIFT", actor, f"Removed shift {shift} for {updated.full_name}")
        return updated

    def check_compliance(self) -> ComplianceResult:
        return check_compliance(self.directory.snapshot(), self.rules)

    def on_duty(self, instant: Optional[Instant] = None) -> list[StaffMember]:
        """Staff members with a shift covering the instant (default: now)."""
        instant = instant or current_instant(self.clock)
        return [s for s in self.directory.snapshot() if s.is_on_duty(instant)]
