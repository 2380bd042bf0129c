"""Explicit login context passed to callers instead of a global singleton."""

import logging
from datetime import datetime
from typing import Optional

from roster.directory import StaffDirectory
from roster.staff import StaffMember

from .gate import AuthorizationGate, GateResult
from .token_hash import verify_password

logger = logging.getLogger(__name__)


class AuthSession:
    """Tracks the currently logged-in staff member for one client."""

    def __init__(self, directory: StaffDirectory, gate: Optional[AuthorizationGate] = None):
        self.directory = directory
        self.gate = gate or AuthorizationGate()
        self._username: Optional[str] = None

    def login(self, username: str, password: str) -> Optional[StaffMember]:
        staff = self.directory.find(username)
        if staff is None or not verify_password(password, staff.password_hash):
            logger.warning(f"Failed login for {username}")
            return None
        self._username = staff.username
        logger.info(f"{staff.full_name} logged in")
        return staff

    def logout(self) -> None:
        self._username = None

    @property
    def current_actor(self) -> Optional[StaffMember]:
        # Re-read so shift edits made after login are seen
        if self._username is None:
            return None
        return self.directory.find(self._username)

    @property
    def is_logged_in(self) -> bool:
        return self.current_actor is not None

    def check(self, action, now: Optional[datetime] = None) -> GateResult:
        return self.gate.check(self.current_actor, action, now)
