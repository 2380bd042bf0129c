"""Authorization gate: role capability plus on-duty check for every privileged action."""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from roster.shifts import Instant, current_instant
from roster.staff import StaffMember
from utils.time import local_now

from .capabilities import action_name, role_allows
from .config import ADMIN_USERNAME

logger = logging.getLogger(__name__)


class GateFailure(str, Enum):
    """Reasons an action request is refused."""
    NOT_LOGGED_IN = "NOT_LOGGED_IN"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_ROSTERED = "NOT_ROSTERED"


@dataclass(frozen=True)
class GateResult:
    """Outcome of one authorization check."""
    action: str
    actor: Optional[str] = None
    failure: Optional[GateFailure] = None
    message: str = ""

    @property
    def allowed(self) -> bool:
        return self.failure is None

    def to_dict(self) -> dict:
        return {
            "allowed": self.allowed,
            "action": self.action,
            "actor": self.actor,
            "failure": self.failure.value if self.failure else None,
            "message": self.message,
        }


class AuthorizationGate:
    """
    Decides whether an actor may perform an action right now.

    An action needs both a role that grants it and a shift covering the
    current instant. The administrator identity passes unconditionally.
    """

    def __init__(
        self,
        admin_username: str = ADMIN_USERNAME,
        clock: Callable[[], datetime] = local_now,
    ):
        self.admin_username = admin_username
        self.clock = clock

    def is_admin(self, actor: Optional[StaffMember]) -> bool:
        return actor is not None and actor.username == self.admin_username

    def is_authorized(self, actor: Optional[StaffMember], action) -> bool:
        if actor is None:
            return False
        return self.is_admin(actor) or role_allows(actor, action)

    def is_rostered(self, actor: Optional[StaffMember], now: Optional[datetime] = None) -> bool:
        if actor is None:
            return False
        if self.is_admin(actor):
            return True
        instant = current_instant(self.clock) if now is None else Instant.from_datetime(now)
        return actor.is_on_duty(instant)

    def check(
        self,
        actor: Optional[StaffMember],
        action,
        now: Optional[datetime] = None,
    ) -> GateResult:
        """Check login, then role capability, then roster coverage."""
        action = action_name(action)

        if actor is None:
            result = GateResult(
                action=action,
                failure=GateFailure.NOT_LOGGED_IN,
                message="No user is logged in",
            )
        elif not self.is_authorized(actor, action):
            result = GateResult(
                action=action,
                actor=actor.username,
                failure=GateFailure.UNAUTHORIZED,
                message=f"{actor.full_name} is not authorized to {action}",
            )
        elif not self.is_rostered(actor, now):
            result = GateResult(
                action=action,
                actor=actor.username,
                failure=GateFailure.NOT_ROSTERED,
                message=f"{actor.full_name} is not rostered for the current time",
            )
        else:
            return GateResult(action=action, actor=actor.username)

        logger.warning(f"Denied {action}: {result.message}")
        return result

    check_authorized_and_rostered = check
