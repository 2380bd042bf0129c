"""Static role -> capability table."""

from enum import Enum

from roster.staff import Role, StaffMember


class Capability(str, Enum):
    """Named actions that require authorization."""
    ADD_PATIENT = "ADD_PATIENT"
    MOVE_PATIENT = "MOVE_PATIENT"
    DISCHARGE_PATIENT = "DISCHARGE_PATIENT"
    ADD_PRESCRIPTION = "ADD_PRESCRIPTION"
    ADMINISTER_MEDICATION = "ADMINISTER_MEDICATION"
    ADD_STAFF = "ADD_STAFF"
    MODIFY_STAFF = "MODIFY_STAFF"
    VIEW_LOGS = "VIEW_LOGS"


ROLE_CAPABILITIES: dict[Role, frozenset[str]] = {
    Role.DOCTOR: frozenset({Capability.ADD_PRESCRIPTION.value}),
    Role.NURSE: frozenset({
        Capability.ADMINISTER_MEDICATION.value,
        Capability.MOVE_PATIENT.value,
    }),
    Role.MANAGER: frozenset({
        Capability.ADD_PATIENT.value,
        Capability.ADD_STAFF.value,
        Capability.MODIFY_STAFF.value,
    }),
    Role.OTHER: frozenset(),
}


def capabilities_for(role: Role) -> frozenset[str]:
    return ROLE_CAPABILITIES.get(role, frozenset())


def action_name(action) -> str:
    return action.value if isinstance(action, Enum) else str(action)


def role_allows(staff: StaffMember, action) -> bool:
    """Check the role table only; the administrator override is applied by the gate."""
    return action_name(action) in capabilities_for(staff.role)
