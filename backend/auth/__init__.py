from .config import (
    JWT_SECRET_KEY,
    JWT_ALGORITHM,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    ADMIN_USERNAME,
    validate_auth_config,
)
from .capabilities import Capability, ROLE_CAPABILITIES, capabilities_for, role_allows
from .gate import AuthorizationGate, GateFailure, GateResult
from .session import AuthSession
from .jwt_handler import create_access_token, decode_token
from .token_hash import hash_password, verify_password

__all__ = [
    "JWT_SECRET_KEY",
    "JWT_ALGORITHM",
    "ACCESS_TOKEN_EXPIRE_MINUTES",
    "ADMIN_USERNAME",
    "validate_auth_config",
    "Capability",
    "ROLE_CAPABILITIES",
    "capabilities_for",
    "role_allows",
    "AuthorizationGate",
    "GateFailure",
    "GateResult",
    "AuthSession",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
]
