import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from roster import StaffMember
from .gate import GateFailure, GateResult
from .jwt_handler import decode_token

security = HTTPBearer(auto_error=False)


def get_roster_service(request: Request):
    return request.app.state.roster


async def get_current_actor_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    service=Depends(get_roster_service),
) -> StaffMember | None:
    """Resolve the bearer token to a staff member, or None when absent or invalid."""
    if credentials is None:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except jwt.InvalidTokenError:
        return None

    if payload.get("type") != "access" or not payload.get("sub"):
        return None

    return service.directory.find(payload["sub"])


async def get_current_actor(
    actor: StaffMember | None = Depends(get_current_actor_optional),
) -> StaffMember:
    if actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No user is logged in",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return actor


def raise_for_gate(result: GateResult) -> None:
    """Convert a refused gate check into an HTTP error."""
    if result.allowed:
        return
    if result.failure == GateFailure.NOT_LOGGED_IN:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.to_dict(),
            headers={"WWW-Authenticate": "Bearer"},
        )
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=result.to_dict())
