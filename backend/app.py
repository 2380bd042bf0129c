import logging
from contextlib import asynccontextmanager
from datetime import datetime
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from auth.capabilities import Capability
from auth.config import ADMIN_PASSWORD, ADMIN_USERNAME, SEED_DEFAULT_STAFF, validate_auth_config
from auth.dependencies import (
    get_current_actor,
    get_current_actor_optional,
    get_roster_service,
    raise_for_gate,
)
from auth.jwt_handler import create_access_token
from auth.token_hash import hash_password, verify_password
from roster import (
    Day,
    DuplicateStaff,
    Instant,
    Role,
    Shift,
    StaffDirectory,
    StaffMember,
    StaffNotFound,
    current_instant,
    default_staff,
)
from roster_service import ActionDenied, RosterService
from schemas import (
    ActionLogSchema,
    ComplianceResponse,
    GateResponse,
    LoginRequest,
    OnDutyResponse,
    ShiftSchema,
    StaffCreateRequest,
    StaffSchema,
    StaffUpdateRequest,
    TokenResponse,
)
from utils import format_wall_clock, setup_logging

load_dotenv()

logger = logging.getLogger(__name__)


def build_roster_service() -> RosterService:
    directory = StaffDirectory()
    if SEED_DEFAULT_STAFF:
        if not ADMIN_PASSWORD:
            logger.warning("ADMIN_PASSWORD is not set; the administrator cannot log in")
        password_hash = hash_password(ADMIN_PASSWORD) if ADMIN_PASSWORD else None
        for member in default_staff(ADMIN_USERNAME, password_hash):
            directory.add(member)
    return RosterService(directory)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    validate_auth_config()
    result = app.state.roster.check_compliance()
    if not result.is_compliant:
        logger.warning(f"Roster is not compliant: {result.message}")
    yield


app = FastAPI(title="wardRoster", lifespan=lifespan)
app.state.roster = build_roster_service()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def parse_shift(shift: ShiftSchema) -> Shift:
    try:
        return Shift.parse(shift.day_of_week, shift.start_time, shift.end_time)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def parse_role(role: str) -> Role:
    try:
        return Role(role.strip().upper())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid role: {role}")


def resolve_instant(service: RosterService, at: datetime | None) -> Instant:
    return Instant.from_datetime(at) if at else current_instant(service.clock)


def run_action(call):
    """Run a gated service call, mapping failures to HTTP errors."""
    try:
        return call()
    except ActionDenied as e:
        raise_for_gate(e.result)
    except StaffNotFound as e:
        raise HTTPException(status_code=404, detail=f"Staff member not found: {e.args[0]}")
    except DuplicateStaff as e:
        raise HTTPException(status_code=409, detail=f"Username already exists: {e.args[0]}")


@app.post("/auth/login", response_model=TokenResponse)
async def login(request: LoginRequest, service: RosterService = Depends(get_roster_service)):
    staff = service.directory.find(request.username)
    if staff is None or not verify_password(request.password, staff.password_hash):
        logger.warning(f"Failed login for {request.username}")
        raise HTTPException(status_code=401, detail="Invalid username or password")

    logger.info(f"{staff.full_name} logged in")
    return TokenResponse(
        access_token=create_access_token(staff.username, staff.role.value),
        username=staff.username,
        role=staff.role.value,
    )


@app.get("/auth/me", response_model=StaffSchema)
async def get_me(actor: StaffMember = Depends(get_current_actor)):
    return actor.to_dict()


@app.get("/staff", response_model=list[StaffSchema])
async def list_staff(service: RosterService = Depends(get_roster_service)):
    return [s.to_dict() for s in service.list_staff()]


@app.post("/staff", response_model=StaffSchema, status_code=201)
async def add_staff(
    request: StaffCreateRequest,
    actor: StaffMember | None = Depends(get_current_actor_optional),
    service: RosterService = Depends(get_roster_service),
):
    member = StaffMember(
        username=request.username,
        full_name=request.full_name,
        role=parse_role(request.role),
        shifts=frozenset(parse_shift(s) for s in request.shifts),
        details=request.details,
    )
    return run_action(lambda: service.add_staff(actor, member, request.password)).to_dict()


@app.put("/staff/{username}", response_model=StaffSchema)
async def update_staff(
    username: str,
    request: StaffUpdateRequest,
    actor: StaffMember | None = Depends(get_current_actor_optional),
    service: RosterService = Depends(get_roster_service),
):
    role = parse_role(request.role) if request.role else None
    updated = run_action(
        lambda: service.update_staff(actor, username, request.full_name, role, request.details)
    )
    return updated.to_dict()


@app.delete("/staff/{username}")
async def remove_staff(
    username: str,
    actor: StaffMember | None = Depends(get_current_actor_optional),
    service: RosterService = Depends(get_roster_service),
):
    run_action(lambda: service.remove_staff(actor, username))
    return {"success": True, "username": username}


@app.post("/staff/{username}/shifts", response_model=StaffSchema)
async def add_shift(
    username: str,
    request: ShiftSchema,
    actor: StaffMember | None = Depends(get_current_actor_optional),
    service: RosterService = Depends(get_roster_service),
):
    shift = parse_shift(request)
    return run_action(lambda: service.add_shift(actor, username, shift)).to_dict()


@app.delete("/staff/{username}/shifts", response_model=StaffSchema)
async def remove_shift(
    username: str,
    day: str,
    start: str,
    end: str,
    actor: StaffMember | None = Depends(get_current_actor_optional),
    service: RosterService = Depends(get_roster_service),
):
    shift = parse_shift(ShiftSchema(day_of_week=day, start_time=start, end_time=end))
    return run_action(lambda: service.remove_shift(actor, username, shift)).to_dict()


@app.get("/staff/{username}/on-duty")
async def staff_on_duty(
    username: str,
    at: datetime | None = None,
    service: RosterService = Depends(get_roster_service),
):
    staff = service.directory.find(username)
    if staff is None:
        raise HTTPException(status_code=404, detail=f"Staff member not found: {username}")

    instant = resolve_instant(service, at)
    return {
        "username": username,
        "day_of_week": instant.day.value,
        "time": format_wall_clock(instant.time),
        "on_duty": staff.is_on_duty(instant),
    }


@app.get("/roster/on-duty", response_model=OnDutyResponse)
async def roster_on_duty(
    at: datetime | None = None,
    service: RosterService = Depends(get_roster_service),
):
    instant = resolve_instant(service, at)
    return OnDutyResponse(
        day_of_week=instant.day.value,
        time=format_wall_clock(instant.time),
        on_duty=[s.username for s in service.on_duty(instant)],
    )


@app.get("/roster/hours/{day}")
async def hours_for_day(day: str, service: RosterService = Depends(get_roster_service)):
    """Whole hours each staff member has scheduled on the given day."""
    try:
        day_of_week = Day.parse(day)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "day_of_week": day_of_week.value,
        "hours": {s.username: s.hours_on_day(day_of_week) for s in service.list_staff()},
    }


@app.get("/compliance", response_model=ComplianceResponse)
async def get_compliance(service: RosterService = Depends(get_roster_service)):
    return service.check_compliance().to_dict()


@app.get("/authorize/{action}", response_model=GateResponse)
async def authorize(
    action: str,
    actor: StaffMember | None = Depends(get_current_actor_optional),
    service: RosterService = Depends(get_roster_service),
):
    """Report whether the caller may perform an action right now."""
    return service.gate.check(actor, action.upper(), service.clock()).to_dict()


@app.get("/logs", response_model=list[ActionLogSchema])
async def read_logs(
    username: str | None = None,
    action: str | None = None,
    actor: StaffMember | None = Depends(get_current_actor_optional),
    service: RosterService = Depends(get_roster_service),
):
    raise_for_gate(service.gate.check(actor, Capability.VIEW_LOGS, service.clock()))

    logs = service.directory.logs
    if username:
        logs = service.directory.logs_for_staff(username)
    if action:
        matching = service.directory.logs_for_action(action.upper())
        logs = [log for log in logs if log in matching]
    return [log.to_dict() for log in logs]
