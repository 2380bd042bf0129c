from pydantic import BaseModel, Field


class ShiftSchema(BaseModel):
    day_of_week: str
    start_time: str  # "08:00", "8:00 AM", "8am"
    end_time: str


class StaffSchema(BaseModel):
    username: str
    full_name: str
    role: str  # "DOCTOR", "NURSE", "MANAGER", "OTHER"
    shifts: list[ShiftSchema] = []
    details: dict = {}


class StaffCreateRequest(BaseModel):
    username: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    role: str
    password: str | None = None
    shifts: list[ShiftSchema] = []
    details: dict = {}


class StaffUpdateRequest(BaseModel):
    full_name: str | None = None
    role: str | None = None
    details: dict | None = None


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    username: str
    role: str


class ViolationSchema(BaseModel):
    rule_type: str  # "NO_NURSES_REGISTERED", "MISSING_MORNING_COVERAGE", etc.
    day: str | None = None
    staff_name: str | None = None
    message: str
    details: dict | None = None


class ComplianceResponse(BaseModel):
    is_compliant: bool
    violation: ViolationSchema | None = None
    message: str


class OnDutyResponse(BaseModel):
    day_of_week: str
    time: str
    on_duty: list[str]


class GateResponse(BaseModel):
    allowed: bool
    action: str
    actor: str | None = None
    failure: str | None = None  # "NOT_LOGGED_IN", "UNAUTHORIZED", "NOT_ROSTERED"
    message: str


class ActionLogSchema(BaseModel):
    action: str
    username: str
    details: str
    timestamp: str
