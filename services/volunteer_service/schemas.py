"""Pydantic schemas for the Volunteer Service."""

import datetime as dt
import uuid
from datetime import datetime, time
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    computed_field,
    field_validator,
    model_validator,
)
from libs.auth.tokens import BCRYPT_MAX_PASSWORD_BYTES
from services.volunteer_service.awards import AGE_GROUP_LABELS
from services.volunteer_service.models import (
    AgeGroup,
    AwardTier,
    NextTier,
    SessionSource,
)

# ============================================================================
# AUTH SCHEMAS
# ============================================================================


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    age: int = Field(..., ge=0, le=130)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=40)
    password: str = Field(..., min_length=1)
    confirm_password: str

    @field_validator("password")
    @classmethod
    def password_fits_hash(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )
        return v

    @model_validator(mode="after")
    def passwords_match(self) -> "SignupRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


# ============================================================================
# PROFILE SCHEMAS
# ============================================================================


class VolunteerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    age: Optional[int] = Field(None, ge=0, le=130)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=40)


class VolunteerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: EmailStr
    phone: Optional[str] = None
    age: int
    age_group: AgeGroup
    clocked_in_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def age_group_label(self) -> str:
        return AGE_GROUP_LABELS[self.age_group]


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    volunteer: VolunteerResponse


class VolunteerStatsResponse(BaseModel):
    session_count: int
    total_hours: float
    average_hours_per_session: float


# ============================================================================
# SESSION SCHEMAS
# ============================================================================


def _wall_clock(value: Optional[time]) -> Optional[time]:
    # Session times are local wall-clock values; an offset can't be stored
    if value is not None and value.tzinfo is not None:
        raise ValueError("Times must not include a UTC offset")
    return value


class ManualSessionCreate(BaseModel):
    date: dt.date
    start_time: time
    end_time: time
    description: Optional[str] = Field(None, max_length=500)

    check_wall_clock = field_validator("start_time", "end_time")(_wall_clock)


class SessionUpdate(BaseModel):
    date: Optional[dt.date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    description: Optional[str] = Field(None, max_length=500)

    check_wall_clock = field_validator("start_time", "end_time")(_wall_clock)


class VolunteerSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    volunteer_id: uuid.UUID
    date: dt.date
    start_time: time
    end_time: time
    duration_hours: float
    description: str
    source: SessionSource
    created_at: datetime
    updated_at: datetime


# ============================================================================
# CLOCK SCHEMAS
# ============================================================================


class ClockStatusResponse(BaseModel):
    is_active: bool
    clocked_in_at: Optional[datetime] = None
    elapsed_seconds: int = 0


# ============================================================================
# AWARD SCHEMAS
# ============================================================================


class TierThresholdsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    age_group: AgeGroup
    age_group_label: str
    bronze: float
    silver: float
    gold: float


class TierStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_hours: float
    current_tier: AwardTier
    next_tier: NextTier
    next_tier_hours: float
    progress_percent: float


class ProgressResponse(TierStatusResponse):
    age_group: AgeGroup
    age_group_label: str
    hours_remaining: Optional[float] = None
    thresholds: TierThresholdsResponse
