"""
Pydantic request / response schemas for the HTTP API.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from auth.password import MAX_PASSWORD_BYTES


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class Credentials(BaseModel):
    """Body of ``/auth/signin``; the base of the signup body."""

    username: str = Field(..., min_length=5, max_length=64)
    password: str = Field(..., min_length=6)

    @field_validator("username", "password")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class SignUpRequest(Credentials):
    """Body of ``/auth/signup``."""

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes long")
        return value


class TokenResponse(BaseModel):
    token: str


# ═══════════════════════════════════════════════════════════════════════════════
# Points
# ═══════════════════════════════════════════════════════════════════════════════


class PointRequest(BaseModel):
    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)
    r: float = Field(..., allow_inf_nan=False)


class PointResponse(BaseModel):
    """One stored sample as the web client sees it."""

    x: float
    y: float
    r: float
    result: bool
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored in UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_sample(cls, sample) -> "PointResponse":
        return cls(
            x=sample.x,
            y=sample.y,
            r=sample.r,
            result=sample.inside,
            timestamp=sample.created_at,
        )
