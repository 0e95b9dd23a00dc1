from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .passwords import MAX_LENGTH, MIN_LENGTH
from .users import BCRYPT_MAX_BYTES


class LoginRequest(BaseModel):
    username: str
    password: str


class SignupRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=8, max_length=BCRYPT_MAX_BYTES)
    full_name: str | None = None
    role: str | None = None
    company: str | None = None

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
        return value


class ProfileUpdate(BaseModel):
    full_name: str | None = None
    role: str | None = None
    company: str | None = None


class PasswordSuggestionRequest(BaseModel):
    length: int = Field(default=16, ge=MIN_LENGTH, le=MAX_LENGTH)
    use_symbols: bool = True
    use_numbers: bool = True


class PasswordSuggestionResponse(BaseModel):
    password: str
    strength: int = Field(..., ge=0, le=100)
    feedback: str
