"""Auth Schemas — registration, login, and identity payloads.

Invariants:
    - RegisterRequest.password: 8-72 chars (bcrypt byte limit re-checked in core)
    - Emails validated by pydantic EmailStr
    - Responses never include password hashes
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)


class UserResponse(BaseModel):
    id: str
    email: str
    name: str


class SessionResponse(BaseModel):
    """Issued session. The token is also set as an httponly cookie."""
    user: UserResponse
    token: str
    expires_at: datetime
