"""
User domain models and schemas.

Request/response schemas for signup, login and the current-user endpoint.
The HTML forms post ``user[email]`` / ``user[password]``; JSON clients may
send either ``{"user": {...}}`` or the flat fields.

Dependencies: pydantic
System role: Account API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator


class Credentials(BaseModel):
    """Email and raw password."""

    email: str = Field(..., min_length=1, max_length=320, description="Login email")
    password: str = Field(..., min_length=1, description="Raw password")


class CredentialsRequest(BaseModel):
    """Request schema for POST /users and POST /login."""

    user: Credentials

    @model_validator(mode="before")
    @classmethod
    def wrap_flat_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and "user" not in data:
            return {"user": data}
        return data


class UserResponse(BaseModel):
    """Public view of an account (never includes the password hash)."""

    id: uuid.UUID
    email: str
    created_at: datetime
    updated_at: datetime
