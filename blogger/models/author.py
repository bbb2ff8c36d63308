"""
Author domain models and schemas.

Dependencies: pydantic
System role: Author API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreateAuthorRequest(BaseModel):
    """Request schema for creating an author."""

    name: str | None = Field(None, max_length=255, description="Display name")


class AuthorResponse(BaseModel):
    """Response schema for author operations."""

    id: uuid.UUID
    name: str | None
    created_at: datetime
    updated_at: datetime
