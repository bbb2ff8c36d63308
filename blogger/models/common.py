"""
Common response models.

Dependencies: pydantic
System role: Shared API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    err: str = Field(description="Error message")
