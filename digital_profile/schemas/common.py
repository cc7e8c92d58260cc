"""
Common Pydantic schemas shared across endpoints.
"""
from pydantic import BaseModel, Field
from typing import Iterable, Optional


def ensure_choice(value: Optional[str], choices: Iterable[str], label: str) -> Optional[str]:
    """Validate a categorical value; None passes through."""
    if value is None:
        return value
    if value not in choices:
        raise ValueError(f"Invalid {label}: {value}")
    return value


class ProfileRecordBase(BaseModel):
    """Base for admin payloads; ``id`` may be supplied or generated."""
    id: Optional[str] = Field(None, max_length=36, description="Record id (generated when omitted)")


class MutationResponse(BaseModel):
    """Result of create/update/delete procedures."""
    success: bool = True
    id: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    database: str


class ErrorResponse(BaseModel):
    """Body returned for typed procedure errors."""
    error: str
    code: str
    status_code: int
