"""
Education Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class FormalEducationCreate(BaseModel):
    ward: str = Field(..., min_length=1, max_length=10)
    gender: str = Field(..., min_length=1, max_length=20)
    total: int = Field(0, ge=0)
    not_mentioned: int = Field(0, ge=0)
    currently_attending: int = Field(0, ge=0)
    previously_attended: int = Field(0, ge=0)
    never_attended: int = Field(0, ge=0)


class FormalEducationUpdate(BaseModel):
    """Partial update; only supplied fields change."""
    ward: Optional[str] = Field(None, min_length=1, max_length=10)
    gender: Optional[str] = Field(None, min_length=1, max_length=20)
    total: Optional[int] = Field(None, ge=0)
    not_mentioned: Optional[int] = Field(None, ge=0)
    currently_attending: Optional[int] = Field(None, ge=0)
    previously_attended: Optional[int] = Field(None, ge=0)
    never_attended: Optional[int] = Field(None, ge=0)


class FormalEducationRecord(FormalEducationCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FormalEducationWardSummary(BaseModel):
    ward: str
    total_count: int
    currently_attending_count: int
    previously_attended_count: int
    never_attended_count: int
