"""
Education API endpoints.
"""
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from digital_profile.auth import CurrentUser, get_current_user
from digital_profile.config import settings
from digital_profile.database import get_db
from digital_profile.schemas.common import MutationResponse
from digital_profile.schemas.education import (
    FormalEducationCreate,
    FormalEducationUpdate,
    FormalEducationRecord,
    FormalEducationWardSummary,
)
from digital_profile.services.education import FormalEducationService

router = APIRouter()


@router.get("/formal-education", response_model=List[FormalEducationRecord])
def get_formal_education(
    ward: Optional[str] = Query(None),
    gender: Optional[str] = Query(None),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db)
):
    """
    Ward-wise formal education rows, ordered by ward and gender.

    - **ward**: Filter by ward
    - **gender**: Filter by gender
    - **limit** / **offset**: Pagination
    """
    return FormalEducationService(db).list_page(ward=ward, gender=gender, limit=limit, offset=offset)


@router.get("/formal-education/summary", response_model=List[FormalEducationWardSummary])
def get_formal_education_summary(db: Session = Depends(get_db)):
    return FormalEducationService(db).summary()


@router.get("/formal-education/{record_id}", response_model=Optional[FormalEducationRecord])
def get_formal_education_by_id(record_id: int, db: Session = Depends(get_db)):
    return FormalEducationService(db).get_by_id(record_id)


@router.post("/formal-education", response_model=FormalEducationRecord)
def create_formal_education(
    payload: FormalEducationCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return FormalEducationService(db).create(payload.model_dump(), user)


@router.post("/formal-education/bulk", response_model=List[FormalEducationRecord])
def create_many_formal_education(
    payload: List[FormalEducationCreate] = Body(...),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return FormalEducationService(db).create_many([item.model_dump() for item in payload], user)


@router.put("/formal-education/{record_id}", response_model=FormalEducationRecord)
def update_formal_education(
    record_id: int,
    payload: FormalEducationUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return FormalEducationService(db).update(record_id, payload.model_dump(exclude_unset=True), user)


@router.delete("/formal-education/{record_id}", response_model=MutationResponse)
def delete_formal_education(
    record_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return FormalEducationService(db).delete(record_id, user)
