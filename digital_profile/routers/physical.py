"""
Physical infrastructure API endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from digital_profile.database import get_db
from digital_profile.routers.crud import register_mutations
from digital_profile.schemas.physical import FacilityCreate
from digital_profile.services.physical import FacilitiesService

router = APIRouter()

facilities_router = APIRouter()


@facilities_router.get("")
def get_facilities(
    facility: Optional[str] = Query(None, description="Facility type, e.g. MOBILE_PHONE"),
    db: Session = Depends(get_db)
):
    return FacilitiesService(db).get_all(facility=facility)


@facilities_router.get("/summary")
def get_facilities_summary(db: Session = Depends(get_db)):
    return FacilitiesService(db).summary()


@facilities_router.get("/by-type/{facility}")
def get_facility_by_type(facility: str, db: Session = Depends(get_db)):
    """Single facility row, or null."""
    return FacilitiesService(db).get_by_type(facility)


register_mutations(facilities_router, FacilitiesService, FacilityCreate, "municipality facility")

router.include_router(facilities_router, prefix="/facilities")
