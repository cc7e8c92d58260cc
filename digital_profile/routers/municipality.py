"""
Municipality introduction API endpoints (read-only).
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from digital_profile.config import settings
from digital_profile.database import get_db
from digital_profile.schemas.municipality import SlopeResponse, AspectResponse, SettlementResponse
from digital_profile.services.municipality import MunicipalityIntroductionService

router = APIRouter()


@router.get("/slope", response_model=SlopeResponse)
def get_municipality_slope(
    municipality_id: int = Query(settings.MUNICIPALITY_ID),
    db: Session = Depends(get_db)
):
    return MunicipalityIntroductionService(db).get_slope(municipality_id)


@router.get("/aspect", response_model=AspectResponse)
def get_municipality_aspect(
    municipality_id: int = Query(settings.MUNICIPALITY_ID),
    db: Session = Depends(get_db)
):
    """Area by aspect direction with the largest and smallest directions."""
    return MunicipalityIntroductionService(db).get_aspect(municipality_id)


@router.get("/settlements", response_model=SettlementResponse)
def get_ward_wise_settlements(
    municipality_id: int = Query(settings.MUNICIPALITY_ID),
    db: Session = Depends(get_db)
):
    return MunicipalityIntroductionService(db).get_settlements(municipality_id)
