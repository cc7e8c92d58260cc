"""
Fertility API endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from digital_profile.database import get_db
from digital_profile.routers.crud import register_mutations
from digital_profile.schemas.fertility import DeliveryPlaceCreate
from digital_profile.services.fertility import DeliveryPlaceService

router = APIRouter()

delivery_place_router = APIRouter()


@delivery_place_router.get("")
def get_delivery_places(
    ward_number: Optional[int] = Query(None, ge=1),
    delivery_place: Optional[str] = Query(None, description="Place key, e.g. HOUSE"),
    db: Session = Depends(get_db)
):
    """Rows ordered by ward, then delivery place."""
    return DeliveryPlaceService(db).get_all(ward_number=ward_number, delivery_place=delivery_place)


@delivery_place_router.get("/summary")
def get_delivery_places_summary(db: Session = Depends(get_db)):
    return DeliveryPlaceService(db).summary()


@delivery_place_router.get("/by-ward/{ward_number}")
def get_delivery_places_by_ward(ward_number: int, db: Session = Depends(get_db)):
    return DeliveryPlaceService(db).get_by_ward(ward_number)


register_mutations(delivery_place_router, DeliveryPlaceService, DeliveryPlaceCreate, "ward-wise delivery place")

router.include_router(delivery_place_router, prefix="/delivery-place")
