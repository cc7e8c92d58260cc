"""
Fertility Pydantic schemas.
"""
from pydantic import Field, field_validator

from digital_profile.schemas.common import ProfileRecordBase, ensure_choice
from digital_profile.utils.constants import DELIVERY_PLACE_TYPES


class DeliveryPlaceCreate(ProfileRecordBase):
    ward_number: int = Field(..., ge=1)
    delivery_place: str
    population: int = Field(0, ge=0)

    @field_validator('delivery_place')
    @classmethod
    def validate_delivery_place(cls, v):
        return ensure_choice(v, DELIVERY_PLACE_TYPES, "delivery place")
