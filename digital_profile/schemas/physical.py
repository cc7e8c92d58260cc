"""
Physical infrastructure Pydantic schemas.
"""
from pydantic import Field, field_validator

from digital_profile.schemas.common import ProfileRecordBase, ensure_choice
from digital_profile.utils.constants import FACILITY_TYPES


class FacilityCreate(ProfileRecordBase):
    facility: str
    population: int = Field(..., ge=0)

    @field_validator('facility')
    @classmethod
    def validate_facility(cls, v):
        return ensure_choice(v, FACILITY_TYPES, "facility type")
