"""
Economics Pydantic schemas for request validation.
"""
from pydantic import Field, field_validator

from digital_profile.schemas.common import ProfileRecordBase, ensure_choice
from digital_profile.utils.constants import (
    FOREIGN_EMPLOYMENT_AGE_GROUPS,
    FOREIGN_EMPLOYMENT_GENDERS,
    COUNTRY_REGIONS,
)


class AgricultureFirmCountCreate(ProfileRecordBase):
    ward_number: int = Field(..., ge=1)
    count: int = Field(0, ge=0)


class ForeignEmploymentCountryCreate(ProfileRecordBase):
    age_group: str
    gender: str
    country: str
    population: int = Field(0, ge=0)
    total: int = Field(0, ge=0)

    @field_validator('age_group')
    @classmethod
    def validate_age_group(cls, v):
        return ensure_choice(v, FOREIGN_EMPLOYMENT_AGE_GROUPS, "age group")

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v):
        return ensure_choice(v, FOREIGN_EMPLOYMENT_GENDERS, "gender")

    @field_validator('country')
    @classmethod
    def validate_country(cls, v):
        return ensure_choice(v, COUNTRY_REGIONS, "country region")


class VeterinaryRepresentativeCreate(ProfileRecordBase):
    serial_number: int = Field(..., gt=0)
    name: str = Field(..., min_length=1)
    name_english: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    position_english: str = Field(..., min_length=1)
    contact_number: str = Field(..., min_length=1, max_length=20)
    branch: str = Field(..., min_length=1)
    branch_english: str = Field(..., min_length=1)
    remarks: str = ""


class AgricultureRepresentativeCreate(VeterinaryRepresentativeCreate):
    position_full: str = Field(..., min_length=1)
