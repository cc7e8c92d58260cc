"""
Demographics Pydantic schemas for request validation.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from digital_profile.schemas.common import ProfileRecordBase, ensure_choice
from digital_profile.utils.constants import (
    CASTE_TYPES,
    GENDERS,
    AGE_WISE_GROUPS,
    DECEASED_AGE_GROUPS,
    RELIGION_TYPES,
    OCCUPATION_TYPES,
    LANGUAGE_TYPES,
)


class CastePopulationCreate(ProfileRecordBase):
    caste_type: str
    male_population: int = Field(..., ge=0)
    female_population: int = Field(..., ge=0)

    @field_validator('caste_type')
    @classmethod
    def validate_caste_type(cls, v):
        return ensure_choice(v, CASTE_TYPES, "caste type")


class AgeWisePopulationCreate(ProfileRecordBase):
    age_group: str
    gender: str
    population: int = Field(0, ge=0)

    @field_validator('age_group')
    @classmethod
    def validate_age_group(cls, v):
        return ensure_choice(v, AGE_WISE_GROUPS, "age group")

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v):
        return ensure_choice(v, GENDERS, "gender")


class AgeGroupHouseheadCreate(ProfileRecordBase):
    age_group: str = Field(..., min_length=1, max_length=50)
    male_heads: int = Field(0, ge=0)
    female_heads: int = Field(0, ge=0)
    total_families: int = Field(0, ge=0)


class ReligionPopulationCreate(ProfileRecordBase):
    religion_type: str
    male_population: int = Field(0, ge=0)
    female_population: int = Field(0, ge=0)
    total_population: Optional[int] = Field(None, ge=0, description="Defaults to male + female")
    percentage: Optional[float] = Field(None, ge=0)

    @field_validator('religion_type')
    @classmethod
    def validate_religion_type(cls, v):
        return ensure_choice(v, RELIGION_TYPES, "religion type")


class FamilyMainOccupationCreate(ProfileRecordBase):
    occupation: str
    age_15_19: int = Field(0, ge=0)
    age_20_24: int = Field(0, ge=0)
    age_25_29: int = Field(0, ge=0)
    age_30_34: int = Field(0, ge=0)
    age_35_39: int = Field(0, ge=0)
    age_40_44: int = Field(0, ge=0)
    age_45_49: int = Field(0, ge=0)
    total_population: Optional[int] = Field(None, ge=0, description="Defaults to the sum of age bands")
    percentage: float = Field(0, ge=0)

    @field_validator('occupation')
    @classmethod
    def validate_occupation(cls, v):
        return ensure_choice(v, OCCUPATION_TYPES, "occupation")


class BirthCertificatePopulationCreate(ProfileRecordBase):
    ward_number: int = Field(..., ge=1)
    with_birth_certificate: int = Field(..., ge=0)
    without_birth_certificate: int = Field(..., ge=0)


class DeceasedPopulationCreate(ProfileRecordBase):
    age_group: str
    gender: str
    deceased_population: int = Field(0, ge=0)

    @field_validator('age_group')
    @classmethod
    def validate_age_group(cls, v):
        return ensure_choice(v, DECEASED_AGE_GROUPS, "age group")

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v):
        return ensure_choice(v, GENDERS, "gender")


class DisabilityByAgeCreate(ProfileRecordBase):
    age_group: str = Field(..., min_length=1, max_length=50)
    physical_disability: int = Field(0, ge=0)
    visual_impairment: int = Field(0, ge=0)
    hearing_impairment: int = Field(0, ge=0)
    deaf_mute: int = Field(0, ge=0)
    speech_hearing_combined: int = Field(0, ge=0)
    intellectual_disability: int = Field(0, ge=0)
    mental_psychosocial: int = Field(0, ge=0)
    autism: int = Field(0, ge=0)
    multiple_disabilities: int = Field(0, ge=0)
    other_disabilities: int = Field(0, ge=0)
    total: Optional[int] = Field(None, ge=0, description="Defaults to the sum of disability types")


class EconomicallyActivePopulationCreate(ProfileRecordBase):
    ward_number: str = Field(..., min_length=1, max_length=10)
    gender: str = Field(..., min_length=1, max_length=20)
    age_10_plus_total: int = Field(0, ge=0)
    economically_active_employed: int = Field(0, ge=0)
    economically_active_unemployed: int = Field(0, ge=0)
    household_work: int = Field(0, ge=0)
    economically_active_total: int = Field(0, ge=0)
    dependent_population: int = Field(0, ge=0)


class MotherTonguePopulationCreate(ProfileRecordBase):
    language_type: str
    population: int = Field(0, ge=0)
    percentage: float = Field(0, ge=0)

    @field_validator('language_type')
    @classmethod
    def validate_language_type(cls, v):
        return ensure_choice(v, LANGUAGE_TYPES, "language type")


class BirthplaceHouseholdsCreate(ProfileRecordBase):
    age_group: str = Field(..., min_length=1, max_length=50)
    total_population: int = Field(0, ge=0)
    nepal_born: int = Field(0, ge=0)
    born_in_district_municipality: int = Field(0, ge=0)
    born_in_district_other: int = Field(0, ge=0)
    born_in_district_total: int = Field(0, ge=0)
    born_other_district: int = Field(0, ge=0)
    born_abroad: int = Field(0, ge=0)
    birth_place_unknown: int = Field(0, ge=0)


class DemographicSummaryRecord(BaseModel):
    """Singleton demographic summary row."""
    id: str = "singleton"
    total_population: Optional[int] = None
    population_male: Optional[int] = None
    population_female: Optional[int] = None
    sex_ratio: Optional[float] = None
    annual_growth_rate: Optional[float] = None
    literacy_rate: Optional[float] = None
    total_households: Optional[int] = None
    average_household_size: Optional[float] = None
    population_density: Optional[float] = None
    data_year: Optional[str] = None
    data_year_english: Optional[str] = None

    class Config:
        from_attributes = True
