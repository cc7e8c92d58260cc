"""
Demographics API endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from digital_profile.config import settings
from digital_profile.database import get_db
from digital_profile.routers.crud import register_mutations
from digital_profile.schemas.demographics import (
    CastePopulationCreate,
    AgeWisePopulationCreate,
    AgeGroupHouseheadCreate,
    ReligionPopulationCreate,
    FamilyMainOccupationCreate,
    BirthCertificatePopulationCreate,
    DeceasedPopulationCreate,
    DisabilityByAgeCreate,
    EconomicallyActivePopulationCreate,
    MotherTonguePopulationCreate,
    BirthplaceHouseholdsCreate,
    DemographicSummaryRecord,
)
from digital_profile.services.demographics import (
    CastePopulationService,
    AgeWisePopulationService,
    AgeGroupHouseheadService,
    ReligionPopulationService,
    FamilyMainOccupationService,
    BirthCertificatePopulationService,
    DeceasedPopulationService,
    DisabilityByAgeService,
    EconomicallyActivePopulationService,
    DemographicSummaryService,
    WardDemographicsService,
    MotherTonguePopulationService,
    BirthplaceHouseholdsService,
)

router = APIRouter()


# Caste population

caste_router = APIRouter()


@caste_router.get("")
def get_caste_population(
    caste_type: Optional[str] = Query(None, description="Filter by caste type"),
    db: Session = Depends(get_db)
):
    """Caste rows ordered by total population, largest first."""
    return CastePopulationService(db).get_all(caste_type=caste_type)


@caste_router.get("/summary")
def get_caste_population_summary(db: Session = Depends(get_db)):
    return CastePopulationService(db).summary()


@caste_router.get("/by-caste/{caste_type}")
def get_caste_population_by_caste(caste_type: str, db: Session = Depends(get_db)):
    return CastePopulationService(db).get_by_caste(caste_type)


register_mutations(caste_router, CastePopulationService, CastePopulationCreate, "caste population")


# Age-wise population

age_wise_router = APIRouter()


@age_wise_router.get("")
def get_age_wise_population(
    age_group: Optional[str] = Query(None, description="Five-year band, e.g. AGE_0_4"),
    gender: Optional[str] = Query(None, pattern="^(MALE|FEMALE|OTHER)$"),
    db: Session = Depends(get_db)
):
    return AgeWisePopulationService(db).get_all(age_group=age_group, gender=gender)


@age_wise_router.get("/summary")
def get_age_wise_population_summary(db: Session = Depends(get_db)):
    return AgeWisePopulationService(db).summary()


register_mutations(age_wise_router, AgeWisePopulationService, AgeWisePopulationCreate, "age-wise population")


# Household head gender

househead_router = APIRouter()


@househead_router.get("")
def get_househead_by_age_group(
    age_group: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return AgeGroupHouseheadService(db).get_all(age_group=age_group)


@househead_router.get("/summary")
def get_househead_summary(db: Session = Depends(get_db)):
    """Household head totals, excluding the aggregate row."""
    return AgeGroupHouseheadService(db).summary()


@househead_router.get("/by-group/{age_group}")
def get_househead_by_group(age_group: str, db: Session = Depends(get_db)):
    """Single age group row, or null."""
    return AgeGroupHouseheadService(db).get_first(age_group=age_group)


register_mutations(househead_router, AgeGroupHouseheadService, AgeGroupHouseheadCreate, "household head")


# Religion population

religion_router = APIRouter()


@religion_router.get("")
def get_religion_population(
    religion_type: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return ReligionPopulationService(db).get_all(religion_type=religion_type)


@religion_router.get("/summary")
def get_religion_population_summary(db: Session = Depends(get_db)):
    return ReligionPopulationService(db).summary()


@religion_router.get("/by-religion/{religion_type}")
def get_religion_population_by_religion(religion_type: str, db: Session = Depends(get_db)):
    return ReligionPopulationService(db).get_all(religion_type=religion_type)


register_mutations(religion_router, ReligionPopulationService, ReligionPopulationCreate, "religion population")


# Family main occupation

occupation_router = APIRouter()


@occupation_router.get("")
def get_family_main_occupation(
    occupation: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return FamilyMainOccupationService(db).get_all(occupation=occupation)


@occupation_router.get("/summary")
def get_family_main_occupation_summary(db: Session = Depends(get_db)):
    return FamilyMainOccupationService(db).summary()


register_mutations(occupation_router, FamilyMainOccupationService, FamilyMainOccupationCreate, "family main occupation")


# Birth certificates

birth_certificate_router = APIRouter()


@birth_certificate_router.get("")
def get_birth_certificate_population(
    ward_number: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    return BirthCertificatePopulationService(db).get_all(ward_number=ward_number)


@birth_certificate_router.get("/summary")
def get_birth_certificate_summary(db: Session = Depends(get_db)):
    return BirthCertificatePopulationService(db).summary()


@birth_certificate_router.get("/by-ward/{ward_number}")
def get_birth_certificate_by_ward(ward_number: int, db: Session = Depends(get_db)):
    return BirthCertificatePopulationService(db).get_all(ward_number=ward_number)


register_mutations(
    birth_certificate_router, BirthCertificatePopulationService,
    BirthCertificatePopulationCreate, "birth certificate population"
)


# Deceased population

deceased_router = APIRouter()


@deceased_router.get("")
def get_deceased_population(
    age_group: Optional[str] = Query(None),
    gender: Optional[str] = Query(None, pattern="^(MALE|FEMALE|OTHER)$"),
    db: Session = Depends(get_db)
):
    return DeceasedPopulationService(db).get_all(age_group=age_group, gender=gender)


@deceased_router.get("/summary")
def get_deceased_population_summary(db: Session = Depends(get_db)):
    return DeceasedPopulationService(db).summary()


register_mutations(deceased_router, DeceasedPopulationService, DeceasedPopulationCreate, "deceased population")


# Disability by age

disability_router = APIRouter()


@disability_router.get("")
def get_disability_by_age(
    age_group: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return DisabilityByAgeService(db).get_all(age_group=age_group)


@disability_router.get("/summary")
def get_disability_summary(db: Session = Depends(get_db)):
    return DisabilityByAgeService(db).summary()


@disability_router.get("/by-age-group/{age_group}")
def get_disability_by_age_group(age_group: str, db: Session = Depends(get_db)):
    """Single age group row, or null."""
    return DisabilityByAgeService(db).get_first(age_group=age_group)


register_mutations(disability_router, DisabilityByAgeService, DisabilityByAgeCreate, "disability by age")


# Economically active population

economically_active_router = APIRouter()


@economically_active_router.get("")
def get_economically_active_population(
    ward_number: Optional[str] = Query(None),
    gender: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return EconomicallyActivePopulationService(db).get_all(ward_number=ward_number, gender=gender)


@economically_active_router.get("/summary")
def get_economically_active_summary(db: Session = Depends(get_db)):
    return EconomicallyActivePopulationService(db).summary()


@economically_active_router.get("/by-ward/{ward_number}")
def get_economically_active_by_ward(ward_number: str, db: Session = Depends(get_db)):
    return EconomicallyActivePopulationService(db).get_all(ward_number=ward_number)


register_mutations(
    economically_active_router, EconomicallyActivePopulationService,
    EconomicallyActivePopulationCreate, "economically active population"
)


# Mother tongue population

mother_tongue_router = APIRouter()


@mother_tongue_router.get("")
def get_mother_tongue_population(
    language_type: Optional[str] = Query(None, description="Language key, e.g. NEPALI"),
    db: Session = Depends(get_db)
):
    """Languages ordered by population, largest first."""
    return MotherTonguePopulationService(db).get_all(language_type=language_type)


@mother_tongue_router.get("/summary")
def get_mother_tongue_summary(db: Session = Depends(get_db)):
    return MotherTonguePopulationService(db).summary()


register_mutations(
    mother_tongue_router, MotherTonguePopulationService,
    MotherTonguePopulationCreate, "mother tongue population"
)


# Birthplace households

birthplace_router = APIRouter()


@birthplace_router.get("")
def get_birthplace_households(
    age_group: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return BirthplaceHouseholdsService(db).get_all(age_group=age_group)


@birthplace_router.get("/summary")
def get_birthplace_households_summary(db: Session = Depends(get_db)):
    """Age group rows without the aggregate row."""
    return BirthplaceHouseholdsService(db).summary()


@birthplace_router.get("/by-age-group/{age_group}")
def get_birthplace_households_by_age_group(age_group: str, db: Session = Depends(get_db)):
    return BirthplaceHouseholdsService(db).get_all(age_group=age_group)


register_mutations(
    birthplace_router, BirthplaceHouseholdsService,
    BirthplaceHouseholdsCreate, "birthplace households"
)


# Demographic summary and ward demographics (read-only)

@router.get("/summary", response_model=Optional[DemographicSummaryRecord])
def get_demographic_summary(db: Session = Depends(get_db)):
    """The singleton demographic summary, or null."""
    return DemographicSummaryService(db).get()


@router.get("/ward-demographics")
def get_ward_demographics(
    municipality_id: int = Query(settings.MUNICIPALITY_ID),
    db: Session = Depends(get_db)
):
    return WardDemographicsService(db).get(municipality_id)


@router.get("/ward-demographics/summary")
def get_ward_demographics_summary(
    municipality_id: int = Query(settings.MUNICIPALITY_ID),
    db: Session = Depends(get_db)
):
    return WardDemographicsService(db).summary(municipality_id)


@router.get("/ward-demographics/table")
def get_ward_table(
    municipality_id: int = Query(settings.MUNICIPALITY_ID),
    db: Session = Depends(get_db)
):
    return WardDemographicsService(db).ward_table(municipality_id)


router.include_router(caste_router, prefix="/caste-population")
router.include_router(age_wise_router, prefix="/age-wise-population")
router.include_router(househead_router, prefix="/househead-gender")
router.include_router(religion_router, prefix="/religion-population")
router.include_router(occupation_router, prefix="/main-occupation")
router.include_router(birth_certificate_router, prefix="/birth-certificate-population")
router.include_router(deceased_router, prefix="/deceased-population")
router.include_router(disability_router, prefix="/disability-by-age")
router.include_router(economically_active_router, prefix="/economically-active-population")
router.include_router(mother_tongue_router, prefix="/mother-tongue-population")
router.include_router(birthplace_router, prefix="/birthplace-households")
