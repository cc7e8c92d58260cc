"""
Economics API endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from digital_profile.database import get_db
from digital_profile.routers.crud import register_mutations
from digital_profile.schemas.economics import (
    AgricultureFirmCountCreate,
    ForeignEmploymentCountryCreate,
    VeterinaryRepresentativeCreate,
    AgricultureRepresentativeCreate,
)
from digital_profile.services.economics import (
    AgricultureFirmCountService,
    ForeignEmploymentService,
    VeterinaryRepresentativeService,
    AgricultureRepresentativeService,
)

router = APIRouter()


# Agriculture firms

agriculture_firm_router = APIRouter()


@agriculture_firm_router.get("")
def get_agriculture_firm_count(
    ward_number: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    return AgricultureFirmCountService(db).get_all(ward_number=ward_number)


@agriculture_firm_router.get("/summary")
def get_agriculture_firm_summary(db: Session = Depends(get_db)):
    """Totals plus the wards holding the highest and lowest counts."""
    return AgricultureFirmCountService(db).summary()


@agriculture_firm_router.get("/by-ward/{ward_number}")
def get_agriculture_firm_by_ward(ward_number: int, db: Session = Depends(get_db)):
    return AgricultureFirmCountService(db).get_all(ward_number=ward_number)


register_mutations(
    agriculture_firm_router, AgricultureFirmCountService,
    AgricultureFirmCountCreate, "agriculture firm count"
)


# Foreign employment

foreign_employment_router = APIRouter()


@foreign_employment_router.get("")
def get_foreign_employment_countries(
    age_group: Optional[str] = Query(None),
    gender: Optional[str] = Query(None, pattern="^(MALE|FEMALE|TOTAL)$"),
    country: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return ForeignEmploymentService(db).get_all(age_group=age_group, gender=gender, country=country)


@foreign_employment_router.get("/summary")
def get_foreign_employment_summary(db: Session = Depends(get_db)):
    return ForeignEmploymentService(db).summary()


@foreign_employment_router.get("/by-group")
def get_foreign_employment_by_group(
    age_group: Optional[str] = Query(None),
    gender: Optional[str] = Query(None, pattern="^(MALE|FEMALE|TOTAL)$"),
    db: Session = Depends(get_db)
):
    """Rows for an age group and/or gender, ordered by country."""
    return ForeignEmploymentService(db).get_by_group(age_group=age_group, gender=gender)


register_mutations(
    foreign_employment_router, ForeignEmploymentService,
    ForeignEmploymentCountryCreate, "foreign employment"
)


# Representatives

def _representative_router(service_class, payload_schema, label: str) -> APIRouter:
    representative_router = APIRouter()

    @representative_router.get("")
    def get_representatives(
        serial_number: Optional[int] = Query(None, gt=0),
        name: Optional[str] = Query(None, description="Substring match on name"),
        position: Optional[str] = Query(None, description="Substring match on position"),
        branch: Optional[str] = Query(None, description="Substring match on branch"),
        db: Session = Depends(get_db)
    ):
        return service_class(db).search(
            serial_number=serial_number,
            name=name,
            position=position,
            branch=branch
        )

    @representative_router.get("/summary")
    def get_representatives_summary(db: Session = Depends(get_db)):
        return service_class(db).summary()

    @representative_router.get("/by-serial/{serial_number}")
    def get_representative_by_serial(serial_number: int, db: Session = Depends(get_db)):
        return service_class(db).get_by_serial(serial_number)

    return register_mutations(representative_router, service_class, payload_schema, label)


veterinary_router = _representative_router(
    VeterinaryRepresentativeService, VeterinaryRepresentativeCreate, "veterinary representative"
)
agriculture_representative_router = _representative_router(
    AgricultureRepresentativeService, AgricultureRepresentativeCreate, "agriculture representative"
)


router.include_router(agriculture_firm_router, prefix="/agriculture-firm-count")
router.include_router(foreign_employment_router, prefix="/foreign-employment-countries")
router.include_router(veterinary_router, prefix="/veterinary-representatives")
router.include_router(agriculture_representative_router, prefix="/agriculture-representatives")
