"""
Economics SQLAlchemy models.
"""
from sqlalchemy import Column, Integer, String, Text, UniqueConstraint
from digital_profile.database import Base
from digital_profile.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class WardWiseAgricultureFirmCount(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Registered agricultural groups/firms per ward."""
    __tablename__ = "ward_wise_agriculture_firm_count"

    ward_number = Column(Integer, nullable=False, unique=True, index=True)
    count = Column(Integer, nullable=False, default=0)


class WardWiseForeignEmploymentCountries(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """
    Population abroad by destination region, age group and gender.

    Rows with age_group 'TOTAL' hold the per-region aggregates.
    """
    __tablename__ = "ward_wise_foreign_employment_countries"

    age_group = Column(String(50), nullable=False)
    gender = Column(String(20), nullable=False)
    country = Column(String(50), nullable=False)
    population = Column(Integer, nullable=False, default=0)
    total = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint('age_group', 'gender', 'country', name='uq_foreign_employment_group_gender_country'),
    )


class MunicipalityWideVeterinaryRepresentative(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "municipality_wide_veterinary_representatives"

    serial_number = Column(Integer, nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    name_english = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    position_english = Column(String(255), nullable=False)
    contact_number = Column(String(20), nullable=False)
    branch = Column(String(100), nullable=False)
    branch_english = Column(String(100), nullable=False)
    remarks = Column(Text, default="")


class MunicipalityWideAgricultureRepresentative(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "municipality_wide_agriculture_representatives"

    serial_number = Column(Integer, nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    name_english = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    position_full = Column(String(255), nullable=False)
    position_english = Column(String(255), nullable=False)
    contact_number = Column(String(20), nullable=False)
    branch = Column(String(100), nullable=False)
    branch_english = Column(String(100), nullable=False)
    remarks = Column(Text, default="")
