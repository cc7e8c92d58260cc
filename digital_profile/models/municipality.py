"""
Municipality introduction SQLAlchemy models (terrain and settlements).
"""
from sqlalchemy import Column, Integer, String, Numeric
from digital_profile.database import Base
from digital_profile.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class MunicipalitySlope(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "municipality_slope"

    municipality_id = Column(Integer, nullable=False, index=True)
    slope_range_nepali = Column(String(100), nullable=False)
    slope_range_english = Column(String(100), nullable=False)
    area_sq_km = Column(Numeric(8, 2, asdecimal=False), nullable=False)
    area_percentage = Column(Numeric(5, 2, asdecimal=False), nullable=False)


class MunicipalityAspect(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "municipality_aspect"

    municipality_id = Column(Integer, nullable=False, index=True)
    direction_nepali = Column(String(100), nullable=False)
    direction_english = Column(String(100), nullable=False)
    area_sq_km = Column(Numeric(8, 2, asdecimal=False), nullable=False)
    area_percentage = Column(Numeric(5, 2, asdecimal=False), nullable=False)


class MunicipalityWardWiseSettlement(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """One row per named settlement."""
    __tablename__ = "municipality_ward_wise_settlement"

    municipality_id = Column(Integer, nullable=False, index=True)
    ward_number = Column(Integer, nullable=False)
    ward_number_nepali = Column(String(10), nullable=False)
    settlement_name = Column(String(200), nullable=False)
