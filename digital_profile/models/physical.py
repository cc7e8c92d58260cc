"""
Physical infrastructure SQLAlchemy models.
"""
from sqlalchemy import Column, Integer, String
from digital_profile.database import Base
from digital_profile.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class MunicipalityFacilities(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Population with access to each household facility."""
    __tablename__ = "municipality_facilities"

    facility = Column(String(40), nullable=False, unique=True)
    population = Column(Integer, nullable=False, default=0)
