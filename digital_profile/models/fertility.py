"""
Fertility SQLAlchemy models.
"""
from sqlalchemy import Column, Integer, String, UniqueConstraint
from digital_profile.database import Base
from digital_profile.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class WardWiseDeliveryPlace(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Births per ward by place of delivery."""
    __tablename__ = "ward_wise_delivery_places"

    ward_number = Column(Integer, nullable=False, index=True)
    delivery_place = Column(String(50), nullable=False)
    population = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint('ward_number', 'delivery_place', name='uq_delivery_place_ward_place'),
    )

    def __repr__(self):
        return f"<WardWiseDeliveryPlace(ward={self.ward_number}, place={self.delivery_place}, population={self.population})>"
