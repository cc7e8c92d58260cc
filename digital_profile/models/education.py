"""
Education SQLAlchemy models.
"""
from sqlalchemy import Column, Integer, String, Index
from digital_profile.database import Base
from digital_profile.models.mixins import TimestampMixin


class WardWiseFormalEducation(TimestampMixin, Base):
    """
    School attendance status per ward and gender.

    Unlike the other profile tables this one uses an autoincrement id.
    """
    __tablename__ = "ward_wise_formal_education"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    ward = Column(String(10), nullable=False)
    gender = Column(String(20), nullable=False)
    total = Column(Integer, nullable=False, default=0)
    not_mentioned = Column(Integer, nullable=False, default=0)
    currently_attending = Column(Integer, nullable=False, default=0)
    previously_attended = Column(Integer, nullable=False, default=0)
    never_attended = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index('idx_formal_education_ward_gender', 'ward', 'gender'),
    )

    def __repr__(self):
        return f"<WardWiseFormalEducation(id={self.id}, ward={self.ward}, gender={self.gender}, total={self.total})>"
