"""
Education service - ward-wise formal education.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func

from digital_profile.auth import CurrentUser, ensure_superadmin
from digital_profile.exceptions import NotFoundError
from digital_profile.models.education import WardWiseFormalEducation
from digital_profile.services.base import ProfileDatasetService, procedure

logger = logging.getLogger(__name__)


class FormalEducationService(ProfileDatasetService):
    """
    Formal education rows use integer ids, paginated listing and partial
    updates, so the mutations here differ from the generic ones.
    """

    model = WardWiseFormalEducation
    label = "formal education data"
    not_found_message = "Formal education data not found"

    def order_by(self):
        return [WardWiseFormalEducation.ward, WardWiseFormalEducation.gender]

    @procedure()
    def list_page(
        self,
        ward: Optional[str] = None,
        gender: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[Dict[str, Any]]:
        query = self.db.query(WardWiseFormalEducation)
        if ward:
            query = query.filter(WardWiseFormalEducation.ward == ward)
        if gender:
            query = query.filter(WardWiseFormalEducation.gender == gender)

        results = query.order_by(*self.order_by()).offset(offset).limit(limit).all()
        return [self.serialize(record) for record in results]

    @procedure()
    def get_by_id(self, record_id: int) -> Optional[Dict[str, Any]]:
        record = self.get_record(record_id)
        return self.serialize(record) if record is not None else None

    @procedure("Failed to create entry")
    def create(self, payload: Dict[str, Any], user: Optional[CurrentUser]) -> Dict[str, Any]:
        ensure_superadmin(user, "create", self.label)
        record = WardWiseFormalEducation(**payload)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return self.serialize(record)

    @procedure("Failed to create entries")
    def create_many(self, payloads: List[Dict[str, Any]], user: Optional[CurrentUser]) -> List[Dict[str, Any]]:
        ensure_superadmin(user, "create", self.label)
        created = [WardWiseFormalEducation(**payload) for payload in payloads]
        self.db.add_all(created)
        self.db.commit()
        for record in created:
            self.db.refresh(record)
        logger.info("Created %d %s rows", len(created), self.label)
        return [self.serialize(record) for record in created]

    @procedure("Failed to update entry")
    def update(self, record_id: int, payload: Dict[str, Any], user: Optional[CurrentUser]) -> Dict[str, Any]:
        ensure_superadmin(user, "update", self.label)
        record = self.get_record(record_id)
        if record is None:
            raise NotFoundError(self.not_found_message)

        for field, value in payload.items():
            setattr(record, field, value)
        self.db.commit()
        self.db.refresh(record)
        return self.serialize(record)

    @procedure()
    def summary(self) -> List[Dict[str, Any]]:
        """Attendance sums grouped by ward."""
        results = self.db.query(
            WardWiseFormalEducation.ward,
            func.sum(WardWiseFormalEducation.total).label('total_count'),
            func.sum(WardWiseFormalEducation.currently_attending).label('currently_attending_count'),
            func.sum(WardWiseFormalEducation.previously_attended).label('previously_attended_count'),
            func.sum(WardWiseFormalEducation.never_attended).label('never_attended_count'),
        ).group_by(
            WardWiseFormalEducation.ward
        ).order_by(
            WardWiseFormalEducation.ward
        ).all()

        return [
            {
                "ward": r.ward,
                "total_count": int(r.total_count or 0),
                "currently_attending_count": int(r.currently_attending_count or 0),
                "previously_attended_count": int(r.previously_attended_count or 0),
                "never_attended_count": int(r.never_attended_count or 0),
            }
            for r in results
        ]
