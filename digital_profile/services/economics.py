"""
Economics services - agriculture, foreign employment and staff registers.
"""
import logging
from typing import Any, Dict, List, Optional

import pandas as pd
from sqlalchemy import func

from digital_profile.models.economics import (
    WardWiseAgricultureFirmCount,
    WardWiseForeignEmploymentCountries,
    MunicipalityWideVeterinaryRepresentative,
    MunicipalityWideAgricultureRepresentative,
)
from digital_profile.services.base import ProfileDatasetService, procedure
from digital_profile.utils.aggregators import (
    find_extremes,
    sum_field,
    aggregate_by_group,
    add_percentage_column,
    records,
)
from digital_profile.utils.constants import (
    VETERINARY_DEFAULT_DEPARTMENT,
    AGRICULTURE_DEFAULT_DEPARTMENT,
    AGRICULTURE_DEFAULT_POSITION,
    ward_label,
)

logger = logging.getLogger(__name__)


class AgricultureFirmCountService(ProfileDatasetService):
    model = WardWiseAgricultureFirmCount
    label = "ward-wise agriculture firm count data"
    unique_fields = ("ward_number",)
    conflict_message = "Data for ward {ward_number} already exists"
    not_found_message = "Ward-wise agriculture firm count data not found"
    legacy_table = "ward_wise_agriculture_firm_count"
    legacy_order_by = "ward_number"

    def order_by(self):
        return [WardWiseAgricultureFirmCount.ward_number]

    @procedure("Failed to retrieve ward-wise agriculture firm count summary")
    def summary(self) -> Dict[str, Any]:
        rows = self.get_all()
        highest, lowest = find_extremes(rows, "count")

        return {
            "total_wards": len(rows),
            "total_agricultural_groups": sum_field(rows, "count"),
            "highest_count_ward": ward_label(highest["ward_number"]) if highest else None,
            "highest_count": highest["count"] if highest else 0,
            "lowest_count_ward": ward_label(lowest["ward_number"]) if lowest else None,
            "lowest_count": lowest["count"] if lowest else 0,
        }


class ForeignEmploymentService(ProfileDatasetService):
    model = WardWiseForeignEmploymentCountries
    label = "ward-wise foreign employment countries data"
    unique_fields = ("age_group", "gender", "country")
    conflict_message = "Data for this age group, gender and country already exists"
    not_found_message = "Ward-wise foreign employment countries data not found"
    legacy_table = "ward_wise_foreign_employment_countries"
    legacy_order_by = "age_group, gender, country"

    def order_by(self):
        return [
            WardWiseForeignEmploymentCountries.age_group,
            WardWiseForeignEmploymentCountries.gender,
            WardWiseForeignEmploymentCountries.country,
        ]

    @procedure()
    def get_by_group(self, age_group: Optional[str] = None, gender: Optional[str] = None) -> List[Dict[str, Any]]:
        rows = self.get_all(age_group=age_group, gender=gender)
        return sorted(rows, key=lambda row: row["country"])

    @procedure("Failed to retrieve foreign employment summary")
    def summary(self) -> Dict[str, Any]:
        """Population per destination over the TOTAL age group rows."""
        rows = self.get_all(age_group="TOTAL")
        if not rows:
            return {"total_population": 0, "country_count": 0, "countries": []}

        df = aggregate_by_group(pd.DataFrame(rows)[["country", "population"]], ["country"], ["population"])
        df = df.rename(columns={"population": "total_population"})
        df = df.sort_values("total_population", ascending=False, kind="stable")
        df = add_percentage_column(df, "total_population")

        return {
            "total_population": int(df["total_population"].sum()),
            "country_count": len(df),
            "countries": records(df),
        }


class RepresentativeService(ProfileDatasetService):
    """Staff registers keyed by serial number, with substring search."""

    unique_fields = ("serial_number",)
    conflict_message = "Representative with serial number {serial_number} already exists"
    not_found_message = "Representative not found"
    default_department = ("", "")

    def order_by(self):
        return [self.model.serial_number]

    @procedure()
    def search(
        self,
        serial_number: Optional[int] = None,
        name: Optional[str] = None,
        position: Optional[str] = None,
        branch: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        query = self.db.query(self.model)
        if serial_number:
            query = query.filter(self.model.serial_number == serial_number)
        if name:
            query = query.filter(self.model.name.like(f"%{name}%"))
        if position:
            query = query.filter(self.model.position.like(f"%{position}%"))
        if branch:
            query = query.filter(self.model.branch.like(f"%{branch}%"))
        return [self.serialize(record) for record in query.order_by(*self.order_by()).all()]

    @procedure()
    def get_by_serial(self, serial_number: int) -> Optional[Dict[str, Any]]:
        record = self.db.query(self.model).filter(self.model.serial_number == serial_number).first()
        return self.serialize(record) if record is not None else None

    def _position_counts(self) -> List[Dict[str, Any]]:
        results = self.db.query(
            self.model.position,
            self.model.position_english,
            func.count(self.model.id).label('count')
        ).group_by(
            self.model.position,
            self.model.position_english
        ).order_by(
            self.model.position
        ).all()

        return [
            {"position": r.position, "position_english": r.position_english, "count": int(r.count or 0)}
            for r in results
        ]

    def _department(self):
        first = self.db.query(self.model).order_by(*self.order_by()).first()
        if first is None:
            return self.default_department
        return first.branch, first.branch_english

    @procedure("Failed to retrieve representatives summary")
    def summary(self) -> Dict[str, Any]:
        total_staff = self.db.query(func.count(self.model.id)).scalar() or 0
        department, department_english = self._department()
        return {
            "total_staff": int(total_staff),
            "department": department,
            "department_english": department_english,
            "positions": self._position_counts(),
        }


class VeterinaryRepresentativeService(RepresentativeService):
    model = MunicipalityWideVeterinaryRepresentative
    label = "veterinary representatives data"
    not_found_message = "Veterinary representative not found"
    default_department = VETERINARY_DEFAULT_DEPARTMENT


class AgricultureRepresentativeService(RepresentativeService):
    model = MunicipalityWideAgricultureRepresentative
    label = "agriculture representatives data"
    not_found_message = "Agriculture representative not found"
    default_department = AGRICULTURE_DEFAULT_DEPARTMENT

    @procedure("Failed to retrieve agriculture representatives summary")
    def summary(self) -> Dict[str, Any]:
        result = super().summary()

        first = self.db.query(self.model).order_by(*self.order_by()).first()
        if first is None:
            position_type, position_type_english = AGRICULTURE_DEFAULT_POSITION
        else:
            position_type, position_type_english = first.position_full, first.position_english

        result["position_type"] = position_type
        result["position_type_english"] = position_type_english
        return result
