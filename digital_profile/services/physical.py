"""
Physical infrastructure services.
"""
from typing import Any, Dict, Optional

from digital_profile.models.physical import MunicipalityFacilities
from digital_profile.services.base import ProfileDatasetService, procedure
from digital_profile.utils.aggregators import calculate_percentage, sum_field
from digital_profile.utils.constants import FACILITY_TYPES


class FacilitiesService(ProfileDatasetService):
    model = MunicipalityFacilities
    label = "municipality facilities data"
    unique_fields = ("facility",)
    conflict_message = "Data for facility type {facility} already exists"
    not_found_message = "Municipality facilities data not found"

    def order_by(self):
        return [MunicipalityFacilities.facility]

    def decorate(self, item):
        item["facility_display"] = FACILITY_TYPES.get(item["facility"], item["facility"])
        return item

    @procedure()
    def get_by_type(self, facility: str) -> Optional[Dict[str, Any]]:
        return self.get_first(facility=facility)

    @procedure("Failed to retrieve municipality facilities summary")
    def summary(self) -> Dict[str, Any]:
        rows = self.get_all()
        total_population = sum_field(rows, "population")
        return {
            "total_facilities": len(rows),
            "total_population": total_population,
            "facilities": [
                {
                    "facility": row["facility"],
                    "facility_display": row["facility_display"],
                    "population": row["population"],
                    "percentage": calculate_percentage(row["population"], total_population),
                }
                for row in rows
            ],
        }
