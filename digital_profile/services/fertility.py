"""
Fertility services - place of delivery by ward.
"""
from typing import Any, Dict, List

import pandas as pd

from digital_profile.models.fertility import WardWiseDeliveryPlace
from digital_profile.services.base import ProfileDatasetService, procedure
from digital_profile.utils.aggregators import aggregate_by_group, add_percentage_column, records
from digital_profile.utils.constants import DELIVERY_PLACE_TYPES


class DeliveryPlaceService(ProfileDatasetService):
    model = WardWiseDeliveryPlace
    label = "ward-wise delivery places data"
    unique_fields = ("ward_number", "delivery_place")
    conflict_message = "Data for Ward Number {ward_number} and delivery place {delivery_place} already exists"
    not_found_message = "Ward-wise delivery places data not found"
    legacy_table = "ward_wise_delivery_places"
    legacy_order_by = "ward_number, delivery_place"

    def order_by(self):
        return [WardWiseDeliveryPlace.ward_number, WardWiseDeliveryPlace.delivery_place]

    def decorate(self, item):
        item["delivery_place_display"] = DELIVERY_PLACE_TYPES.get(item["delivery_place"], item["delivery_place"])
        return item

    @procedure()
    def get_by_ward(self, ward_number: int) -> List[Dict[str, Any]]:
        return self.get_all(ward_number=ward_number)

    @procedure("Failed to retrieve ward-wise delivery places summary")
    def summary(self) -> Dict[str, Any]:
        """Births per delivery place across all wards with their share."""
        rows = self.get_all()
        if not rows:
            return {"total_population": 0, "delivery_places": []}

        df = pd.DataFrame(rows)[["delivery_place", "population"]]
        df = aggregate_by_group(df, ["delivery_place"], ["population"])
        df = df.rename(columns={"population": "total_population"})
        df["delivery_place_display"] = df["delivery_place"].map(
            lambda place: DELIVERY_PLACE_TYPES.get(place, place)
        )
        df = add_percentage_column(df, "total_population")

        return {
            "total_population": int(df["total_population"].sum()),
            "delivery_places": records(df),
        }
