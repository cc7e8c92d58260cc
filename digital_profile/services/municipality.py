"""
Municipality introduction services - slope, aspect and settlements.
"""
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from digital_profile.models.municipality import (
    MunicipalitySlope,
    MunicipalityAspect,
    MunicipalityWardWiseSettlement,
)
from digital_profile.services.base import procedure
from digital_profile.utils.constants import (
    SLOPE_COLUMN_HEADERS,
    ASPECT_COLUMN_HEADERS,
    SETTLEMENT_COLUMN_HEADERS,
)


def _extreme(row) -> Dict[str, Any]:
    if row is None:
        return {"direction": "", "direction_english": "", "area_sq_km": 0.0, "area_percentage": 0.0}
    return {
        "direction": row["direction_nepali"],
        "direction_english": row["direction_english"],
        "area_sq_km": row["area_sq_km"],
        "area_percentage": row["area_percentage"],
    }


class MunicipalityIntroductionService:
    """Read-only terrain and settlement tables."""

    def __init__(self, db: Session):
        self.db = db

    @procedure()
    def get_slope(self, municipality_id: int) -> Dict[str, Any]:
        records = (
            self.db.query(MunicipalitySlope)
            .filter(MunicipalitySlope.municipality_id == municipality_id)
            .order_by(MunicipalitySlope.area_percentage.desc(), MunicipalitySlope.slope_range_english)
            .all()
        )
        data = [
            {
                "slope_range_nepali": r.slope_range_nepali,
                "slope_range_english": r.slope_range_english,
                "area_sq_km": float(r.area_sq_km or 0),
                "area_percentage": float(r.area_percentage or 0),
            }
            for r in records
        ]

        if data:
            summary = f"The majority of the area ({data[0]['area_percentage']}%) has a gentle slope of 0-5 degrees"
        else:
            summary = "No slope data available"

        return {
            "title": "भिरालोपन विवरण",
            "title_english": "Slope Information",
            "data": data,
            "total": {
                "total_area_sq_km": sum(item["area_sq_km"] for item in data),
                "total_percentage": sum(item["area_percentage"] for item in data),
            },
            "metadata": {
                "column_headers": SLOPE_COLUMN_HEADERS,
                "summary": summary,
            },
        }

    @procedure()
    def get_aspect(self, municipality_id: int) -> Dict[str, Any]:
        records = (
            self.db.query(MunicipalityAspect)
            .filter(MunicipalityAspect.municipality_id == municipality_id)
            .order_by(MunicipalityAspect.area_sq_km.desc(), MunicipalityAspect.direction_english)
            .all()
        )
        data = [
            {
                "direction_nepali": r.direction_nepali,
                "direction_english": r.direction_english,
                "area_sq_km": float(r.area_sq_km or 0),
                "area_percentage": float(r.area_percentage or 0),
            }
            for r in records
        ]
        # Largest area first, so the extremes are the first and last rows
        highest = data[0] if data else None
        lowest = data[-1] if data else None

        return {
            "title": "मोहोडा अनुसार क्षेत्रफल विवरण",
            "title_english": "Area Distribution by Aspect (Direction)",
            "data": data,
            "total": {
                "area_sq_km": sum(item["area_sq_km"] for item in data),
                "area_percentage": sum(item["area_percentage"] for item in data),
            },
            "metadata": {
                "column_headers": ASPECT_COLUMN_HEADERS,
                "highest_area": _extreme(highest),
                "lowest_area": _extreme(lowest),
            },
        }

    @procedure()
    def get_settlements(self, municipality_id: int) -> Dict[str, Any]:
        """Settlement names grouped by ward, wards in numeric order."""
        records = (
            self.db.query(MunicipalityWardWiseSettlement)
            .filter(MunicipalityWardWiseSettlement.municipality_id == municipality_id)
            .all()
        )

        groups: Dict[int, Dict[str, Any]] = {}
        for r in records:
            group = groups.setdefault(r.ward_number, {
                "ward_number": r.ward_number_nepali,
                "ward_number_english": str(r.ward_number),
                "settlements": [],
            })
            group["settlements"].append(r.settlement_name)

        data: List[Dict[str, Any]] = [groups[ward] for ward in sorted(groups)]

        return {
            "title": "प्रमुख बस्तीहरूको विवरण",
            "title_english": "Details of Main Settlements",
            "data": data,
            "metadata": {
                "total_wards": len(data),
                "column_headers": SETTLEMENT_COLUMN_HEADERS,
            },
        }
