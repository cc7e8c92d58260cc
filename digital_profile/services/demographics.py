"""
Demographics services - population datasets and their summaries.
"""
import logging
from typing import Any, Dict, List, Optional

import pandas as pd
from sqlalchemy import case, func

from digital_profile.config import settings
from digital_profile.models.demographics import (
    CastePopulation,
    AgeWisePopulation,
    AgeGroupHousehead,
    ReligionPopulation,
    FamilyMainOccupation,
    WardWiseBirthCertificatePopulation,
    AgeGenderWiseDeceasedPopulation,
    DisabilityByAge,
    WardGenderWiseEconomicallyActivePopulation,
    DemographicSummary,
    WardDemographics,
    MotherTonguePopulation,
    BirthplaceHouseholds,
)
from digital_profile.exceptions import NotFoundError
from digital_profile.services.base import ProfileDatasetService, procedure
from digital_profile.utils.aggregators import (
    calculate_percentage,
    sum_field,
    find_extremes,
    aggregate_by_group,
    add_percentage_column,
    records,
)
from digital_profile.utils.constants import (
    CASTE_TYPES,
    RELIGION_TYPES,
    OCCUPATION_TYPES,
    OCCUPATION_AGE_BANDS,
    DISABILITY_TYPES,
    DISABILITY_TOTAL_LABEL,
    HOUSEHEAD_TOTAL_LABEL,
    ECONOMICALLY_ACTIVE_TOTAL_LABEL,
    LANGUAGE_TYPES,
    BIRTHPLACE_TOTAL_LABEL,
    SAMPLE_WARDS,
)

logger = logging.getLogger(__name__)


def _group_totals(rows: List[Dict[str, Any]], group_columns: List[str], value_column: str) -> List[Dict[str, Any]]:
    """Sum ``value_column`` per group, renamed to total_population."""
    if not rows:
        return []
    df = pd.DataFrame(rows)[group_columns + [value_column]]
    agg_df = aggregate_by_group(df, group_columns, [value_column])
    return records(agg_df.rename(columns={value_column: 'total_population'}))


class CastePopulationService(ProfileDatasetService):
    model = CastePopulation
    label = "caste population data"
    unique_fields = ("caste_type",)
    conflict_message = "Caste population data already exists for this caste type"
    not_found_message = "Caste population data not found"

    def order_by(self):
        return [
            (CastePopulation.male_population + CastePopulation.female_population).desc(),
            CastePopulation.caste_type,
        ]

    def decorate(self, item):
        item["caste_type_display"] = CASTE_TYPES.get(item["caste_type"], item["caste_type"])
        item["total_population"] = (item["male_population"] or 0) + (item["female_population"] or 0)
        return item

    @procedure()
    def get_by_caste(self, caste_type: str) -> Dict[str, Any]:
        row = self.get_first(caste_type=caste_type)
        if row is None:
            raise NotFoundError(self.not_found_message)
        return row

    @procedure("Failed to retrieve summary data")
    def summary(self) -> Dict[str, Any]:
        """
        Totals by gender plus the most populous caste.

        Also reports the overall sex ratio (males per 100 females), the caste
        closest to an even split and which castes have a male or female
        majority.
        """
        rows = self.get_all()

        total_male = sum_field(rows, "male_population")
        total_female = sum_field(rows, "female_population")
        most_populous, _ = find_extremes(rows, "total_population")

        populated = [row for row in rows if row["total_population"] > 0]
        _, most_balanced = find_extremes(
            populated,
            lambda row: abs(row["male_population"] / row["total_population"] - 0.5)
        )

        return {
            "total_male": total_male,
            "total_female": total_female,
            "total_population": total_male + total_female,
            "caste_count": len(rows),
            "most_populous_caste": most_populous,
            "sex_ratio": round(total_male / total_female * 100, 2) if total_female else 0.0,
            "most_gender_balanced_caste": most_balanced,
            "male_majority_castes": [
                row for row in rows if row["male_population"] > row["female_population"]
            ],
            "female_majority_castes": [
                row for row in rows if row["female_population"] > row["male_population"]
            ],
        }


class AgeWisePopulationService(ProfileDatasetService):
    model = AgeWisePopulation
    label = "age-wise population data"
    unique_fields = ("age_group", "gender")
    conflict_message = "Age-wise population data already exists for this age group and gender"
    not_found_message = "Age-wise population data not found"
    legacy_table = "age_wise_population"
    legacy_order_by = "age_group, gender"

    def order_by(self):
        return [AgeWisePopulation.age_group, AgeWisePopulation.gender]

    @procedure("Failed to retrieve age-wise population summary")
    def summary(self) -> Dict[str, Any]:
        rows = self.get_all()
        return {
            "by_age_and_gender": _group_totals(rows, ["age_group", "gender"], "population"),
            "by_gender": _group_totals(rows, ["gender"], "population"),
            "total_population": sum_field(rows, "population"),
        }


class AgeGroupHouseheadService(ProfileDatasetService):
    model = AgeGroupHousehead
    label = "household head data"
    unique_fields = ("age_group",)
    conflict_message = "Household head data already exists for age group {age_group}"
    not_found_message = "Household head data not found"
    legacy_table = "age_group_househead"
    legacy_order_by = "age_group"

    def order_by(self):
        return [AgeGroupHousehead.age_group]

    @procedure("Failed to retrieve household head summary")
    def summary(self) -> Dict[str, Any]:
        # The aggregate row would double every total
        rows = [row for row in self.get_all() if row["age_group"] != HOUSEHEAD_TOTAL_LABEL]

        male_heads = sum_field(rows, "male_heads")
        female_heads = sum_field(rows, "female_heads")
        return {
            "total_male_heads": male_heads,
            "total_female_heads": female_heads,
            "total_heads": male_heads + female_heads,
            "total_families": sum_field(rows, "total_families"),
            "female_headed_percentage": calculate_percentage(female_heads, male_heads + female_heads),
            "age_group_count": len(rows),
        }


class ReligionPopulationService(ProfileDatasetService):
    model = ReligionPopulation
    label = "religion population data"
    unique_fields = ("religion_type",)
    conflict_message = "Data for religion type {religion_type} already exists"
    not_found_message = "Religion population data not found"
    derived_fields = ("total_population",)
    legacy_table = "religion_population"
    legacy_order_by = "religion_type"

    def order_by(self):
        return [ReligionPopulation.religion_type]

    def prepare(self, data):
        if data.get("total_population") is None:
            data["total_population"] = (data.get("male_population") or 0) + (data.get("female_population") or 0)
        if data.get("percentage") is None:
            data["percentage"] = 0.0
        return data

    def decorate(self, item):
        item["religion_type_display"] = RELIGION_TYPES.get(item["religion_type"], item["religion_type"])
        return item

    @procedure("Failed to retrieve religion population summary")
    def summary(self) -> Dict[str, Any]:
        """Religions ordered by population with their share of the total."""
        rows = self.get_all()
        if not rows:
            return {"total_population": 0, "religion_count": 0, "religions": []}

        columns = [
            "religion_type", "religion_type_display",
            "male_population", "female_population", "total_population",
        ]
        df = pd.DataFrame(rows)[columns]
        df = df.sort_values("total_population", ascending=False, kind="stable")
        df = add_percentage_column(df, "total_population")

        return {
            "total_population": int(df["total_population"].sum()),
            "religion_count": len(df),
            "religions": records(df),
        }


class FamilyMainOccupationService(ProfileDatasetService):
    model = FamilyMainOccupation
    label = "family main occupation data"
    unique_fields = ("occupation",)
    conflict_message = "Data for occupation {occupation} already exists"
    not_found_message = "Family main occupation data not found"
    derived_fields = ("total_population",)
    legacy_table = "family_main_occupation"
    legacy_order_by = "total_population DESC"

    def order_by(self):
        return [FamilyMainOccupation.total_population.desc(), FamilyMainOccupation.occupation]

    def prepare(self, data):
        if data.get("total_population") is None:
            data["total_population"] = sum(data.get(band) or 0 for band in OCCUPATION_AGE_BANDS)
        return data

    def decorate(self, item):
        item["occupation_display"] = OCCUPATION_TYPES.get(item["occupation"], item["occupation"])
        return item

    @procedure("Failed to retrieve family main occupation summary")
    def summary(self) -> Dict[str, Any]:
        rows = self.get_all()
        top_occupation, _ = find_extremes(rows, "total_population")

        occupations = []
        if rows:
            df = pd.DataFrame(rows)[["occupation", "occupation_display", "total_population"]]
            occupations = records(add_percentage_column(df, "total_population"))

        return {
            "total_population": sum_field(rows, "total_population"),
            "occupation_count": len(rows),
            "top_occupation": top_occupation,
            "age_band_totals": {band: sum_field(rows, band) for band in OCCUPATION_AGE_BANDS},
            "occupations": occupations,
        }


class BirthCertificatePopulationService(ProfileDatasetService):
    model = WardWiseBirthCertificatePopulation
    label = "ward-wise birth certificate population data"
    unique_fields = ("ward_number",)
    conflict_message = "Data for ward {ward_number} already exists"
    not_found_message = "Ward-wise birth certificate population data not found"
    derived_fields = ("total_population_under_5",)
    legacy_table = "ward_wise_birth_certificate_population"
    legacy_order_by = "ward_number"

    def order_by(self):
        return [WardWiseBirthCertificatePopulation.ward_number]

    def prepare(self, data):
        data["total_population_under_5"] = (
            (data.get("with_birth_certificate") or 0) + (data.get("without_birth_certificate") or 0)
        )
        return data

    def decorate(self, item):
        if item.get("total_population_under_5") is None:
            self.prepare(item)
        return item

    @procedure("Failed to retrieve birth certificate summary")
    def summary(self) -> Dict[str, Any]:
        rows = self.get_all()
        with_certificate = sum_field(rows, "with_birth_certificate")
        without_certificate = sum_field(rows, "without_birth_certificate")
        total = with_certificate + without_certificate

        return {
            "total_wards": len(rows),
            "total_with_birth_certificate": with_certificate,
            "total_without_birth_certificate": without_certificate,
            "total_population_under_5": total,
            "coverage_percentage": calculate_percentage(with_certificate, total),
        }


class DeceasedPopulationService(ProfileDatasetService):
    model = AgeGenderWiseDeceasedPopulation
    label = "age-gender-wise deceased population data"
    unique_fields = ("age_group", "gender")
    conflict_message = "Deceased population data already exists for this age group and gender"
    not_found_message = "Deceased population data not found"
    legacy_table = "age_gender_wise_deceased_population"
    legacy_order_by = "age_group, gender"

    def order_by(self):
        return [AgeGenderWiseDeceasedPopulation.age_group, AgeGenderWiseDeceasedPopulation.gender]

    @procedure("Failed to retrieve deceased population summary")
    def summary(self) -> Dict[str, Any]:
        rows = self.get_all()
        return {
            "by_age_and_gender": _group_totals(rows, ["age_group", "gender"], "deceased_population"),
            "by_gender": _group_totals(rows, ["gender"], "deceased_population"),
            "total_deceased": sum_field(rows, "deceased_population"),
        }


class DisabilityByAgeService(ProfileDatasetService):
    model = DisabilityByAge
    label = "disability by age data"
    unique_fields = ("age_group",)
    conflict_message = "Disability data already exists for age group {age_group}"
    not_found_message = "Disability data not found"
    derived_fields = ("total",)
    legacy_table = "disability_by_age"
    legacy_order_by = "age_group"

    def order_by(self):
        return [DisabilityByAge.age_group]

    def prepare(self, data):
        if data.get("total") is None:
            data["total"] = sum(data.get(field) or 0 for field in DISABILITY_TYPES)
        return data

    @procedure("Failed to retrieve disability summary")
    def summary(self) -> Dict[str, Any]:
        rows = [row for row in self.get_all() if row["age_group"] != DISABILITY_TOTAL_LABEL]
        type_totals = {field: sum_field(rows, field) for field in DISABILITY_TYPES}
        grand_total = sum(type_totals.values())

        most_common_type = None
        if grand_total > 0:
            most_common_type = max(type_totals, key=type_totals.get)

        return {
            "total_disabled": grand_total,
            "age_group_count": len(rows),
            "type_totals": type_totals,
            "type_percentages": {
                field: calculate_percentage(count, grand_total) for field, count in type_totals.items()
            },
            "most_common_type": most_common_type,
            "most_common_type_display": DISABILITY_TYPES.get(most_common_type) if most_common_type else None,
        }


class EconomicallyActivePopulationService(ProfileDatasetService):
    model = WardGenderWiseEconomicallyActivePopulation
    label = "economically active population data"
    unique_fields = ("ward_number", "gender")
    conflict_message = "Data for ward {ward_number} and gender {gender} already exists"
    not_found_message = "Economically active population data not found"
    legacy_table = "ward_gender_wise_economically_active_population"
    legacy_order_by = "ward_number, gender"

    def order_by(self):
        return [
            WardGenderWiseEconomicallyActivePopulation.ward_number,
            WardGenderWiseEconomicallyActivePopulation.gender,
        ]

    @procedure("Failed to retrieve summary")
    def summary(self) -> Dict[str, Any]:
        rows = [
            row for row in self.get_all()
            if row["ward_number"] != ECONOMICALLY_ACTIVE_TOTAL_LABEL
            and row["gender"] != ECONOMICALLY_ACTIVE_TOTAL_LABEL
        ]

        employed = sum_field(rows, "economically_active_employed")
        unemployed = sum_field(rows, "economically_active_unemployed")
        active_total = sum_field(rows, "economically_active_total")

        return {
            "total_age_10_plus": sum_field(rows, "age_10_plus_total"),
            "total_employed": employed,
            "total_unemployed": unemployed,
            "total_household_work": sum_field(rows, "household_work"),
            "total_economically_active": active_total,
            "total_dependent": sum_field(rows, "dependent_population"),
            "employment_rate": calculate_percentage(employed, active_total),
            "unemployment_rate": calculate_percentage(unemployed, active_total),
        }


class DemographicSummaryService(ProfileDatasetService):
    model = DemographicSummary
    label = "demographic summary"

    @procedure()
    def get(self) -> Optional[Dict[str, Any]]:
        record = self.db.query(DemographicSummary).first()
        return self.serialize(record) if record is not None else None


class WardDemographicsService(ProfileDatasetService):
    """Ward population and area figures for the landing statistics."""

    model = WardDemographics
    label = "ward demographics"

    def _wards(self, municipality_id: int) -> List[WardDemographics]:
        return (
            self.db.query(WardDemographics)
            .filter(WardDemographics.municipality_id == municipality_id)
            .order_by(WardDemographics.ward_no)
            .all()
        )

    @procedure()
    def get(self, municipality_id: int) -> Dict[str, Any]:
        wards = self._wards(municipality_id)

        if not wards:
            total_population = settings.DEFAULT_TOTAL_POPULATION
            total_area = settings.DEFAULT_TOTAL_AREA_SQ_KM
            return {
                "total_population": total_population,
                "total_area_sq_km": total_area,
                "total_wards": settings.DEFAULT_TOTAL_WARDS,
                "population_density": round(total_population / total_area, 0),
                "wards": [],
            }

        total_population = sum(ward.population for ward in wards)
        total_area = sum(float(ward.area_sq_km or 0) for ward in wards)
        density = total_population / total_area if total_area > 0 else 0

        return {
            "total_population": total_population,
            "total_area_sq_km": round(total_area, 2),
            "total_wards": len(wards),
            "population_density": round(density, 2),
            "wards": [
                {
                    "ward_no": ward.ward_no,
                    "included_vdc_or_municipality": ward.included_vdc_or_municipality,
                    "population": ward.population,
                    "area_sq_km": float(ward.area_sq_km or 0),
                }
                for ward in wards
            ],
        }

    @procedure()
    def summary(self, municipality_id: int) -> Dict[str, Any]:
        result = self.db.query(
            func.sum(WardDemographics.population).label('total_population'),
            func.sum(WardDemographics.area_sq_km).label('total_area_sq_km'),
            func.count(WardDemographics.id).label('total_wards'),
            func.avg(WardDemographics.population).label('average_population'),
            func.avg(WardDemographics.area_sq_km).label('average_area'),
        ).filter(
            WardDemographics.municipality_id == municipality_id
        ).first()

        total_population = int(result.total_population or 0)
        total_area = float(result.total_area_sq_km or 0)

        return {
            "total_population": total_population,
            "total_area_sq_km": total_area,
            "total_wards": int(result.total_wards or 0),
            "average_ward_population": float(result.average_population or 0),
            "average_ward_area": float(result.average_area or 0),
            "population_density": total_population / total_area if total_area > 0 else 0,
        }

    @staticmethod
    def _ward_row(ward: Dict[str, Any]) -> Dict[str, Any]:
        area = float(ward["area_sq_km"] or 0)
        population = ward["population"]
        return {
            **ward,
            "area_sq_km": area,
            "estimated_households": round(population / settings.AVERAGE_HOUSEHOLD_SIZE),
            "population_density": round(population / area, 2) if area > 0 else 0,
        }

    @procedure()
    def ward_table(self, municipality_id: int) -> Dict[str, Any]:
        """Per-ward table with estimated households and density."""
        wards = self._wards(municipality_id)

        if not wards:
            total_population = settings.DEFAULT_TOTAL_POPULATION
            total_area = settings.DEFAULT_TOTAL_AREA_SQ_KM
            return {
                "wards": [self._ward_row(dict(ward, created_at=None, updated_at=None)) for ward in SAMPLE_WARDS],
                "totals": {
                    "total_wards": settings.DEFAULT_TOTAL_WARDS,
                    "total_population": total_population,
                    "total_area_sq_km": total_area,
                    "total_estimated_households": round(total_population / settings.AVERAGE_HOUSEHOLD_SIZE),
                    "average_population_density": round(total_population / total_area, 2),
                },
            }

        rows = [
            self._ward_row({
                "id": ward.id,
                "ward_no": ward.ward_no,
                "included_vdc_or_municipality": ward.included_vdc_or_municipality,
                "population": ward.population,
                "area_sq_km": ward.area_sq_km,
                "created_at": ward.created_at,
                "updated_at": ward.updated_at,
            })
            for ward in wards
        ]

        total_population = sum(row["population"] for row in rows)
        total_area = sum(row["area_sq_km"] for row in rows)

        return {
            "wards": rows,
            "totals": {
                "total_wards": len(rows),
                "total_population": total_population,
                "total_area_sq_km": round(total_area, 2),
                "total_estimated_households": sum(row["estimated_households"] for row in rows),
                "average_population_density": round(total_population / total_area, 2) if total_area > 0 else 0,
            },
        }


class MotherTonguePopulationService(ProfileDatasetService):
    model = MotherTonguePopulation
    label = "mother tongue population data"
    unique_fields = ("language_type",)
    conflict_message = "Data for language {language_type} already exists"
    not_found_message = "Mother tongue population data not found"
    legacy_table = "mother_tongue_population"
    legacy_order_by = "population DESC"

    def order_by(self):
        return [MotherTonguePopulation.population.desc(), MotherTonguePopulation.language_type]

    def decorate(self, item):
        item["language_type_display"] = LANGUAGE_TYPES.get(item["language_type"], item["language_type"])
        return item

    @procedure("Failed to retrieve mother tongue population summary")
    def summary(self) -> Dict[str, Any]:
        rows = self.get_all()
        return {
            "total_languages": len(rows),
            "total_population": sum_field(rows, "population"),
            "average_percentage": round(sum_field(rows, "percentage") / len(rows), 2) if rows else 0.0,
        }


class BirthplaceHouseholdsService(ProfileDatasetService):
    model = BirthplaceHouseholds
    label = "birthplace households data"
    unique_fields = ("age_group",)
    conflict_message = "Data for age group {age_group} already exists"
    not_found_message = "Birthplace households data not found"
    legacy_table = "birthplace_households"
    legacy_order_by = f"CASE WHEN age_group = '{BIRTHPLACE_TOTAL_LABEL}' THEN 1 ELSE 0 END, age_group"

    def order_by(self):
        # Aggregate row last
        return [
            case((BirthplaceHouseholds.age_group == BIRTHPLACE_TOTAL_LABEL, 1), else_=0),
            BirthplaceHouseholds.age_group,
        ]

    @procedure("Failed to retrieve birthplace households summary")
    def summary(self) -> List[Dict[str, Any]]:
        """Age group rows without the aggregate row."""
        return [row for row in self.get_all() if row["age_group"] != BIRTHPLACE_TOTAL_LABEL]
