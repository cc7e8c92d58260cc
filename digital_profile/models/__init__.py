"""
Models package initialization.
"""
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
from digital_profile.models.economics import (
    WardWiseAgricultureFirmCount,
    WardWiseForeignEmploymentCountries,
    MunicipalityWideVeterinaryRepresentative,
    MunicipalityWideAgricultureRepresentative,
)
from digital_profile.models.education import WardWiseFormalEducation
from digital_profile.models.fertility import WardWiseDeliveryPlace
from digital_profile.models.municipality import (
    MunicipalitySlope,
    MunicipalityAspect,
    MunicipalityWardWiseSettlement,
)
from digital_profile.models.physical import MunicipalityFacilities

__all__ = [
    "CastePopulation",
    "AgeWisePopulation",
    "AgeGroupHousehead",
    "ReligionPopulation",
    "FamilyMainOccupation",
    "WardWiseBirthCertificatePopulation",
    "AgeGenderWiseDeceasedPopulation",
    "DisabilityByAge",
    "WardGenderWiseEconomicallyActivePopulation",
    "DemographicSummary",
    "WardDemographics",
    "MotherTonguePopulation",
    "BirthplaceHouseholds",
    "WardWiseAgricultureFirmCount",
    "WardWiseForeignEmploymentCountries",
    "MunicipalityWideVeterinaryRepresentative",
    "MunicipalityWideAgricultureRepresentative",
    "WardWiseFormalEducation",
    "WardWiseDeliveryPlace",
    "MunicipalitySlope",
    "MunicipalityAspect",
    "MunicipalityWardWiseSettlement",
    "MunicipalityFacilities",
]
