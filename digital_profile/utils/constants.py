"""
Categorical values and display labels used across the profile datasets.
"""

# Caste / ethnic groups with Nepali display names
CASTE_TYPES = {
    "chhetri": "क्षेत्री",
    "brahmin_hill": "ब्राम्हण पहाड",
    "magar": "मगर",
    "newar": "नेवार",
    "bishwakarma": "विश्वकर्मा",
    "pariyar": "परियार",
    "thakuri": "ठकुरी",
    "sanyasi_dasnami": "सन्यासी/दसनामी",
    "mallaha": "मल्लाह",
    "hajam_thakur": "हजाम/ठकुर",
    "badi": "बादी",
    "other": "अन्य",
}

GENDERS = ["MALE", "FEMALE", "OTHER"]

# Five-year bands for the age-wise population table
AGE_WISE_GROUPS = [
    "AGE_0_4",
    "AGE_5_9",
    "AGE_10_14",
    "AGE_15_19",
    "AGE_20_24",
    "AGE_25_29",
    "AGE_30_34",
    "AGE_35_39",
    "AGE_40_44",
    "AGE_45_49",
    "AGE_50_54",
    "AGE_55_59",
    "AGE_60_64",
    "AGE_65_69",
    "AGE_70_74",
    "AGE_75_79",
    "AGE_80_84",
    "AGE_85_89",
    "AGE_90_94",
    "AGE_95_ABOVE",
]

DECEASED_AGE_GROUPS = [
    "AGE_1_YEAR",
    "AGE_1_4_YEARS",
    "AGE_5_9_YEARS",
    "AGE_10_14_YEARS",
    "AGE_15_19_YEARS",
    "AGE_20_24_YEARS",
    "AGE_25_29_YEARS",
    "AGE_30_34_YEARS",
    "AGE_35_39_YEARS",
    "AGE_40_44_YEARS",
    "AGE_45_49_YEARS",
    "AGE_50_54_YEARS",
    "AGE_55_59_YEARS",
    "AGE_60_64_YEARS",
    "AGE_65_69_YEARS",
    "AGE_70_74_YEARS",
    "AGE_75_79_YEARS",
    "AGE_80_AND_ABOVE",
]

# Aggregate row label in the household head table
HOUSEHEAD_TOTAL_LABEL = "जम्मा"

RELIGION_TYPES = {
    "HINDU": "हिन्दु",
    "BUDDHIST": "बौद्ध",
    "KIRANT": "किराँत",
    "CHRISTIAN": "क्रिश्चियन",
    "ISLAM": "इस्लाम",
    "NATURE": "प्रकृति",
    "BON": "बोन",
    "JAIN": "जैन",
    "BAHAI": "बहाई",
    "SIKH": "सिख",
    "OTHER": "अन्य",
}

OCCUPATION_TYPES = {
    "MILITARY_OFFICERS": "दैनिक अधिकारीहरू",
    "MANAGERS": "व्यवस्थापकहरु",
    "PROFESSIONALS": "पेशाविदहरू",
    "TECHNICIANS_AND_ASSOCIATE_PROFESSIONALS": "प्राविधिक तथा सहायक पेशागतहरू",
    "CLERICAL_SUPPORT_WORKERS": "कार्यालय सहायकहरू",
    "SERVICE_AND_SALES_WORKERS": "सेवा तथा वस्तु बिक्री गर्ने कामदारहरू",
    "SKILLED_AGRICULTURAL_WORKERS": "कृषि कार्यसँग सम्बन्धित रोजगारहरू",
    "CRAFT_AND_RELATED_TRADES_WORKERS": "शिल्पकला तथा कालिगढ र यससँग सम्बन्धी व्यापार गर्नेहरू",
    "PLANT_AND_MACHINE_OPERATORS": "यन्त्र तथा मेशिन अपरेटर र जडान गर्ने कामदारहरू",
    "ELEMENTARY_OCCUPATIONS": "सामान्य वा प्राथमिक पेशाका कामदारहरू",
    "NOT_SPECIFIED": "उल्लेख नगरेका",
    "ECONOMICALLY_INACTIVE": "आर्थिक रूपमा सक्रिय नभएकाहरू",
}

OCCUPATION_AGE_BANDS = [
    "age_15_19",
    "age_20_24",
    "age_25_29",
    "age_30_34",
    "age_35_39",
    "age_40_44",
    "age_45_49",
]

DISABILITY_TYPES = {
    "physical_disability": "शारीरिक अपाङ्गता",
    "visual_impairment": "दृष्टि सम्बन्धी अपाङ्गता",
    "hearing_impairment": "सुनाइ सम्बन्धी अपाङ्गता",
    "deaf_mute": "बहिरा र बोल्न नसक्ने",
    "speech_hearing_combined": "स्वर र बोलाइ सम्बन्धी",
    "intellectual_disability": "बौद्धिक अपाङ्गता",
    "mental_psychosocial": "मानसिक वा मनोसामाजिक",
    "autism": "अटिज्म",
    "multiple_disabilities": "बहुअपाङ्गता",
    "other_disabilities": "अन्य",
}

# Aggregate row label in the disability table
DISABILITY_TOTAL_LABEL = "जम्मा"

LANGUAGE_TYPES = {
    "NEPALI": "नेपाली",
    "MAITHILI": "मैथिली",
    "BHOJPURI": "भोजपुरी",
    "THARU": "थारु",
    "TAMANG": "तामाङ",
    "NEWARI": "नेवारी",
    "MAGAR": "मगर",
    "BAJJIKA": "बज्जिका",
    "URDU": "उर्दु",
    "HINDI": "हिन्दी",
    "LIMBU": "लिम्बु",
    "RAI": "राई",
    "GURUNG": "गुरुङ",
    "SHERPA": "शेर्पा",
    "DOTELI": "डोटेली",
    "AWADI": "अवधी",
    "OTHER": "अन्य",
}

# Aggregate row label in the birthplace households table
BIRTHPLACE_TOTAL_LABEL = "जम्मा"

DELIVERY_PLACE_TYPES = {
    "HOUSE": "घरमा",
    "GOVERNMENTAL_HEALTH_INSTITUTION": "सरकारी स्वास्थ्य संस्था",
    "PRIVATE_HEALTH_INSTITUTION": "निजी स्वास्थ्य संस्था",
    "OTHER": "अन्य",
}

# Aggregate marker used by the economically active table
ECONOMICALLY_ACTIVE_TOTAL_LABEL = "जम्मा"

FOREIGN_EMPLOYMENT_AGE_GROUPS = [
    "0-14",
    "15-24",
    "25-34",
    "35-44",
    "45-54",
    "55-64",
    "65_PLUS",
    "NOT_MENTIONED",
    "TOTAL",
]

FOREIGN_EMPLOYMENT_GENDERS = ["MALE", "FEMALE", "TOTAL"]

COUNTRY_REGIONS = [
    "INDIA",
    "SAARC",
    "ASIAN",
    "MIDDLE_EAST",
    "OTHER_ASIAN",
    "EUROPE",
    "OTHER_EUROPE",
    "NORTH_AMERICA",
    "AFRICA",
    "PACIFIC",
    "OTHER",
    "NOT_DISCLOSED",
]

FACILITY_TYPES = {
    "RADIO": "Radio (रेडियो सुविधा)",
    "TELEVISION": "Television (टेलिभिजन)",
    "COMPUTER": "Computer/Laptop (कम्प्युटर/ल्यापटप)",
    "INTERNET": "Internet service (इन्टरनेट सुविधा)",
    "MOBILE_PHONE": "Mobile phone (मोबाईल फोन)",
    "CAR_JEEP": "Car/Jeep/Van (कार/जीप/भ्यान)",
    "MOTORCYCLE": "Motorcycle/Scooter (मोटरसाईकल/स्कुटर)",
    "BICYCLE": "Bicycle (साईकल)",
    "REFRIGERATOR": "Refrigerator (रेफ्रिजेरेटर/फ्रिज)",
    "WASHING_MACHINE": "Washing machine (वासिङ मेसिन)",
    "AIR_CONDITIONER": "Air conditioner (एयर कन्डिसनर)",
    "ELECTRICAL_FAN": "Electrical fan (विद्युतीय पंखा)",
    "MICROWAVE_OVEN": "Microwave oven (माइक्रोवेभ ओभन)",
    "DAILY_NATIONAL_NEWSPAPER_ACCESS": "Access to daily national newspaper (राष्ट्रिय दैनिक पत्रिकाको पहुँच)",
    "NONE": "None of the above (माथिका कुनै पनि नभएको)",
}

# Representative summaries fall back to these when the table is empty
VETERINARY_DEFAULT_DEPARTMENT = ("पशु सेवा शाखा", "Animal Service Branch")
AGRICULTURE_DEFAULT_DEPARTMENT = ("कृषि", "Agriculture")
AGRICULTURE_DEFAULT_POSITION = ("नायब प्रशासन सहायक", "Assistant Administration Officer")

# Ward table placeholders returned when no ward rows exist
SAMPLE_WARDS = [
    {
        "id": "sample-1",
        "ward_no": 1,
        "included_vdc_or_municipality": "कुरेली (१–९)",
        "population": 2939,
        "area_sq_km": 47.76,
    },
    {
        "id": "sample-2",
        "ward_no": 2,
        "included_vdc_or_municipality": "राडसी (१–९)",
        "population": 4928,
        "area_sq_km": 32.69,
    },
]

SLOPE_COLUMN_HEADERS = {
    "nepali": ["भिरालोपन (डिग्रीमा)", "क्षेत्रफल (वर्ग कि.मि.)", "क्षेत्रफल (प्रतिशत)"],
    "english": ["Slope (in degrees)", "Area (sq. km.)", "Area (percentage)"],
}

ASPECT_COLUMN_HEADERS = {
    "nepali": ["मोहोडा", "क्षेत्रफल (वर्ग कि.मि.)", "क्षेत्रफल (प्रतिशत)"],
    "english": ["Aspect", "Area (sq. km.)", "Area (percentage)"],
}

SETTLEMENT_COLUMN_HEADERS = {
    "nepali": ["वडा नं.", "मुख्य बस्तीहरूको विवरण"],
    "english": ["Ward No.", "Details of Main Settlements"],
}


def ward_label(ward_number) -> str:
    """Nepali ward label, e.g. 'वडा नं 3'."""
    return f"वडा नं {ward_number}"
