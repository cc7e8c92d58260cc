from digital_profile.models.demographics import (
    AgeGroupHousehead,
    AgeWisePopulation,
    DemographicSummary,
    WardDemographics,
    WardGenderWiseEconomicallyActivePopulation,
)
from tests.conftest import ADMIN_HEADERS

BASE = "/api/profile/demographics"
CASTE_URL = f"{BASE}/caste-population"


def create(client, url, payload):
    response = client.post(url, json=payload, headers=ADMIN_HEADERS)
    assert response.status_code == 200, response.text
    return response.json()["id"]


def test_caste_population_lifecycle(client):
    caste_id = create(client, CASTE_URL, {"caste_type": "magar", "male_population": 50, "female_population": 40})
    create(client, CASTE_URL, {"caste_type": "chhetri", "male_population": 100, "female_population": 120})

    rows = client.get(CASTE_URL).json()
    assert [row["caste_type"] for row in rows] == ["chhetri", "magar"]
    assert rows[0]["caste_type_display"] == "क्षेत्री"
    assert rows[0]["total_population"] == 220

    response = client.put(
        f"{CASTE_URL}/{caste_id}",
        json={"caste_type": "magar", "male_population": 55, "female_population": 40},
        headers=ADMIN_HEADERS,
    )
    assert response.json() == {"success": True, "id": caste_id}
    assert client.get(f"{CASTE_URL}/by-caste/magar").json()["male_population"] == 55

    response = client.delete(f"{CASTE_URL}/{caste_id}", headers=ADMIN_HEADERS)
    assert response.json()["success"] is True
    assert [row["caste_type"] for row in client.get(CASTE_URL).json()] == ["chhetri"]


def test_caste_filter(client):
    create(client, CASTE_URL, {"caste_type": "magar", "male_population": 5, "female_population": 4})
    create(client, CASTE_URL, {"caste_type": "newar", "male_population": 3, "female_population": 2})

    rows = client.get(CASTE_URL, params={"caste_type": "newar"}).json()
    assert len(rows) == 1
    assert rows[0]["caste_type"] == "newar"


def test_duplicate_caste_is_conflict(client):
    payload = {"caste_type": "magar", "male_population": 1, "female_population": 1}
    create(client, CASTE_URL, payload)

    response = client.post(CASTE_URL, json=payload, headers=ADMIN_HEADERS)
    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"
    assert response.json()["error"] == "Caste population data already exists for this caste type"


def test_invalid_caste_type_is_bad_request(client):
    response = client.post(
        CASTE_URL,
        json={"caste_type": "unknown", "male_population": 1, "female_population": 1},
        headers=ADMIN_HEADERS,
    )
    assert response.status_code == 400
    assert response.json()["code"] == "BAD_REQUEST"


def test_negative_count_is_bad_request(client):
    response = client.post(
        CASTE_URL,
        json={"caste_type": "magar", "male_population": -1, "female_population": 1},
        headers=ADMIN_HEADERS,
    )
    assert response.status_code == 400


def test_update_unknown_caste_is_not_found(client):
    response = client.put(
        f"{CASTE_URL}/missing",
        json={"caste_type": "magar", "male_population": 1, "female_population": 1},
        headers=ADMIN_HEADERS,
    )
    assert response.status_code == 404
    assert response.json()["error"] == "Caste population data not found"


def test_delete_unknown_caste_succeeds(client):
    response = client.delete(f"{CASTE_URL}/missing", headers=ADMIN_HEADERS)
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_by_caste_not_found(client):
    response = client.get(f"{CASTE_URL}/by-caste/magar")
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_caste_summary(client):
    create(client, CASTE_URL, {"caste_type": "magar", "male_population": 50, "female_population": 40})
    create(client, CASTE_URL, {"caste_type": "chhetri", "male_population": 100, "female_population": 120})

    summary = client.get(f"{CASTE_URL}/summary").json()
    assert summary["total_male"] == 150
    assert summary["total_female"] == 160
    assert summary["total_population"] == 310
    assert summary["caste_count"] == 2
    assert summary["most_populous_caste"]["caste_type"] == "chhetri"
    assert summary["sex_ratio"] == 93.75
    assert summary["most_gender_balanced_caste"]["caste_type"] == "chhetri"
    assert [row["caste_type"] for row in summary["male_majority_castes"]] == ["magar"]
    assert [row["caste_type"] for row in summary["female_majority_castes"]] == ["chhetri"]


def test_caste_summary_empty(client):
    summary = client.get(f"{CASTE_URL}/summary").json()
    assert summary["total_population"] == 0
    assert summary["most_populous_caste"] is None
    assert summary["sex_ratio"] == 0.0


def test_age_wise_summary(client, db_session):
    db_session.add_all([
        AgeWisePopulation(age_group="AGE_0_4", gender="MALE", population=10),
        AgeWisePopulation(age_group="AGE_0_4", gender="FEMALE", population=12),
        AgeWisePopulation(age_group="AGE_5_9", gender="MALE", population=8),
    ])
    db_session.commit()

    summary = client.get(f"{BASE}/age-wise-population/summary").json()
    assert summary["total_population"] == 30
    assert summary["by_gender"] == [
        {"gender": "FEMALE", "total_population": 12},
        {"gender": "MALE", "total_population": 18},
    ]
    assert len(summary["by_age_and_gender"]) == 3

    rows = client.get(f"{BASE}/age-wise-population", params={"gender": "MALE"}).json()
    assert {row["age_group"] for row in rows} == {"AGE_0_4", "AGE_5_9"}


def test_age_wise_gender_filter_is_validated(client):
    response = client.get(f"{BASE}/age-wise-population", params={"gender": "male"})
    assert response.status_code == 400


def test_househead_summary_excludes_total_row(client, db_session):
    db_session.add_all([
        AgeGroupHousehead(age_group="15-19", male_heads=10, female_heads=5, total_families=15),
        AgeGroupHousehead(age_group="20-24", male_heads=20, female_heads=15, total_families=35),
        AgeGroupHousehead(age_group="जम्मा", male_heads=30, female_heads=20, total_families=50),
    ])
    db_session.commit()

    summary = client.get(f"{BASE}/househead-gender/summary").json()
    assert summary["total_male_heads"] == 30
    assert summary["total_female_heads"] == 20
    assert summary["total_heads"] == 50
    assert summary["total_families"] == 50
    assert summary["female_headed_percentage"] == 40.0
    assert summary["age_group_count"] == 2

    assert client.get(f"{BASE}/househead-gender/by-group/20-24").json()["male_heads"] == 20
    assert client.get(f"{BASE}/househead-gender/by-group/99").json() is None


def test_religion_total_is_derived_and_summary_percentages(client):
    url = f"{BASE}/religion-population"
    hindu_id = create(client, url, {"religion_type": "HINDU", "male_population": 40, "female_population": 35})
    create(client, url, {"religion_type": "BUDDHIST", "male_population": 10, "female_population": 15})

    rows = client.get(f"{url}/by-religion/HINDU").json()
    assert rows[0]["total_population"] == 75
    assert rows[0]["religion_type_display"] == "हिन्दु"

    summary = client.get(f"{url}/summary").json()
    assert summary["total_population"] == 100
    assert summary["religion_count"] == 2
    assert [(r["religion_type"], r["percentage"]) for r in summary["religions"]] == [
        ("HINDU", 75.0),
        ("BUDDHIST", 25.0),
    ]

    # Total is recomputed when the counts change
    client.put(
        f"{url}/{hindu_id}",
        json={"religion_type": "HINDU", "male_population": 50, "female_population": 35},
        headers=ADMIN_HEADERS,
    )
    assert client.get(f"{url}/by-religion/HINDU").json()[0]["total_population"] == 85


def test_religion_summary_empty(client):
    assert client.get(f"{BASE}/religion-population/summary").json() == {
        "total_population": 0,
        "religion_count": 0,
        "religions": [],
    }


def test_main_occupation_summary(client):
    url = f"{BASE}/main-occupation"
    create(client, url, {"occupation": "SKILLED_AGRICULTURAL_WORKERS", "age_15_19": 10, "age_20_24": 30})
    create(client, url, {"occupation": "SERVICE_AND_SALES_WORKERS", "age_25_29": 10})

    rows = client.get(url).json()
    assert rows[0]["occupation"] == "SKILLED_AGRICULTURAL_WORKERS"
    assert rows[0]["total_population"] == 40

    summary = client.get(f"{url}/summary").json()
    assert summary["total_population"] == 50
    assert summary["top_occupation"]["occupation"] == "SKILLED_AGRICULTURAL_WORKERS"
    assert summary["age_band_totals"]["age_20_24"] == 30
    assert summary["occupations"][0]["percentage"] == 80.0


def test_birth_certificate_total_always_derived(client):
    url = f"{BASE}/birth-certificate-population"
    create(client, url, {"ward_number": 1, "with_birth_certificate": 90, "without_birth_certificate": 10})
    create(client, url, {"ward_number": 2, "with_birth_certificate": 60, "without_birth_certificate": 40})

    ward = client.get(f"{url}/by-ward/2").json()
    assert ward[0]["total_population_under_5"] == 100

    summary = client.get(f"{url}/summary").json()
    assert summary == {
        "total_wards": 2,
        "total_with_birth_certificate": 150,
        "total_without_birth_certificate": 50,
        "total_population_under_5": 200,
        "coverage_percentage": 75.0,
    }


def test_birth_certificate_duplicate_ward(client):
    url = f"{BASE}/birth-certificate-population"
    payload = {"ward_number": 1, "with_birth_certificate": 1, "without_birth_certificate": 1}
    create(client, url, payload)
    response = client.post(url, json=payload, headers=ADMIN_HEADERS)
    assert response.status_code == 409
    assert response.json()["error"] == "Data for ward 1 already exists"


def test_deceased_summary(client):
    url = f"{BASE}/deceased-population"
    create(client, url, {"age_group": "AGE_1_YEAR", "gender": "MALE", "deceased_population": 3})
    create(client, url, {"age_group": "AGE_1_YEAR", "gender": "FEMALE", "deceased_population": 2})

    summary = client.get(f"{url}/summary").json()
    assert summary["total_deceased"] == 5
    assert {row["gender"]: row["total_population"] for row in summary["by_gender"]} == {"MALE": 3, "FEMALE": 2}


def test_disability_summary(client):
    url = f"{BASE}/disability-by-age"
    create(client, url, {"age_group": "0-14", "physical_disability": 6, "autism": 2})
    create(client, url, {"age_group": "15-59", "physical_disability": 4, "visual_impairment": 8})

    rows = client.get(url).json()
    assert rows[0]["total"] == 8

    summary = client.get(f"{url}/summary").json()
    assert summary["total_disabled"] == 20
    assert summary["age_group_count"] == 2
    assert summary["most_common_type"] == "physical_disability"
    assert summary["type_percentages"]["visual_impairment"] == 40.0


def test_disability_summary_skips_aggregate_row(client):
    url = f"{BASE}/disability-by-age"
    create(client, url, {"age_group": "AGE_0_4", "physical_disability": 3})
    create(client, url, {"age_group": "AGE_5_9", "physical_disability": 2})
    create(client, url, {"age_group": "जम्मा", "physical_disability": 5})

    summary = client.get(f"{url}/summary").json()
    assert summary["total_disabled"] == 5
    assert summary["type_totals"]["physical_disability"] == 5
    assert summary["age_group_count"] == 2


def test_disability_by_age_group(client):
    url = f"{BASE}/disability-by-age"
    create(client, url, {"age_group": "AGE_5_9", "hearing_impairment": 4, "autism": 1})

    row = client.get(f"{url}/by-age-group/AGE_5_9").json()
    assert row["hearing_impairment"] == 4
    assert row["total"] == 5
    assert client.get(f"{url}/by-age-group/AGE_80_PLUS").json() is None


def test_disability_summary_empty(client):
    summary = client.get(f"{BASE}/disability-by-age/summary").json()
    assert summary["total_disabled"] == 0
    assert summary["most_common_type"] is None


def test_economically_active_summary_excludes_total_rows(client, db_session):
    Model = WardGenderWiseEconomicallyActivePopulation
    db_session.add_all([
        Model(ward_number="1", gender="MALE", age_10_plus_total=100, economically_active_employed=60,
              economically_active_unemployed=20, household_work=10, economically_active_total=80,
              dependent_population=20),
        Model(ward_number="1", gender="FEMALE", age_10_plus_total=100, economically_active_employed=30,
              economically_active_unemployed=10, household_work=40, economically_active_total=40,
              dependent_population=60),
        Model(ward_number="जम्मा", gender="MALE", age_10_plus_total=200, economically_active_employed=90,
              economically_active_unemployed=30, household_work=50, economically_active_total=120,
              dependent_population=80),
    ])
    db_session.commit()

    summary = client.get(f"{BASE}/economically-active-population/summary").json()
    assert summary["total_age_10_plus"] == 200
    assert summary["total_employed"] == 90
    assert summary["total_unemployed"] == 30
    assert summary["total_economically_active"] == 120
    assert summary["employment_rate"] == 75.0
    assert summary["unemployment_rate"] == 25.0

    ward_rows = client.get(f"{BASE}/economically-active-population/by-ward/1").json()
    assert len(ward_rows) == 2


def test_demographic_summary_singleton(client, db_session):
    assert client.get(f"{BASE}/summary").json() is None

    db_session.add(DemographicSummary(total_population=21671, population_male=10500, population_female=11171))
    db_session.commit()

    summary = client.get(f"{BASE}/summary").json()
    assert summary["id"] == "singleton"
    assert summary["total_population"] == 21671


def test_ward_demographics_defaults_when_empty(client):
    data = client.get(f"{BASE}/ward-demographics").json()
    assert data["total_population"] == 21671
    assert data["total_wards"] == 6
    assert data["population_density"] == 133.0
    assert data["wards"] == []

    table = client.get(f"{BASE}/ward-demographics/table").json()
    assert [ward["ward_no"] for ward in table["wards"]] == [1, 2]
    assert table["wards"][0]["estimated_households"] == 1024
    assert table["wards"][0]["population_density"] == 61.54
    assert table["totals"]["total_population"] == 21671


def test_ward_demographics_table(client, db_session):
    db_session.add_all([
        WardDemographics(municipality_id=1, ward_no=2, included_vdc_or_municipality="B", population=574, area_sq_km=2),
        WardDemographics(municipality_id=1, ward_no=1, included_vdc_or_municipality="A", population=2870, area_sq_km=10),
        WardDemographics(municipality_id=2, ward_no=1, included_vdc_or_municipality="X", population=999, area_sq_km=1),
    ])
    db_session.commit()

    table = client.get(f"{BASE}/ward-demographics/table").json()
    assert [ward["ward_no"] for ward in table["wards"]] == [1, 2]
    assert table["wards"][0]["estimated_households"] == 1000
    assert table["wards"][0]["population_density"] == 287.0
    assert table["totals"]["total_population"] == 3444
    assert table["totals"]["total_estimated_households"] == 1200
    assert table["totals"]["average_population_density"] == 287.0

    summary = client.get(f"{BASE}/ward-demographics/summary").json()
    assert summary["total_wards"] == 2
    assert summary["total_population"] == 3444

    other = client.get(f"{BASE}/ward-demographics", params={"municipality_id": 2}).json()
    assert other["total_population"] == 999


def test_mother_tongue_population(client):
    url = f"{BASE}/mother-tongue-population"
    create(client, url, {"language_type": "MAGAR", "population": 300, "percentage": 30})
    create(client, url, {"language_type": "NEPALI", "population": 600, "percentage": 60})
    create(client, url, {"language_type": "OTHER", "population": 100, "percentage": 10})

    rows = client.get(url).json()
    assert [row["language_type"] for row in rows] == ["NEPALI", "MAGAR", "OTHER"]
    assert rows[0]["language_type_display"] == "नेपाली"

    summary = client.get(f"{url}/summary").json()
    assert summary == {"total_languages": 3, "total_population": 1000, "average_percentage": 33.33}

    response = client.post(url, json={"language_type": "MAGAR", "population": 1}, headers=ADMIN_HEADERS)
    assert response.status_code == 409
    assert response.json()["error"] == "Data for language MAGAR already exists"

    response = client.post(url, json={"language_type": "KLINGON", "population": 1}, headers=ADMIN_HEADERS)
    assert response.status_code == 400


def test_birthplace_households(client):
    url = f"{BASE}/birthplace-households"
    create(client, url, {"age_group": "जम्मा", "total_population": 150, "nepal_born": 145, "born_abroad": 5})
    create(client, url, {"age_group": "15-29", "total_population": 100, "nepal_born": 97, "born_abroad": 3})
    create(client, url, {"age_group": "0-14", "total_population": 50, "nepal_born": 48, "born_abroad": 2})

    rows = client.get(url).json()
    assert [row["age_group"] for row in rows] == ["0-14", "15-29", "जम्मा"]

    summary = client.get(f"{url}/summary").json()
    assert [row["age_group"] for row in summary] == ["0-14", "15-29"]

    by_group = client.get(f"{url}/by-age-group/15-29").json()
    assert len(by_group) == 1
    assert by_group[0]["born_abroad"] == 3

    response = client.post(url, json={"age_group": "0-14"}, headers=ADMIN_HEADERS)
    assert response.status_code == 409
    assert response.json()["error"] == "Data for age group 0-14 already exists"
