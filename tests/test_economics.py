from digital_profile.models.economics import (
    MunicipalityWideAgricultureRepresentative,
    MunicipalityWideVeterinaryRepresentative,
    WardWiseForeignEmploymentCountries,
)
from tests.conftest import ADMIN_HEADERS, VIEWER_HEADERS

BASE = "/api/profile/economics"


def vet(serial_number, name, position, branch="पशु सेवा शाखा"):
    return MunicipalityWideVeterinaryRepresentative(
        serial_number=serial_number,
        name=name,
        name_english=name,
        position=position,
        position_english=position,
        contact_number="9800000000",
        branch=branch,
        branch_english="Livestock",
    )


def test_agriculture_firm_summary(client):
    url = f"{BASE}/agriculture-firm-count"
    for ward, count in [(1, 12), (2, 8), (3, 15)]:
        response = client.post(url, json={"ward_number": ward, "count": count}, headers=ADMIN_HEADERS)
        assert response.status_code == 200

    summary = client.get(f"{url}/summary").json()
    assert summary == {
        "total_wards": 3,
        "total_agricultural_groups": 35,
        "highest_count_ward": "वडा नं 3",
        "highest_count": 15,
        "lowest_count_ward": "वडा नं 2",
        "lowest_count": 8,
    }

    assert client.get(f"{url}/by-ward/2").json()[0]["count"] == 8


def test_agriculture_firm_summary_empty(client):
    summary = client.get(f"{BASE}/agriculture-firm-count/summary").json()
    assert summary["highest_count_ward"] is None
    assert summary["lowest_count"] == 0


def test_agriculture_firm_viewer_cannot_update(client):
    url = f"{BASE}/agriculture-firm-count"
    record_id = client.post(url, json={"ward_number": 1, "count": 1}, headers=ADMIN_HEADERS).json()["id"]

    response = client.put(f"{url}/{record_id}", json={"ward_number": 1, "count": 5}, headers=VIEWER_HEADERS)
    assert response.status_code == 401
    assert response.json()["error"] == "Only administrators can update ward-wise agriculture firm count data"


def test_foreign_employment_summary_uses_total_rows(client, db_session):
    db_session.add_all([
        WardWiseForeignEmploymentCountries(age_group="TOTAL", gender="TOTAL", country="INDIA", population=100),
        WardWiseForeignEmploymentCountries(age_group="TOTAL", gender="TOTAL", country="MIDDLE_EAST", population=300),
        WardWiseForeignEmploymentCountries(age_group="15-24", gender="MALE", country="INDIA", population=999),
    ])
    db_session.commit()

    summary = client.get(f"{BASE}/foreign-employment-countries/summary").json()
    assert summary["total_population"] == 400
    assert summary["country_count"] == 2
    assert summary["countries"] == [
        {"country": "MIDDLE_EAST", "total_population": 300, "percentage": 75.0},
        {"country": "INDIA", "total_population": 100, "percentage": 25.0},
    ]

    rows = client.get(f"{BASE}/foreign-employment-countries/by-group", params={"age_group": "15-24"}).json()
    assert len(rows) == 1
    assert rows[0]["population"] == 999


def test_foreign_employment_rejects_unknown_region(client):
    response = client.post(
        f"{BASE}/foreign-employment-countries",
        json={"age_group": "TOTAL", "gender": "TOTAL", "country": "ATLANTIS"},
        headers=ADMIN_HEADERS,
    )
    assert response.status_code == 400


def test_foreign_employment_duplicate_group(client):
    url = f"{BASE}/foreign-employment-countries"
    payload = {"age_group": "15-24", "gender": "MALE", "country": "INDIA", "population": 4}
    assert client.post(url, json=payload, headers=ADMIN_HEADERS).status_code == 200
    assert client.post(url, json=payload, headers=ADMIN_HEADERS).status_code == 409


def test_veterinary_search(client, db_session):
    db_session.add_all([
        vet(2, "Sita Thapa", "Veterinary Technician"),
        vet(1, "Ram Bahadur", "Veterinary Officer"),
        vet(3, "Hari Magar", "Livestock Assistant"),
    ])
    db_session.commit()

    url = f"{BASE}/veterinary-representatives"
    assert [row["serial_number"] for row in client.get(url).json()] == [1, 2, 3]
    assert [row["name"] for row in client.get(url, params={"position": "Veterinary"}).json()] == [
        "Ram Bahadur",
        "Sita Thapa",
    ]
    assert client.get(url, params={"name": "Hari"}).json()[0]["serial_number"] == 3
    assert client.get(f"{url}/by-serial/2").json()["name"] == "Sita Thapa"
    assert client.get(f"{url}/by-serial/9").json() is None


def test_veterinary_summary(client, db_session):
    db_session.add_all([
        vet(1, "A", "Officer", branch="Branch One"),
        vet(2, "B", "Technician"),
        vet(3, "C", "Technician"),
    ])
    db_session.commit()

    summary = client.get(f"{BASE}/veterinary-representatives/summary").json()
    assert summary["total_staff"] == 3
    assert summary["department"] == "Branch One"
    assert {p["position"]: p["count"] for p in summary["positions"]} == {"Officer": 1, "Technician": 2}


def test_representative_summaries_default_when_empty(client):
    vet_summary = client.get(f"{BASE}/veterinary-representatives/summary").json()
    assert vet_summary["total_staff"] == 0
    assert vet_summary["department"] == "पशु सेवा शाखा"
    assert vet_summary["department_english"] == "Animal Service Branch"
    assert vet_summary["positions"] == []

    agri_summary = client.get(f"{BASE}/agriculture-representatives/summary").json()
    assert agri_summary["department"] == "कृषि"
    assert agri_summary["position_type"] == "नायब प्रशासन सहायक"


def test_agriculture_representative_lifecycle(client, db_session):
    url = f"{BASE}/agriculture-representatives"
    payload = {
        "serial_number": 1,
        "name": "गीता",
        "name_english": "Gita",
        "position": "ना.प्र.स.",
        "position_full": "नायब प्रशासन सहायक",
        "position_english": "Assistant Administration Officer",
        "contact_number": "9800000001",
        "branch": "कृषि",
        "branch_english": "Agriculture",
    }
    record_id = client.post(url, json=payload, headers=ADMIN_HEADERS).json()["id"]

    response = client.post(url, json=payload, headers=ADMIN_HEADERS)
    assert response.status_code == 409
    assert response.json()["error"] == "Representative with serial number 1 already exists"

    client.put(f"{url}/{record_id}", json={**payload, "remarks": "on leave"}, headers=ADMIN_HEADERS)
    record = db_session.get(MunicipalityWideAgricultureRepresentative, record_id)
    assert record.remarks == "on leave"

    summary = client.get(f"{url}/summary").json()
    assert summary["total_staff"] == 1
    assert summary["position_type"] == "नायब प्रशासन सहायक"
    assert summary["position_type_english"] == "Assistant Administration Officer"
