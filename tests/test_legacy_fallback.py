import pytest
from sqlalchemy import text

from digital_profile.database import table_exists
from digital_profile.exceptions import InternalServerError
from digital_profile.models.demographics import ReligionPopulation
from digital_profile.services.demographics import (
    BirthCertificatePopulationService,
    DeceasedPopulationService,
    ReligionPopulationService,
)

URL = "/api/profile/demographics/religion-population"


def create_legacy_religion_table(db_session):
    db_session.execute(text(
        'CREATE TABLE "acme_religion_population" ('
        "id TEXT, religion_type TEXT, male_population TEXT, female_population TEXT, "
        "total_population TEXT, percentage TEXT)"
    ))
    db_session.execute(text(
        "INSERT INTO acme_religion_population VALUES "
        "('1', 'HINDU', '120', '130', '250', '83.33'), "
        "('2', 'BUDDHIST', '20', '30', '50', NULL)"
    ))
    db_session.commit()


def test_no_legacy_table_returns_empty(db_session):
    assert not table_exists(db_session, "acme_religion_population")
    assert ReligionPopulationService(db_session).get_all() == []


def test_legacy_rows_are_coerced_when_orm_table_is_empty(db_session):
    create_legacy_religion_table(db_session)

    rows = ReligionPopulationService(db_session).get_all()
    assert [row["religion_type"] for row in rows] == ["BUDDHIST", "HINDU"]

    hindu = rows[1]
    assert hindu["id"] == "1"
    assert hindu["male_population"] == 120
    assert hindu["total_population"] == 250
    assert hindu["percentage"] == 83.33
    assert hindu["religion_type_display"] == "हिन्दु"
    assert rows[0]["percentage"] == 0.0


def test_legacy_rows_are_filtered_in_code(db_session):
    create_legacy_religion_table(db_session)

    rows = ReligionPopulationService(db_session).get_all(religion_type="HINDU")
    assert len(rows) == 1
    assert rows[0]["female_population"] == 130


def test_orm_rows_take_precedence(db_session):
    create_legacy_religion_table(db_session)
    db_session.add(ReligionPopulation(
        religion_type="ISLAM", male_population=1, female_population=1, total_population=2, percentage=0,
    ))
    db_session.commit()

    rows = ReligionPopulationService(db_session).get_all()
    assert [row["religion_type"] for row in rows] == ["ISLAM"]


def test_failed_orm_query_falls_back_to_legacy(db_session):
    create_legacy_religion_table(db_session)
    db_session.execute(text("DROP TABLE religion_population"))
    db_session.commit()

    rows = ReligionPopulationService(db_session).get_all()
    assert len(rows) == 2


def test_summary_over_legacy_rows(client, db_session):
    create_legacy_religion_table(db_session)

    summary = client.get(f"{URL}/summary").json()
    assert summary["total_population"] == 300
    assert summary["religions"][0]["religion_type"] == "HINDU"
    assert summary["religions"][0]["percentage"] == 83.33


def test_failed_orm_query_without_legacy_table_raises(db_session):
    db_session.execute(text("DROP TABLE religion_population"))
    db_session.commit()

    with pytest.raises(InternalServerError) as excinfo:
        ReligionPopulationService(db_session).get_all()
    assert excinfo.value.message == "Failed to retrieve data"


def test_failed_orm_query_is_a_server_error(client, db_session):
    db_session.execute(text("DROP TABLE caste_population"))
    db_session.commit()

    response = client.get("/api/profile/demographics/caste-population")
    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_SERVER_ERROR"


def test_age_wise_summary_over_legacy_rows(client, db_session):
    db_session.execute(text(
        'CREATE TABLE "acme_age_wise_population" (id TEXT, age_group TEXT, gender TEXT, population TEXT)'
    ))
    db_session.execute(text(
        "INSERT INTO acme_age_wise_population VALUES "
        "('1', 'AGE_5_9', 'MALE', '7'), ('2', 'AGE_0_4', 'FEMALE', '4'), ('3', 'AGE_0_4', 'MALE', '5')"
    ))
    db_session.commit()

    url = "/api/profile/demographics/age-wise-population"
    rows = client.get(url).json()
    assert [(row["age_group"], row["gender"]) for row in rows] == [
        ("AGE_0_4", "FEMALE"), ("AGE_0_4", "MALE"), ("AGE_5_9", "MALE"),
    ]
    assert rows[0]["population"] == 4

    summary = client.get(f"{url}/summary").json()
    assert summary["total_population"] == 16
    assert {row["gender"]: row["total_population"] for row in summary["by_gender"]} == {"FEMALE": 4, "MALE": 12}


def test_househead_summary_over_legacy_rows(client, db_session):
    db_session.execute(text(
        'CREATE TABLE "acme_age_group_househead" '
        "(id TEXT, age_group TEXT, male_heads TEXT, female_heads TEXT, total_families TEXT)"
    ))
    db_session.execute(text(
        "INSERT INTO acme_age_group_househead VALUES "
        "('1', '15-29', '10', '5', '15'), ('2', 'जम्मा', '10', '5', '15')"
    ))
    db_session.commit()

    summary = client.get("/api/profile/demographics/househead-gender/summary").json()
    assert summary["total_heads"] == 15
    assert summary["age_group_count"] == 1


def test_birth_certificate_and_deceased_read_legacy_rows(db_session):
    db_session.execute(text(
        'CREATE TABLE "acme_ward_wise_birth_certificate_population" '
        "(id TEXT, ward_number TEXT, with_birth_certificate TEXT, without_birth_certificate TEXT, "
        "total_population_under_5 TEXT)"
    ))
    db_session.execute(text(
        "INSERT INTO acme_ward_wise_birth_certificate_population VALUES "
        "('2', '2', '30', '10', '40'), ('1', '1', '8', '2', '10')"
    ))
    db_session.execute(text(
        'CREATE TABLE "acme_age_gender_wise_deceased_population" '
        "(id TEXT, age_group TEXT, gender TEXT, deceased_population TEXT)"
    ))
    db_session.execute(text(
        "INSERT INTO acme_age_gender_wise_deceased_population VALUES ('1', 'AGE_1_YEAR', 'MALE', '3')"
    ))
    db_session.commit()

    rows = BirthCertificatePopulationService(db_session).get_all()
    assert [row["ward_number"] for row in rows] == [1, 2]
    assert BirthCertificatePopulationService(db_session).summary()["coverage_percentage"] == 76.0

    assert DeceasedPopulationService(db_session).summary()["total_deceased"] == 3


def test_foreign_employment_summary_over_legacy_rows(client, db_session):
    db_session.execute(text(
        'CREATE TABLE "acme_ward_wise_foreign_employment_countries" '
        "(id TEXT, age_group TEXT, gender TEXT, country TEXT, population TEXT, total TEXT)"
    ))
    db_session.execute(text(
        "INSERT INTO acme_ward_wise_foreign_employment_countries VALUES "
        "('1', 'TOTAL', 'TOTAL', 'INDIA', '100', '100'), "
        "('2', 'TOTAL', 'TOTAL', 'MIDDLE_EAST', '300', '300'), "
        "('3', '15-24', 'MALE', 'INDIA', '40', '40')"
    ))
    db_session.commit()

    url = "/api/profile/economics/foreign-employment-countries"
    summary = client.get(f"{url}/summary").json()
    assert summary["total_population"] == 400
    assert [row["country"] for row in summary["countries"]] == ["MIDDLE_EAST", "INDIA"]
    assert summary["countries"][0]["percentage"] == 75.0

    rows = client.get(f"{url}/by-group", params={"age_group": "15-24"}).json()
    assert [row["population"] for row in rows] == [40]
