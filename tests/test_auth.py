import pytest

from digital_profile.auth import (
    CurrentUser,
    SUPERADMIN,
    VIEWER,
    ensure_superadmin,
    resolve_identity_from_headers,
    role_for_email,
)
from digital_profile.exceptions import UnauthorizedError
from tests.conftest import ADMIN_HEADERS, VIEWER_HEADERS

CASTE_URL = "/api/profile/demographics/caste-population"


def test_role_for_email_is_case_insensitive_via_normalization():
    _, email = resolve_identity_from_headers(None, "  Second.Admin@Example.COM ", None, None)
    assert email == "second.admin@example.com"
    assert role_for_email(email) == SUPERADMIN


def test_unknown_email_is_viewer():
    assert role_for_email("someone@example.com") == VIEWER
    assert role_for_email(None) == VIEWER


def test_forwarded_headers_are_used_as_fallback():
    user, email = resolve_identity_from_headers(None, None, "fwd-user", "admin@example.com")
    assert user == "fwd-user"
    assert email == "admin@example.com"


def test_ensure_superadmin_rejects_viewer(viewer_user):
    with pytest.raises(UnauthorizedError) as excinfo:
        ensure_superadmin(viewer_user, "create", "caste population data")
    assert excinfo.value.message == "Only administrators can create caste population data"
    assert excinfo.value.code == "UNAUTHORIZED"


def test_ensure_superadmin_rejects_anonymous():
    with pytest.raises(UnauthorizedError):
        ensure_superadmin(None, "delete", "data")
    with pytest.raises(UnauthorizedError):
        ensure_superadmin(CurrentUser(email=None, name=None, role=SUPERADMIN), "delete", "data")


def test_ensure_superadmin_allows_admin(admin_user):
    ensure_superadmin(admin_user, "update", "data")


def test_viewer_cannot_create_over_http(client):
    response = client.post(
        CASTE_URL,
        json={"caste_type": "magar", "male_population": 1, "female_population": 1},
        headers=VIEWER_HEADERS,
    )
    assert response.status_code == 401
    body = response.json()
    assert body["code"] == "UNAUTHORIZED"
    assert body["error"] == "Only administrators can create caste population data"


def test_anonymous_cannot_delete_over_http(client):
    response = client.delete(f"{CASTE_URL}/some-id")
    assert response.status_code == 401
    assert response.json()["error"] == "Only administrators can delete caste population data"


def test_admin_can_create_over_http(client):
    response = client.post(
        CASTE_URL,
        json={"caste_type": "magar", "male_population": 1, "female_population": 1},
        headers=ADMIN_HEADERS,
    )
    assert response.status_code == 200
    assert response.json()["success"] is True
