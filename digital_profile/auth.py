"""
Identity resolution and role checks for administrative mutations.

Identity comes from the reverse proxy headers. Emails listed in
``ADMIN_EMAILS`` are promoted to ``superadmin``; every other identified
caller is a ``viewer``.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from fastapi import Header

from digital_profile.config import settings
from digital_profile.exceptions import UnauthorizedError

SUPERADMIN = "superadmin"
VIEWER = "viewer"


@dataclass
class CurrentUser:
    email: Optional[str]
    name: Optional[str]
    role: str

    @property
    def is_authenticated(self) -> bool:
        return bool(self.email)


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    return email.strip().lower()


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str],
    x_auth_request_email: Optional[str],
    x_forwarded_user: Optional[str],
    x_forwarded_email: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    user = x_auth_request_user or x_forwarded_user
    email = _normalize_email(x_auth_request_email or x_forwarded_email)
    return user, email


def role_for_email(email: Optional[str]) -> str:
    if email and email in settings.admin_emails:
        return SUPERADMIN
    return VIEWER


def get_current_user(
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
) -> CurrentUser:
    """FastAPI dependency returning the caller (possibly anonymous)."""
    name, email = resolve_identity_from_headers(
        x_auth_request_user=x_auth_request_user,
        x_auth_request_email=x_auth_request_email,
        x_forwarded_user=x_forwarded_user,
        x_forwarded_email=x_forwarded_email,
    )
    return CurrentUser(email=email, name=name, role=role_for_email(email))


def ensure_superadmin(user: Optional[CurrentUser], action: str, label: str):
    """Raise UnauthorizedError unless the caller may run the mutation."""
    if user is None or not user.is_authenticated or user.role != SUPERADMIN:
        raise UnauthorizedError(f"Only administrators can {action} {label}")
