"""
Typed errors raised by the profile procedures.

Each error carries the HTTP status it maps to and an RPC-style code so that
clients can branch on ``code`` without parsing messages.
"""


class ProfileError(Exception):
    """Base class for all procedure errors."""

    status_code = 500
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "code": self.code,
            "status_code": self.status_code,
        }


class BadRequestError(ProfileError):
    status_code = 400
    code = "BAD_REQUEST"


class UnauthorizedError(ProfileError):
    status_code = 401
    code = "UNAUTHORIZED"


class NotFoundError(ProfileError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(ProfileError):
    status_code = 409
    code = "CONFLICT"


class InternalServerError(ProfileError):
    """Raised when a query fails at the procedure boundary."""
