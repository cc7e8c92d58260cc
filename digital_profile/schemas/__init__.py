"""
Schemas package initialization.
"""
from digital_profile.schemas.common import MutationResponse, HealthResponse, ErrorResponse

__all__ = ["MutationResponse", "HealthResponse", "ErrorResponse"]
