"""
Routers package initialization.
"""
from digital_profile.routers import demographics
from digital_profile.routers import economics
from digital_profile.routers import education
from digital_profile.routers import fertility
from digital_profile.routers import municipality
from digital_profile.routers import physical

__all__ = [
    "demographics",
    "economics",
    "education",
    "fertility",
    "municipality",
    "physical",
]
