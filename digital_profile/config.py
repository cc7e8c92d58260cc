"""
Application configuration settings.
"""
from pydantic_settings import BaseSettings
from typing import List
import logging
import os


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - PostgreSQL for production, SQLite for local
    DATABASE_URL: str = ""  # PostgreSQL connection string (production)
    DATABASE_PATH: str = "data/digital_profile.db"  # SQLite path (local fallback)
    USE_POSTGRES: bool = False  # Set to True to use PostgreSQL

    # Raw tables kept by the earlier deployment (e.g. acme_religion_population)
    LEGACY_TABLE_PREFIX: str = "acme_"

    # Seed CSVs for scripts/init_database.py
    SEED_DATA_DIR: str = "data/seed"

    # API settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Digital Profile API"
    VERSION: str = "1.0.0"

    # Municipality identity
    MUNICIPALITY_ID: int = 1
    MUNICIPALITY_NAME: str = "परिवर्तन गाउँपालिका"
    MUNICIPALITY_NAME_ENGLISH: str = "Khajura Rural Municipality"

    # Fallbacks used by the ward demographics procedures
    AVERAGE_HOUSEHOLD_SIZE: float = 2.87
    DEFAULT_TOTAL_POPULATION: int = 21671
    DEFAULT_TOTAL_AREA_SQ_KM: float = 163.01
    DEFAULT_TOTAL_WARDS: int = 6

    # Comma separated list of superadmin emails
    ADMIN_EMAILS: str = ""

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "*"
    ]

    # Pagination
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 1000

    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        """Get database URL - PostgreSQL if configured, else SQLite."""
        if self.USE_POSTGRES and self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DATABASE_PATH}"

    @property
    def is_postgres(self) -> bool:
        """Check if using PostgreSQL."""
        return self.USE_POSTGRES and bool(self.DATABASE_URL)

    @property
    def admin_emails(self) -> set:
        """Normalized superadmin emails."""
        emails = set()
        for entry in self.ADMIN_EMAILS.split(","):
            cleaned = entry.strip().strip('"').strip("'")
            if cleaned:
                emails.add(cleaned.lower())
        return emails

    class Config:
        env_file = ".env"
        extra = "allow"


# Global settings instance
settings = Settings()


def configure_logging():
    """Configure root logging once for the API process."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


# Ensure directories exist
def ensure_directories():
    """Create necessary directories if they don't exist."""
    dirs = [settings.SEED_DATA_DIR]
    if not settings.is_postgres:
        dirs.append(os.path.dirname(settings.DATABASE_PATH))
    for dir_path in dirs:
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
