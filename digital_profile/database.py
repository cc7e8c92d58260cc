"""
Database connection and session management.
"""
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from digital_profile.config import settings
from typing import Generator

# Database URL (PostgreSQL or SQLite)
SQLALCHEMY_DATABASE_URL = settings.database_url

# Create engine with appropriate settings
if settings.is_postgres:
    # PostgreSQL settings
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        echo=False,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )
else:
    # SQLite settings
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=False,
        pool_pre_ping=True,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()


# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for ORM models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database session.
    Use with FastAPI's Depends().
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def table_exists(db: Session, table_name: str) -> bool:
    """Check whether a table is present on the session's connection."""
    return inspect(db.connection()).has_table(table_name)


def init_db(bind=None):
    """Initialize database by creating all tables."""
    from digital_profile.models import demographics, economics, education, fertility, municipality, physical  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
