import os

# Settings are read at import time
os.environ["ADMIN_EMAILS"] = "admin@example.com, Second.Admin@Example.com"
os.environ["DATABASE_PATH"] = ":memory:"
os.environ["USE_POSTGRES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from digital_profile.auth import CurrentUser, SUPERADMIN, VIEWER
from digital_profile.database import get_db, init_db
from digital_profile.main import app

ADMIN_HEADERS = {"X-Auth-Request-Email": "admin@example.com", "X-Auth-Request-User": "admin"}
VIEWER_HEADERS = {"X-Auth-Request-Email": "viewer@example.com", "X-Auth-Request-User": "viewer"}


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def admin_user():
    return CurrentUser(email="admin@example.com", name="admin", role=SUPERADMIN)


@pytest.fixture()
def viewer_user():
    return CurrentUser(email="viewer@example.com", name="viewer", role=VIEWER)
