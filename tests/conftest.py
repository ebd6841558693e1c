"""Pytest configuration and fixtures."""

import os

# Must be set before the application modules read their settings
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("ROUTE_CACHE_URL", "memory://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from app import app
from core.base import Base
from core.containers import CatalogContainer
from core.database import get_db
from src.auth_bc.user.domain.entities import UserRole
from src.auth_bc.user.infrastructure.models import UserModel
from src.auth_bc.user.infrastructure.services import PasswordHasher
from src.catalog_bc.routing import route_cache
from src.framework.application import CommandBus, QueryBus

ADMIN_PASSWORD = "admin123"
AGENCY_PASSWORD = "agency123"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def fresh_database():
    """Every test starts with empty tables and an empty route cache."""
    Base.metadata.create_all(bind=engine)
    route_cache.invalidate_all()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def command_bus(db_session):
    return CommandBus(CatalogContainer(session=db_session))


@pytest.fixture
def query_bus(db_session):
    return QueryBus(CatalogContainer(session=db_session))


@pytest.fixture(scope="session")
def password_hashes():
    """bcrypt is slow on purpose; hash the test passwords once per run."""
    hasher = PasswordHasher()
    return {
        "admin": hasher.hash(ADMIN_PASSWORD),
        "agency": hasher.hash(AGENCY_PASSWORD),
    }


@pytest.fixture
def users(db_session, password_hashes):
    """Create the admin (ADMIN) and agency (AGENCY) users."""
    db_session.add_all([
        UserModel(username="admin", password_hash=password_hashes["admin"], role=UserRole.ADMIN.value, is_active=True),
        UserModel(username="agency", password_hash=password_hashes["agency"], role=UserRole.AGENCY.value, is_active=True),
    ])
    db_session.commit()


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def api_base_url():
    """Base URL for the flight routes API."""
    return "/api"


def _login(client, api_base_url, username, password):
    response = client.post(f"{api_base_url}/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def admin_headers(client, api_base_url, users):
    return _login(client, api_base_url, "admin", ADMIN_PASSWORD)


@pytest.fixture
def agency_headers(client, api_base_url, users):
    return _login(client, api_base_url, "agency", AGENCY_PASSWORD)
