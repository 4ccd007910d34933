"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown (in-memory SQLite)
- FastAPI test client wired to the test database
- Registered provider/seeker users with auth headers
- Sample profile payloads
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool

from dailywage.core.database import Base, create_session_factory
from dailywage.crud.profile import ProfileRepository
from dailywage.crud.user import UserRepository
from dailywage.models.user import UserRole
from dailywage.services.listing_service import ListingService
from main import create_app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    """
    A fresh in-memory database per test.

    StaticPool keeps the single connection alive so every session (and
    the TestClient's worker threads) sees the same database.
    """
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        dbapi_connection.execute("PRAGMA foreign_keys = ON")

    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def users(session_factory):
    return UserRepository(session_factory)


@pytest.fixture
def profiles(session_factory):
    return ProfileRepository(session_factory)


@pytest.fixture
def listings(session_factory):
    return ListingService(session_factory)


@pytest.fixture
def client(session_factory):
    """
    FastAPI test client using the test session factory.
    """
    app = create_app(session_factory=session_factory)

    with TestClient(app) as test_client:
        yield test_client


def register(client, name, phone, role, password="secret123"):
    """Register through the API and return the response body."""
    response = client.post(
        "/api/auth/register",
        json={"name": name, "phone": phone, "password": password, "role": role}
    )
    assert response.status_code == 200, response.text
    return response.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def provider_user(client):
    """A registered provider: {"user": ..., "token": ..., "headers": ...}"""
    data = register(client, "Ravi Kumar", "9000000001", "provider")
    data["headers"] = auth_headers(data["token"])
    return data


@pytest.fixture
def seeker_user(client):
    """A registered seeker: {"user": ..., "token": ..., "headers": ...}"""
    data = register(client, "Sita Devi", "9000000002", "seeker")
    data["headers"] = auth_headers(data["token"])
    return data


@pytest.fixture
def make_user(users):
    """Create users directly through the repository (no HTTP)."""
    counter = {"n": 0}

    def _make(role=UserRole.SEEKER, name=None):
        counter["n"] += 1
        n = counter["n"]
        return users.create(
            name=name or f"User {n}",
            phone=f"98{n:08d}",
            password_hash="not-a-real-hash",
            role=role,
        )

    return _make


@pytest.fixture
def provider_payload():
    """Sample provider profile (job posting) request body"""
    return {
        "workType": "Construction",
        "budgetPerDay": 800,
        "workersNeeded": 3,
        "workingHours": "Full Day",
        "location": "Pune, Maharashtra",
        "workStartTime": "08:00"
    }


@pytest.fixture
def seeker_payload():
    """Sample seeker profile request body"""
    return {
        "workTypes": ["Plumbing", "Painting"],
        "expectedWage": 600,
        "hoursAvailability": "Half Day",
        "availableDays": ["Mon", "Tue", "Wed"],
        "location": "Pune",
        "experience": "5 years of plumbing work"
    }
