"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client (anonymous and logged-in admin)
- Company/job factories
"""

import os

# Keep the app's own engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.core.config import settings
from jobboard.core.database import Base, get_db
from jobboard.services import company_service, job_service
import jobboard.models  # noqa: F401 - register models
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _login(client, username=None, password=None):
    """Fetch the login form (sets the CSRF cookie) and post credentials."""
    client.get("/login")
    csrf_token = client.cookies.get(settings.CSRF_COOKIE_NAME)
    return client.post(
        "/login",
        data={
            "username": username or settings.ADMIN_USERNAME,
            "password": password or settings.ADMIN_PASSWORD,
            "csrf_token": csrf_token,
        },
        follow_redirects=False,
    )


@pytest.fixture
def login():
    """Helper posting the admin login form for a given client."""
    return _login


@pytest.fixture
def admin_client(client):
    """Test client holding an admin session cookie."""
    response = _login(client)
    assert response.status_code == 303
    return client


@pytest.fixture
def company(db_session):
    return company_service.create(db_session, name="Acme", website="https://acme.example")


@pytest.fixture
def make_job(db_session, company):
    """Factory creating jobs under the default company."""
    def _make_job(title="Backend Engineer", company_id=None, **fields):
        return job_service.create(
            db_session,
            title=title,
            description=fields.get("description", "Build and run our Python services."),
            location=fields.get("location", "Berlin"),
            tags=fields.get("tags", "python, fastapi"),
            company_id=company_id or company.id,
            status=fields.get("status"),
        )

    return _make_job


@pytest.fixture
def sample_job_data(company):
    """Sample job data for testing (API camelCase body)"""
    return {
        "title": "Senior Python Developer",
        "description": """
        We are looking for a Senior Python Developer with 5+ years of experience.

        Requirements:
        - Expert knowledge of Python and FastAPI
        - Strong experience with PostgreSQL
        """,
        "location": "San Francisco, CA (Remote)",
        "tags": "python, fastapi, postgres",
        "companyId": company.id,
    }


@pytest.fixture
def sample_application_data():
    return {
        "applicantName": "Jane Doe",
        "applicantEmail": "jane@example.com",
        "coverLetter": "I would love to join.",
        "resumeUrl": "https://cv.example/jane.pdf",
    }
