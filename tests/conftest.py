"""
Shared pytest fixtures.

Every test gets its own seeded context so session and store state never leak
between tests.
"""

import pytest
from fastapi.testclient import TestClient

from context import AppContext, create_context
from main import create_app
from models import MedicalRecord, Patient, Role, User


@pytest.fixture
def ctx() -> AppContext:
    """A context seeded with the demo users and patients."""
    return create_context(seed=True)


@pytest.fixture
def empty_ctx() -> AppContext:
    return create_context(seed=False)


@pytest.fixture
def client(ctx: AppContext) -> TestClient:
    return TestClient(create_app(ctx))


@pytest.fixture
def login(client: TestClient):
    """Log in through the API and return the response body."""
    def _login(username: str, password: str) -> dict:
        response = client.post("/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return response.json()
    return _login


@pytest.fixture
def john(ctx: AppContext) -> Patient:
    return ctx.patients.filter("john.smith")[0]


def make_user(username: str = "nurse1", password: str = "nurse123", role: Role = Role.VISITOR) -> User:
    return User(
        username=username,
        password=password,
        email=f"{username}@example.com",
        first_name="Test",
        last_name="User",
        role=role,
    )


def make_record(diagnosis: str = "Sprained ankle") -> MedicalRecord:
    return MedicalRecord(
        doctor_name="Dr. Test",
        diagnosis=diagnosis,
        symptoms="Swelling",
        treatment="Rest",
        notes="",
        prescriptions="None",
        record_type="Illness",
    )
