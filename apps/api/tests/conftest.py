from __future__ import annotations

import os
import tempfile
from collections.abc import Callable
from itertools import count

import pytest
from fastapi.testclient import TestClient

# Ensure settings are set before app import
_db_dir = tempfile.mkdtemp(prefix="campus-events-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+pysqlite:///{os.path.join(_db_dir, 'test.db')}")
os.environ.setdefault("JWT_SECRET", "test_jwt_secret_32_chars_minimum")
os.environ.setdefault("ACCESS_TOKEN_TTL_SECONDS", "86400")
os.environ.setdefault("ENV", "local")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("AUTO_CREATE_SCHEMA", "false")

from campus_events.db import SessionLocal, engine  # noqa: E402
from campus_events.main import app  # noqa: E402
from campus_events.models import Base  # noqa: E402

PASSWORD = "Str0ng!pass"

_student_numbers = count(1000)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def clean_db():
    # Fresh schema for each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


def next_email() -> str:
    return f"2-u{next(_student_numbers)}@students.git.edu"


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_account(client: TestClient) -> Callable[..., str]:
    """Register an account over HTTP and return its bearer token."""

    def _make(role: str = "user", email: str | None = None) -> str:
        resp = client.post(
            "/v1/auth/register",
            json={"email": email or next_email(), "password": PASSWORD, "role": role},
        )
        assert resp.status_code == 200, resp.text
        return resp.json()["token"]

    return _make


@pytest.fixture
def admin_token(make_account) -> str:
    return make_account("admin")


@pytest.fixture
def user_token(make_account) -> str:
    return make_account("user")


def event_payload(**overrides) -> dict:
    payload = {
        "event_id": "EVT-001",
        "name": "Orientation",
        "description": "Welcome session",
        "start_date": "2024-01-10",
        "start_time": "09:00",
        "end_date": "2024-01-10",
        "end_time": "10:00",
        "venue": "Main Hall",
        "max_participants": None,
        "registration_deadline_date": None,
        "registration_deadline_time": None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_event(client: TestClient, admin_token: str):
    def _create(**overrides):
        return client.post("/v1/events", json=event_payload(**overrides), headers=auth_headers(admin_token))

    return _create
