# tests/conftest.py
"""
Pytest configuration and fixtures.

Provides:
- in-memory SQLite database, schema rebuilt for every test
- AppService with a deterministic clock
- FastAPI test client + login helper

Environment is set before any app import so Settings picks it up.
"""

import os
import tempfile
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="mts-logs-")


from app.main import app
from app.database import Base, SessionLocal, engine
from app.seed import seed_demo_data
from app.services.app_service import AppService


class TickingClock:
    """Returns a strictly increasing time on every call."""

    def __init__(self, start=datetime(2024, 3, 1, 9, 0, 0), step=timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def service(db, clock):
    return AppService(db, clock=clock)


@pytest.fixture
def seeded(service):
    seed_demo_data(service)
    return service


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def login_as(client):
    def _login(username: str, password: str = "password") -> dict:
        resp = client.post("/api/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['accessToken']}"}

    return _login
