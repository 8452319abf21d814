from __future__ import annotations

import os

os.environ["APP_ENV"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from accubooks.core.config import settings  # noqa: E402
from accubooks.core.security import create_access_token  # noqa: E402
from accubooks.db import session as session_module  # noqa: E402
from accubooks.db.base_class import Base  # noqa: E402
from accubooks.db.session import SessionLocal  # noqa: E402
from accubooks.models import models  # noqa: E402,F401

TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    future=True,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Ensure application code uses the test engine
settings.DATABASE_URL = TEST_DATABASE_URL  # type: ignore[attr-defined]
settings.ENV = "test"  # type: ignore[attr-defined]
session_module.engine = test_engine  # type: ignore[assignment]
SessionLocal.configure(bind=test_engine)


@pytest.fixture(autouse=True)
def _reset_database_state():
    """Ensure each test sees a fresh database schema."""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield


@pytest.fixture
def db_session():
    """Provide a database session for tests."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


from accubooks.api.main import app  # noqa: E402


@pytest.fixture
def client():  # noqa: D401 - simple factory fixture
    """Provide a FastAPI TestClient bound to the application."""
    return TestClient(app)


def auth_headers_for(user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def auth_headers():
    return auth_headers_for("user-a")


@pytest.fixture
def other_auth_headers():
    return auth_headers_for("user-b")


@pytest.fixture
def company(client, auth_headers):
    """Company profile for ``user-a`` with the default accounts seeded."""
    resp = client.post(
        "/company",
        json={"company_name": "Acme Traders", "gstin": "27AAPFU0939F1ZV"},
        headers=auth_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def accounts_by_name(client, auth_headers, company):
    resp = client.get("/accounts", headers=auth_headers)
    assert resp.status_code == 200, resp.text
    return {account["account_name"]: account for account in resp.json()}
