from __future__ import annotations

import os
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_USE_MYSQL"] = "false"
    os.environ["ADMIN_EMAILS"] = '["admin@example.com"]'
    os.environ["ENVIRONMENT"] = "test"
    # LLM features must never reach the network from tests.
    os.environ["GEMINI_API_KEY"] = ""


@pytest.fixture()
def client() -> Any:
    from career_platform.database import Base, engine
    from career_platform.main import create_app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers(client) -> Callable[..., dict[str, str]]:
    def _make(email: str = "student@example.com", *, skills: str | None = None, **profile: Any) -> dict[str, str]:
        payload = {"email": email, "password": "SecretPass123", "full_name": "Test Student"}
        r = client.post("/auth/register", json=payload)
        assert r.status_code == 201, r.text
        r = client.post("/auth/login", json={"email": email, "password": "SecretPass123"})
        assert r.status_code == 200, r.text
        headers = {"Authorization": f"Bearer {r.json()['access_token']}"}
        update = dict(profile)
        if skills is not None:
            update["skills"] = skills
        if update:
            r = client.put("/users/me/profile", json=update, headers=headers)
            assert r.status_code == 200, r.text
        return headers

    return _make


@pytest.fixture()
def seed_catalog(client) -> Callable[..., None]:
    from career_platform.database import SessionLocal
    from career_platform.models.job import Job
    from career_platform.models.resource import Resource

    def _seed(jobs: list[dict[str, Any]], resources: list[dict[str, Any]] | None = None) -> None:
        with SessionLocal() as db:
            for item in jobs:
                db.add(Job(**item))
            for item in resources or []:
                db.add(Resource(**item))
            db.commit()

    return _seed
