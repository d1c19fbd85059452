from __future__ import annotations

import pytest

from snaptrack.container import build_container
from snaptrack.core.enums import Role
from snaptrack.main import create_app
from snaptrack.users.model import Caller


@pytest.fixture
def container():
    """Empty in-memory container with a teacher/student roster but no attendance."""
    c = build_container(signing_key="unit-test-secret", backend="memory")
    c.user_service.register(user_id="t1", name="Tina Teacher", email="t1@school.test", password="pw-t1", role=Role.TEACHER)
    c.user_service.register(user_id="t2", name="Tom Teacher", email="t2@school.test", password="pw-t2", role=Role.TEACHER)
    c.user_service.register(user_id="s1", name="Sam Student", email="s1@school.test", password="pw-s1", role=Role.STUDENT)
    c.user_service.register(user_id="s2", name="Sue Student", email="s2@school.test", password="pw-s2", role=Role.STUDENT)
    c.roster_service.register_class(class_id="c1", name="Algebra", schedule="MWF 9:00", teacher_id="t1", student_ids=["s1", "s2"])
    c.roster_service.register_class(class_id="c2", name="Biology", schedule="TTh 11:00", teacher_id="t2", student_ids=["s2"])
    return c


@pytest.fixture
def teacher() -> Caller:
    return Caller(user_id="t1", role=Role.TEACHER)


@pytest.fixture
def other_teacher() -> Caller:
    return Caller(user_id="t2", role=Role.TEACHER)


@pytest.fixture
def student() -> Caller:
    return Caller(user_id="s1", role=Role.STUDENT)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    return create_app("snaptrack.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(email: str, password: str = "password") -> dict:
        resp = client.post("/api/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return {"Authorization": f"Bearer {resp.get_json()['token']}"}

    return _login
