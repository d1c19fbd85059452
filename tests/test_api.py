from __future__ import annotations

import importlib

import pytest

import snaptrack.config.production as production
from snaptrack.core.enums import Role
from snaptrack.core.exceptions import ConfigurationError
from snaptrack.main import create_app


def test_login_returns_token_and_public_user(client):
    resp = client.post("/api/auth/login", json={"email": "teacher@example.com", "password": "password"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["token"]
    assert body["user"] == {"id": "1", "name": "John Doe", "email": "teacher@example.com", "role": "teacher"}


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "teacher@example.com", "password": "wrong"},
        {"email": "ghost@example.com", "password": "password"},
        {},
    ],
)
def test_login_failures_share_one_response(client, payload):
    resp = client.post("/api/auth/login", json=payload)
    assert resp.status_code == 401
    assert resp.get_json() == {"message": "Invalid email or password"}


def test_missing_token_is_401_and_bad_token_is_403(client):
    assert client.get("/api/classes/teacher").status_code == 401
    assert client.get("/api/classes/teacher", headers={"Authorization": "Bearer"}).status_code == 401
    resp = client.get("/api/classes/teacher", headers={"Authorization": "Bearer forged.token"})
    assert resp.status_code == 403


def test_class_listings_are_role_exclusive(client, login):
    teacher = login("teacher@example.com")
    student = login("student@example.com")

    resp = client.get("/api/classes/teacher", headers=teacher)
    assert resp.status_code == 200
    assert [c["name"] for c in resp.get_json()] == ["Mathematics 101", "Physics 201"]
    assert resp.get_json()[0] == {
        "id": "1",
        "name": "Mathematics 101",
        "schedule": "MWF 9:00 AM - 10:30 AM",
        "teacherId": "1",
        "students": ["2"],
    }

    assert client.get("/api/classes/student", headers=student).status_code == 200
    assert client.get("/api/classes/student", headers=teacher).status_code == 403
    assert client.get("/api/classes/teacher", headers=student).status_code == 403


def test_seeded_sessions_are_visible(client, login):
    resp = client.get("/api/attendance/1", headers=login("student@example.com"))
    assert resp.status_code == 200
    assert resp.get_json() == [
        {"id": "1", "classId": "1", "date": "2025-04-01", "records": [{"studentId": "2", "status": "present"}]},
        {"id": "2", "classId": "1", "date": "2025-04-03", "records": [{"studentId": "2", "status": "absent"}]},
    ]


def test_class_without_sessions_returns_empty_list(client, login):
    resp = client.get("/api/attendance/2", headers=login("teacher@example.com"))
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_mark_create_then_update_then_read(client, login):
    teacher = login("teacher@example.com")
    student = login("student@example.com")

    created = client.post(
        "/api/attendance",
        headers=teacher,
        json={"classId": "2", "date": "2025-04-01", "records": [{"studentId": "2", "status": "present"}]},
    )
    assert created.status_code == 201
    assert created.get_json()["records"] == [{"studentId": "2", "status": "present"}]

    updated = client.post(
        "/api/attendance",
        headers=teacher,
        json={"classId": "2", "date": "2025-04-01", "records": [{"studentId": "2", "status": "absent"}]},
    )
    assert updated.status_code == 200
    assert updated.get_json()["id"] == created.get_json()["id"]

    sessions = client.get("/api/attendance/2", headers=student).get_json()
    assert len(sessions) == 1
    assert sessions[0]["date"] == "2025-04-01"
    assert sessions[0]["records"] == [{"studentId": "2", "status": "absent"}]


def test_student_cannot_mark_attendance(client, login):
    resp = client.post(
        "/api/attendance",
        headers=login("student@example.com"),
        json={"classId": "1", "date": "2025-04-05", "records": []},
    )
    assert resp.status_code == 403


def test_unknown_class_is_404(client, login):
    resp = client.post(
        "/api/attendance",
        headers=login("teacher@example.com"),
        json={"classId": "99", "date": "2025-04-05", "records": []},
    )
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Class not found or not authorized"}


def test_malformed_mark_is_400(client, login):
    teacher = login("teacher@example.com")
    bad_date = client.post("/api/attendance", headers=teacher, json={"classId": "1", "date": "soon", "records": []})
    bad_status = client.post(
        "/api/attendance",
        headers=teacher,
        json={"classId": "1", "date": "2025-04-05", "records": [{"studentId": "2", "status": "asleep"}]},
    )
    assert bad_date.status_code == 400
    assert bad_status.status_code == 400


def test_other_teacher_is_refused(app, client):
    container = app.extensions["snaptrack.container"]
    container.user_service.register(
        user_id="3", name="Other Teacher", email="other@example.com", password="password", role=Role.TEACHER
    )
    login = client.post("/api/auth/login", json={"email": "other@example.com", "password": "password"})
    headers = {"Authorization": f"Bearer {login.get_json()['token']}"}

    assert client.get("/api/attendance/1", headers=headers).status_code == 403
    assert client.get("/api/classes/teacher", headers=headers).get_json() == []
    mark = client.post(
        "/api/attendance",
        headers=headers,
        json={"classId": "1", "date": "2025-04-01", "records": []},
    )
    assert mark.status_code == 404


def test_unexpected_error_is_500_without_detail(app, client, login, monkeypatch):
    container = app.extensions["snaptrack.container"]

    def boom(class_id):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(container.attendance_repo, "list_for_class", boom)
    resp = client.get("/api/attendance/1", headers=login("teacher@example.com"))
    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Server error"}


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_production_settings_refuse_missing_secret(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    importlib.reload(production)

    with pytest.raises(ConfigurationError):
        create_app("snaptrack.config.production")
