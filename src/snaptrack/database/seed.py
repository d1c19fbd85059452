"""Demo data: one teacher, one student, two classes and two attendance sessions.

Seeding is idempotent; records that already exist are left untouched.
"""
from __future__ import annotations

import logging
from datetime import date

from ..attendance.model import AttendanceEntry
from ..container import Container
from ..core.enums import AttendanceStatus, Role

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"

DEMO_USERS = [
    {"user_id": "1", "name": "John Doe", "email": "teacher@example.com", "role": Role.TEACHER},
    {"user_id": "2", "name": "Jane Smith", "email": "student@example.com", "role": Role.STUDENT},
]

DEMO_CLASSES = [
    {
        "class_id": "1",
        "name": "Mathematics 101",
        "schedule": "MWF 9:00 AM - 10:30 AM",
        "teacher_id": "1",
        "student_ids": ["2"],
    },
    {
        "class_id": "2",
        "name": "Physics 201",
        "schedule": "TTh 11:00 AM - 12:30 PM",
        "teacher_id": "1",
        "student_ids": ["2"],
    },
]

DEMO_SESSIONS = [
    ("1", date(2025, 4, 1), [("2", AttendanceStatus.PRESENT)]),
    ("1", date(2025, 4, 3), [("2", AttendanceStatus.ABSENT)]),
]


def seed_demo_data(container: Container) -> None:
    for u in DEMO_USERS:
        if container.users_repo.get_by_id(u["user_id"]) or container.users_repo.get_by_email(u["email"]):
            continue
        container.user_service.register(password=DEMO_PASSWORD, **u)

    for c in DEMO_CLASSES:
        if container.classes_repo.get_by_id(c["class_id"]):
            continue
        container.roster_service.register_class(**c)

    for class_id, day, rows in DEMO_SESSIONS:
        if container.attendance_repo.get_for_class_and_date(class_id, day):
            continue
        container.attendance_service.seed_session(
            class_id=class_id,
            session_date=day,
            records=[AttendanceEntry(student_id=sid, status=status) for sid, status in rows],
        )

    logger.info("demo data ready (%d users, %d classes)", len(DEMO_USERS), len(DEMO_CLASSES))
