from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access decisions."""

    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Per-student status stored inside an attendance session."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"
