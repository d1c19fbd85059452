from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    student_id: str
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceSession:
    """Domain entity: attendance of one class on one date.

    At most one session exists per (class_id, session_date).
    """

    session_id: str
    class_id: str
    session_date: date
    records: Tuple[AttendanceEntry, ...]


@dataclass(frozen=True)
class UpsertResult:
    session: AttendanceSession
    created: bool
