from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry, AttendanceSession, UpsertResult


class AttendanceRepository(Protocol):
    def get_for_class_and_date(self, class_id: str, session_date: date) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def list_for_class(self, class_id: str) -> Sequence[AttendanceSession]:
        """Sessions of a class in insertion order."""

        raise NotImplementedError

    def upsert(self, *, class_id: str, session_date: date, records: Sequence[AttendanceEntry]) -> UpsertResult:
        """Create the session for (class_id, session_date) or replace its records wholesale.

        Must be atomic per key: concurrent calls for the same new key never
        produce two sessions.
        """

        raise NotImplementedError
