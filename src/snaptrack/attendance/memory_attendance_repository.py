from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from .model import AttendanceEntry, AttendanceSession, UpsertResult
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Ledger kept in process memory.

    One lock serializes every upsert, so the lookup and the append/replace
    happen as a single step.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._sessions: Dict[Tuple[str, date], AttendanceSession] = {}

    def get_for_class_and_date(self, class_id: str, session_date: date) -> Optional[AttendanceSession]:
        return self._sessions.get((class_id, session_date))

    def list_for_class(self, class_id: str) -> List[AttendanceSession]:
        with self._lock:
            return [s for s in self._sessions.values() if s.class_id == class_id]

    def upsert(self, *, class_id: str, session_date: date, records: Sequence[AttendanceEntry]) -> UpsertResult:
        key = (class_id, session_date)
        with self._lock:
            existing = self._sessions.get(key)
            if existing:
                # Replacing the value keeps the key's original insertion position.
                updated = replace(existing, records=tuple(records))
                self._sessions[key] = updated
                return UpsertResult(session=updated, created=False)

            session = AttendanceSession(
                session_id=str(next(self._ids)),
                class_id=class_id,
                session_date=session_date,
                records=tuple(records),
            )
            self._sessions[key] = session
            return UpsertResult(session=session, created=True)
