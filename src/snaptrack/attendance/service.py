from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Sequence

from ..classes.model import ClassSection
from ..classes.repository import ClassRepository
from ..common.datetime_utils import parse_session_date
from ..common.validators import require_list
from ..core import policy
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..users.model import Caller
from .model import AttendanceEntry, AttendanceSession, UpsertResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark and read per-class, per-date attendance.

    Marking is an upsert keyed by (class, date). A second mark for the same key
    replaces the whole record list; students left out of the new submission
    lose their earlier status for that date.
    """

    def __init__(self, attendance: AttendanceRepository, classes: ClassRepository):
        self._attendance = attendance
        self._classes = classes

    def _find_class(self, class_id: Any):
        if not isinstance(class_id, str) or not class_id:
            return None
        return self._classes.get_by_id(class_id)

    @staticmethod
    def _parse_records(section: ClassSection, raw_records: Any) -> List[AttendanceEntry]:
        entries: List[AttendanceEntry] = []
        seen = set()
        for item in require_list(raw_records, "Records"):
            if not isinstance(item, dict):
                raise ValidationError("Each record must be an object with studentId and status")

            student_id = item.get("studentId")
            if not isinstance(student_id, str) or not student_id:
                raise ValidationError("Each record needs a studentId")
            try:
                status = AttendanceStatus(item.get("status"))
            except ValueError:
                allowed = ", ".join(s.value for s in AttendanceStatus)
                raise ValidationError(f"Invalid status for student {student_id} (allowed: {allowed})")

            if student_id in seen:
                raise ValidationError(f"Student {student_id} appears more than once")
            if not section.has_student(student_id):
                raise ValidationError(f"Student {student_id} is not enrolled in this class")

            seen.add(student_id)
            entries.append(AttendanceEntry(student_id=student_id, status=status))
        return entries

    def mark_attendance(self, caller: Caller, *, class_id: Any, session_date: Any, records: Any) -> UpsertResult:
        section = self._find_class(class_id)
        policy.ensure_can_mark_attendance(caller, section)

        day = parse_session_date(session_date)
        entries = self._parse_records(section, records)

        result = self._attendance.upsert(class_id=section.class_id, session_date=day, records=entries)
        logger.info(
            "attendance %s: class=%s date=%s records=%d by=%s",
            "created" if result.created else "replaced",
            section.class_id,
            day.isoformat(),
            len(entries),
            caller.user_id,
        )
        return result

    def get_attendance_for_class(self, caller: Caller, class_id: str) -> List[AttendanceSession]:
        section = self._find_class(class_id)
        policy.ensure_can_view_attendance(caller, section)
        return list(self._attendance.list_for_class(section.class_id))

    def seed_session(self, *, class_id: str, session_date: date, records: Sequence[AttendanceEntry]) -> UpsertResult:
        """Write a session without a caller; used only by startup seeding."""
        return self._attendance.upsert(class_id=class_id, session_date=session_date, records=list(records))
