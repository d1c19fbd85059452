from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceEntry, AttendanceSession, UpsertResult
from .repository import AttendanceRepository


def _load_entries(cur, session_ids: Sequence[int]) -> Dict[int, List[AttendanceEntry]]:
    if not session_ids:
        return {}
    placeholders = ",".join(["%s"] * len(session_ids))
    cur.execute(
        f"""
        SELECT session_id, student_id, status
        FROM attendance_entries
        WHERE session_id IN ({placeholders})
        ORDER BY session_id ASC, position ASC
        """,
        tuple(session_ids),
    )
    out: Dict[int, List[AttendanceEntry]] = {sid: [] for sid in session_ids}
    for r in fetchall(cur):
        out[int(r["session_id"])].append(
            AttendanceEntry(student_id=str(r["student_id"]), status=AttendanceStatus(r["status"]))
        )
    return out


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_class_and_date(self, class_id: str, session_date: date) -> Optional[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT session_id, class_id, session_date
                FROM attendance_sessions
                WHERE class_id=%s AND session_date=%s
                """,
                (class_id, session_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            entries = _load_entries(cur, [int(r["session_id"])])
            return AttendanceSession(
                session_id=str(r["session_id"]),
                class_id=str(r["class_id"]),
                session_date=r["session_date"],
                records=tuple(entries[int(r["session_id"])]),
            )

    def list_for_class(self, class_id: str) -> List[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT session_id, class_id, session_date
                FROM attendance_sessions
                WHERE class_id=%s
                ORDER BY session_id ASC
                """,
                (class_id,),
            )
            rows = fetchall(cur)
            entries = _load_entries(cur, [int(r["session_id"]) for r in rows])
            return [
                AttendanceSession(
                    session_id=str(r["session_id"]),
                    class_id=str(r["class_id"]),
                    session_date=r["session_date"],
                    records=tuple(entries[int(r["session_id"])]),
                )
                for r in rows
            ]

    def upsert(self, *, class_id: str, session_date: date, records: Sequence[AttendanceEntry]) -> UpsertResult:
        with db_cursor(self._conn_factory) as (_, cur):
            # Single statement so concurrent first marks serialize on the unique key.
            # The revision bump makes an existing row report 2 affected rows even with FOUND_ROWS.
            cur.execute(
                """
                INSERT INTO attendance_sessions(class_id, session_date)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE
                    revision=revision+1,
                    session_id=LAST_INSERT_ID(session_id)
                """,
                (class_id, session_date),
            )
            created = cur.rowcount == 1
            session_id = int(cur.lastrowid)

            cur.execute("DELETE FROM attendance_entries WHERE session_id=%s", (session_id,))
            if records:
                cur.executemany(
                    """
                    INSERT INTO attendance_entries(session_id, position, student_id, status)
                    VALUES(%s,%s,%s,%s)
                    """,
                    [(session_id, pos, e.student_id, e.status.value) for pos, e in enumerate(records)],
                )

            session = AttendanceSession(
                session_id=str(session_id),
                class_id=class_id,
                session_date=session_date,
                records=tuple(records),
            )
            return UpsertResult(session=session, created=created)
