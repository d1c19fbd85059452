from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import mysql.connector

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ClassSection
from .repository import ClassRepository


def _load_students(cur, class_ids: Sequence[str]) -> Dict[str, List[str]]:
    if not class_ids:
        return {}
    placeholders = ",".join(["%s"] * len(class_ids))
    cur.execute(
        f"""
        SELECT class_id, student_id
        FROM class_students
        WHERE class_id IN ({placeholders})
        ORDER BY class_id ASC, position ASC
        """,
        tuple(class_ids),
    )
    out: Dict[str, List[str]] = {cid: [] for cid in class_ids}
    for r in fetchall(cur):
        out[str(r["class_id"])].append(str(r["student_id"]))
    return out


def _to_sections(cur, rows: List[Dict[str, Any]]) -> List[ClassSection]:
    students = _load_students(cur, [str(r["class_id"]) for r in rows])
    return [
        ClassSection(
            class_id=str(r["class_id"]),
            name=r["class_name"],
            schedule=r.get("schedule") or "",
            teacher_id=str(r["teacher_id"]),
            student_ids=tuple(students.get(str(r["class_id"]), [])),
        )
        for r in rows
    ]


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, class_id: str) -> Optional[ClassSection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, class_name, schedule, teacher_id
                FROM classes
                WHERE class_id=%s
                """,
                (class_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return _to_sections(cur, [row])[0]

    def list_for_teacher(self, teacher_id: str) -> List[ClassSection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, class_name, schedule, teacher_id
                FROM classes
                WHERE teacher_id=%s
                ORDER BY created_seq ASC
                """,
                (teacher_id,),
            )
            return _to_sections(cur, fetchall(cur))

    def list_for_student(self, student_id: str) -> List[ClassSection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.class_id, c.class_name, c.schedule, c.teacher_id
                FROM classes c
                JOIN class_students cs ON cs.class_id = c.class_id
                WHERE cs.student_id=%s
                ORDER BY c.created_seq ASC
                """,
                (student_id,),
            )
            return _to_sections(cur, fetchall(cur))

    def add(self, section: ClassSection) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO classes(class_id, class_name, schedule, teacher_id)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (section.class_id, section.name, section.schedule, section.teacher_id),
                )
                if section.student_ids:
                    cur.executemany(
                        "INSERT INTO class_students(class_id, student_id, position) VALUES(%s,%s,%s)",
                        [(section.class_id, sid, pos) for pos, sid in enumerate(section.student_ids)],
                    )
        except mysql.connector.IntegrityError as e:
            raise ValidationError(f"Class already exists: {section.class_id}") from e
