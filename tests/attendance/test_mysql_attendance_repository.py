from __future__ import annotations

from datetime import date

from snaptrack.attendance.model import AttendanceEntry
from snaptrack.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from snaptrack.core.enums import AttendanceStatus


class FakeCursor:
    """Records every statement and reports MySQL's affected-rows for the session upsert.

    ``existing_id`` simulates a row already holding the (class, date) key:
    ON DUPLICATE KEY UPDATE then reports 2 affected rows and LAST_INSERT_ID
    returns the existing id. Otherwise the insert reports 1 and a fresh id.
    """

    def __init__(self, *, existing_id=None, next_id=41):
        self._existing_id = existing_id
        self._next_id = next_id
        self.rowcount = -1
        self.lastrowid = None
        self.executed = []
        self.many = []

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        if sql.strip().startswith("INSERT INTO attendance_sessions"):
            if self._existing_id is None:
                self.rowcount, self.lastrowid = 1, self._next_id
            else:
                self.rowcount, self.lastrowid = 2, self._existing_id

    def executemany(self, sql, rows):
        self.many.append((" ".join(sql.split()), list(rows)))

    def fetchone(self):
        return None

    def fetchall(self):
        return []

    def close(self):
        pass


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, conn):
        self._conn = conn

    def connect(self):
        return self._conn


RECORDS = [AttendanceEntry(student_id="2", status=AttendanceStatus.PRESENT)]


def _session_statements(cur):
    return [sql for sql, _ in cur.executed if "attendance_sessions" in sql]


def test_upsert_inserts_new_session_and_entries():
    cur = FakeCursor(next_id=41)
    conn = FakeConn(cur)
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    result = repo.upsert(class_id="1", session_date=date(2025, 4, 1), records=RECORDS)

    assert result.created is True
    assert result.session.session_id == "41"
    assert cur.many[0][1] == [(41, 0, "2", "present")]
    assert conn.committed


def test_upsert_replaces_entries_of_existing_session():
    cur = FakeCursor(existing_id=7)
    repo = MySQLAttendanceRepository(FakeConnFactory(FakeConn(cur)))

    result = repo.upsert(class_id="1", session_date=date(2025, 4, 1), records=RECORDS)

    assert result.created is False
    assert result.session.session_id == "7"
    assert ("DELETE FROM attendance_entries WHERE session_id=%s", (7,)) in cur.executed
    assert cur.many[0][1] == [(7, 0, "2", "present")]


def test_upsert_claims_the_session_key_in_one_statement_without_locking_reads():
    cur = FakeCursor(existing_id=9)
    repo = MySQLAttendanceRepository(FakeConnFactory(FakeConn(cur)))

    repo.upsert(class_id="1", session_date=date(2025, 4, 1), records=RECORDS)

    statements = _session_statements(cur)
    assert len(statements) == 1
    assert "ON DUPLICATE KEY UPDATE" in statements[0]
    assert "LAST_INSERT_ID(session_id)" in statements[0]
    assert not any("FOR UPDATE" in sql for sql, _ in cur.executed)
    assert cur.executed[0][1] == ("1", date(2025, 4, 1))


def test_upsert_with_no_records_only_clears_entries():
    cur = FakeCursor(existing_id=3)
    repo = MySQLAttendanceRepository(FakeConnFactory(FakeConn(cur)))

    result = repo.upsert(class_id="1", session_date=date(2025, 4, 1), records=[])

    assert result.session.records == ()
    assert cur.many == []
    assert ("DELETE FROM attendance_entries WHERE session_id=%s", (3,)) in cur.executed
