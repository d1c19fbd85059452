from __future__ import annotations

from typing import Any, Dict, Optional

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=str(row["user_id"]),
        name=row["full_name"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, email, password_hash, role
                FROM users
                WHERE user_id=%s
                """,
                (user_id,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        # BINARY keeps the match case-sensitive under the default collation.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, email, password_hash, role
                FROM users
                WHERE email = BINARY %s
                """,
                (email,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def add(self, user: User) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(user_id, full_name, email, password_hash, role)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (user.user_id, user.name, user.email, user.password_hash, user.role.value),
                )
        except mysql.connector.IntegrityError as e:
            raise ValidationError(f"User already exists: {user.user_id} / {user.email}") from e
