from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classes.memory_class_repository import InMemoryClassRepository
from .classes.repository import ClassRepository
from .classes.service import RosterService
from .core.constants import DEFAULT_TOKEN_TTL_SECONDS
from .core.exceptions import ConfigurationError
from .users.memory_user_repository import InMemoryUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    classes_repo: ClassRepository
    attendance_repo: AttendanceRepository

    token_service: TokenService
    auth_service: AuthService
    user_service: UserService
    roster_service: RosterService
    attendance_service: AttendanceService


def _build_repositories(backend: str, db_config: Optional[dict]):
    if backend == "memory":
        return InMemoryUserRepository(), InMemoryClassRepository(), InMemoryAttendanceRepository()

    if backend == "mysql":
        # Imported lazily so the in-memory backend runs without a MySQL driver configured.
        from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
        from .classes.mysql_class_repository import MySQLClassRepository
        from .database.connection import DatabaseConnection, DBConfig
        from .users.mysql_user_repository import MySQLUserRepository

        if not db_config:
            raise ConfigurationError("STORE_BACKEND=mysql requires DB_CONFIG")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        return MySQLUserRepository(conn), MySQLClassRepository(conn), MySQLAttendanceRepository(conn)

    raise ConfigurationError(f"Unknown STORE_BACKEND: {backend!r}")


def build_container(
    *,
    signing_key: str,
    backend: str = "memory",
    db_config: Optional[dict] = None,
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
) -> Container:
    users_repo, classes_repo, attendance_repo = _build_repositories(backend, db_config)

    token_service = TokenService(signing_key, ttl_seconds=token_ttl_seconds)
    auth_service = AuthService(users_repo, token_service)
    user_service = UserService(users_repo)
    roster_service = RosterService(classes_repo, users_repo)
    attendance_service = AttendanceService(attendance_repo, classes_repo)

    return Container(
        users_repo=users_repo,
        classes_repo=classes_repo,
        attendance_repo=attendance_repo,
        token_service=token_service,
        auth_service=auth_service,
        user_service=user_service,
        roster_service=roster_service,
        attendance_service=attendance_service,
    )
