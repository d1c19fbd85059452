from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a teacher or student account.

    Plain data object; it never talks to storage.
    """

    user_id: str
    name: str
    email: str
    password_hash: str
    role: Role


@dataclass(frozen=True)
class Caller:
    """Identity extracted from a validated session token.

    Trusted for the lifetime of one request; not re-checked against the user store.
    """

    user_id: str
    role: Role

    @property
    def is_teacher(self) -> bool:
        return self.role == Role.TEACHER

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT
