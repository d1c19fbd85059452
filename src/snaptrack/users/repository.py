from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Identity store interface.

    Services depend on this protocol, never on a concrete backend.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        """Exact, case-sensitive lookup."""

        raise NotImplementedError

    def add(self, user: User) -> None:
        raise NotImplementedError
