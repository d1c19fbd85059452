from __future__ import annotations

import threading
from typing import Dict, Optional

from ..core.exceptions import ValidationError
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: Dict[str, User] = {}
        self._by_email: Dict[str, User] = {}

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._by_email.get(email)

    def add(self, user: User) -> None:
        with self._lock:
            if user.user_id in self._by_id:
                raise ValidationError(f"User id already exists: {user.user_id}")
            if user.email in self._by_email:
                raise ValidationError(f"Email already exists: {user.email}")
            self._by_id[user.user_id] = user
            self._by_email[user.email] = user
