from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import INVALID_CREDENTIALS_MESSAGE
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..common.validators import require_non_empty
from .model import User
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)

# Checked against when the email is unknown so both failure paths pay the same hashing cost.
_DUMMY_PASSWORD_HASH = generate_password_hash("snaptrack-no-such-user")


def _mask_email(email: str) -> str:
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}" if domain else "***"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


class AuthService:
    """Use case: authenticate user (login) and hand out a session token."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def authenticate(self, email: str, password: str) -> LoginResult:
        # Unknown email and wrong password must be indistinguishable to the caller.
        if not isinstance(email, str) or not isinstance(password, str):
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        user = self._users.get_by_email(email)
        stored_hash = user.password_hash if user else _DUMMY_PASSWORD_HASH
        try:
            ok = check_password_hash(stored_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not user or not ok:
            logger.debug("login failed for %s", _mask_email(email))
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        return LoginResult(token=self._tokens.issue(user), user=user)


class UserService:
    """Use case: register accounts (used by seeding)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, *, user_id: str, name: str, email: str, password: str, role: Role) -> User:
        user = User(
            user_id=require_non_empty(user_id, "User id"),
            name=require_non_empty(name, "Name"),
            email=require_non_empty(email, "Email"),
            password_hash=generate_password_hash(password),
            role=Role(role),
        )
        self._users.add(user)
        return user
