"""Session tokens.

A token is an ``itsdangerous`` timed signature over ``{"id", "role"}``; the same
signing scheme Flask uses for its session cookie. Validity is checked at load
time against the configured window.
"""
from __future__ import annotations

import logging
from typing import Optional

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from ..core.constants import DEFAULT_TOKEN_TTL_SECONDS, INSECURE_DEFAULT_SECRET, TOKEN_SALT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConfigurationError, UnauthorizedError
from .model import Caller, User

logger = logging.getLogger(__name__)


def resolve_signing_key(secret: Optional[str], *, allow_insecure: bool) -> str:
    """Pick the token signing key, refusing the built-in fallback unless allowed."""
    if secret:
        return secret
    if not allow_insecure:
        raise ConfigurationError("JWT_SECRET is not set and ALLOW_INSECURE_SECRET is disabled")
    logger.warning("JWT_SECRET is not set; using the insecure built-in signing key. Do not run like this in production.")
    return INSECURE_DEFAULT_SECRET


class TokenService:
    def __init__(self, signing_key: str, *, ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS):
        if not signing_key:
            raise ConfigurationError("Token signing key must not be empty")
        if int(ttl_seconds) <= 0:
            raise ConfigurationError("Token lifetime must be positive")
        self._serializer = URLSafeTimedSerializer(signing_key, salt=TOKEN_SALT)
        self._ttl_seconds = int(ttl_seconds)

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def issue(self, user: User) -> str:
        return self._serializer.dumps({"id": user.user_id, "role": user.role.value})

    def validate(self, token: Optional[str]) -> Caller:
        if not token:
            raise UnauthorizedError("Unauthorized")

        try:
            payload = self._serializer.loads(token, max_age=self._ttl_seconds)
        except SignatureExpired:
            logger.info("rejected expired session token")
            raise AuthorizationError("Forbidden")
        except BadSignature:
            logger.info("rejected session token with bad signature")
            raise AuthorizationError("Forbidden")

        if not isinstance(payload, dict):
            raise AuthorizationError("Forbidden")
        try:
            return Caller(user_id=str(payload["id"]), role=Role(payload["role"]))
        except (KeyError, ValueError):
            raise AuthorizationError("Forbidden")
