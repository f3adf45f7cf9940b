import logging
from datetime import datetime, timedelta
from typing import Any

from src.api.auth_utils import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)

logger = logging.getLogger(__name__)


class JWTAuthAdapter:
    """Auth adapter that uses JWT tokens and passlib (argon2) for password hashing."""

    def __init__(self, secret_key: str | None = None) -> None:
        self._secret_key = secret_key

    def hash_password(self, password: str) -> str:
        return get_password_hash(password)

    def verify_password(self, plain: str, hashed: str) -> bool:
        return verify_password(plain, hashed)

    def create_token(
        self, user_id: Any, ttl_minutes: int, now_utc: datetime | None = None
    ) -> str:
        return create_access_token(
            {"sub": str(user_id)},
            timedelta(minutes=ttl_minutes),
            now_utc=now_utc,
            secret_key=self._secret_key,
        )

    def validate_token(self, token: str) -> str | None:
        payload = decode_access_token(token, secret_key=self._secret_key)
        if payload is None:
            logger.debug("Rejected invalid or expired token")
            return None
        subject = payload.get("sub")
        return str(subject) if subject else None
