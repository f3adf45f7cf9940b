from datetime import datetime
from typing import Protocol

from src.ports.clock import ClockPort
from src.ports.repo import UserRepoPort

__all__ = ["AuthAdapterPort", "ClockPort", "UserRepoPort"]


class AuthAdapterPort(Protocol):
    def verify_password(self, plain: str, hashed: str) -> bool: ...
    def hash_password(self, plain: str) -> str: ...
    def create_token(
        self, user_id: object, ttl_minutes: int, now_utc: datetime | None = None
    ) -> str: ...
    def validate_token(self, token: str) -> str | None:
        """Return the token subject (user id) or None if invalid or expired."""
        ...
