"""
Notifications component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import NotificationType
from src.ports.clock import ClockPort
from src.ports.repo import NotificationRepoPort

__all__ = ["ClockPort", "NotificationRepoPort", "NotifierPort"]


class NotifierPort(Protocol):
    """Outbound notification sink used by other components."""

    def notify(
        self,
        user_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        link: str | None = None,
    ) -> None:
        """Deliver a notification to a user."""
        ...
