"""
Notifications component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities import Notification, NotificationType


@dataclass(frozen=True)
class CreateNotificationInput:
    user_id: UUID
    type: NotificationType
    title: str
    message: str
    link: str | None = None


@dataclass(frozen=True)
class ListNotificationsInput:
    user_id: UUID
    unread_only: bool = False


@dataclass(frozen=True)
class MarkReadInput:
    notification_id: UUID
    user_id: UUID


@dataclass(frozen=True)
class NotificationOutput:
    notification: Notification | None = None
    success: bool = False
    error: str | None = None


@dataclass(frozen=True)
class NotificationListOutput:
    notifications: tuple[Notification, ...]
    total: int
    unread: int
