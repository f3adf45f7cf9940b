"""
Notifications component - In-app notifications for staff.

Shell Layer - persists notifications through the repository port.
"""

from __future__ import annotations

import logging
from uuid import UUID

from src.domain.entities import Notification, NotificationType

from .models import (
    CreateNotificationInput,
    ListNotificationsInput,
    MarkReadInput,
    NotificationListOutput,
    NotificationOutput,
)
from .ports import ClockPort, NotificationRepoPort

logger = logging.getLogger(__name__)


def run_create(
    inp: CreateNotificationInput, repo: NotificationRepoPort, clock: ClockPort
) -> NotificationOutput:
    if not inp.title.strip():
        return NotificationOutput(success=False, error="Title is required")

    notification = Notification(
        user_id=inp.user_id,
        type=inp.type,
        title=inp.title,
        message=inp.message,
        link=inp.link,
        created_at=clock.now_utc(),
    )
    repo.save(notification)
    logger.info("Notification %s (%s) created for user %s", notification.id, inp.type, inp.user_id)
    return NotificationOutput(notification=notification, success=True)


def run_list(inp: ListNotificationsInput, repo: NotificationRepoPort) -> NotificationListOutput:
    """List a user's notifications, newest first."""
    items = sorted(repo.list_by_user(inp.user_id), key=lambda n: n.created_at, reverse=True)
    unread = sum(1 for n in items if not n.read)
    if inp.unread_only:
        items = [n for n in items if not n.read]
    return NotificationListOutput(notifications=tuple(items), total=len(items), unread=unread)


def run_mark_read(inp: MarkReadInput, repo: NotificationRepoPort) -> NotificationOutput:
    notification = repo.get_by_id(inp.notification_id)
    if notification is None or notification.user_id != inp.user_id:
        return NotificationOutput(success=False, error="Notification not found")

    if not notification.read:
        notification.read = True
        repo.save(notification)
    return NotificationOutput(notification=notification, success=True)


def unread_count(user_id: UUID, repo: NotificationRepoPort) -> int:
    return sum(1 for n in repo.list_by_user(user_id) if not n.read)


class RepoNotifier:
    """NotifierPort backed by the notification repository."""

    def __init__(self, repo: NotificationRepoPort, clock: ClockPort) -> None:
        self._repo = repo
        self._clock = clock

    def notify(
        self,
        user_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        link: str | None = None,
    ) -> None:
        run_create(
            CreateNotificationInput(
                user_id=user_id, type=type, title=title, message=message, link=link
            ),
            self._repo,
            self._clock,
        )


def run(
    inp: CreateNotificationInput | ListNotificationsInput | MarkReadInput,
    *,
    repo: NotificationRepoPort,
    clock: ClockPort | None = None,
) -> NotificationOutput | NotificationListOutput:
    if isinstance(inp, CreateNotificationInput):
        assert clock
        return run_create(inp, repo, clock)

    elif isinstance(inp, ListNotificationsInput):
        return run_list(inp, repo)

    elif isinstance(inp, MarkReadInput):
        return run_mark_read(inp, repo)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
