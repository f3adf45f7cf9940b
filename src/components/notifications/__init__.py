"""
Notifications component - In-app notifications for staff.
"""

from .component import (
    RepoNotifier,
    run,
    run_create,
    run_list,
    run_mark_read,
    unread_count,
)
from .models import (
    CreateNotificationInput,
    ListNotificationsInput,
    MarkReadInput,
    NotificationListOutput,
    NotificationOutput,
)
from .ports import NotifierPort

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_list",
    "run_mark_read",
    "unread_count",
    "RepoNotifier",
    # Models
    "CreateNotificationInput",
    "ListNotificationsInput",
    "MarkReadInput",
    "NotificationListOutput",
    "NotificationOutput",
    # Ports
    "NotifierPort",
]
