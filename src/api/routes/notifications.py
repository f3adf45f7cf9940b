from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_context, require
from src.api.schemas import UnreadCountResponse
from src.app_shell.context import ServiceContext
from src.components.notifications import (
    ListNotificationsInput,
    MarkReadInput,
    run_list,
    run_mark_read,
    unread_count,
)
from src.domain.entities import Notification, User

router = APIRouter()


@router.get("", response_model=list[Notification])
def list_notifications(
    unread_only: bool = False,
    user: User = Depends(require("notifications:read")),
    ctx: ServiceContext = Depends(get_context),
) -> tuple[Notification, ...]:
    """The caller's notifications, newest first."""
    inp = ListNotificationsInput(user_id=user.id, unread_only=unread_only)
    return run_list(inp, ctx.notification_repo).notifications


@router.get("/unread-count", response_model=UnreadCountResponse)
def get_unread_count(
    user: User = Depends(require("notifications:read")),
    ctx: ServiceContext = Depends(get_context),
) -> UnreadCountResponse:
    return UnreadCountResponse(unread=unread_count(user.id, ctx.notification_repo))


@router.post("/{notification_id}/read", response_model=Notification)
def mark_read(
    notification_id: UUID,
    user: User = Depends(require("notifications:read")),
    ctx: ServiceContext = Depends(get_context),
) -> Notification | None:
    result = run_mark_read(
        MarkReadInput(notification_id=notification_id, user_id=user.id), ctx.notification_repo
    )
    if not result.success:
        raise HTTPException(status_code=404, detail=result.error or "Notification not found")
    return result.notification
