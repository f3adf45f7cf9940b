from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_context, get_current_user
from src.api.schemas import UserCreateRequest, UserResponse, UserUpdateRequest
from src.app_shell.context import ServiceContext
from src.components.auth import (
    CreateUserInput,
    ListUsersInput,
    UpdateUserInput,
    run_create_user,
    run_list_users,
    run_update_user,
)
from src.domain.entities import User

router = APIRouter()


@router.get("", response_model=list[UserResponse])
def list_users(
    current_user: User = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> list[User]:
    """List all users (admin only)."""
    result = run_list_users(ListUsersInput(actor=current_user), ctx.user_repo, ctx.policy)

    if not result.success:
        raise HTTPException(status_code=403, detail=result.error or "Access denied")

    return result.users


@router.post("", response_model=UserResponse, status_code=201)
def create_user(
    req: UserCreateRequest,
    current_user: User = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> User | None:
    """Create a new user (admin only)."""
    inp = CreateUserInput(
        actor=current_user,
        email=req.email,
        password=req.password,
        role=req.role,
        name=req.name,
    )
    result = run_create_user(inp, ctx.user_repo, ctx.auth_adapter, ctx.policy, ctx.clock)

    if not result.success:
        if result.error == "Access denied":
            raise HTTPException(status_code=403, detail="Access denied")
        raise HTTPException(status_code=400, detail=result.error)

    return result.user


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    req: UserUpdateRequest,
    current_user: User = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> User | None:
    """Update a user (admin only)."""
    inp = UpdateUserInput(
        actor=current_user,
        target_id=user_id,
        new_role=req.role,
        new_status=req.status,
        new_name=req.name,
    )
    result = run_update_user(inp, ctx.user_repo, ctx.policy, ctx.clock)

    if not result.success:
        if result.error == "Access denied":
            raise HTTPException(status_code=403, detail="Access denied")
        if result.error == "User not found":
            raise HTTPException(status_code=404, detail="User not found")
        raise HTTPException(status_code=400, detail=result.error)

    return result.user
