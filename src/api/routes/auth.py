from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import OAuth2PasswordRequestForm

from src.api.deps import get_context, get_current_user
from src.api.schemas import Token, UserResponse
from src.app_shell.context import ServiceContext
from src.components.auth import LoginInput, SessionState, login
from src.domain.entities import User

router = APIRouter()


@router.post("/login", response_model=Token)
async def login_for_access_token(
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    ctx: ServiceContext = Depends(get_context),
) -> Token:
    """Authenticate user and return access token."""
    ttl_minutes = ctx.rules.auth.token_ttl_minutes
    state = login(
        SessionState(),
        LoginInput(email=form_data.username, password=form_data.password),
        user_repo=ctx.user_repo,
        auth_adapter=ctx.auth_adapter,
        ttl_minutes=ttl_minutes,
        clock=ctx.clock,
    )

    if not state.is_authenticated or state.token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=state.error or "Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Set HttpOnly Cookie
    response.set_cookie(
        key="access_token",
        value=f"Bearer {state.token}",
        httponly=True,
        max_age=ttl_minutes * 60,
        expires=ttl_minutes * 60,
        samesite="lax",
        secure=False,  # Set to True for HTTPS prod
    )

    return Token(access_token=state.token, token_type="bearer")


@router.post("/logout")
def logout(response: Response) -> dict[str, str]:
    """Log out user by clearing cookie."""
    response.delete_cookie(key="access_token")
    return {"status": "success"}


@router.get("/me", response_model=UserResponse)
def read_users_me(current_user: User = Depends(get_current_user)) -> User:
    """Get current user info."""
    return current_user
