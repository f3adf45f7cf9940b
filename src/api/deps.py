import os
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from src.app_shell.context import ServiceContext
from src.components.auth import SessionState, check_auth
from src.domain.entities import User
from src.domain.policy import PolicyEngine
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("CRANE_RULES_PATH", self.base_dir / "rules.yaml"))
        self.secret_key = os.environ.get("CRANE_SECRET_KEY")
        self.seed_demo = os.environ.get("CRANE_SEED_DEMO", "1").lower() in ("1", "true", "yes")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Context ---
@lru_cache
def get_context() -> ServiceContext:
    """Process-wide context. Tests replace it through app.dependency_overrides."""
    settings = get_settings()
    return ServiceContext.create(
        get_rules(), secret_key=settings.secret_key, seed=settings.seed_demo
    )


def get_policy(ctx: ServiceContext = Depends(get_context)) -> PolicyEngine:
    return ctx.policy


# --- Auth ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


async def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
    ctx: ServiceContext = Depends(get_context),
) -> User:
    # Cookie first (HttpOnly), then the Authorization header
    cookie_token = request.cookies.get("access_token")
    if cookie_token and cookie_token.startswith("Bearer "):
        token = cookie_token.split(" ")[1]

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    state = check_auth(
        SessionState(token=token), user_repo=ctx.user_repo, auth_adapter=ctx.auth_adapter
    )
    if not state.is_authenticated or state.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=state.error or "Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return state.user


def require(action: str) -> Callable[..., User]:
    """Dependency factory: the current user, if the role grants `action`."""

    def dependency(
        user: User = Depends(get_current_user),
        policy: PolicyEngine = Depends(get_policy),
    ) -> User:
        if not policy.check_permission(user, action):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Access denied: {action}")
        return user

    return dependency
