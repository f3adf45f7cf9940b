import logging
from typing import Literal, cast, get_args
from uuid import UUID

from src.domain.entities import RoleType, User
from src.domain.policy import PolicyEngine

from .models import (
    CreateUserInput,
    ListUsersInput,
    LoginInput,
    SessionState,
    UpdateUserInput,
    UserListOutput,
    UserOutput,
)
from .ports import AuthAdapterPort, ClockPort, UserRepoPort

logger = logging.getLogger(__name__)

ROLES: tuple[str, ...] = get_args(RoleType)
DEFAULT_TOKEN_TTL_MINUTES = 24 * 60


# --- Session transitions ---


def login(
    state: SessionState,
    inp: LoginInput,
    *,
    user_repo: UserRepoPort,
    auth_adapter: AuthAdapterPort,
    ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES,
    clock: ClockPort | None = None,
) -> SessionState:
    """Authenticate and return a new session. Failure clears any previous session."""
    user = user_repo.get_by_email(inp.email)
    if not user or not auth_adapter.verify_password(inp.password, user.password_hash):
        logger.info("Failed login for %s", inp.email)
        return SessionState(error="Invalid credentials")

    if user.status != "active":
        return SessionState(error="User account is disabled")

    token = auth_adapter.create_token(
        user.id, ttl_minutes, now_utc=clock.now_utc() if clock else None
    )
    logger.info("User %s logged in", user.id)
    return SessionState(token=token, user=user)


def logout(state: SessionState) -> SessionState:
    if state.user is not None:
        logger.info("User %s logged out", state.user.id)
    return SessionState()


def check_auth(
    state: SessionState,
    *,
    user_repo: UserRepoPort,
    auth_adapter: AuthAdapterPort,
) -> SessionState:
    """
    Re-validate the session token.

    An invalid or expired token, or a user that no longer exists or was
    disabled, yields an empty state.
    """
    if not state.token:
        return SessionState()

    subject = auth_adapter.validate_token(state.token)
    if subject is None:
        return SessionState(error="Session expired")

    try:
        user_id = UUID(subject)
    except ValueError:
        return SessionState(error="Invalid session")

    user = user_repo.get_by_id(user_id)
    if user is None or user.status != "active":
        return SessionState(error="User not found")

    return SessionState(token=state.token, user=user)


# --- User administration ---


def run_create_user(
    inp: CreateUserInput,
    user_repo: UserRepoPort,
    auth_adapter: AuthAdapterPort,
    policy: PolicyEngine,
    time: ClockPort,
) -> UserOutput:
    if not policy.can_manage_users(inp.actor):
        return UserOutput(success=False, error="Access denied")

    if inp.role not in ROLES:
        return UserOutput(success=False, error=f"Unknown role: {inp.role}")

    min_length = policy.rules.auth.password_min_length
    if len(inp.password) < min_length:
        return UserOutput(
            success=False, error=f"Password must be at least {min_length} characters"
        )

    email = inp.email.strip().lower()
    if user_repo.get_by_email(email):
        return UserOutput(success=False, error="Email already in use")

    now = time.now_utc()
    new_user = User(
        email=email,
        name=inp.name or email.split("@")[0],
        password_hash=auth_adapter.hash_password(inp.password),
        role=cast(RoleType, inp.role),
        status="active",
        created_at=now,
        updated_at=now,
    )
    user_repo.save(new_user)
    logger.info("User %s created with role %s by %s", new_user.id, new_user.role, inp.actor.id)
    return UserOutput(user=new_user, success=True)


def run_update_user(
    inp: UpdateUserInput,
    user_repo: UserRepoPort,
    policy: PolicyEngine,
    time: ClockPort,
) -> UserOutput:
    if not policy.can_manage_users(inp.actor):
        return UserOutput(success=False, error="Access denied")

    try:
        uid = UUID(str(inp.target_id))
    except (ValueError, TypeError):
        return UserOutput(success=False, error="Invalid user ID format")

    target = user_repo.get_by_id(uid)
    if not target:
        return UserOutput(success=False, error="User not found")

    if inp.new_role is not None and inp.new_role not in ROLES:
        return UserOutput(success=False, error=f"Unknown role: {inp.new_role}")
    if inp.new_status is not None and inp.new_status not in ("active", "disabled"):
        return UserOutput(success=False, error=f"Unknown status: {inp.new_status}")

    # Self-lockout check
    if target.id == inp.actor.id:
        if inp.new_role is not None and target.role == "admin" and inp.new_role != "admin":
            return UserOutput(success=False, error="Cannot remove admin role from yourself")
        if inp.new_status is not None and inp.new_status != "active":
            return UserOutput(success=False, error="Cannot disable yourself")

    if inp.new_role is not None:
        target.role = cast(RoleType, inp.new_role)
    if inp.new_status is not None:
        target.status = cast(Literal["active", "disabled"], inp.new_status)
    if inp.new_name:
        target.name = inp.new_name

    target.updated_at = time.now_utc()
    user_repo.save(target)
    return UserOutput(user=target, success=True)


def run_list_users(
    inp: ListUsersInput, user_repo: UserRepoPort, policy: PolicyEngine
) -> UserListOutput:
    if not policy.can_manage_users(inp.actor):
        return UserListOutput(users=[], success=False, error="Access denied")

    users = sorted(user_repo.list_all(), key=lambda u: u.email)
    return UserListOutput(users=users, success=True)


def run(
    inp: CreateUserInput | UpdateUserInput | ListUsersInput,
    *,
    user_repo: UserRepoPort,
    policy: PolicyEngine,
    auth_adapter: AuthAdapterPort | None = None,
    time: ClockPort | None = None,
) -> UserOutput | UserListOutput:
    if isinstance(inp, CreateUserInput):
        assert auth_adapter and time
        return run_create_user(inp, user_repo, auth_adapter, policy, time)

    elif isinstance(inp, UpdateUserInput):
        assert time
        return run_update_user(inp, user_repo, policy, time)

    elif isinstance(inp, ListUsersInput):
        return run_list_users(inp, user_repo, policy)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
