"""
Auth component unit tests.

Tests for session transitions and user administration.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from uuid import UUID, uuid4

import pytest

from src.components.auth import (
    CreateUserInput,
    ListUsersInput,
    LoginInput,
    SessionState,
    UpdateUserInput,
    check_auth,
    login,
    logout,
    run_create_user,
    run_list_users,
    run_update_user,
)
from src.domain.entities import User
from src.domain.policy import PolicyEngine
from src.rules.loader import load_rules

RULES_PATH = Path(__file__).resolve().parents[4] / "rules.yaml"

# --- Mock Implementations ---


class MockUserRepo:
    """In-memory user repository for testing."""

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}

    def get_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email.lower()), None)

    def get_by_id(self, user_id: UUID) -> User | None:
        return self._users.get(user_id)

    def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    def list_all(self) -> list[User]:
        return list(self._users.values())


class MockAuthAdapter:
    """Tokens are "token:<user_id>"; "expired:<user_id>" never validates."""

    def verify_password(self, plain: str, hashed: str) -> bool:
        return hashed == f"hashed_{plain}"

    def hash_password(self, plain: str) -> str:
        return f"hashed_{plain}"

    def create_token(self, user_id: object, ttl_minutes: int, now_utc: datetime | None = None) -> str:
        return f"token:{user_id}"

    def validate_token(self, token: str) -> str | None:
        kind, _, subject = token.partition(":")
        return subject if kind == "token" else None


class MockTimePort:
    """Mock time port for deterministic testing."""

    def __init__(self, fixed_time: datetime | None = None) -> None:
        self._time = fixed_time or datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        return self._time

    def advance(self, delta: timedelta) -> None:
        self._time = self._time + delta


# --- Fixtures ---


@pytest.fixture
def user_repo() -> MockUserRepo:
    return MockUserRepo()


@pytest.fixture
def auth_adapter() -> MockAuthAdapter:
    return MockAuthAdapter()


@pytest.fixture
def time_port() -> MockTimePort:
    return MockTimePort()


@pytest.fixture
def policy() -> PolicyEngine:
    return PolicyEngine(load_rules(RULES_PATH))


@pytest.fixture
def admin_user(user_repo: MockUserRepo) -> User:
    user = User(
        email="admin@example.com",
        name="Admin User",
        password_hash="hashed_admin123",
        role="admin",
    )
    user_repo.save(user)
    return user


@pytest.fixture
def sales_user(user_repo: MockUserRepo) -> User:
    user = User(
        email="sales@example.com",
        name="Sam Sales",
        password_hash="hashed_sales123",
        role="sales_agent",
    )
    user_repo.save(user)
    return user


# --- Session Tests ---


class TestLogin:
    def test_login_success(
        self, admin_user: User, user_repo: MockUserRepo, auth_adapter: MockAuthAdapter
    ) -> None:
        state = login(
            SessionState(),
            LoginInput(email="admin@example.com", password="admin123"),
            user_repo=user_repo,
            auth_adapter=auth_adapter,
        )

        assert state.is_authenticated is True
        assert state.user == admin_user
        assert state.token == f"token:{admin_user.id}"
        assert state.error is None

    def test_wrong_password(
        self, admin_user: User, user_repo: MockUserRepo, auth_adapter: MockAuthAdapter
    ) -> None:
        state = login(
            SessionState(),
            LoginInput(email="admin@example.com", password="nope"),
            user_repo=user_repo,
            auth_adapter=auth_adapter,
        )

        assert state.is_authenticated is False
        assert state.error == "Invalid credentials"

    def test_unknown_email_clears_previous_session(
        self, admin_user: User, user_repo: MockUserRepo, auth_adapter: MockAuthAdapter
    ) -> None:
        previous = SessionState(token="token:x", user=admin_user)

        state = login(
            previous,
            LoginInput(email="ghost@example.com", password="admin123"),
            user_repo=user_repo,
            auth_adapter=auth_adapter,
        )

        assert state.user is None
        assert previous.user == admin_user

    def test_disabled_user(
        self, admin_user: User, user_repo: MockUserRepo, auth_adapter: MockAuthAdapter
    ) -> None:
        admin_user.status = "disabled"
        user_repo.save(admin_user)

        state = login(
            SessionState(),
            LoginInput(email="admin@example.com", password="admin123"),
            user_repo=user_repo,
            auth_adapter=auth_adapter,
        )

        assert state.error == "User account is disabled"


class TestCheckAuth:
    def test_valid_token(
        self, admin_user: User, user_repo: MockUserRepo, auth_adapter: MockAuthAdapter
    ) -> None:
        state = check_auth(
            SessionState(token=f"token:{admin_user.id}"),
            user_repo=user_repo,
            auth_adapter=auth_adapter,
        )

        assert state.is_authenticated is True
        assert state.user == admin_user

    def test_expired_token_clears_state(
        self, admin_user: User, user_repo: MockUserRepo, auth_adapter: MockAuthAdapter
    ) -> None:
        state = check_auth(
            SessionState(token=f"expired:{admin_user.id}", user=admin_user),
            user_repo=user_repo,
            auth_adapter=auth_adapter,
        )

        assert state.is_authenticated is False
        assert state.user is None

    def test_deleted_user(self, user_repo: MockUserRepo, auth_adapter: MockAuthAdapter) -> None:
        state = check_auth(
            SessionState(token=f"token:{uuid4()}"), user_repo=user_repo, auth_adapter=auth_adapter
        )
        assert state.error == "User not found"

    def test_no_token(self, user_repo: MockUserRepo, auth_adapter: MockAuthAdapter) -> None:
        assert check_auth(SessionState(), user_repo=user_repo, auth_adapter=auth_adapter) == SessionState()

    def test_logout(self, admin_user: User) -> None:
        assert logout(SessionState(token="token:x", user=admin_user)) == SessionState()


# --- User Administration Tests ---


class TestCreateUser:
    def test_admin_creates_user(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        result = run_create_user(
            CreateUserInput(
                actor=admin_user,
                email="Mike@Example.com",
                password="operator123",
                role="operator",
                name="Mike Operator",
            ),
            user_repo,
            auth_adapter,
            policy,
            time_port,
        )

        assert result.success is True
        assert result.user is not None
        assert result.user.email == "mike@example.com"
        assert result.user.password_hash == "hashed_operator123"
        assert result.user.created_at == time_port.now_utc()

    def test_non_admin_denied(
        self,
        sales_user: User,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        result = run_create_user(
            CreateUserInput(actor=sales_user, email="x@example.com", password="password1", role="admin"),
            user_repo,
            auth_adapter,
            policy,
            time_port,
        )
        assert result.error == "Access denied"

    @pytest.mark.parametrize(
        ("email", "password", "role", "error"),
        [
            ("new@example.com", "short", "operator", "Password must be at least 8 characters"),
            ("new@example.com", "password1", "support", "Unknown role: support"),
            ("admin@example.com", "password1", "operator", "Email already in use"),
        ],
    )
    def test_validation(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        policy: PolicyEngine,
        time_port: MockTimePort,
        email: str,
        password: str,
        role: str,
        error: str,
    ) -> None:
        result = run_create_user(
            CreateUserInput(actor=admin_user, email=email, password=password, role=role),
            user_repo,
            auth_adapter,
            policy,
            time_port,
        )
        assert result.error == error


class TestUpdateUser:
    def test_change_role(
        self,
        admin_user: User,
        sales_user: User,
        user_repo: MockUserRepo,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        result = run_update_user(
            UpdateUserInput(actor=admin_user, target_id=str(sales_user.id), new_role="operations_manager"),
            user_repo,
            policy,
            time_port,
        )

        assert result.success is True
        assert user_repo.get_by_id(sales_user.id).role == "operations_manager"  # type: ignore[union-attr]

    def test_self_lockout(
        self, admin_user: User, user_repo: MockUserRepo, policy: PolicyEngine, time_port: MockTimePort
    ) -> None:
        demote = run_update_user(
            UpdateUserInput(actor=admin_user, target_id=str(admin_user.id), new_role="operator"),
            user_repo,
            policy,
            time_port,
        )
        disable = run_update_user(
            UpdateUserInput(actor=admin_user, target_id=str(admin_user.id), new_status="disabled"),
            user_repo,
            policy,
            time_port,
        )

        assert demote.error == "Cannot remove admin role from yourself"
        assert disable.error == "Cannot disable yourself"

    def test_invalid_id(
        self, admin_user: User, user_repo: MockUserRepo, policy: PolicyEngine, time_port: MockTimePort
    ) -> None:
        result = run_update_user(
            UpdateUserInput(actor=admin_user, target_id="not-a-uuid"), user_repo, policy, time_port
        )
        assert result.error == "Invalid user ID format"


class TestListUsers:
    def test_admin_lists(
        self, admin_user: User, sales_user: User, user_repo: MockUserRepo, policy: PolicyEngine
    ) -> None:
        result = run_list_users(ListUsersInput(actor=admin_user), user_repo, policy)
        assert [u.email for u in result.users] == ["admin@example.com", "sales@example.com"]

    def test_sales_denied(self, sales_user: User, user_repo: MockUserRepo, policy: PolicyEngine) -> None:
        result = run_list_users(ListUsersInput(actor=sales_user), user_repo, policy)
        assert result.success is False
        assert result.users == []
