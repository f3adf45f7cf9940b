from dataclasses import dataclass

from src.domain.entities import User


@dataclass(frozen=True)
class SessionState:
    """
    The caller's authentication state.

    Immutable; login, logout and check_auth return a new state.
    """

    token: str | None = None
    user: User | None = None
    error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None


@dataclass
class LoginInput:
    email: str
    password: str


@dataclass
class CreateUserInput:
    actor: User
    email: str
    password: str
    role: str
    name: str | None = None


@dataclass
class UpdateUserInput:
    actor: User
    target_id: str
    new_role: str | None = None
    new_status: str | None = None
    new_name: str | None = None


@dataclass
class ListUsersInput:
    actor: User


@dataclass
class UserOutput:
    user: User | None = None
    success: bool = False
    error: str | None = None


@dataclass
class UserListOutput:
    users: list[User]
    success: bool = False
    error: str | None = None
