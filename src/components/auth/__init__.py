"""
Auth component - Authentication and user management.

Handles login, session checks, and user administration.
"""

from .component import (
    ROLES,
    check_auth,
    login,
    logout,
    run,
    run_create_user,
    run_list_users,
    run_update_user,
)
from .models import (
    CreateUserInput,
    ListUsersInput,
    LoginInput,
    SessionState,
    UpdateUserInput,
    UserListOutput,
    UserOutput,
)
from .ports import AuthAdapterPort

__all__ = [
    # Session transitions
    "login",
    "logout",
    "check_auth",
    # Entry points
    "run",
    "run_create_user",
    "run_list_users",
    "run_update_user",
    "ROLES",
    # Models
    "SessionState",
    "CreateUserInput",
    "ListUsersInput",
    "LoginInput",
    "UpdateUserInput",
    "UserListOutput",
    "UserOutput",
    # Ports
    "AuthAdapterPort",
]
