from src.domain.entities import User
from src.rules.models import Rules


class PolicyEngine:
    def __init__(self, rules: Rules):
        self.rules = rules

    def check_permission(self, user: User | None, action: str) -> bool:
        """
        Check if the user's role allows the action.

        Order of precedence:
        1. Public Permissions (Global)
        2. Role-Based Access Control (RBAC), with "*" and "scope:*" wildcards
        """
        if action in self.rules.rbac.public_permissions:
            return True

        if not user or user.status != "active":
            return False

        allowed_actions = self.rules.rbac.roles.get(user.role, [])
        if "*" in allowed_actions or action in allowed_actions:
            return True

        # "jobs:*" matches "jobs:schedule"
        if ":" in action:
            scope = action.split(":")[0]
            if f"{scope}:*" in allowed_actions:
                return True

        return False

    def require(self, user: User | None, action: str) -> None:
        if not self.check_permission(user, action):
            raise PermissionError(f"Access denied: {action}")

    def can_manage_users(self, user: User) -> bool:
        return self.check_permission(user, "users:manage")

    def can_decide_discount(self, user: User) -> bool:
        return self.check_permission(user, "feedback:decide_discount")
