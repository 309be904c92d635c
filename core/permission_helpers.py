from typing import Union

from core.permissions import ROLE_PERMISSIONS
from models.enums import UserRole
from models.user import User


# -----------------------------------------------------
# Collect effective permissions for a role
# -----------------------------------------------------
def get_effective_permissions(role: Union[UserRole, str]) -> set:
    role_value = role.value if isinstance(role, UserRole) else str(role)
    return set(ROLE_PERMISSIONS.get(role_value, []))


# -----------------------------------------------------
# Permission evaluation
# -----------------------------------------------------
def has_permission(user: User, permission: str) -> bool:
    return permission in get_effective_permissions(user.role)
