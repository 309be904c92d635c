from fastapi import Depends, HTTPException, Request, status

from core.permission_helpers import has_permission
from models.user import User
from models.bundle import AnyBundle
from services.session_manager import SessionManager


# ============================================================
# Session manager (owned by the app, injected per request)
# ============================================================
def get_session_manager(request: Request) -> SessionManager:
    manager = getattr(request.app.state, "session_manager", None)
    if manager is None:
        raise HTTPException(500, "Session manager not configured")
    return manager


# ============================================================
# Current user guard
# ============================================================
def get_current_user(
    manager: SessionManager = Depends(get_session_manager),
) -> User:
    if manager.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return manager.user


def get_current_bundle(
    manager: SessionManager = Depends(get_session_manager),
    current_user: User = Depends(get_current_user),
) -> AnyBundle:
    if manager.user_data is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No dashboard data for role '{current_user.role}'",
        )
    return manager.user_data


# ============================================================
# PERMISSION CHECK
# ============================================================
def requires_permission(permission: str):
    """
    Usage:
        @router.get("/", dependencies=[Depends(requires_permission("analytics:read"))])
    """

    def dependency(current_user: User = Depends(get_current_user)):
        if not has_permission(current_user, permission):
            raise HTTPException(
                status_code=403,
                detail=f"Insufficient permissions: '{permission}' required"
            )
        return current_user

    return dependency
