# routers/__init__.py

from .auth import router as auth_router
from .dashboard import router as dashboard_router
from .health import router as health_router

__all__ = [
    "auth_router",
    "dashboard_router",
    "health_router",
]
