# routers/health.py

from fastapi import APIRouter, Depends

from core.config import settings
from core.storage import CURRENT_USER_KEY, USER_DATA_KEY
from dependencies.session import get_session_manager
from services.session_manager import SessionManager

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/storage
# Reports which session keys are currently persisted
# No auth required
# -----------------------------------------------------
@router.get("/storage", summary="Session storage health check")
def health_storage(manager: SessionManager = Depends(get_session_manager)):
    """
    Verifies the session storage backend can be read.
    Never returns stored values, only which keys are present.
    """
    try:
        keys = manager.storage.keys()
        return {
            "service": "SessionStorage",
            "status": "ok",
            "backend": settings.SESSION_STORAGE_BACKEND,
            "has_current_user": CURRENT_USER_KEY in keys,
            "has_user_data": USER_DATA_KEY in keys,
        }

    except Exception as e:
        return {
            "service": "SessionStorage",
            "status": "error",
            "error": str(e),
        }


# -----------------------------------------------------
# GET /health/app
# Simple API health check
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    """
    Lightweight health check for uptime monitors.
    """
    return {
        "service": "PropertyHub API",
        "status": "ok",
    }
