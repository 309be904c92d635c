from typing import List
from fastapi import APIRouter, HTTPException, Depends

from dependencies.session import get_session_manager
from models.session import LoginRequest, SessionState
from models.user import DemoAccount
from mock_data import DEMO_ACCOUNTS
from services.session_manager import SessionManager
from core.logging_config import logger


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


# ============================================================
# LOGIN (DEMO, any password)
# ============================================================
@router.post("/login", response_model=SessionState, summary="Log in as a demo user")
async def login(
    payload: LoginRequest,
    manager: SessionManager = Depends(get_session_manager),
):
    """
    Look up the demo user by email. The password is not checked.
    Responds after the configured artificial delay.
    """
    ok = await manager.login(payload.email, payload.password)
    if not ok:
        raise HTTPException(
            status_code=401,
            detail="Invalid email or password"
        )
    return manager.state()


# ============================================================
# LOGOUT
# ============================================================
@router.post("/logout", response_model=SessionState, summary="End the current session")
def logout(manager: SessionManager = Depends(get_session_manager)):
    manager.logout()
    return manager.state()


# ============================================================
# SWITCH USER (demo only, no password)
# ============================================================
@router.post("/switch/{user_id}", response_model=SessionState, summary="Become another demo user")
def switch_user(
    user_id: str,
    manager: SessionManager = Depends(get_session_manager),
):
    if not manager.switch_user(user_id):
        raise HTTPException(404, f"Unknown demo user: {user_id}")
    logger.info(f"Demo switch to user {user_id} via API")
    return manager.state()


# ============================================================
# CURRENT SESSION
# ============================================================
@router.get("/session", response_model=SessionState, summary="Current session state")
def read_session(manager: SessionManager = Depends(get_session_manager)):
    return manager.state()


# ============================================================
# DEMO ACCOUNTS (login screen shortcuts)
# ============================================================
@router.get("/demo-accounts", response_model=List[DemoAccount], summary="Quick-login demo accounts")
def demo_accounts():
    return DEMO_ACCOUNTS
