# models/session.py

from typing import Optional
from pydantic import BaseModel

from .user import User
from .bundle import DataBundle


class LoginRequest(BaseModel):
    email: str
    password: str


class SessionState(BaseModel):
    """
    What the dashboard reads from the session manager:
    the active user, their data bundle, and whether an auth call is in flight.
    """
    user: Optional[User] = None
    user_data: Optional[DataBundle] = None
    is_loading: bool = False
