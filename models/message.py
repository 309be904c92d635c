# models/message.py

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from .enums import NotificationType


class Message(BaseModel):
    """Direct message between two demo users."""
    model_config = ConfigDict(frozen=True)

    id: str
    sender_id: str
    receiver_id: str
    subject: str
    content: str
    is_read: bool = False
    created_at: datetime
    attachments: List[str] = Field(default_factory=list)


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    type: NotificationType
    title: str
    message: str
    is_read: bool = False
    action_url: Optional[str] = None
    created_at: datetime
