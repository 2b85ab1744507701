"""Notification models"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class NotificationKind(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Notification(BaseModel):
    """Transient message shown to the shopper"""
    kind: NotificationKind
    title: str
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
