"""Shared base for domain entities"""

import uuid
from datetime import datetime, timezone
from sqlmodel import SQLModel


def generate_uuid() -> str:
    """Generate a string identifier for new records"""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    """Timezone-aware current time; all timestamps are stored in UTC"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Base class for all SQLModel domain entities"""
    pass
