from datetime import datetime
from typing import Optional

import pytz
from pydantic import field_validator

from .base import CreatedAtMixin


class Reminder(CreatedAtMixin):
    id: int
    description: str
    timestamp: datetime
    user_id: int
    channel_id: Optional[int] = None
    private_message: bool = False

    @field_validator("description")
    @classmethod
    def description_validator(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("description is required")
        return v

    @field_validator("timestamp", "created_at")
    @classmethod
    def as_utc(cls, v: datetime):
        # Mongo hands back naive UTC unless the client is tz aware
        if v.tzinfo is None:
            return pytz.utc.localize(v)
        return v.astimezone(pytz.utc)
