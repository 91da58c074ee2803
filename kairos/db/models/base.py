from datetime import datetime

import pytz
from pydantic import BaseModel, Field, field_validator


def utcnow() -> datetime:
    return datetime.now(pytz.utc)


class CreatedAtMixin(BaseModel):
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("created_at", mode="before")
    @classmethod
    def set_created_at_now(cls, v):
        return v or utcnow()
