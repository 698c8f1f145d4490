from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class MessageSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)


class AnnouncementIn(MessageSchema):
    message: str = Field(min_length=1)


class AnnouncementOut(MessageSchema):
    id: UUID
    message: str
    created_at: datetime


class QueryIn(MessageSchema):
    message: str = Field(min_length=1)


class QueryReplyIn(MessageSchema):
    reply: str = Field(min_length=1)


class QueryOut(MessageSchema):
    id: UUID
    event_id: str
    user_id: UUID
    user_name: str
    message: str
    admin_reply: str | None = None
    created_at: datetime
    replied_at: datetime | None = None


class CreatedOut(MessageSchema):
    id: UUID
