from __future__ import annotations

from datetime import date, datetime, time
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _ensure_wall_clock(value: time | None) -> time | None:
    if value is None:
        return value
    if value.tzinfo is not None:
        raise ValueError("time must be a local wall-clock time without a UTC offset")
    return value


class SchemaBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore", str_strip_whitespace=True)


class EventFields(SchemaBase):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    start_date: date
    start_time: time
    end_date: date
    end_time: time
    venue: str | None = Field(default=None, max_length=300)
    max_participants: int | None = Field(default=None, ge=1)
    registration_deadline_date: date | None = None
    registration_deadline_time: time | None = None

    @field_validator("start_time", "end_time", "registration_deadline_time", mode="after")
    @classmethod
    def _validate_wall_clock(cls, value: time | None) -> time | None:
        return _ensure_wall_clock(value)


class EventCreate(EventFields):
    event_id: str = Field(min_length=1, max_length=64)


class EventUpdate(EventFields):
    """Full replacement of an event's mutable fields; unchanged values must be resent."""


class EventOut(SchemaBase):
    id: UUID
    event_id: str
    name: str
    description: str | None = None
    start_date: date
    start_time: time
    end_date: date
    end_time: time
    venue: str | None = None
    max_participants: int | None = None
    registration_deadline_date: date | None = None
    registration_deadline_time: time | None = None
    created_at: datetime
    updated_at: datetime


class EventCreatedOut(SchemaBase):
    id: UUID
    event_id: str


class EventDeletedOut(SchemaBase):
    status: str = "deleted"
    event_id: str


class RegistrationIn(SchemaBase):
    user_name: str = Field(min_length=1, max_length=200)
    user_phone: str | None = Field(default=None, max_length=40)


class RegistrationOut(SchemaBase):
    id: UUID
    event_id: str
    user_name: str
    user_email: str
    user_phone: str | None = None
    created_at: datetime


class RegistrationCreatedOut(SchemaBase):
    id: UUID


class RegistrationCountOut(SchemaBase):
    count: int = Field(ge=0)
