from __future__ import annotations

from datetime import datetime

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_events.api.v1.schemas.events import EventCreate, EventFields, EventUpdate
from campus_events.auth.identity import Identity
from campus_events.models import Event
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from campus_events.services.overlap import event_window, find_conflict

logger = structlog.get_logger(__name__)

_REQUIRED_FIELDS = ("name", "start_date", "start_time", "end_date", "end_time")


def _require_admin(caller: Identity, action: str) -> None:
    if not caller.is_admin:
        raise PermissionDeniedError(ErrorCode.FORBIDDEN.value, f"only admins can {action} events")


def _validated_window(payload: EventFields) -> tuple[datetime, datetime]:
    missing = [name for name in _REQUIRED_FIELDS if getattr(payload, name, None) in (None, "")]
    if missing:
        raise ValidationError(
            ErrorCode.INVALID_INPUT.value, f"missing required fields: {', '.join(missing)}"
        )

    start, end = event_window(payload.start_date, payload.start_time, payload.end_date, payload.end_time)
    if start >= end:
        raise ValidationError(
            ErrorCode.INVALID_INPUT.value, "start date/time must be before end date/time"
        )
    return start, end


def _check_schedule(
    db: Session,
    start: datetime,
    end: datetime,
    exclude_event_id: str | None = None,
) -> None:
    conflict = find_conflict(start, end, db.scalars(select(Event)), exclude_event_id)
    if conflict is not None:
        logger.info(
            "event_schedule_conflict",
            conflicting_event_id=conflict.event_id,
            start=start.isoformat(),
            end=end.isoformat(),
        )
        raise ConflictError(
            ErrorCode.SCHEDULING_CONFLICT.value, "event time overlaps with an existing event"
        )


def _get_event(db: Session, event_id: str) -> Event:
    event = db.scalar(select(Event).where(Event.event_id == event_id))
    if not event:
        raise NotFoundError(ErrorCode.EVENT_NOT_FOUND.value, "event not found")
    return event


def list_events(db: Session) -> list[Event]:
    return list(db.scalars(select(Event).order_by(Event.start_date, Event.start_time)))


def get_event(db: Session, event_id: str) -> Event:
    return _get_event(db, event_id)


def create_event(db: Session, caller: Identity, payload: EventCreate) -> Event:
    _require_admin(caller, "create")

    if not payload.event_id:
        raise ValidationError(ErrorCode.INVALID_INPUT.value, "missing required fields: event_id")
    start, end = _validated_window(payload)
    _check_schedule(db, start, end)

    if db.scalar(select(Event.id).where(Event.event_id == payload.event_id)):
        raise ConflictError(ErrorCode.DUPLICATE_IDENTIFIER.value, "event id already exists")

    event = Event(**payload.model_dump())
    db.add(event)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(ErrorCode.DUPLICATE_IDENTIFIER.value, "event id already exists") from exc

    db.refresh(event)
    logger.info("event_created", event_id=event.event_id, id=str(event.id), admin_id=str(caller.id))
    return event


def update_event(db: Session, caller: Identity, event_id: str, payload: EventUpdate) -> Event:
    _require_admin(caller, "update")

    event = _get_event(db, event_id)
    start, end = _validated_window(payload)
    _check_schedule(db, start, end, exclude_event_id=event.event_id)

    # Full replace: every mutable field comes from the payload
    for key, value in payload.model_dump().items():
        setattr(event, key, value)

    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("event_updated", event_id=event.event_id, admin_id=str(caller.id))
    return event


def delete_event(db: Session, caller: Identity, event_id: str) -> None:
    _require_admin(caller, "delete")

    # Registrations, announcements and queries referencing the event are left in place
    result = db.execute(delete(Event).where(Event.event_id == event_id))
    if not result.rowcount:
        db.rollback()
        raise NotFoundError(ErrorCode.EVENT_NOT_FOUND.value, "event not found")

    db.commit()
    logger.info("event_deleted", event_id=event_id, admin_id=str(caller.id))
