from __future__ import annotations

from datetime import datetime

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_events.api.v1.schemas.events import RegistrationIn
from campus_events.auth.identity import Identity
from campus_events.models import Event, Registration, UserRole
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


def _now() -> datetime:
    # Deadlines are wall-clock local server time
    return datetime.now()


def _current_registration_count(db: Session, event_id: str) -> int:
    return int(
        db.scalar(
            select(func.count())
            .select_from(Registration)
            .where(Registration.event_id == event_id)
        )
        or 0
    )


def _reject(code: ErrorCode, event_id: str, caller: Identity) -> None:
    logger.info("registration_rejected", reason=code.value, event_id=event_id, user_id=str(caller.id))


def register_for_event(
    db: Session,
    caller: Identity,
    event_id: str,
    payload: RegistrationIn,
    now: datetime | None = None,
) -> Registration:
    """Register the caller for an event.

    Checks run in order: role, existence, deadline, duplicate, capacity. The
    event row is locked for update where the backend supports it; elsewhere two
    concurrent registrations for the last seat can both pass the capacity check.
    """
    if caller.role != UserRole.USER:
        raise PermissionDeniedError(ErrorCode.FORBIDDEN.value, "only users can register for events")
    if not payload.user_name:
        raise ValidationError(ErrorCode.INVALID_INPUT.value, "name is required")

    event = db.scalar(select(Event).where(Event.event_id == event_id).with_for_update())
    if not event:
        raise NotFoundError(ErrorCode.EVENT_NOT_FOUND.value, "event not found")

    deadline = event.registration_deadline
    if deadline is not None:
        current = now or _now()
        if current > deadline:
            _reject(ErrorCode.DEADLINE_PASSED, event_id, caller)
            raise ConflictError(ErrorCode.DEADLINE_PASSED.value, "registration deadline has passed")

    existing = db.scalar(
        select(Registration.id).where(
            Registration.event_id == event_id,
            Registration.user_email == caller.email,
        )
    )
    if existing:
        _reject(ErrorCode.ALREADY_REGISTERED, event_id, caller)
        raise ConflictError(
            ErrorCode.ALREADY_REGISTERED.value, "you are already registered for this event"
        )

    if event.max_participants is not None:
        if _current_registration_count(db, event_id) >= event.max_participants:
            _reject(ErrorCode.EVENT_FULL, event_id, caller)
            raise ConflictError(ErrorCode.EVENT_FULL.value, "event is full")

    registration = Registration(
        event_id=event_id,
        user_name=payload.user_name,
        user_email=caller.email,
        user_phone=payload.user_phone,
    )
    db.add(registration)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(
            ErrorCode.ALREADY_REGISTERED.value, "you are already registered for this event"
        ) from exc

    db.refresh(registration)
    logger.info("registration_created", event_id=event_id, registration_id=str(registration.id))
    return registration


def list_registrations(db: Session, caller: Identity, event_id: str) -> list[Registration]:
    if not caller.is_admin:
        raise PermissionDeniedError(ErrorCode.FORBIDDEN.value, "admin privileges required")
    return list(
        db.scalars(
            select(Registration)
            .where(Registration.event_id == event_id)
            .order_by(Registration.created_at.desc())
        )
    )


def registration_count(db: Session, event_id: str) -> int:
    return _current_registration_count(db, event_id)
