from __future__ import annotations

from fastapi import APIRouter

from campus_events.api.errors import http_error_from_service
from campus_events.api.v1.schemas.events import (
    EventCreate,
    EventCreatedOut,
    EventDeletedOut,
    EventOut,
    EventUpdate,
)
from campus_events.auth.deps import CurrentIdentity, DBSession
from campus_events.services import events_service
from campus_events.services.exceptions import ServiceError

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventOut])
def list_events(db: DBSession):
    return [EventOut.model_validate(e) for e in events_service.list_events(db)]


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: str, db: DBSession):
    try:
        event = events_service.get_event(db, event_id)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return EventOut.model_validate(event)


@router.post("", response_model=EventCreatedOut)
def create_event(payload: EventCreate, db: DBSession, identity: CurrentIdentity):
    try:
        event = events_service.create_event(db, identity, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return EventCreatedOut(id=event.id, event_id=event.event_id)


@router.put("/{event_id}", response_model=EventOut)
def update_event(event_id: str, payload: EventUpdate, db: DBSession, identity: CurrentIdentity):
    try:
        event = events_service.update_event(db, identity, event_id, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return EventOut.model_validate(event)


@router.delete("/{event_id}", response_model=EventDeletedOut)
def delete_event(event_id: str, db: DBSession, identity: CurrentIdentity):
    try:
        events_service.delete_event(db, identity, event_id)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return EventDeletedOut(event_id=event_id)
