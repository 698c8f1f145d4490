from __future__ import annotations

from fastapi import APIRouter

from campus_events.api.errors import http_error_from_service
from campus_events.api.v1.schemas.events import (
    RegistrationCountOut,
    RegistrationCreatedOut,
    RegistrationIn,
    RegistrationOut,
)
from campus_events.auth.deps import CurrentIdentity, DBSession
from campus_events.services import registration_service
from campus_events.services.exceptions import ServiceError

router = APIRouter(prefix="/events", tags=["registrations"])


@router.post("/{event_id}/register", response_model=RegistrationCreatedOut)
def register_for_event(
    event_id: str,
    payload: RegistrationIn,
    db: DBSession,
    identity: CurrentIdentity,
):
    try:
        registration = registration_service.register_for_event(db, identity, event_id, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return RegistrationCreatedOut(id=registration.id)


@router.get("/{event_id}/registrations", response_model=list[RegistrationOut])
def list_registrations(event_id: str, db: DBSession, identity: CurrentIdentity):
    try:
        rows = registration_service.list_registrations(db, identity, event_id)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return [RegistrationOut.model_validate(r) for r in rows]


@router.get("/{event_id}/registrations/count", response_model=RegistrationCountOut)
def registration_count(event_id: str, db: DBSession):
    return RegistrationCountOut(count=registration_service.registration_count(db, event_id))
