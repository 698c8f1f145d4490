from __future__ import annotations

from fastapi import APIRouter

from campus_events.api.errors import http_error_from_service
from campus_events.api.v1.schemas.messages import (
    AnnouncementIn,
    AnnouncementOut,
    CreatedOut,
    QueryIn,
    QueryOut,
    QueryReplyIn,
)
from campus_events.auth.deps import CurrentIdentity, DBSession
from campus_events.services import messages_service
from campus_events.services.exceptions import ServiceError

router = APIRouter(tags=["messages"])


@router.get("/events/{event_id}/announcements", response_model=list[AnnouncementOut])
def list_announcements(event_id: str, db: DBSession):
    return [
        AnnouncementOut.model_validate(a)
        for a in messages_service.list_announcements(db, event_id)
    ]


@router.post("/events/{event_id}/announcements", response_model=CreatedOut)
def post_announcement(
    event_id: str,
    payload: AnnouncementIn,
    db: DBSession,
    identity: CurrentIdentity,
):
    try:
        announcement = messages_service.post_announcement(db, identity, event_id, payload.message)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return CreatedOut(id=announcement.id)


@router.get("/events/{event_id}/queries", response_model=list[QueryOut])
def list_queries(event_id: str, db: DBSession, identity: CurrentIdentity):
    return [QueryOut.model_validate(q) for q in messages_service.list_queries(db, identity, event_id)]


@router.post("/events/{event_id}/queries", response_model=CreatedOut)
def submit_query(event_id: str, payload: QueryIn, db: DBSession, identity: CurrentIdentity):
    try:
        query = messages_service.submit_query(db, identity, event_id, payload.message)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return CreatedOut(id=query.id)


@router.get("/events/{event_id}/admin-queries", response_model=list[QueryOut])
def list_all_queries(event_id: str, db: DBSession, identity: CurrentIdentity):
    try:
        rows = messages_service.list_all_queries(db, identity, event_id)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return [QueryOut.model_validate(q) for q in rows]


@router.post("/queries/{query_id}/reply")
def reply_to_query(query_id: str, payload: QueryReplyIn, db: DBSession, identity: CurrentIdentity):
    try:
        messages_service.reply_to_query(db, identity, query_id, payload.reply)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return {"status": "ok"}
