from __future__ import annotations

import uuid
from datetime import datetime, timezone

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session

from campus_events.auth.identity import Identity
from campus_events.models import Announcement, Event, Query
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import NotFoundError, PermissionDeniedError

logger = structlog.get_logger(__name__)


def _require_event(db: Session, event_id: str) -> None:
    if not db.scalar(select(Event.id).where(Event.event_id == event_id)):
        raise NotFoundError(ErrorCode.EVENT_NOT_FOUND.value, "event not found")


def list_announcements(db: Session, event_id: str) -> list[Announcement]:
    return list(
        db.scalars(
            select(Announcement)
            .where(Announcement.event_id == event_id)
            .order_by(Announcement.created_at.desc())
        )
    )


def post_announcement(db: Session, caller: Identity, event_id: str, message: str) -> Announcement:
    if not caller.is_admin:
        raise PermissionDeniedError(ErrorCode.FORBIDDEN.value, "only admins can post announcements")
    _require_event(db, event_id)

    announcement = Announcement(event_id=event_id, admin_id=caller.id, message=message)
    db.add(announcement)
    db.commit()
    db.refresh(announcement)
    logger.info("announcement_posted", event_id=event_id, announcement_id=str(announcement.id))
    return announcement


def list_queries(db: Session, caller: Identity, event_id: str) -> list[Query]:
    """Queries for an event: the caller's own, or every query when the caller is an admin."""
    stmt = select(Query).where(Query.event_id == event_id)
    if not caller.is_admin:
        stmt = stmt.where(Query.user_id == caller.id)
    return list(db.scalars(stmt.order_by(Query.created_at.desc())))


def list_all_queries(db: Session, caller: Identity, event_id: str) -> list[Query]:
    if not caller.is_admin:
        raise PermissionDeniedError(ErrorCode.FORBIDDEN.value, "only admins can view all queries")
    return list_queries(db, caller, event_id)


def submit_query(db: Session, caller: Identity, event_id: str, message: str) -> Query:
    _require_event(db, event_id)

    query = Query(event_id=event_id, user_id=caller.id, user_name=caller.email, message=message)
    db.add(query)
    db.commit()
    db.refresh(query)
    logger.info("query_submitted", event_id=event_id, query_id=str(query.id))
    return query


def reply_to_query(db: Session, caller: Identity, query_id: str, reply: str) -> Query:
    if not caller.is_admin:
        raise PermissionDeniedError(ErrorCode.FORBIDDEN.value, "only admins can reply to queries")

    try:
        key = uuid.UUID(query_id)
    except ValueError:
        raise NotFoundError(ErrorCode.QUERY_NOT_FOUND.value, "query not found") from None

    query = db.get(Query, key)
    if not query:
        raise NotFoundError(ErrorCode.QUERY_NOT_FOUND.value, "query not found")

    query.admin_reply = reply
    query.replied_at = datetime.now(timezone.utc)
    db.add(query)
    db.commit()
    db.refresh(query)
    logger.info("query_replied", query_id=str(query.id), admin_id=str(caller.id))
    return query
