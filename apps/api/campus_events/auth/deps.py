from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from campus_events.auth.identity import Identity
from campus_events.core.config import settings
from campus_events.db import get_db
from campus_events.models import User
from campus_events.services.auth_service import identity_from_token
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import AuthenticationError

DBSession = Annotated[Session, Depends(get_db)]


def _unauthorized(detail: str = "unauthorized") -> HTTPException:
    return HTTPException(
        status_code=401,
        detail={"code": ErrorCode.INVALID_OR_EXPIRED_TOKEN.value, "message": detail},
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_identity(request: Request, db: DBSession) -> Identity:
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        raise _unauthorized("missing bearer token")

    token = auth.removeprefix("Bearer ").strip()
    if not token:
        raise _unauthorized("invalid authorization header")

    try:
        identity = identity_from_token(token)
    except AuthenticationError as err:
        raise _unauthorized(err.message) from None

    # Optional stricter mode: the stored role wins over the token claim
    if settings.auth_recheck_role:
        user = db.get(User, identity.id)
        if not user:
            raise _unauthorized("user no longer exists")
        identity = Identity.from_user(user)

    return identity


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
