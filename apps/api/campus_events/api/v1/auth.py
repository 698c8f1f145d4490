from __future__ import annotations

from fastapi import APIRouter

from campus_events.api.errors import http_error_from_service
from campus_events.api.v1.schemas.auth import AuthTokensOut, LoginIn, MeOut, RegisterIn, UserOut
from campus_events.auth.deps import CurrentIdentity, DBSession
from campus_events.core.config import settings
from campus_events.models import User
from campus_events.services import auth_service
from campus_events.services.exceptions import ServiceError

router = APIRouter(prefix="/auth", tags=["auth"])


def _tokens_out(token: str, user: User) -> AuthTokensOut:
    return AuthTokensOut(
        token=token,
        expires_in=settings.access_token_ttl_seconds,
        user=UserOut(id=user.id, email=user.email, role=user.role.value),
    )


@router.post("/register", response_model=AuthTokensOut)
def register(payload: RegisterIn, db: DBSession):
    try:
        token, user = auth_service.register_user(db, payload.email, payload.password, payload.role)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return _tokens_out(token, user)


@router.post("/login", response_model=AuthTokensOut)
def login(payload: LoginIn, db: DBSession):
    try:
        token, user = auth_service.login(db, payload.email, payload.password)
    except ServiceError as err:
        raise http_error_from_service(err) from None
    return _tokens_out(token, user)


@router.get("/me", response_model=MeOut)
def me(identity: CurrentIdentity):
    return MeOut(user=UserOut(id=identity.id, email=identity.email, role=identity.role.value))
