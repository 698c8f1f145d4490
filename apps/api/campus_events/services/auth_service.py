from __future__ import annotations

import re

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_events.auth.identity import Identity
from campus_events.auth.jwt import create_access_token, verify_access_token
from campus_events.auth.password import burn_verification, hash_password, verify_password
from campus_events.core.config import settings
from campus_events.models import User, UserRole
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import (
    AuthenticationError,
    ConflictError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

PASSWORD_MIN_LENGTH = 8
PASSWORD_SYMBOLS = "!@#$%^&*()_-+=[]{};':\"\\|,.<>/?"

# External-facing synonyms accepted at the account boundary
ROLE_ALIASES = {"participant": UserRole.USER}

_email_re = re.compile(settings.institutional_email_pattern, re.IGNORECASE)


def normalize_email(email: str) -> str:
    candidate = (email or "").strip()
    if not _email_re.match(candidate):
        raise ValidationError(
            ErrorCode.INVALID_INPUT.value,
            "please use your college email address (e.g. 2-u1234@students.git.edu)",
        )
    return candidate.lower()


def normalize_role(role: str) -> UserRole:
    raw = (role or "").strip().lower()
    if raw in ROLE_ALIASES:
        return ROLE_ALIASES[raw]
    try:
        return UserRole(raw)
    except ValueError:
        raise ValidationError(ErrorCode.INVALID_INPUT.value, "role must be user or admin") from None


def is_strong_password(password: str) -> bool:
    return (
        isinstance(password, str)
        and len(password) >= PASSWORD_MIN_LENGTH
        and any(ch.isalpha() for ch in password)
        and any(ch.isdigit() for ch in password)
        and any(ch in PASSWORD_SYMBOLS for ch in password)
    )


def issue_token(user: User) -> str:
    return create_access_token(user.id, user.email, user.role.value)


def register_user(db: Session, email: str, password: str, role: str) -> tuple[str, User]:
    normalized_email = normalize_email(email)
    user_role = normalize_role(role)
    if not is_strong_password(password):
        raise ValidationError(
            ErrorCode.INVALID_INPUT.value,
            f"password must be at least {PASSWORD_MIN_LENGTH} characters and include "
            "a letter, a digit and a special character",
        )

    if db.scalar(select(User.id).where(User.email == normalized_email)):
        raise ConflictError(ErrorCode.DUPLICATE_IDENTIFIER.value, "email already registered")

    user = User(email=normalized_email, password_hash=hash_password(password), role=user_role)
    db.add(user)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(ErrorCode.DUPLICATE_IDENTIFIER.value, "email already registered") from exc

    db.refresh(user)
    logger.info("user_registered", user_id=str(user.id), role=user.role.value)
    return issue_token(user), user


def login(db: Session, email: str, password: str) -> tuple[str, User]:
    normalized_email = normalize_email(email)
    user = db.scalar(select(User).where(User.email == normalized_email))

    # Same error whether the account is missing or the password is wrong
    if not user:
        burn_verification(password)
        logger.info("login_failed")
        raise AuthenticationError(ErrorCode.INVALID_CREDENTIALS.value, "invalid credentials")
    if not verify_password(password, user.password_hash):
        logger.info("login_failed")
        raise AuthenticationError(ErrorCode.INVALID_CREDENTIALS.value, "invalid credentials")

    logger.info("login_succeeded", user_id=str(user.id))
    return issue_token(user), user


def identity_from_token(token: str) -> Identity:
    try:
        claims = verify_access_token(token)
        return Identity.from_claims(claims)
    except (ValueError, KeyError) as exc:
        raise AuthenticationError(
            ErrorCode.INVALID_OR_EXPIRED_TOKEN.value, "invalid or expired token"
        ) from exc
