from fastapi import HTTPException

from campus_events.services.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ServiceError,
    ValidationError,
)


def status_for_service_error(err: ServiceError) -> int:
    if isinstance(err, NotFoundError):
        return 404
    if isinstance(err, PermissionDeniedError):
        return 403
    if isinstance(err, ConflictError):
        return 409
    if isinstance(err, ValidationError):
        return 422
    if isinstance(err, AuthenticationError):
        return 401
    return 500


def http_error_from_service(err: ServiceError) -> HTTPException:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(err, AuthenticationError) else None
    return HTTPException(
        status_code=status_for_service_error(err),
        detail={"code": err.code, "message": err.message},
        headers=headers,
    )
