"""Application-wide exception handlers."""

import structlog
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import StoreError

logger = structlog.get_logger(__name__)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or missing request fields as INVALID_INPUT."""
    return JSONResponse(
        status_code=422,
        content={
            "detail": {
                "code": ErrorCode.INVALID_INPUT.value,
                "message": "missing or malformed fields",
                "errors": jsonable_encoder(exc.errors()),
            }
        },
    )


async def handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Surface persistence failures immediately; nothing is retried."""
    logger.exception("store_failure", method=request.method, path=request.url.path)
    err = StoreError(ErrorCode.STORE_FAILURE.value, "storage operation failed")
    return JSONResponse(status_code=500, content={"detail": {"code": err.code, "message": err.message}})
