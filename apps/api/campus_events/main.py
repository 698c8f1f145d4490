from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.exc import SQLAlchemyError

from campus_events.api.exception_handlers import handle_request_validation_error, handle_store_error
from campus_events.api.v1.router import router as v1_router
from campus_events.core.config import settings
from campus_events.core.logging import configure_logging
from campus_events.db import init_db
from campus_events.middleware.rate_limit import RateLimitMiddleware
from campus_events.middleware.request_id import RequestIdMiddleware
from campus_events.middleware.security_headers import SecurityHeadersMiddleware

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.auto_create_schema:
        init_db()
    yield


app = FastAPI(title="Campus Events API", lifespan=lifespan)

# Starlette runs the LAST added middleware FIRST (outermost).
# RequestId + SecurityHeaders wrap everything, including CORS preflight
# and rate-limit rejections; RateLimit sits closest to the app.
app.add_middleware(RateLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIdMiddleware)

app.add_exception_handler(RequestValidationError, handle_request_validation_error)
app.add_exception_handler(SQLAlchemyError, handle_store_error)

Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)


@app.get("/")
def root():
    return {"name": "Campus Events API", "status": "ok"}


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(v1_router, prefix="/v1")
