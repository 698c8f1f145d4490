from fastapi import APIRouter

from campus_events.api.v1.auth import router as auth_router
from campus_events.api.v1.events import router as events_router
from campus_events.api.v1.messages import router as messages_router
from campus_events.api.v1.registrations import router as registrations_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(events_router)
router.include_router(registrations_router)
router.include_router(messages_router)
