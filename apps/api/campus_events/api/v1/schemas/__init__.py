from campus_events.api.v1.schemas.auth import AuthTokensOut, LoginIn, MeOut, RegisterIn, UserOut
from campus_events.api.v1.schemas.events import (
    EventCreate,
    EventCreatedOut,
    EventDeletedOut,
    EventOut,
    EventUpdate,
    RegistrationCountOut,
    RegistrationCreatedOut,
    RegistrationIn,
    RegistrationOut,
)
from campus_events.api.v1.schemas.messages import (
    AnnouncementIn,
    AnnouncementOut,
    CreatedOut,
    QueryIn,
    QueryOut,
    QueryReplyIn,
)

__all__ = [
    "AuthTokensOut",
    "LoginIn",
    "MeOut",
    "RegisterIn",
    "UserOut",
    "EventCreate",
    "EventCreatedOut",
    "EventDeletedOut",
    "EventOut",
    "EventUpdate",
    "RegistrationCountOut",
    "RegistrationCreatedOut",
    "RegistrationIn",
    "RegistrationOut",
    "AnnouncementIn",
    "AnnouncementOut",
    "CreatedOut",
    "QueryIn",
    "QueryOut",
    "QueryReplyIn",
]
