from campus_events.services.auth_service import identity_from_token, login, register_user
from campus_events.services.events_service import (
    create_event,
    delete_event,
    get_event,
    list_events,
    update_event,
)
from campus_events.services.messages_service import (
    list_all_queries,
    list_announcements,
    list_queries,
    post_announcement,
    reply_to_query,
    submit_query,
)
from campus_events.services.overlap import has_overlap
from campus_events.services.registration_service import (
    list_registrations,
    register_for_event,
    registration_count,
)

__all__ = [
    "register_user",
    "login",
    "identity_from_token",
    "list_events",
    "get_event",
    "create_event",
    "update_event",
    "delete_event",
    "has_overlap",
    "register_for_event",
    "list_registrations",
    "registration_count",
    "list_announcements",
    "post_announcement",
    "list_queries",
    "list_all_queries",
    "submit_query",
    "reply_to_query",
]
