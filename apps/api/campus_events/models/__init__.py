from campus_events.models.announcement import Announcement
from campus_events.models.base import Base
from campus_events.models.event import Event
from campus_events.models.query import Query
from campus_events.models.registration import Registration
from campus_events.models.user import User, UserRole

__all__ = ["Base", "User", "UserRole", "Event", "Registration", "Announcement", "Query"]
