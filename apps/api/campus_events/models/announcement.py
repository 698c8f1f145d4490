import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from campus_events.models.base import Base, CreatedAtMixin, UUIDPrimaryKeyMixin


class Announcement(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    __tablename__ = "announcements"

    event_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    admin_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
