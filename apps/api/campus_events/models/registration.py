from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from campus_events.models.base import Base, CreatedAtMixin, UUIDPrimaryKeyMixin


class Registration(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    __tablename__ = "registrations"
    __table_args__ = (
        UniqueConstraint("event_id", "user_email", name="uq_registrations_event_email"),
    )

    # Weak reference to Event.event_id: no foreign key, deleted events leave orphans
    event_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    user_name: Mapped[str] = mapped_column(String(200), nullable=False)
    user_email: Mapped[str] = mapped_column(String(320), nullable=False)
    user_phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
