from datetime import date, datetime, time

from sqlalchemy import Date, Integer, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column

from campus_events.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Event(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "events"

    # External identifier chosen by the admin; used in every URL
    event_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Wall-clock local server time, not instants
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)

    venue: Mapped[str | None] = mapped_column(String(300), nullable=True)
    max_participants: Mapped[int | None] = mapped_column(Integer, nullable=True)
    registration_deadline_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    registration_deadline_time: Mapped[time | None] = mapped_column(Time, nullable=True)

    @property
    def registration_deadline(self) -> datetime | None:
        if self.registration_deadline_date is None or self.registration_deadline_time is None:
            return None
        return datetime.combine(self.registration_deadline_date, self.registration_deadline_time)
