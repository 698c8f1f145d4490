"""Scheduling conflict detection over half-open event windows.

An event occupies ``[start, end)``: the start instant is included and the end
instant is excluded, so an event ending at 10:00 and another starting at 10:00
do not conflict. Instants are naive local wall-clock datetimes built from the
event's date and time columns.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time
from typing import Protocol, TypeVar


class Scheduled(Protocol):
    event_id: str
    start_date: date
    start_time: time
    end_date: date
    end_time: time


S = TypeVar("S", bound=Scheduled)


def event_window(
    start_date: date,
    start_time: time,
    end_date: date,
    end_time: time,
) -> tuple[datetime, datetime]:
    return datetime.combine(start_date, start_time), datetime.combine(end_date, end_time)


def intervals_overlap(
    a_start: datetime,
    a_end: datetime,
    b_start: datetime,
    b_end: datetime,
) -> bool:
    return a_start < b_end and a_end > b_start


def find_conflict(
    start: datetime,
    end: datetime,
    events: Iterable[S],
    exclude_event_id: str | None = None,
) -> S | None:
    """Return the first event whose window overlaps ``[start, end)``, if any."""
    for event in events:
        if exclude_event_id is not None and event.event_id == exclude_event_id:
            continue
        existing_start, existing_end = event_window(
            event.start_date, event.start_time, event.end_date, event.end_time
        )
        if intervals_overlap(start, end, existing_start, existing_end):
            return event
    return None


def has_overlap(
    start: datetime,
    end: datetime,
    events: Iterable[Scheduled],
    exclude_event_id: str | None = None,
) -> bool:
    return find_conflict(start, end, events, exclude_event_id) is not None
