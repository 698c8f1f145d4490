from __future__ import annotations

from datetime import date, datetime, time
from types import SimpleNamespace

import pytest

from campus_events.services.overlap import event_window, find_conflict, has_overlap, intervals_overlap


def _event(event_id: str, start: str, end: str, day: date = date(2024, 1, 10), end_day: date | None = None):
    return SimpleNamespace(
        event_id=event_id,
        start_date=day,
        start_time=time.fromisoformat(start),
        end_date=end_day or day,
        end_time=time.fromisoformat(end),
    )


def _at(hhmm: str, day: date = date(2024, 1, 10)) -> datetime:
    return datetime.combine(day, time.fromisoformat(hhmm))


def test_event_window_combines_date_and_time():
    start, end = event_window(date(2024, 1, 10), time(9), date(2024, 1, 11), time(1, 30))
    assert start == datetime(2024, 1, 10, 9, 0)
    assert end == datetime(2024, 1, 11, 1, 30)


def test_touching_endpoints_do_not_overlap():
    assert not intervals_overlap(_at("09:00"), _at("10:00"), _at("10:00"), _at("11:00"))
    assert not intervals_overlap(_at("10:00"), _at("11:00"), _at("09:00"), _at("10:00"))


@pytest.mark.parametrize(
    ("candidate", "existing"),
    [
        (("08:00", "12:00"), ("09:00", "10:00")),  # contains
        (("09:15", "09:45"), ("09:00", "10:00")),  # contained
        (("08:30", "09:30"), ("09:00", "10:00")),  # partially precedes
        (("09:30", "10:30"), ("09:00", "10:00")),  # partially follows
        (("09:00", "10:00"), ("09:00", "10:00")),  # identical
    ],
)
def test_overlap_is_symmetric(candidate, existing):
    a = (_at(candidate[0]), _at(candidate[1]))
    b = (_at(existing[0]), _at(existing[1]))
    assert intervals_overlap(*a, *b)
    assert intervals_overlap(*b, *a)


def test_disjoint_intervals_do_not_overlap():
    assert not intervals_overlap(_at("07:00"), _at("08:00"), _at("09:00"), _at("10:00"))


def test_multi_day_event_overlaps_next_morning():
    overnight = _event("night", "22:00", "02:00", end_day=date(2024, 1, 11))
    early = (_at("01:00", date(2024, 1, 11)), _at("03:00", date(2024, 1, 11)))
    assert has_overlap(*early, [overnight])


def test_find_conflict_returns_first_blocking_event():
    events = [_event("a", "07:00", "08:00"), _event("b", "09:00", "10:00"), _event("c", "09:30", "11:00")]
    conflict = find_conflict(_at("09:45"), _at("10:15"), events)
    assert conflict is events[1]


def test_excluded_event_is_ignored():
    events = [_event("a", "09:00", "10:00")]
    assert has_overlap(_at("09:00"), _at("10:00"), events)
    assert not has_overlap(_at("09:00"), _at("10:00"), events, exclude_event_id="a")


def test_exclusion_still_checks_other_events():
    events = [_event("a", "09:00", "10:00"), _event("b", "10:30", "11:30")]
    assert has_overlap(_at("09:30"), _at("11:00"), events, exclude_event_id="a")


def test_empty_event_set_never_overlaps():
    assert not has_overlap(_at("09:00"), _at("10:00"), [])
