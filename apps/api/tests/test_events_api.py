from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from conftest import auth_headers, event_payload


def test_admin_can_create_event(create_event):
    resp = create_event()
    assert resp.status_code == 200
    body = resp.json()
    assert body["event_id"] == "EVT-001"
    assert body["id"]


def test_assigned_identifiers_are_unique(create_event):
    first = create_event(event_id="A", start_time="08:00", end_time="09:00").json()
    second = create_event(event_id="B", start_time="09:00", end_time="10:00").json()
    assert first["id"] != second["id"]


def test_user_cannot_create_event(client: TestClient, user_token: str):
    resp = client.post("/v1/events", json=event_payload(), headers=auth_headers(user_token))
    assert resp.status_code == 403
    assert resp.json()["detail"]["code"] == "FORBIDDEN"


def test_create_event_requires_token(client: TestClient):
    resp = client.post("/v1/events", json=event_payload())
    assert resp.status_code == 401


@pytest.mark.parametrize("field", ["event_id", "name", "start_date", "start_time", "end_date", "end_time"])
def test_create_event_missing_required_field(client: TestClient, admin_token: str, field: str):
    payload = event_payload()
    payload.pop(field)
    resp = client.post("/v1/events", json=payload, headers=auth_headers(admin_token))
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "INVALID_INPUT"


@pytest.mark.parametrize(
    ("start_time", "end_time"),
    [("10:00", "10:00"), ("11:00", "10:00")],
)
def test_create_event_requires_start_before_end(create_event, start_time, end_time):
    resp = create_event(start_time=start_time, end_time=end_time)
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "INVALID_INPUT"


def test_create_event_rejects_end_date_before_start_date(create_event):
    resp = create_event(start_date="2024-01-11", end_date="2024-01-10", start_time="09:00", end_time="10:00")
    assert resp.status_code == 422


@pytest.mark.parametrize(
    ("start_time", "end_time"),
    [
        ("08:00", "12:00"),  # strictly contains
        ("09:15", "09:45"),  # contained
        ("08:30", "09:30"),  # partially precedes
        ("09:30", "10:30"),  # partially follows
        ("09:00", "10:00"),  # same slot
    ],
)
def test_overlapping_event_is_rejected(create_event, start_time, end_time):
    assert create_event().status_code == 200

    resp = create_event(event_id="EVT-002", start_time=start_time, end_time=end_time)
    assert resp.status_code == 409
    assert resp.json()["detail"]["code"] == "SCHEDULING_CONFLICT"


@pytest.mark.parametrize(("start_time", "end_time"), [("10:00", "11:00"), ("08:00", "09:00")])
def test_adjacent_event_is_accepted(create_event, start_time, end_time):
    assert create_event().status_code == 200

    resp = create_event(event_id="EVT-002", start_time=start_time, end_time=end_time)
    assert resp.status_code == 200


def test_overlap_across_days_is_detected(create_event):
    assert create_event(start_date="2024-01-10", start_time="22:00", end_date="2024-01-11", end_time="02:00").status_code == 200

    resp = create_event(event_id="EVT-002", start_date="2024-01-11", start_time="01:00", end_date="2024-01-11", end_time="03:00")
    assert resp.status_code == 409


def test_duplicate_event_id_is_rejected(create_event):
    assert create_event().status_code == 200

    resp = create_event(start_date="2024-02-01", end_date="2024-02-01")
    assert resp.status_code == 409
    assert resp.json()["detail"]["code"] == "DUPLICATE_IDENTIFIER"


def test_list_events_is_ordered_by_start(client: TestClient, create_event):
    create_event(event_id="late", start_date="2024-03-01", end_date="2024-03-01")
    create_event(event_id="afternoon", start_time="14:00", end_time="15:00")
    create_event(event_id="morning", start_time="08:00", end_time="09:00")

    resp = client.get("/v1/events")
    assert resp.status_code == 200
    assert [e["event_id"] for e in resp.json()] == ["morning", "afternoon", "late"]


def test_get_event(client: TestClient, create_event):
    create_event(max_participants=25, registration_deadline_date="2024-01-09", registration_deadline_time="23:59")

    resp = client.get("/v1/events/EVT-001")
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Orientation"
    assert body["start_time"] == "09:00:00"
    assert body["max_participants"] == 25
    assert body["registration_deadline_date"] == "2024-01-09"


def test_get_unknown_event_is_not_found(client: TestClient):
    resp = client.get("/v1/events/nope")
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "EVENT_NOT_FOUND"


def test_update_event_keeping_its_own_slot(client: TestClient, admin_token: str, create_event):
    create_event()

    payload = event_payload(name="Orientation (updated)")
    payload.pop("event_id")
    resp = client.put("/v1/events/EVT-001", json=payload, headers=auth_headers(admin_token))
    assert resp.status_code == 200
    assert resp.json()["name"] == "Orientation (updated)"


def test_update_event_can_shift_within_its_own_slot(client: TestClient, admin_token: str, create_event):
    create_event()

    payload = event_payload(start_time="09:30", end_time="10:30")
    resp = client.put("/v1/events/EVT-001", json=payload, headers=auth_headers(admin_token))
    assert resp.status_code == 200
    assert resp.json()["start_time"] == "09:30:00"


def test_update_event_into_another_slot_conflicts(client: TestClient, admin_token: str, create_event):
    create_event()
    create_event(event_id="EVT-002", start_time="11:00", end_time="12:00")

    payload = event_payload(start_time="09:30", end_time="11:30")
    resp = client.put("/v1/events/EVT-002", json=payload, headers=auth_headers(admin_token))
    assert resp.status_code == 409
    assert resp.json()["detail"]["code"] == "SCHEDULING_CONFLICT"


def test_update_is_full_replace(client: TestClient, admin_token: str, create_event):
    create_event(max_participants=10)

    payload = event_payload()
    payload.pop("description")
    payload.pop("max_participants")
    resp = client.put("/v1/events/EVT-001", json=payload, headers=auth_headers(admin_token))
    assert resp.status_code == 200
    assert resp.json()["description"] is None
    assert resp.json()["max_participants"] is None


def test_update_requires_start_before_end(client: TestClient, admin_token: str, create_event):
    create_event()

    payload = event_payload(start_time="10:00", end_time="09:00")
    resp = client.put("/v1/events/EVT-001", json=payload, headers=auth_headers(admin_token))
    assert resp.status_code == 422


def test_update_unknown_event_is_not_found(client: TestClient, admin_token: str):
    resp = client.put("/v1/events/missing", json=event_payload(), headers=auth_headers(admin_token))
    assert resp.status_code == 404


def test_user_cannot_update_or_delete(client: TestClient, user_token: str, create_event):
    create_event()

    update = client.put("/v1/events/EVT-001", json=event_payload(), headers=auth_headers(user_token))
    delete = client.delete("/v1/events/EVT-001", headers=auth_headers(user_token))
    assert update.status_code == 403
    assert delete.status_code == 403


def test_delete_event(client: TestClient, admin_token: str, create_event):
    create_event()

    resp = client.delete("/v1/events/EVT-001", headers=auth_headers(admin_token))
    assert resp.status_code == 200
    assert resp.json() == {"status": "deleted", "event_id": "EVT-001"}
    assert client.get("/v1/events/EVT-001").status_code == 404

    again = client.delete("/v1/events/EVT-001", headers=auth_headers(admin_token))
    assert again.status_code == 404


def test_deleted_event_frees_its_slot(client: TestClient, admin_token: str, create_event):
    create_event()
    client.delete("/v1/events/EVT-001", headers=auth_headers(admin_token))

    assert create_event(event_id="EVT-002").status_code == 200


def test_delete_leaves_registrations_in_place(client: TestClient, admin_token: str, user_token: str, create_event):
    create_event(start_date="2099-01-10", end_date="2099-01-10")
    client.post("/v1/events/EVT-001/register", json={"user_name": "Ada"}, headers=auth_headers(user_token))

    client.delete("/v1/events/EVT-001", headers=auth_headers(admin_token))

    assert client.get("/v1/events/EVT-001/registrations/count").json() == {"count": 1}


@pytest.mark.parametrize(
    ("start_time", "end_time"),
    [("09:00Z", "10:00"), ("12:00+00:00", "13:00+00:00")],
)
def test_create_event_rejects_times_with_utc_offset(create_event, start_time, end_time):
    create_event(event_id="EVT-000", start_time="07:00", end_time="08:00")

    resp = create_event(event_id="EVT-002", start_time=start_time, end_time=end_time)
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "INVALID_INPUT"


def test_create_event_rejects_deadline_with_utc_offset(create_event):
    resp = create_event(registration_deadline_date="2024-01-09", registration_deadline_time="18:00+02:00")
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "INVALID_INPUT"


def test_update_event_rejects_times_with_utc_offset(client: TestClient, admin_token: str, create_event):
    create_event()

    payload = event_payload(start_time="09:00Z", end_time="10:00Z")
    resp = client.put("/v1/events/EVT-001", json=payload, headers=auth_headers(admin_token))
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "INVALID_INPUT"
