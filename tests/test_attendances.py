from datetime import datetime

from crud import attendances as attendances_crud
from models.attendance import Attendance


def _event(client, headers):
    res = client.post("/api/events", json={
        "title": "Toque", "date": "2026-12-01T20:00:00", "showTime": "20:00", "location": "Club",
    }, headers=headers)
    return res.json()["id"]


def test_confirm_twice_keeps_one_row(client, admin_headers, musician, musician_headers):
    event_id = _event(client, admin_headers)
    for _ in range(2):
        res = client.put("/api/attendances", json={"eventId": event_id, "status": "confirmed"},
                         headers=musician_headers)
        assert res.json() == {"success": True}

    roster = client.get(f"/api/attendances/event/{event_id}", headers=admin_headers).json()
    assert len(roster) == 1
    assert roster[0]["status"] == "confirmed"
    assert roster[0]["userId"] == musician[0]


def test_decline_updates_the_same_row(client, admin_headers, musician_headers):
    event_id = _event(client, admin_headers)
    client.put("/api/attendances", json={"eventId": event_id, "status": "confirmed"}, headers=musician_headers)
    first = client.get("/api/attendances/me", headers=musician_headers).json()
    client.put("/api/attendances", json={"eventId": event_id, "status": "declined"}, headers=musician_headers)
    second = client.get("/api/attendances/me", headers=musician_headers).json()

    assert len(second) == 1
    assert second[0]["id"] == first[0]["id"]
    assert second[0]["status"] == "declined"


def test_caller_identity_comes_from_session(client, db, admin, admin_headers, musician, musician_headers):
    event_id = _event(client, admin_headers)
    client.put("/api/attendances", json={"eventId": event_id, "status": "confirmed", "userId": admin[0]},
               headers=musician_headers)

    assert attendances_crud.get_attendance_by_user_and_event(db, admin[0], event_id) is None
    own = attendances_crud.get_attendance_by_user_and_event(db, musician[0], event_id)
    assert own.status == "confirmed"


def test_roster_holds_one_row_per_member(client, admin_headers, musician_headers):
    event_id = _event(client, admin_headers)
    client.put("/api/attendances", json={"eventId": event_id, "status": "confirmed"}, headers=musician_headers)
    client.put("/api/attendances", json={"eventId": event_id, "status": "pending"}, headers=admin_headers)

    roster = client.get(f"/api/attendances/event/{event_id}", headers=musician_headers).json()
    assert sorted(a["status"] for a in roster) == ["confirmed", "pending"]
    assert len(client.get("/api/attendances/me", headers=musician_headers).json()) == 1


def test_invalid_status_is_rejected(client, admin_headers, musician_headers):
    event_id = _event(client, admin_headers)
    res = client.put("/api/attendances", json={"eventId": event_id, "status": "maybe"}, headers=musician_headers)
    assert res.status_code == 400
    assert res.json()["detail"][0]["loc"] == ["body", "status"]


def test_upsert_requires_session(client):
    res = client.put("/api/attendances", json={"eventId": 1, "status": "confirmed"})
    assert res.status_code == 401


def test_upsert_refreshes_updated_at(db):
    old = datetime(2020, 1, 1)
    attendances_crud.upsert_attendance(db, 7, 3, "pending")
    db.query(Attendance).filter(Attendance.event_id == 7).update({"updated_at": old}, synchronize_session=False)
    db.commit()

    attendances_crud.upsert_attendance(db, 7, 3, "confirmed")
    db.expire_all()

    attendance = attendances_crud.get_attendance_by_user_and_event(db, 3, 7)
    assert attendance.status == "confirmed"
    assert attendance.updated_at > old
