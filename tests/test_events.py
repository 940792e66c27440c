from datetime import datetime, timedelta, timezone

from crud import events as events_crud
from models.event import Event


def _iso(dt):
    return dt.replace(microsecond=0).isoformat()


def _now():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _create(client, headers, **fields):
    body = {"title": "Toque", "date": "2026-03-15T20:00:00", "showTime": "20:00", "location": "Plaza Central"}
    body.update(fields)
    res = client.post("/api/events", json=body, headers=headers)
    assert res.status_code == 200, res.text
    return res.json()["id"]


def test_admin_creates_event_and_lists_it(client, admin_headers, musician_headers):
    res = client.post("/api/events", json={
        "title": "Concierto de Prueba",
        "date": "2026-03-15T20:00:00",
        "showTime": "20:00",
        "location": "Plaza Central",
    }, headers=admin_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["id"] > 0

    events = client.get("/api/events", headers=musician_headers).json()
    match = [e for e in events if e["id"] == body["id"]]
    assert len(match) == 1
    event = match[0]
    assert event["title"] == "Concierto de Prueba"
    assert event["date"] == "2026-03-15T20:00:00"
    assert event["showTime"] == "20:00"
    assert event["location"] == "Plaza Central"
    assert event["soundCheckTime"] is None


def test_create_with_all_details(client, admin_headers):
    event_id = _create(
        client, admin_headers,
        soundCheckTime="18:00",
        locationMapUrl="https://maps.google.com/test",
        uniformDescription="Camisa blanca, pantalón negro",
        notes="Evento de prueba",
    )
    event = client.get(f"/api/events/{event_id}", headers=admin_headers).json()
    assert event["soundCheckTime"] == "18:00"
    assert event["uniformDescription"] == "Camisa blanca, pantalón negro"
    assert event["notes"] == "Evento de prueba"


def test_aware_dates_are_stored_as_utc(client, admin_headers):
    event_id = _create(client, admin_headers, date="2026-03-15T20:00:00-03:00")
    event = client.get(f"/api/events/{event_id}", headers=admin_headers).json()
    assert event["date"] == "2026-03-15T23:00:00"


def test_create_validation_errors(client, admin_headers):
    res = client.post("/api/events", json={"title": "", "date": "nope", "showTime": "20:00"}, headers=admin_headers)
    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "BAD_REQUEST"
    fields = {err["loc"][-1] for err in body["detail"]}
    assert {"title", "date", "location"} <= fields
    assert client.get("/api/events", headers=admin_headers).json() == []


def test_list_is_chronological(client, admin_headers):
    _create(client, admin_headers, title="B", date="2026-05-01T20:00:00")
    _create(client, admin_headers, title="A", date="2026-04-01T20:00:00")
    _create(client, admin_headers, title="C", date="2026-06-01T20:00:00")
    titles = [e["title"] for e in client.get("/api/events", headers=admin_headers).json()]
    assert titles == ["A", "B", "C"]


def test_upcoming_excludes_past_events(client, admin_headers, musician_headers):
    now = _now()
    _create(client, admin_headers, title="Ayer", date=_iso(now - timedelta(days=1)))
    _create(client, admin_headers, title="Pasado mañana", date=_iso(now + timedelta(days=2)))
    _create(client, admin_headers, title="Mañana", date=_iso(now + timedelta(days=1)))

    titles = [e["title"] for e in client.get("/api/events/upcoming", headers=musician_headers).json()]
    assert titles == ["Mañana", "Pasado mañana"]


def test_get_by_id_missing_returns_null(client, musician_headers):
    res = client.get("/api/events/999", headers=musician_headers)
    assert res.status_code == 200
    assert res.json() is None


def test_partial_update_keeps_other_fields(client, admin_headers):
    event_id = _create(client, admin_headers, title="Original", notes="Traer atriles")
    res = client.patch(f"/api/events/{event_id}", json={"title": "Renombrado"}, headers=admin_headers)
    assert res.json() == {"success": True}

    event = client.get(f"/api/events/{event_id}", headers=admin_headers).json()
    assert event["title"] == "Renombrado"
    assert event["location"] == "Plaza Central"
    assert event["notes"] == "Traer atriles"
    assert event["date"] == "2026-03-15T20:00:00"


def test_update_rejects_empty_title(client, admin_headers):
    event_id = _create(client, admin_headers)
    res = client.patch(f"/api/events/{event_id}", json={"title": ""}, headers=admin_headers)
    assert res.status_code == 400


def test_empty_update_is_noop(client, admin_headers):
    event_id = _create(client, admin_headers, title="Igual")
    assert client.patch(f"/api/events/{event_id}", json={}, headers=admin_headers).json() == {"success": True}
    assert client.get(f"/api/events/{event_id}", headers=admin_headers).json()["title"] == "Igual"


def test_delete_event(client, admin_headers):
    event_id = _create(client, admin_headers)
    assert client.delete(f"/api/events/{event_id}", headers=admin_headers).json() == {"success": True}
    assert client.get(f"/api/events/{event_id}", headers=admin_headers).json() is None


def test_delete_missing_event_succeeds(client, admin_headers):
    res = client.delete("/api/events/4242", headers=admin_headers)
    assert res.status_code == 200
    assert res.json() == {"success": True}


def test_delete_event_keeps_attendances(client, admin_headers, musician_headers):
    event_id = _create(client, admin_headers)
    client.put("/api/attendances", json={"eventId": event_id, "status": "confirmed"}, headers=musician_headers)
    client.delete(f"/api/events/{event_id}", headers=admin_headers)
    roster = client.get(f"/api/attendances/event/{event_id}", headers=admin_headers).json()
    assert len(roster) == 1


def test_upcoming_includes_events_starting_now(db):
    now = _now()
    events_crud.create_event(db, {"title": "Ya empieza", "date": now + timedelta(seconds=5),
                                  "show_time": "20:00", "location": "Plaza"})
    events_crud.create_event(db, {"title": "Recién pasó", "date": now - timedelta(seconds=5),
                                  "show_time": "20:00", "location": "Plaza"})

    titles = [e.title for e in events_crud.get_upcoming_events(db)]
    assert titles == ["Ya empieza"]


def test_update_refreshes_updated_at(db):
    old = datetime(2020, 1, 1)
    event_id = events_crud.create_event(db, {"title": "Toque", "date": datetime(2026, 3, 15, 20),
                                             "show_time": "20:00", "location": "Plaza"})
    db.query(Event).filter(Event.id == event_id).update({"updated_at": old}, synchronize_session=False)
    db.commit()

    events_crud.update_event(db, event_id, {"location": "Teatro"})
    db.expire_all()

    event = events_crud.get_event_by_id(db, event_id)
    assert event.location == "Teatro"
    assert event.updated_at > old
