import pytest


def _create(client, headers, **fields):
    body = {"title": "Partitura", "type": "document", "url": "https://example.com/partitura.pdf"}
    body.update(fields)
    res = client.post("/api/resources", json=body, headers=headers)
    assert res.status_code == 200, res.text
    return res.json()["id"]


def test_admin_creates_resource(client, admin, admin_headers, musician_headers):
    resource_id = _create(client, admin_headers, description="Versión 2026")
    items = client.get("/api/resources", headers=musician_headers).json()
    assert [r["id"] for r in items] == [resource_id]
    assert items[0]["url"] == "https://example.com/partitura.pdf"
    assert items[0]["description"] == "Versión 2026"
    assert items[0]["createdBy"] == admin[0]


@pytest.mark.parametrize("fields", [
    {"type": "image"},
    {"url": "not a url"},
    {"title": ""},
])
def test_create_validation(client, admin_headers, fields):
    body = {"title": "Audio", "type": "audio", "url": "https://example.com/a.mp3"}
    body.update(fields)
    res = client.post("/api/resources", json=body, headers=admin_headers)
    assert res.status_code == 400


def test_list_is_newest_first(client, admin_headers):
    first = _create(client, admin_headers, title="Uno")
    second = _create(client, admin_headers, title="Dos", type="video", url="https://example.com/v.mp4")
    assert [r["id"] for r in client.get("/api/resources", headers=admin_headers).json()] == [second, first]


def test_partial_update(client, admin_headers):
    resource_id = _create(client, admin_headers)
    client.patch(f"/api/resources/{resource_id}", json={"type": "audio"}, headers=admin_headers)
    item = client.get("/api/resources", headers=admin_headers).json()[0]
    assert item["type"] == "audio"
    assert item["title"] == "Partitura"
    assert item["url"] == "https://example.com/partitura.pdf"


def test_update_rejects_bad_url(client, admin_headers):
    resource_id = _create(client, admin_headers)
    res = client.patch(f"/api/resources/{resource_id}", json={"url": "nope"}, headers=admin_headers)
    assert res.status_code == 400


def test_delete_resource(client, admin_headers):
    resource_id = _create(client, admin_headers)
    assert client.delete(f"/api/resources/{resource_id}", headers=admin_headers).json() == {"success": True}
    assert client.get("/api/resources", headers=admin_headers).json() == []
    assert client.delete("/api/resources/777", headers=admin_headers).json() == {"success": True}
