"""Admin API — conference settings and email list."""

from uuid import uuid4


async def test_settings_default_created_on_first_read(client):
    res = await client.get("/api/v1/admin/settings")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == "default"
    assert body["start_date"] == "2025-07-17"
    assert body["end_date"] == "2025-07-22"
    assert body["address"] == ""


async def test_settings_update_persists_all_fields(client):
    res = await client.put("/api/v1/admin/settings", json={
        "start_date": "2025-08-04T00:00:00.000Z",
        "end_date": "2025-08-08",
        "address": "1 Main St",
        "notes": "Badges at the door",
    })
    assert res.status_code == 200

    body = (await client.get("/api/v1/admin/settings")).json()
    assert body["start_date"] == "2025-08-04"
    assert body["end_date"] == "2025-08-08"
    assert body["address"] == "1 Main St"
    assert body["notes"] == "Badges at the door"


async def test_settings_reject_inverted_dates(client):
    res = await client.put("/api/v1/admin/settings", json={
        "start_date": "2025-08-08", "end_date": "2025-08-04",
    })
    assert res.status_code == 400


async def test_add_and_list_emails(client):
    first = await client.post("/api/v1/admin/emails", json={
        "email": "ana@example.org", "name": "Ana", "role": "speaker",
    })
    assert first.status_code == 201
    await client.post("/api/v1/admin/emails", json={
        "email": "bo@example.org", "name": "Bo",
    })

    listed = (await client.get("/api/v1/admin/emails")).json()
    assert [e["email"] for e in listed] == ["bo@example.org", "ana@example.org"]
    assert listed[0]["role"] == "attendee"


async def test_duplicate_email_returns_409(client):
    payload = {"email": "ana@example.org", "name": "Ana"}
    await client.post("/api/v1/admin/emails", json=payload)
    res = await client.post("/api/v1/admin/emails", json=dict(payload, email="ANA@example.org"))
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DUPLICATE_RESOURCE"

    listed = (await client.get("/api/v1/admin/emails")).json()
    assert [e["email"] for e in listed] == ["ana@example.org"]


async def test_missing_email_fields_return_400(client):
    res = await client.post("/api/v1/admin/emails", json={"email": "ana@example.org"})
    assert res.status_code == 400


async def test_delete_email(client):
    created = (await client.post("/api/v1/admin/emails", json={
        "email": "ana@example.org", "name": "Ana",
    })).json()
    res = await client.delete(f"/api/v1/admin/emails/{created['id']}")
    assert res.status_code == 200
    assert (await client.get("/api/v1/admin/emails")).json() == []


async def test_delete_unknown_email_returns_404(client):
    res = await client.delete(f"/api/v1/admin/emails/{uuid4()}")
    assert res.status_code == 404
