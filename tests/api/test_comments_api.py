"""Comments API — create and list comments per event."""

from uuid import uuid4


async def test_create_comment(client, created_event):
    res = await client.post("/api/v1/comments", json={
        "event_id": created_event["id"], "content": "Great talk", "author_name": "Ana",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["content"] == "Great talk"
    assert body["event_id"] == created_event["id"]


async def test_create_comment_on_unknown_event_returns_404(client):
    res = await client.post("/api/v1/comments", json={
        "event_id": str(uuid4()), "content": "Hello", "author_name": "Ana",
    })
    assert res.status_code == 404


async def test_list_comments_newest_first(client, created_event):
    for text in ("first", "second", "third"):
        await client.post("/api/v1/comments", json={
            "event_id": created_event["id"], "content": text, "author_name": "Ana",
        })
    res = await client.get("/api/v1/comments", params={"event_id": created_event["id"]})
    assert res.status_code == 200
    assert [c["content"] for c in res.json()] == ["third", "second", "first"]


async def test_list_comments_requires_event_id(client):
    res = await client.get("/api/v1/comments")
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "query.event_id"


async def test_comments_embedded_in_event(client, created_event):
    await client.post("/api/v1/comments", json={
        "event_id": created_event["id"], "content": "Embedded", "author_name": "Bo",
    })
    event = (await client.get(f"/api/v1/events/{created_event['id']}")).json()
    assert [c["content"] for c in event["comments"]] == ["Embedded"]
