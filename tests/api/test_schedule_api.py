"""Schedule API — day view, day strip and new-event defaults."""


async def _create(client, payload, title, start, end):
    res = await client.post(
        "/api/v1/events", json=dict(payload, title=title, start_time=start, end_time=end),
    )
    assert res.status_code == 201
    return res.json()


async def test_day_view_returns_only_matching_events(client, event_payload):
    await _create(client, event_payload, "Day 18 late", "2025-07-18T16:00:00Z", "2025-07-18T17:00:00Z")
    await _create(client, event_payload, "Day 17", "2025-07-17T10:00:00Z", "2025-07-17T11:00:00Z")
    await _create(client, event_payload, "Day 18 early", "2025-07-18T09:00:00Z", "2025-07-18T10:00:00Z")

    res = await client.get("/api/v1/schedule", params={"day": 18})
    assert res.status_code == 200
    body = res.json()
    assert body["day"] == 18
    assert body["date"] == "2025-07-18"
    assert [e["title"] for e in body["events"]] == ["Day 18 early", "Day 18 late"]


async def test_day_view_defaults_to_conference_start_day(client, event_payload):
    await _create(client, event_payload, "Opening", "2025-07-17T09:00:00Z", "2025-07-17T10:00:00Z")
    body = (await client.get("/api/v1/schedule")).json()
    assert body["day"] == 17
    assert [e["title"] for e in body["events"]] == ["Opening"]


async def test_day_view_with_no_events(client):
    body = (await client.get("/api/v1/schedule", params={"day": 20})).json()
    assert body["events"] == []


async def test_day_view_rejects_out_of_range_day(client):
    res = await client.get("/api/v1/schedule", params={"day": 32})
    assert res.status_code == 400


async def test_day_view_date_is_none_when_day_not_in_month(client):
    await client.put("/api/v1/admin/settings", json={
        "start_date": "2025-06-28", "end_date": "2025-07-02",
    })
    body = (await client.get("/api/v1/schedule", params={"day": 31})).json()
    assert body["date"] is None


async def test_conference_days_strip(client):
    res = await client.get("/api/v1/schedule/days")
    assert res.status_code == 200
    days = res.json()
    assert [d["day_of_month"] for d in days] == [17, 18, 19, 20, 21, 22]
    assert days[0] == {"date": "2025-07-17", "day_of_month": 17, "weekday": "THU"}


async def test_conference_days_follow_settings(client):
    await client.put("/api/v1/admin/settings", json={
        "start_date": "2025-09-29", "end_date": "2025-10-01",
    })
    days = (await client.get("/api/v1/schedule/days")).json()
    assert [d["day_of_month"] for d in days] == [29, 30, 1]


async def test_draft_window_is_one_hour_inside_conference(client):
    res = await client.get("/api/v1/schedule/draft-window")
    assert res.status_code == 200
    body = res.json()
    # Conference is in the past, so the draft opens at its first moment
    assert body["start_time"].startswith("2025-07-17T00:00:00")
    assert body["end_time"].startswith("2025-07-17T01:00:00")
