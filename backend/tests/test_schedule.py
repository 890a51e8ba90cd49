"""일정 CRUD와 저장 일정 + 반복 기념일 병합 캘린더 조회를 검증합니다."""

CONCERT = {
    "start": "2025-08-16T19:40:00",
    "end": "2025-08-16T20:30:00",
    "type": "C",
    "title": "Concert",
    "allDay": False,
}


def _create(client, **overrides):
    payload = dict(CONCERT)
    payload.update(overrides)
    resp = client.post("/api/schedule", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


def test_create_schedule_adds_color(admin_client):
    event = _create(admin_client)
    assert event["type"] == "C"
    assert event["color"] == "#72d2c0"
    assert event["recurring"] is False
    assert event["start"] == "2025-08-16T19:40:00"

    detail = admin_client.get(f"/api/schedule/{event['id']}").json()["data"]
    assert detail == event


def test_timezone_aware_input_is_stored_as_utc(admin_client):
    event = _create(admin_client, start="2025-08-16T19:40:00+09:00", end="2025-08-16T20:30:00+09:00")
    assert event["start"] == "2025-08-16T10:40:00"
    assert event["end"] == "2025-08-16T11:30:00"


def test_end_before_start_rejected(admin_client):
    resp = admin_client.post("/api/schedule", json=dict(CONCERT, end="2025-08-16T18:00:00"))
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "종료 일시는 시작 일시보다 빠를 수 없습니다."}


def test_invalid_type_rejected(admin_client):
    resp = admin_client.post("/api/schedule", json=dict(CONCERT, type="X"))
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_partial_update_revalidates_window(admin_client):
    event = _create(admin_client)

    ok = admin_client.put(f"/api/schedule/{event['id']}", json={"title": "Encore"})
    assert ok.status_code == 200
    assert ok.json()["data"]["title"] == "Encore"
    assert ok.json()["data"]["start"] == event["start"]

    bad = admin_client.put(f"/api/schedule/{event['id']}", json={"end": "2025-08-15T00:00:00"})
    assert bad.status_code == 400
    assert admin_client.get(f"/api/schedule/{event['id']}").json()["data"]["end"] == event["end"]


def test_update_and_delete_missing_schedule(admin_client):
    assert admin_client.put("/api/schedule/none", json={"title": "x"}).status_code == 404
    assert admin_client.delete("/api/schedule/none").status_code == 404


def test_list_filters_by_overlap(admin_client):
    inside = _create(admin_client)
    _create(admin_client, start="2025-12-24T10:00:00", end="2025-12-24T12:00:00", title="Xmas")

    resp = admin_client.get("/api/schedule", params={"start": "2025-08-01", "end": "2025-08-31"})
    assert [e["id"] for e in resp.json()["data"]] == [inside["id"]]
    assert len(admin_client.get("/api/schedule").json()["data"]) == 2


def test_calendar_contains_each_rule_once_per_year(client):
    resp = client.get("/api/schedule/calendar", params={"start": "2025-01-01", "end": "2025-12-31"})
    assert resp.status_code == 200
    events = resp.json()["data"]
    assert len(events) == 5
    assert all(e["recurring"] and e["allDay"] for e in events)
    assert [e["start"] for e in events] == sorted(e["start"] for e in events)

    debut = next(e for e in events if e["type"] == "E")
    assert debut["id"] == "recurring-debut-20251018"
    assert debut["start"] == debut["end"] == "2025-10-18T00:00:00"
    assert debut["color"] == "#f1bd4c"


def test_calendar_merges_persisted_and_recurring(admin_client):
    concert = _create(admin_client)
    same_day = _create(
        admin_client, start="2025-06-02T18:00:00", end="2025-06-02T19:00:00", type="E", title="Fan sign"
    )

    resp = admin_client.get("/api/schedule/calendar", params={"start": "2025-06-01", "end": "2025-08-31"})
    events = resp.json()["data"]
    ids = [e["id"] for e in events]
    assert ids == ["recurring-birthday-majenta-20250602", same_day["id"], concert["id"]]
    assert events[0]["color"] == "#e79c89"


def test_calendar_before_anchor_year_has_no_recurring(client):
    resp = client.get("/api/schedule/calendar", params={"start": "2020-01-01", "end": "2022-12-31"})
    assert resp.status_code == 200
    assert resp.json()["data"] == []


def test_calendar_requires_ordered_range(client):
    resp = client.get("/api/schedule/calendar", params={"start": "2025-02-01", "end": "2025-01-01"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False

    missing = client.get("/api/schedule/calendar", params={"start": "2025-01-01"})
    assert missing.status_code == 400


def test_deleted_schedule_is_gone_from_detail_and_calendar(admin_client):
    event = _create(admin_client)

    resp = admin_client.delete(f"/api/schedule/{event['id']}")
    assert resp.status_code == 200
    assert resp.json()["success"] is True

    detail = admin_client.get(f"/api/schedule/{event['id']}")
    assert detail.status_code == 404
    assert detail.json() == {"success": False, "message": "일정을 찾을 수 없습니다."}

    calendar = admin_client.get("/api/schedule/calendar", params={"start": "2025-08-01", "end": "2025-08-31"})
    assert event["id"] not in [e["id"] for e in calendar.json()["data"]]
