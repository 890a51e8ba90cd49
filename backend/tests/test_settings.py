"""사이트 설정(메인 배너, SNS 링크) 조회/저장을 검증합니다."""

import json

from tests.conftest import blob_exists, png_file

SNS_IDS = ["instagram", "youtube", "twitter", "cafe", "shop"]


def test_defaults_when_nothing_saved(client):
    resp = client.get("/api/settings")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["mainImage"] == ""
    assert [link["id"] for link in data["snsLinks"]] == SNS_IDS
    assert all(link["url"] == "" for link in data["snsLinks"])


def test_save_links_and_main_image(admin_client):
    links = [{"id": "youtube", "url": "https://youtube.com/@qwer"}]
    resp = admin_client.post(
        "/api/settings",
        data={"snsLinks": json.dumps(links)},
        files={"image": png_file("banner.png")},
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["mainImage"].endswith("/uploads/images/main.png")
    assert blob_exists(data["mainImage"])
    by_id = {link["id"]: link["url"] for link in data["snsLinks"]}
    assert by_id["youtube"] == "https://youtube.com/@qwer"
    assert by_id["instagram"] == ""

    assert admin_client.get("/api/settings").json()["data"] == data


def test_links_not_sent_keep_previous_values(admin_client):
    admin_client.post(
        "/api/settings",
        data={"snsLinks": json.dumps([{"id": "cafe", "url": "https://cafe.naver.com/qwer"}])},
    )
    resp = admin_client.post(
        "/api/settings",
        data={"snsLinks": json.dumps([{"id": "shop", "url": "https://shop.example.com"}])},
    )
    by_id = {link["id"]: link["url"] for link in resp.json()["data"]["snsLinks"]}
    assert by_id["cafe"] == "https://cafe.naver.com/qwer"
    assert by_id["shop"] == "https://shop.example.com"


def test_saving_without_image_keeps_main_image(admin_client):
    first = admin_client.post("/api/settings", data={"snsLinks": "[]"}, files={"image": png_file()}).json()["data"]
    second = admin_client.post("/api/settings", data={"snsLinks": "[]"}).json()["data"]
    assert second["mainImage"] == first["mainImage"]


def test_invalid_links_rejected(admin_client):
    for raw in ("not json", json.dumps({"id": "youtube"}), json.dumps([{"id": "myspace", "url": "x"}])):
        resp = admin_client.post("/api/settings", data={"snsLinks": raw})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "message": "잘못된 SNS 링크 데이터"}


def test_save_requires_admin(client):
    assert client.post("/api/settings", data={"snsLinks": "[]"}).status_code == 401
