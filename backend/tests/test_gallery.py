"""갤러리 다중 업로드, 이미지 교체, 일괄 삭제 흐름을 검증합니다."""

from tests.conftest import blob_exists, png_file


def _upload(client, count=2):
    files = [("images", png_file(f"img{i}.png")) for i in range(count)]
    resp = client.post("/api/gallery", files=files)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


def test_upload_multiple_images(admin_client):
    items = _upload(admin_client, 3)
    assert len(items) == 3
    for item in items:
        assert item["url"].startswith("/uploads/gallery/")
        assert item["createdAt"]
        assert blob_exists(item["url"])

    listed = admin_client.get("/api/gallery").json()["data"]
    assert {i["id"] for i in listed} == {i["id"] for i in items}


def test_upload_requires_files(admin_client):
    resp = admin_client.post("/api/gallery", data={"note": "x"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_upload_rejects_batch_over_limit(admin_client, monkeypatch):
    from app.config import settings

    monkeypatch.setattr(settings, "GALLERY_BATCH_MAX_SIZE", 100)
    files = [("images", png_file("a.png")), ("images", png_file("b.png"))]
    resp = admin_client.post("/api/gallery", files=files)
    assert resp.status_code == 400
    assert admin_client.get("/api/gallery").json()["data"] == []


def test_batch_delete_removes_documents_and_blobs(admin_client):
    a, b, c = _upload(admin_client, 3)

    resp = admin_client.request("DELETE", "/api/gallery", json={"ids": [a["id"], b["id"]]})
    assert resp.status_code == 200
    assert sorted(resp.json()["data"]["deleted"]) == sorted([a["id"], b["id"]])
    assert resp.json()["data"]["missing"] == []

    remaining = [i["id"] for i in admin_client.get("/api/gallery").json()["data"]]
    assert remaining == [c["id"]]
    assert not blob_exists(a["url"])
    assert not blob_exists(b["url"])
    assert blob_exists(c["url"])


def test_batch_delete_reports_missing_ids(admin_client):
    (item,) = _upload(admin_client, 1)
    resp = admin_client.request("DELETE", "/api/gallery", json={"ids": [item["id"], "nope"]})
    assert resp.status_code == 200
    assert resp.json()["data"] == {"deleted": [item["id"]], "missing": ["nope"]}


def test_batch_delete_requires_ids(admin_client):
    resp = admin_client.request("DELETE", "/api/gallery", json={"ids": []})
    assert resp.status_code == 400


def test_replace_image(admin_client):
    (item,) = _upload(admin_client, 1)
    resp = admin_client.put(f"/api/gallery/{item['id']}", files={"image": png_file("new.png")})
    assert resp.status_code == 200
    replaced = resp.json()["data"]
    assert replaced["id"] == item["id"]
    assert replaced["url"] != item["url"]
    assert replaced["createdAt"] == item["createdAt"]
    assert not blob_exists(item["url"])


def test_single_delete_then_get_is_404(admin_client):
    (item,) = _upload(admin_client, 1)
    assert admin_client.get(f"/api/gallery/{item['id']}").status_code == 200
    assert admin_client.delete(f"/api/gallery/{item['id']}").status_code == 200
    resp = admin_client.get(f"/api/gallery/{item['id']}")
    assert resp.status_code == 404
    assert resp.json()["success"] is False


def test_batch_upload_uses_batch_limit_per_file(admin_client, monkeypatch):
    from app.config import settings

    monkeypatch.setattr(settings, "GALLERY_ITEM_MAX_SIZE", 10)
    monkeypatch.setattr(settings, "GALLERY_BATCH_MAX_SIZE", 10_000)
    resp = admin_client.post("/api/gallery", files=[("images", png_file("big.png", size=500))])
    assert resp.status_code == 200, resp.text
    assert len(resp.json()["data"]) == 1
