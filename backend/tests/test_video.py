"""영상(YouTube) 등록/수정/삭제와 임베드 ID 추출을 검증합니다."""

import pytest

from app.schemas.video import extract_video_id


@pytest.mark.parametrize(
    "url",
    [
        "https://youtu.be/dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "youtube.com/embed/dQw4w9WgXcQ?autoplay=1",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
    ],
)
def test_extract_video_id_forms(url):
    assert extract_video_id(url) == "dQw4w9WgXcQ"


def test_extract_video_id_rejects_other_hosts():
    assert extract_video_id("https://vimeo.com/123456") is None
    assert extract_video_id("") is None


def test_create_video_derives_thumbnail(admin_client):
    resp = admin_client.post("/api/video", json={"title": "MV", "src": "https://youtu.be/dQw4w9WgXcQ"})
    assert resp.status_code == 200, resp.text
    video = resp.json()["data"]
    assert video["videoId"] == "dQw4w9WgXcQ"
    assert video["thumbnail"] == "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg"
    assert video["createdAt"]

    detail = admin_client.get(f"/api/video/{video['id']}").json()["data"]
    assert detail == video


def test_create_video_rejects_unparseable_src(admin_client):
    resp = admin_client.post("/api/video", json={"title": "MV", "src": "https://example.com/video"})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "유효한 YouTube 영상 주소가 아닙니다."}


def test_update_video(admin_client):
    video = admin_client.post("/api/video", json={"title": "MV", "src": "https://youtu.be/dQw4w9WgXcQ"}).json()["data"]
    resp = admin_client.put(
        f"/api/video/{video['id']}",
        json={"src": "https://www.youtube.com/watch?v=abcdefghijk"},
    )
    assert resp.status_code == 200
    updated = resp.json()["data"]
    assert updated["title"] == "MV"
    assert updated["videoId"] == "abcdefghijk"


def test_delete_video(admin_client):
    video = admin_client.post("/api/video", json={"title": "MV", "src": "https://youtu.be/dQw4w9WgXcQ"}).json()["data"]
    assert admin_client.delete(f"/api/video/{video['id']}").status_code == 200
    assert admin_client.get(f"/api/video/{video['id']}").status_code == 404
    assert admin_client.get("/api/video").json()["data"] == []
