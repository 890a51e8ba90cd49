"""Video 요청/응답 계약을 위한 Pydantic 스키마입니다."""

import re
from typing import Optional

from pydantic import field_validator

from app.schemas.common import CamelModel

YOUTUBE_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.|m\.)?"
    r"(?:youtu\.be/|youtube\.com/(?:embed/|v/|shorts/|watch\?v=|watch\?.+&v=))"
    r"([\w-]{11})(?:\S+)?$"
)


def extract_video_id(url: str | None) -> Optional[str]:
    if not url:
        return None
    match = YOUTUBE_URL_RE.match(url.strip())
    return match.group(1) if match else None


def thumbnail_url(video_id: str | None) -> str:
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg" if video_id else ""


def _check_src(value: str) -> str:
    text = (value or "").strip()
    if not extract_video_id(text):
        raise ValueError("유효한 YouTube 영상 주소가 아닙니다.")
    return text


def _title_not_blank(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("영상 제목을 입력해주세요.")
    return value.strip()


class VideoCreate(CamelModel):
    title: str
    src: str

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        return _title_not_blank(value)

    @field_validator("src")
    @classmethod
    def src_embeddable(cls, value: str) -> str:
        return _check_src(value)


class VideoUpdate(CamelModel):
    title: Optional[str] = None
    src: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return _title_not_blank(value) if value is not None else None

    @field_validator("src")
    @classmethod
    def src_embeddable(cls, value: Optional[str]) -> Optional[str]:
        return _check_src(value) if value is not None else None


class VideoOut(CamelModel):
    id: str
    title: str
    src: str
    created_at: str
    video_id: str = ""
    thumbnail: str = ""
