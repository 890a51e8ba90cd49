"""Album(디스코그래피) 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import date
from typing import List, Optional

from pydantic import field_validator

from app.schemas.common import CamelModel


def _check_date(value: str) -> str:
    text = (value or "").strip()
    try:
        date.fromisoformat(text)
    except ValueError:
        raise ValueError("발매일은 YYYY-MM-DD 형식이어야 합니다.")
    return text


def _check_tracks(value: List[str]) -> List[str]:
    for track in value:
        if not isinstance(track, str) or not track.strip():
            raise ValueError("수록곡 이름은 비어 있을 수 없습니다.")
    return [track.strip() for track in value]


class AlbumCreate(CamelModel):
    title: str
    date: str
    description: str = ""
    tracks: List[str] = []
    video_url: str = ""

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("앨범 제목을 입력해주세요.")
        return value.strip()

    @field_validator("date")
    @classmethod
    def date_format(cls, value: str) -> str:
        return _check_date(value)

    @field_validator("tracks")
    @classmethod
    def tracks_non_empty(cls, value: List[str]) -> List[str]:
        return _check_tracks(value)


class AlbumUpdate(CamelModel):
    title: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None
    tracks: Optional[List[str]] = None
    video_url: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("앨범 제목을 입력해주세요.")
        return value.strip() if value is not None else None

    @field_validator("date")
    @classmethod
    def date_format(cls, value: Optional[str]) -> Optional[str]:
        return _check_date(value) if value is not None else None

    @field_validator("tracks")
    @classmethod
    def tracks_non_empty(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return _check_tracks(value) if value is not None else None


class AlbumOut(CamelModel):
    id: str
    title: str
    date: str
    description: str = ""
    tracks: List[str] = []
    video_url: str = ""
    image: str = ""
