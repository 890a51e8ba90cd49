"""Notice 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from enum import Enum
from typing import Optional

from pydantic import field_validator

from app.schemas.common import CamelModel


class NoticeType(str, Enum):
    NOTICE = "공지"
    EVENT = "이벤트"


def _title_not_blank(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("제목을 입력해주세요.")
    return value.strip()


class NoticeCreate(CamelModel):
    type: NoticeType = NoticeType.NOTICE
    title: str
    content: str = ""

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        return _title_not_blank(value)


class NoticeUpdate(CamelModel):
    type: Optional[NoticeType] = None
    title: Optional[str] = None
    content: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return _title_not_blank(value) if value is not None else None


class NoticeOut(CamelModel):
    id: str
    type: NoticeType
    title: str
    content: str = ""
    created_at: str
    updated_at: Optional[str] = None
