"""Schedule 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import field_validator, model_validator

from app.schemas.common import CamelModel


class ScheduleType(str, Enum):
    BIRTHDAY = "B"
    CONCERT = "C"
    EVENT = "E"


def normalize_datetime(value: datetime) -> datetime:
    # 저장/비교는 UTC 기준 naive datetime으로 통일한다.
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _title_not_blank(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("일정 제목을 입력해주세요.")
    return value.strip()


class ScheduleEventCreate(CamelModel):
    start: datetime
    end: datetime
    type: ScheduleType = ScheduleType.EVENT
    title: str
    all_day: bool = False

    @field_validator("start", "end")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        return normalize_datetime(value)

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        return _title_not_blank(value)

    @model_validator(mode="after")
    def check_window(self):
        if not self.all_day and self.end < self.start:
            raise ValueError("종료 일시는 시작 일시보다 빠를 수 없습니다.")
        return self


class ScheduleEventUpdate(CamelModel):
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    type: Optional[ScheduleType] = None
    title: Optional[str] = None
    all_day: Optional[bool] = None

    @field_validator("start", "end")
    @classmethod
    def to_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return normalize_datetime(value) if value is not None else None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return _title_not_blank(value) if value is not None else None


class ScheduleEventOut(CamelModel):
    id: str
    start: datetime
    end: datetime
    type: ScheduleType
    title: str
    all_day: bool = False
    color: str = ""
    recurring: bool = False
