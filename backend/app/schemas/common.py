"""API 공통 응답 봉투와 camelCase 직렬화 기반 Pydantic 스키마입니다."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def envelope(data: Any = None, message: str | None = None) -> dict:
    body: dict = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    return body


def failure(message: str) -> dict:
    return {"success": False, "message": message}
