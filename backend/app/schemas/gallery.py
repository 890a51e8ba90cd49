"""Gallery 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from typing import List

from app.schemas.common import CamelModel


class GalleryItemOut(CamelModel):
    id: str
    url: str
    created_at: str


class GalleryBatchDelete(CamelModel):
    ids: List[str] = []


class GalleryBatchDeleteOut(CamelModel):
    deleted: List[str]
    missing: List[str]
