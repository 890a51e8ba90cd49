"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.stored_document import StoredDocument

__all__ = [
    "StoredDocument",
]
