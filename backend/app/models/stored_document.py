"""컬렉션/ID로 주소 지정되는 스키마리스 문서 저장소 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, String, Text, DateTime, Index
from sqlalchemy.sql import func

from app.database import Base


class StoredDocument(Base):
    __tablename__ = "stored_document"

    collection = Column(String(50), primary_key=True)  # albums/gallery/notices/schedules/videos/profiles/settings
    doc_id = Column(String(64), primary_key=True)
    data = Column(Text, nullable=False)  # JSON string
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_stored_document_collection", "collection", "created_at"),
    )
