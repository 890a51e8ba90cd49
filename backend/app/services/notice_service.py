"""Notice Service 도메인 서비스 레이어입니다."""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.schemas.notice import NoticeCreate, NoticeUpdate
from app.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

COLLECTION = "notices"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def list_notices(db: Session, notice_type: str | None = None) -> list[dict]:
    notices = DocumentStore(db).list(COLLECTION, order_by="createdAt")
    if notice_type:
        notices = [n for n in notices if n.get("type") == notice_type]
    return notices


def get_notice(db: Session, notice_id: str) -> Optional[dict]:
    return DocumentStore(db).get(COLLECTION, notice_id)


def create_notice(db: Session, data: NoticeCreate) -> dict:
    now = _now_iso()
    payload = data.model_dump(mode="json", by_alias=True)
    payload.update({"createdAt": now, "updatedAt": now})
    notice = DocumentStore(db).add(COLLECTION, payload)
    logger.info("[notice] created id=%s type=%s", notice["id"], notice["type"])
    return notice


def update_notice(db: Session, notice_id: str, data: NoticeUpdate) -> Optional[dict]:
    store = DocumentStore(db)
    current = store.get(COLLECTION, notice_id)
    if current is None:
        return None
    payload = data.model_dump(mode="json", exclude_none=True, by_alias=True)
    if not payload:
        return current
    payload["updatedAt"] = _now_iso()
    return store.update(COLLECTION, notice_id, payload)


def delete_notice(db: Session, notice_id: str) -> bool:
    deleted = DocumentStore(db).delete(COLLECTION, notice_id)
    if deleted:
        logger.info("[notice] deleted id=%s", notice_id)
    return deleted
