"""Gallery Service 도메인 서비스 레이어입니다. 이미지 업로드/교체/일괄 삭제 흐름을 캡슐화합니다."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from app.services.document_store import DocumentStore
from app.utils.helpers import StagedUpload, delete_blob, release_all, save_blob

logger = logging.getLogger(__name__)

COLLECTION = "gallery"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _store_image(image: StagedUpload) -> str:
    with image:
        return save_blob(image.content, f"gallery/{uuid.uuid4().hex}.{image.extension or 'png'}")


def list_gallery(db: Session) -> list[dict]:
    return DocumentStore(db).list(COLLECTION, order_by="createdAt")


def get_gallery_item(db: Session, item_id: str) -> Optional[dict]:
    return DocumentStore(db).get(COLLECTION, item_id)


def upload_gallery_images(db: Session, images: list[StagedUpload]) -> list[dict]:
    store = DocumentStore(db)
    created: list[dict] = []
    try:
        for image in images:
            url = _store_image(image)
            created.append(store.add(COLLECTION, {"url": url, "createdAt": _now_iso()}))
    finally:
        release_all(images)
    logger.info("[gallery] uploaded %d image(s)", len(created))
    return created


def replace_gallery_image(db: Session, item_id: str, image: StagedUpload) -> Optional[dict]:
    store = DocumentStore(db)
    current = store.get(COLLECTION, item_id)
    if current is None:
        image.release()
        return None
    url = _store_image(image)
    item = store.update(COLLECTION, item_id, {"url": url})
    delete_blob(current.get("url"))
    logger.info("[gallery] replaced image id=%s", item_id)
    return item


def delete_gallery_item(db: Session, item_id: str) -> bool:
    store = DocumentStore(db)
    current = store.get(COLLECTION, item_id)
    if current is None:
        return False
    delete_blob(current.get("url"))
    store.delete(COLLECTION, item_id)
    logger.info("[gallery] deleted id=%s", item_id)
    return True


def delete_gallery_items(db: Session, item_ids: Iterable[str]) -> dict:
    deleted: list[str] = []
    missing: list[str] = []
    for item_id in dict.fromkeys(item_ids):
        if delete_gallery_item(db, item_id):
            deleted.append(item_id)
        else:
            missing.append(item_id)
    return {"deleted": deleted, "missing": missing}
