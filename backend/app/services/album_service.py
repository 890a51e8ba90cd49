"""Album Service 도메인 서비스 레이어입니다. 디스코그래피 문서와 커버 이미지 저장 흐름을 캡슐화합니다."""

import logging
import uuid
from typing import Optional

from sqlalchemy.orm import Session

from app.schemas.album import AlbumCreate, AlbumUpdate
from app.services.document_store import DocumentStore
from app.utils.helpers import StagedUpload, delete_blob, save_blob

logger = logging.getLogger(__name__)

COLLECTION = "albums"


def _upload_cover(cover: StagedUpload) -> str:
    with cover:
        return save_blob(cover.content, f"albums/{uuid.uuid4().hex}.{cover.extension or 'png'}")


def list_albums(db: Session) -> list[dict]:
    return DocumentStore(db).list(COLLECTION, order_by="date")


def get_album(db: Session, album_id: str) -> Optional[dict]:
    return DocumentStore(db).get(COLLECTION, album_id)


def create_album(db: Session, data: AlbumCreate, cover: StagedUpload | None = None) -> dict:
    image_url = _upload_cover(cover) if cover else ""
    payload = {
        "title": data.title,
        "date": data.date,
        "description": data.description or "",
        "tracks": list(data.tracks or []),
        "videoUrl": data.video_url or "",
        "image": image_url,
    }
    album = DocumentStore(db).add(COLLECTION, payload)
    logger.info("[album] created id=%s title=%s", album["id"], album["title"])
    return album


def update_album(db: Session, album_id: str, data: AlbumUpdate, cover: StagedUpload | None = None) -> Optional[dict]:
    store = DocumentStore(db)
    current = store.get(COLLECTION, album_id)
    if current is None:
        if cover:
            cover.release()
        return None

    payload = data.model_dump(exclude_none=True, by_alias=True)
    if cover:
        payload["image"] = _upload_cover(cover)
    if not payload:
        return current

    album = store.update(COLLECTION, album_id, payload)
    if cover and current.get("image") and current.get("image") != payload["image"]:
        delete_blob(current.get("image"))
    logger.info("[album] updated id=%s fields=%s", album_id, sorted(payload))
    return album


def delete_album(db: Session, album_id: str) -> bool:
    store = DocumentStore(db)
    current = store.get(COLLECTION, album_id)
    if current is None:
        return False
    store.delete(COLLECTION, album_id)
    delete_blob(current.get("image"))
    logger.info("[album] deleted id=%s", album_id)
    return True
