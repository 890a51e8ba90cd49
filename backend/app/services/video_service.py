"""Video Service 도메인 서비스 레이어입니다."""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.schemas.video import VideoCreate, VideoUpdate, extract_video_id, thumbnail_url
from app.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

COLLECTION = "videos"


def _with_embed(video: dict) -> dict:
    video = dict(video)
    video_id = extract_video_id(video.get("src")) or ""
    video["videoId"] = video_id
    video["thumbnail"] = thumbnail_url(video_id)
    return video


def list_videos(db: Session) -> list[dict]:
    return [_with_embed(v) for v in DocumentStore(db).list(COLLECTION, order_by="createdAt")]


def get_video(db: Session, video_id: str) -> Optional[dict]:
    video = DocumentStore(db).get(COLLECTION, video_id)
    return _with_embed(video) if video else None


def create_video(db: Session, data: VideoCreate) -> dict:
    payload = {
        "title": data.title,
        "src": data.src,
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }
    video = DocumentStore(db).add(COLLECTION, payload)
    logger.info("[video] created id=%s", video["id"])
    return _with_embed(video)


def update_video(db: Session, video_id: str, data: VideoUpdate) -> Optional[dict]:
    store = DocumentStore(db)
    current = store.get(COLLECTION, video_id)
    if current is None:
        return None
    payload = data.model_dump(exclude_none=True, by_alias=True)
    if not payload:
        return _with_embed(current)
    return _with_embed(store.update(COLLECTION, video_id, payload))


def delete_video(db: Session, video_id: str) -> bool:
    deleted = DocumentStore(db).delete(COLLECTION, video_id)
    if deleted:
        logger.info("[video] deleted id=%s", video_id)
    return deleted
