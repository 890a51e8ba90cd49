"""Profile Service 도메인 서비스 레이어입니다. 멤버별 프로필 문서와 프로필 이미지 저장을 담당합니다."""

import logging
import uuid
from typing import Optional

from sqlalchemy.orm import Session

from app.schemas.profile import MEMBER_IDS, MEMBER_NAMES, MemberProfileData
from app.services.document_store import DocumentStore
from app.utils.helpers import StagedUpload, blob_path_from_url, delete_blob, release_all, save_blob

logger = logging.getLogger(__name__)

COLLECTION = "profiles"


def _default_profile(member_id: str) -> dict:
    return {"id": member_id, "name": MEMBER_NAMES[member_id], "texts": [], "images": [], "sns": {}}


def _is_member_blob(member_id: str, url: str) -> bool:
    rel_path = blob_path_from_url(url)
    return rel_path is not None and rel_path.startswith(f"members/{member_id}/")


def is_member(member_id: str) -> bool:
    return member_id in MEMBER_IDS


def list_profiles(db: Session) -> list[dict]:
    store = DocumentStore(db)
    return [store.get(COLLECTION, member_id) or _default_profile(member_id) for member_id in MEMBER_IDS]


def get_profile(db: Session, member_id: str) -> Optional[dict]:
    if not is_member(member_id):
        return None
    return DocumentStore(db).get(COLLECTION, member_id) or _default_profile(member_id)


def save_profile(
    db: Session,
    member_id: str,
    name: str | None,
    data: MemberProfileData,
    files: list[StagedUpload] | None = None,
) -> dict:
    store = DocumentStore(db)
    current = store.get(COLLECTION, member_id) or _default_profile(member_id)

    uploaded: list[str] = []
    try:
        for file in files or []:
            with file:
                dest = f"members/{member_id}/{uuid.uuid4().hex}.{file.extension or 'png'}"
                uploaded.append(save_blob(file.content, dest))
    finally:
        release_all(files)

    # 기존 프로필에 없던 URL은 유지 목록으로 받아들이지 않는다.
    owned = set(current.get("images") or [])
    images = [url for url in data.image if url in owned] + uploaded
    payload = {
        "name": (name or "").strip() or current.get("name") or MEMBER_NAMES[member_id],
        "texts": list(data.text),
        "images": images,
        "sns": dict(data.sns),
    }
    profile = store.set(COLLECTION, member_id, payload, merge=True)

    for stale in owned - set(images):
        if _is_member_blob(member_id, stale):
            delete_blob(stale)
    logger.info("[profile] saved id=%s images=%d uploaded=%d", member_id, len(images), len(uploaded))
    return profile
