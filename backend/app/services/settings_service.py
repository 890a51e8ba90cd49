"""Settings Service 도메인 서비스 레이어입니다.

사이트 설정은 ``settings/main`` 단일 문서로 저장되며 요청마다 새로 읽습니다.
저장은 읽기-수정-쓰기이고 동시 수정 시 마지막 저장이 이깁니다.
"""

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from app.schemas.settings import DEFAULT_SNS_IDS, SnsLink
from app.services.document_store import DocumentStore
from app.utils.helpers import StagedUpload, delete_blob, save_blob

logger = logging.getLogger(__name__)

COLLECTION = "settings"
DOC_ID = "main"
MAIN_IMAGE_PATH = "images/main"


def _fill_links(links: Iterable[dict]) -> list[dict]:
    by_id = {}
    for link in links or []:
        link_id = link.get("id")
        if link_id in DEFAULT_SNS_IDS and link_id not in by_id:
            by_id[link_id] = {"id": link_id, "url": link.get("url") or ""}
    return [by_id.get(sns_id, {"id": sns_id, "url": ""}) for sns_id in DEFAULT_SNS_IDS]


def get_site_settings(db: Session) -> dict:
    stored = DocumentStore(db).get(COLLECTION, DOC_ID)
    if stored is None:
        return {"mainImage": "", "snsLinks": _fill_links([])}
    return {
        "mainImage": stored.get("mainImage") or "",
        "snsLinks": _fill_links(stored.get("snsLinks") or []),
    }


def save_site_settings(db: Session, sns_links: list[SnsLink], main_image: StagedUpload | None = None) -> dict:
    store = DocumentStore(db)
    current = get_site_settings(db)

    image_url = current["mainImage"]
    if main_image:
        with main_image:
            # 메인 배너는 항상 같은 경로에 덮어쓴다.
            new_url = save_blob(main_image.content, f"{MAIN_IMAGE_PATH}.{main_image.extension or 'png'}")
        if image_url and image_url != new_url:
            delete_blob(image_url)
        image_url = new_url

    # 전달되지 않은 플랫폼은 기존 값을 유지한다.
    links = _fill_links([link.model_dump(mode="json") for link in sns_links] + current["snsLinks"])
    saved = store.set(COLLECTION, DOC_ID, {"mainImage": image_url, "snsLinks": links}, merge=True)
    logger.info("[settings] saved main_image=%s", bool(image_url))
    return {"mainImage": saved.get("mainImage") or "", "snsLinks": _fill_links(saved.get("snsLinks") or [])}
