"""사이트 설정 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

import json
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.common import envelope
from app.schemas.settings import SiteSettingsOut, SnsLink
from app.services import settings_service
from app.utils.helpers import stage_upload

router = APIRouter(prefix="/api/settings", tags=["settings"])

INVALID_SNS_LINKS = "잘못된 SNS 링크 데이터"


def _parse_sns_links(raw: str) -> list[SnsLink]:
    try:
        parsed = json.loads(raw or "[]")
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_SNS_LINKS)
    if not isinstance(parsed, list):
        raise HTTPException(status_code=400, detail=INVALID_SNS_LINKS)
    try:
        return [SnsLink.model_validate(item) for item in parsed]
    except ValidationError:
        raise HTTPException(status_code=400, detail=INVALID_SNS_LINKS)


@router.get("")
def get_settings(db: Session = Depends(get_db)):
    return envelope(SiteSettingsOut.model_validate(settings_service.get_site_settings(db)))


@router.post("")
async def save_settings(
    sns_links: str = Form("[]", alias="snsLinks"),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    links = _parse_sns_links(sns_links)
    main_image = await stage_upload(image, settings.MAIN_IMAGE_MAX_SIZE) if image and image.filename else None
    saved = settings_service.save_site_settings(db, links, main_image)
    return envelope(SiteSettingsOut.model_validate(saved))
