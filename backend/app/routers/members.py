"""멤버 프로필 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

import json
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.common import envelope
from app.schemas.profile import MAX_PROFILE_IMAGES, MemberProfileData, MemberProfileOut
from app.services import profile_service
from app.utils.helpers import stage_uploads

router = APIRouter(prefix="/api/members", tags=["members"])

NOT_FOUND = "멤버를 찾을 수 없습니다."


def _parse_profile_data(raw: str) -> MemberProfileData:
    try:
        parsed = json.loads(raw or "{}")
    except ValueError:
        raise HTTPException(status_code=400, detail="프로필 데이터 형식이 올바르지 않습니다.")
    if not isinstance(parsed, dict):
        raise HTTPException(status_code=400, detail="프로필 데이터 형식이 올바르지 않습니다.")
    return MemberProfileData.model_validate(parsed)


@router.get("")
def list_members(db: Session = Depends(get_db)):
    return envelope([MemberProfileOut.model_validate(p) for p in profile_service.list_profiles(db)])


@router.get("/{member_id}")
def get_member(member_id: str, db: Session = Depends(get_db)):
    profile = profile_service.get_profile(db, member_id)
    if profile is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(MemberProfileOut.model_validate(profile))


@router.api_route("/{member_id}", methods=["PUT", "POST"])
async def save_member(
    member_id: str,
    name: Optional[str] = Form(None),
    data: str = Form("{}"),
    images: List[UploadFile] = File(default=[]),
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    if not profile_service.is_member(member_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    profile_data = _parse_profile_data(data)
    files = [f for f in images if f.filename]
    if len(profile_data.image) + len(files) > MAX_PROFILE_IMAGES:
        raise HTTPException(status_code=400, detail=f"프로필 이미지는 최대 {MAX_PROFILE_IMAGES}장까지 등록할 수 있습니다.")
    staged = await stage_uploads(files, settings.PROFILE_IMAGE_MAX_SIZE)
    profile = profile_service.save_profile(db, member_id, name, profile_data, staged)
    return envelope(MemberProfileOut.model_validate(profile))
