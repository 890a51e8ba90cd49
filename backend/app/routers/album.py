"""Album 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

import json
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.album import AlbumCreate, AlbumOut, AlbumUpdate
from app.schemas.common import envelope
from app.services import album_service
from app.utils.helpers import stage_upload

router = APIRouter(prefix="/api/album", tags=["album"])

NOT_FOUND = "앨범을 찾을 수 없습니다."


def _parse_tracks(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    if len(values) == 1 and values[0].strip().startswith("["):
        # "[Live] Intro" 같은 곡명은 JSON 목록이 아니므로 그대로 둔다.
        try:
            parsed = json.loads(values[0])
        except ValueError:
            return list(values)
        if isinstance(parsed, list):
            return parsed
    return list(values)


@router.get("")
def list_albums(db: Session = Depends(get_db)):
    return envelope([AlbumOut.model_validate(a) for a in album_service.list_albums(db)])


@router.get("/{album_id}")
def get_album(album_id: str, db: Session = Depends(get_db)):
    album = album_service.get_album(db, album_id)
    if not album:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(AlbumOut.model_validate(album))


@router.post("")
async def create_album(
    title: str = Form(""),
    date: str = Form(""),
    description: str = Form(""),
    tracks: List[str] = Form([]),
    video_url: str = Form("", alias="videoUrl"),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    data = AlbumCreate(
        title=title,
        date=date,
        description=description,
        tracks=_parse_tracks(tracks) or [],
        video_url=video_url,
    )
    cover = await stage_upload(image, settings.ALBUM_COVER_MAX_SIZE) if image and image.filename else None
    album = album_service.create_album(db, data, cover)
    return envelope(AlbumOut.model_validate(album))


@router.put("/{album_id}")
async def update_album(
    album_id: str,
    title: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    tracks: Optional[List[str]] = Form(None),
    video_url: Optional[str] = Form(None, alias="videoUrl"),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    data = AlbumUpdate(
        title=title,
        date=date,
        description=description,
        tracks=_parse_tracks(tracks),
        video_url=video_url,
    )
    if album_service.get_album(db, album_id) is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    cover = await stage_upload(image, settings.ALBUM_COVER_MAX_SIZE) if image and image.filename else None
    album = album_service.update_album(db, album_id, data, cover)
    if not album:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(AlbumOut.model_validate(album))


@router.delete("/{album_id}")
def delete_album(album_id: str, db: Session = Depends(get_db), _admin: str = Depends(require_admin)):
    if not album_service.delete_album(db, album_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(message="삭제되었습니다.")
