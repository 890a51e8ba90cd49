"""Video 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.common import envelope
from app.schemas.video import VideoCreate, VideoOut, VideoUpdate
from app.services import video_service

router = APIRouter(prefix="/api/video", tags=["video"])

NOT_FOUND = "영상을 찾을 수 없습니다."


@router.get("")
def list_videos(db: Session = Depends(get_db)):
    return envelope([VideoOut.model_validate(v) for v in video_service.list_videos(db)])


@router.get("/{video_id}")
def get_video(video_id: str, db: Session = Depends(get_db)):
    video = video_service.get_video(db, video_id)
    if not video:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(VideoOut.model_validate(video))


@router.post("")
def create_video(data: VideoCreate, db: Session = Depends(get_db), _admin: str = Depends(require_admin)):
    return envelope(VideoOut.model_validate(video_service.create_video(db, data)))


@router.put("/{video_id}")
def update_video(
    video_id: str,
    data: VideoUpdate,
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    video = video_service.update_video(db, video_id, data)
    if not video:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(VideoOut.model_validate(video))


@router.delete("/{video_id}")
def delete_video(video_id: str, db: Session = Depends(get_db), _admin: str = Depends(require_admin)):
    if not video_service.delete_video(db, video_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(message="삭제되었습니다.")
