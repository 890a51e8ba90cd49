"""Notice 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.common import envelope
from app.schemas.notice import NoticeCreate, NoticeOut, NoticeType, NoticeUpdate
from app.services import notice_service

router = APIRouter(prefix="/api/notice", tags=["notice"])

NOT_FOUND = "공지사항을 찾을 수 없습니다."


@router.get("")
def list_notices(type: Optional[NoticeType] = Query(None), db: Session = Depends(get_db)):
    notices = notice_service.list_notices(db, type.value if type else None)
    return envelope([NoticeOut.model_validate(n) for n in notices])


@router.get("/{notice_id}")
def get_notice(notice_id: str, db: Session = Depends(get_db)):
    notice = notice_service.get_notice(db, notice_id)
    if not notice:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(NoticeOut.model_validate(notice))


@router.post("", status_code=201)
def create_notice(data: NoticeCreate, db: Session = Depends(get_db), _admin: str = Depends(require_admin)):
    notice = notice_service.create_notice(db, data)
    return envelope(NoticeOut.model_validate(notice))


@router.put("/{notice_id}")
def update_notice(
    notice_id: str,
    data: NoticeUpdate,
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    notice = notice_service.update_notice(db, notice_id, data)
    if not notice:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(NoticeOut.model_validate(notice))


@router.delete("/{notice_id}")
def delete_notice(notice_id: str, db: Session = Depends(get_db), _admin: str = Depends(require_admin)):
    if not notice_service.delete_notice(db, notice_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(message="삭제되었습니다.")
