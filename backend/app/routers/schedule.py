"""Schedule 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.common import envelope
from app.schemas.schedule import ScheduleEventCreate, ScheduleEventOut, ScheduleEventUpdate
from app.services import schedule_service

router = APIRouter(prefix="/api/schedule", tags=["schedule"])

NOT_FOUND = "일정을 찾을 수 없습니다."


def _validate_range(start: Optional[date], end: Optional[date]):
    if start and end and end < start:
        raise HTTPException(status_code=400, detail="조회 종료일은 시작일보다 빠를 수 없습니다.")


@router.get("")
def list_schedules(
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    _validate_range(start, end)
    events = schedule_service.list_schedules(db, start, end)
    return envelope([ScheduleEventOut.model_validate(e) for e in events])


@router.get("/calendar")
def get_calendar(
    start: date = Query(...),
    end: date = Query(...),
    db: Session = Depends(get_db),
):
    _validate_range(start, end)
    events = schedule_service.get_calendar_events(db, start, end)
    return envelope([ScheduleEventOut.model_validate(e) for e in events])


@router.get("/{schedule_id}")
def get_schedule(schedule_id: str, db: Session = Depends(get_db)):
    event = schedule_service.get_schedule(db, schedule_id)
    if not event:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(ScheduleEventOut.model_validate(event))


@router.post("")
def create_schedule(data: ScheduleEventCreate, db: Session = Depends(get_db), _admin: str = Depends(require_admin)):
    event = schedule_service.create_schedule(db, data)
    return envelope(ScheduleEventOut.model_validate(event))


@router.put("/{schedule_id}")
def update_schedule(
    schedule_id: str,
    data: ScheduleEventUpdate,
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    current = schedule_service.get_schedule(db, schedule_id)
    if not current:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    # 부분 수정 후에도 시작/종료 순서를 다시 검증한다.
    merged = ScheduleEventCreate.model_validate(schedule_service.merge_update(current, data))
    event = schedule_service.update_schedule(db, schedule_id, merged)
    if not event:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(ScheduleEventOut.model_validate(event))


@router.delete("/{schedule_id}")
def delete_schedule(schedule_id: str, db: Session = Depends(get_db), _admin: str = Depends(require_admin)):
    if not schedule_service.delete_schedule(db, schedule_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(message="삭제되었습니다.")
