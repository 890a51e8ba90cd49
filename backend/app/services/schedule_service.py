"""Schedule Service 도메인 서비스 레이어입니다. 저장된 일정 CRUD와 반복 기념일 병합 조회를 담당합니다."""

import logging
from datetime import date, datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.schemas.schedule import ScheduleEventCreate, ScheduleEventUpdate
from app.services.document_store import DocumentStore
from app.services.recurring_events import DEFAULT_RULES, RecurringRule, expand_rules

logger = logging.getLogger(__name__)

COLLECTION = "schedules"

EVENT_COLORS = {
    "B": "#e79c89",
    "C": "#72d2c0",
    "E": "#f1bd4c",
}


def _with_color(event: dict) -> dict:
    event = dict(event)
    event["color"] = EVENT_COLORS.get(event.get("type"), "")
    event.setdefault("recurring", False)
    return event


def _parse(value) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _range_bounds(start: date | None, end: date | None) -> tuple[datetime | None, datetime | None]:
    lower = datetime.combine(start, datetime.min.time()) if start else None
    upper = datetime.combine(end, datetime.max.time()) if end else None
    return lower, upper


def _overlaps(event: dict, lower: datetime | None, upper: datetime | None) -> bool:
    event_start = _parse(event["start"])
    event_end = _parse(event.get("end") or event["start"])
    if upper is not None and event_start > upper:
        return False
    if lower is not None and event_end < lower:
        return False
    return True


def list_schedules(db: Session, start: date | None = None, end: date | None = None) -> list[dict]:
    lower, upper = _range_bounds(start, end)
    events = DocumentStore(db).list(COLLECTION, order_by="start")
    return [_with_color(e) for e in events if _overlaps(e, lower, upper)]


def get_schedule(db: Session, schedule_id: str) -> Optional[dict]:
    event = DocumentStore(db).get(COLLECTION, schedule_id)
    return _with_color(event) if event else None


def create_schedule(db: Session, data: ScheduleEventCreate) -> dict:
    payload = data.model_dump(mode="json", by_alias=True)
    event = DocumentStore(db).add(COLLECTION, payload)
    logger.info("[schedule] created id=%s type=%s start=%s", event["id"], event["type"], event["start"])
    return _with_color(event)


def merge_update(current: dict, data: ScheduleEventUpdate) -> dict:
    payload = data.model_dump(mode="json", exclude_none=True, by_alias=True)
    merged = {k: v for k, v in current.items() if k not in ("id", "color", "recurring")}
    merged.update(payload)
    return merged


def update_schedule(db: Session, schedule_id: str, data: ScheduleEventCreate) -> Optional[dict]:
    payload = data.model_dump(mode="json", by_alias=True)
    event = DocumentStore(db).update(COLLECTION, schedule_id, payload)
    if event is None:
        return None
    logger.info("[schedule] updated id=%s", schedule_id)
    return _with_color(event)


def delete_schedule(db: Session, schedule_id: str) -> bool:
    deleted = DocumentStore(db).delete(COLLECTION, schedule_id)
    if deleted:
        logger.info("[schedule] deleted id=%s", schedule_id)
    return deleted


def get_calendar_events(
    db: Session,
    start: date,
    end: date,
    rules: tuple[RecurringRule, ...] = DEFAULT_RULES,
) -> list[dict]:
    """Persisted events in range followed by computed yearly events, sorted by start.

    The two sources are concatenated as-is: a stored event on the same day as a
    computed birthday yields two entries.
    """
    persisted = list_schedules(db, start, end)
    synthetic = [_with_color(e) for e in expand_rules(start, end, rules)]
    merged = persisted + synthetic
    merged.sort(key=lambda e: _parse(e["start"]))
    return merged
