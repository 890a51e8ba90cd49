"""Document Store 영속 어댑터입니다. 컬렉션+ID 단위 문서 조회/저장/삭제를 단일 문서 커밋으로 처리합니다."""

import json
import logging
import uuid
from typing import Any, Optional

from sqlalchemy.orm import Session

from app.models.stored_document import StoredDocument

logger = logging.getLogger(__name__)


def _dumps(data: dict) -> str:
    return json.dumps(data, ensure_ascii=False, default=str)


def _to_dict(row: StoredDocument) -> dict:
    data = json.loads(row.data or "{}")
    data["id"] = row.doc_id
    return data


class DocumentStore:
    """Schemaless per-collection records. Every write commits a single row."""

    def __init__(self, db: Session):
        self.db = db

    def _row(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        return (
            self.db.query(StoredDocument)
            .filter(StoredDocument.collection == collection, StoredDocument.doc_id == doc_id)
            .first()
        )

    def list(self, collection: str, order_by: str | None = None, descending: bool = True) -> list[dict]:
        rows = (
            self.db.query(StoredDocument)
            .filter(StoredDocument.collection == collection)
            .order_by(StoredDocument.created_at.asc(), StoredDocument.doc_id.asc())
            .all()
        )
        docs = [_to_dict(row) for row in rows]
        if order_by:
            docs.sort(key=lambda doc: _sort_value(doc.get(order_by)), reverse=descending)
        return docs

    def get(self, collection: str, doc_id: str) -> Optional[dict]:
        row = self._row(collection, doc_id)
        if not row:
            return None
        return _to_dict(row)

    def exists(self, collection: str, doc_id: str) -> bool:
        return self._row(collection, doc_id) is not None

    def add(self, collection: str, data: dict) -> dict:
        doc_id = uuid.uuid4().hex
        return self.set(collection, doc_id, data)

    def set(self, collection: str, doc_id: str, data: dict, merge: bool = False) -> dict:
        payload = {k: v for k, v in data.items() if k != "id"}
        row = self._row(collection, doc_id)
        if row is None:
            row = StoredDocument(collection=collection, doc_id=doc_id, data=_dumps(payload))
            self.db.add(row)
        else:
            if merge:
                current = json.loads(row.data or "{}")
                current.update(payload)
                payload = current
            row.data = _dumps(payload)
        self.db.commit()
        self.db.refresh(row)
        logger.debug("[store] set %s/%s merge=%s", collection, doc_id, merge)
        return _to_dict(row)

    def update(self, collection: str, doc_id: str, data: dict) -> Optional[dict]:
        if not self.exists(collection, doc_id):
            return None
        return self.set(collection, doc_id, data, merge=True)

    def delete(self, collection: str, doc_id: str) -> bool:
        row = self._row(collection, doc_id)
        if not row:
            return False
        self.db.delete(row)
        self.db.commit()
        logger.debug("[store] deleted %s/%s", collection, doc_id)
        return True


def _sort_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
