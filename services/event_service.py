"""
services/event_service.py

- 캘린더 일정 CRUD + 기간 조회 비즈니스 로직
- 라우터는 요청/응답 변환만, 검증·DB 처리는 이 모듈에서 수행
- 정렬/기간 비교는 문자열(사전순) 비교: ISO 날짜·0패딩 시간이라 시간순과 동일
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.events import Event as EventModel
from schemas.events import REQUIRED_FIELDS, missing_required_fields
from services.errors import EventNotFoundError, EventStoreError, EventValidationError
from utils.timeutils import now_iso

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = REQUIRED_FIELDS + ("description", "location")


class EventService:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _store(self):
        # DB 오류는 롤백 후 원본 메시지를 담아 EventStoreError 로 변환
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            message = str(getattr(exc, "orig", None) or exc)
            logger.error("Event store failure: %s", message)
            raise EventStoreError(message) from exc

    def _ordered(self, query):
        return query.order_by(EventModel.start_date.asc(), EventModel.start_time.asc())

    # ==========================================================
    # [READ] 조회
    # ==========================================================

    def list_events(self) -> List[Dict[str, Any]]:
        with self._store():
            records = self._ordered(self.db.query(EventModel)).all()
        return [r.to_dict() for r in records]

    def get_event(self, event_id: str) -> Dict[str, Any]:
        with self._store():
            event = self.db.query(EventModel).filter(EventModel.id == event_id).first()
        if event is None:
            logger.warning("Event not found: id=%s", event_id)
            raise EventNotFoundError(event_id)
        return event.to_dict()

    def list_events_in_range(self, start_date: str, end_date: str) -> List[Dict[str, Any]]:
        """start_date 가 [start_date, end_date] 안에 드는 일정 (종료일은 고려하지 않음)"""
        with self._store():
            records = self._ordered(
                self.db.query(EventModel)
                .filter(EventModel.start_date >= start_date)
                .filter(EventModel.start_date <= end_date)
            ).all()
        return [r.to_dict() for r in records]

    # ==========================================================
    # [CREATE / UPDATE / DELETE]
    # ==========================================================

    def create_event(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        missing = missing_required_fields(payload)
        if missing:
            raise EventValidationError(missing=missing)

        stamp = now_iso()
        db_event = EventModel(
            id=str(uuid.uuid4()),
            created_at=stamp,
            updated_at=stamp,
            **{name: payload.get(name) for name in MUTABLE_FIELDS},
        )
        with self._store():
            self.db.add(db_event)
            self.db.commit()
            self.db.refresh(db_event)
        logger.info("Event created: id=%s title=%r", db_event.id, db_event.title)
        return db_event.to_dict()

    def update_event(self, event_id: str, payload: Dict[str, Any]) -> None:
        # 전체 덮어쓰기: 요청에 없는 필드는 None 으로 저장 시도
        values: Dict[str, Optional[Any]] = {name: payload.get(name) for name in MUTABLE_FIELDS}
        values["updated_at"] = now_iso()
        with self._store():
            changed = (
                self.db.query(EventModel)
                .filter(EventModel.id == event_id)
                .update(values, synchronize_session=False)
            )
            self.db.commit()
        if changed == 0:
            logger.warning("Update target not found: id=%s", event_id)
            raise EventNotFoundError(event_id)
        logger.info("Event updated: id=%s", event_id)

    def delete_event(self, event_id: str) -> None:
        with self._store():
            deleted = (
                self.db.query(EventModel)
                .filter(EventModel.id == event_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        if deleted == 0:
            logger.warning("Delete target not found: id=%s", event_id)
            raise EventNotFoundError(event_id)
        logger.info("Event deleted: id=%s", event_id)
