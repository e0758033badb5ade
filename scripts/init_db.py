import logging

from sqlalchemy.orm import Session

from config.settings import settings
from database.db import SessionLocal, init_db
from services.event_service import EventService
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

# ✅ 샘플 일정 데이터
SAMPLE_EVENTS = [
    {
        "title": "Team Meeting",
        "description": "Weekly team sync-up meeting",
        "start_date": "2025-09-20",
        "end_date": "2025-09-20",
        "start_time": "10:00",
        "end_time": "11:00",
        "creator_name": "John Doe",
        "creator_email": "john.doe@example.com",
        "location": "Conference Room A",
    },
    {
        "title": "Client Presentation",
        "description": "Quarterly business review with ABC Corp",
        "start_date": "2025-09-22",
        "end_date": "2025-09-22",
        "start_time": "14:00",
        "end_time": "15:30",
        "creator_name": "Jane Smith",
        "creator_email": "jane.smith@example.com",
        "location": "Virtual Meeting",
    },
    {
        "title": "Project Planning",
        "description": "Q4 project planning session",
        "start_date": "2025-09-25",
        "end_date": "2025-09-25",
        "start_time": "09:00",
        "end_time": "12:00",
        "creator_name": "Mike Johnson",
        "creator_email": "mike.johnson@example.com",
        "location": "Main Office",
    },
]


def seed_events(db: Session, events=None):
    """비어 있는 테이블에만 샘플 일정 등록 (재실행 시 중복 방지)"""
    service = EventService(db)
    if service.list_events():
        logger.info("events 테이블에 데이터가 있어 샘플 등록을 건너뜀")
        return []
    return [service.create_event(event) for event in (events or SAMPLE_EVENTS)]


def main():
    setup_logging(settings.LOG_LEVEL)
    init_db()
    db: Session = SessionLocal()
    try:
        created = seed_events(db)
    finally:
        db.close()
    logger.info("✅ 샘플 일정 %d건 등록 완료", len(created))


if __name__ == "__main__":
    main()
