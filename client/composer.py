"""
client/composer.py

- 일정 등록 폼 상태 + 클라이언트 측 필수값 검사
- 서버 검증이 최종 기준이며, 여기서는 빠른 피드백 용도
"""

import logging
from datetime import date
from typing import Callable, List, Literal, Optional

from pydantic import BaseModel

from client.api_client import APIError, EventsAPIClient
from schemas.events import EventOut, missing_required_fields

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Event created successfully!"
FAILURE_MESSAGE = "Failed to create event. Please try again."


class EventForm(BaseModel):
    title: str = ""
    description: str = ""
    start_date: str = ""
    end_date: str = ""
    start_time: str = ""
    end_time: str = ""
    creator_name: str = ""
    creator_email: str = ""
    location: str = ""

    @classmethod
    def blank(cls, today: date) -> "EventForm":
        """기본값: 시작/종료일 = 오늘, 나머지는 빈 값"""
        return cls(start_date=today.isoformat(), end_date=today.isoformat())


class FormMessage(BaseModel):
    type: Literal["", "success", "error"] = ""
    text: str = ""


class EventComposer:
    def __init__(self, api: EventsAPIClient, today: Callable[[], date] = date.today):
        self.api = api
        self._today = today
        self.form = EventForm.blank(today())
        self.message = FormMessage()
        self.is_submitting = False

    def update_field(self, name: str, value: str):
        if name not in EventForm.model_fields:
            raise ValueError(f"Unknown form field: {name}")
        setattr(self.form, name, value)

    def missing_fields(self) -> List[str]:
        return missing_required_fields(self.form.model_dump())

    def reset(self):
        self.form = EventForm.blank(self._today())

    def submit(self) -> Optional[EventOut]:
        self.message = FormMessage()
        missing = self.missing_fields()
        if missing:
            self.message = FormMessage(
                type="error",
                text=f"Please fill in all required fields: {', '.join(missing)}",
            )
            return None

        self.is_submitting = True
        try:
            created = self.api.create_event(self.form.model_dump())
        except APIError as exc:
            # 실패 시 폼 유지 → 수정 후 재전송 가능
            logger.warning("Event creation failed: %s", exc)
            self.message = FormMessage(type="error", text=exc.message or FAILURE_MESSAGE)
            return None
        finally:
            self.is_submitting = False

        self.message = FormMessage(type="success", text=SUCCESS_MESSAGE)
        self.reset()
        return created
