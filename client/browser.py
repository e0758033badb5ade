"""
client/browser.py

- 일정 목록 화면의 상태와 표시용 변환 로직
- 변환(filter → group → sort → status)은 순수 함수: 원본 목록을 변경하지 않으며
  같은 입력 + 같은 now 면 항상 같은 결과
- 날짜/시간 정렬은 문자열 비교 (YYYY-MM-DD, HH:MM)
"""

import logging
from datetime import date, datetime, time
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

from client.api_client import APIError, EventsAPIClient
from schemas.events import EventOut

logger = logging.getLogger(__name__)

STATUS_TODAY = "today"
STATUS_UPCOMING = "upcoming"
STATUS_PAST = "past"
STATUS_UNKNOWN = "unknown"

EMPTY_FILTERED_MESSAGE = "No events found for the selected date."
EMPTY_MESSAGE = "No events scheduled yet."
LOAD_ERROR_MESSAGE = "Failed to load events. Please try again."


# =========================================================
# 1) 표시용 모델
# =========================================================

class DateGroup(BaseModel):
    date: str
    label: str
    status: str
    events: List[EventOut]


class CalendarView(BaseModel):
    filter_date: Optional[str] = None
    groups: List[DateGroup] = []
    empty_message: Optional[str] = None


class EventDetails(BaseModel):
    description: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[str] = None


# =========================================================
# 2) 순수 변환 함수
# =========================================================

def filter_events(events: Iterable[EventOut], filter_date: Optional[str] = None) -> List[EventOut]:
    """filter_date 와 시작일 또는 종료일이 정확히 같은 일정만 (범위 아님)"""
    if not filter_date:
        return list(events)
    return [e for e in events if e.start_date == filter_date or e.end_date == filter_date]


def group_events_by_date(events: Iterable[EventOut]) -> Dict[str, List[EventOut]]:
    grouped: Dict[str, List[EventOut]] = {}
    for event in events:
        grouped.setdefault(event.start_date, []).append(event)
    return {
        day: sorted(grouped[day], key=lambda e: e.start_time)
        for day in sorted(grouped)
    }


def event_status(day: str, now: Optional[datetime] = None) -> str:
    try:
        event_day = date.fromisoformat(day)
    except (TypeError, ValueError):
        return STATUS_UNKNOWN
    today = (now or datetime.now()).date()
    if event_day == today:
        return STATUS_TODAY
    return STATUS_UPCOMING if event_day > today else STATUS_PAST


def _clock(value: str) -> str:
    t = time.fromisoformat(value)
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{t.hour % 12 or 12}:{t.minute:02d} {suffix}"


def _calendar_day(value: str) -> str:
    d = date.fromisoformat(value)
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def format_event_time(start_time: str, end_time: str) -> str:
    """'09:00', '13:30' → '9:00 AM - 1:30 PM' (파싱 실패 시 원문)"""
    try:
        return f"{_clock(start_time)} - {_clock(end_time)}"
    except (TypeError, ValueError):
        return f"{start_time} - {end_time}"


def format_event_date(start_date: str, end_date: str) -> str:
    try:
        start = _calendar_day(start_date)
        if start_date == end_date:
            return start
        return f"{start} - {_calendar_day(end_date)}"
    except (TypeError, ValueError):
        return f"{start_date} - {end_date}"


def build_calendar_view(
    events: Iterable[EventOut],
    filter_date: Optional[str] = None,
    now: Optional[datetime] = None,
) -> CalendarView:
    now = now or datetime.now()
    visible = filter_events(events, filter_date)
    if not visible:
        message = EMPTY_FILTERED_MESSAGE if filter_date else EMPTY_MESSAGE
        return CalendarView(filter_date=filter_date or None, empty_message=message)

    groups = [
        DateGroup(
            date=day,
            label=format_event_date(day, day),
            status=event_status(day, now),
            events=day_events,
        )
        for day, day_events in group_events_by_date(visible).items()
    ]
    return CalendarView(filter_date=filter_date or None, groups=groups)


# =========================================================
# 3) 화면 상태
# =========================================================

class EventBrowser:
    """목록 화면 한 개의 상태 (전역 상태 없음)"""

    def __init__(self, api: EventsAPIClient):
        self.api = api
        self.events: List[EventOut] = []
        self.filter_date: Optional[str] = None
        self.selected_event_id: Optional[str] = None
        self.is_loading = False
        self.error: Optional[str] = None

    def refresh(self) -> bool:
        """전체 목록 다시 불러오기. 실패 시 error 설정 (자동 재시도 없음)"""
        self.is_loading = True
        try:
            self.events = self.api.list_events()
            self.error = None
            return True
        except APIError as exc:
            logger.error("Error fetching events: %s", exc)
            self.error = exc.message or LOAD_ERROR_MESSAGE
            return False
        finally:
            self.is_loading = False

    def set_filter(self, filter_date: Optional[str]):
        self.filter_date = filter_date or None

    def clear_filter(self):
        self.filter_date = None

    def toggle_event(self, event_id: str) -> Optional[str]:
        # 한 번에 하나만 펼침, 같은 일정을 다시 누르면 접힘
        self.selected_event_id = None if self.selected_event_id == event_id else event_id
        return self.selected_event_id

    def is_expanded(self, event_id: str) -> bool:
        return self.selected_event_id == event_id

    def event_details(self, event_id: str) -> Optional[EventDetails]:
        for event in self.events:
            if event.id == event_id:
                return EventDetails(
                    description=event.description,
                    location=event.location,
                    created_at=event.created_at,
                )
        return None

    def view(self, now: Optional[datetime] = None) -> CalendarView:
        return build_calendar_view(self.events, self.filter_date, now)
