"""
schemas/events.py

- /api/events 엔드포인트의 요청/응답 스키마
- 날짜/시간은 문자열 그대로 주고받음 (YYYY-MM-DD, HH:MM)
- 요청 필드는 전부 Optional: 필수값 검사는 서비스 계층에서 수행(400 응답)
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =========================================================
# 1) 요청 스키마
# =========================================================

class EventPayload(BaseModel):
    """생성/수정 공통 입력 필드 (id/타임스탬프는 서버에서 부여)"""
    title: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    end_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    start_time: Optional[str] = Field(default=None, description="HH:MM")
    end_time: Optional[str] = Field(default=None, description="HH:MM")
    creator_name: Optional[str] = None
    creator_email: Optional[str] = None
    location: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class EventCreate(EventPayload):
    pass


class EventUpdate(EventPayload):
    """수정은 전체 덮어쓰기: 누락된 필드는 NULL로 저장됨"""


# =========================================================
# 2) 응답 스키마
# =========================================================

class EventOut(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    start_date: str
    end_date: str
    start_time: str
    end_time: str
    creator_name: str
    creator_email: str
    location: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class EventListResponse(BaseModel):
    events: List[EventOut]


class EventResponse(BaseModel):
    event: EventOut


class EventCreatedResponse(BaseModel):
    message: str
    event: EventOut


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ErrorResponse(BaseModel):
    """전역 에러 핸들러가 내려주는 에러 응답 ({"error": "..."})"""
    error: str


# =========================================================
# 3) 필수값 검사 (서버/클라이언트 공용)
# =========================================================

REQUIRED_FIELDS = (
    "title",
    "start_date",
    "end_date",
    "start_time",
    "end_time",
    "creator_name",
    "creator_email",
)


def missing_required_fields(payload: dict) -> List[str]:
    """값이 없거나 빈 문자열인 필수 필드 목록"""
    return [name for name in REQUIRED_FIELDS if payload.get(name) in (None, "")]
