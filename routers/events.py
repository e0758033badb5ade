from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.events import (
    EventCreate,
    EventCreatedResponse,
    EventListResponse,
    EventResponse,
    EventUpdate,
    ErrorResponse,
    MessageResponse,
)
from services.event_service import EventService

router = APIRouter(prefix="/events", tags=["Events"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_SERVER_ERROR = {500: {"model": ErrorResponse}}


# ==========================================================
# [공통] 서비스 주입
# ==========================================================
def get_event_service(db: Session = Depends(get_db)) -> EventService:
    return EventService(db)


# 본문 없는 요청은 빈 payload 로 처리 → 검증/404 판단은 서비스가 담당
def _payload(body) -> dict:
    return body.model_dump() if body is not None else {}


# ==========================================================
# [1단계] 목록/생성
# ==========================================================

# ✅ [READ] 전체 일정 조회 (start_date, start_time 오름차순)
@router.get("", response_model=EventListResponse, responses=_SERVER_ERROR)
def read_events(service: EventService = Depends(get_event_service)):
    return {"events": service.list_events()}


# ✅ [CREATE] 일정 등록
@router.post(
    "",
    status_code=201,
    response_model=EventCreatedResponse,
    responses={400: {"model": ErrorResponse}, **_SERVER_ERROR},
)
def create_event(
    event: Optional[EventCreate] = Body(default=None),
    service: EventService = Depends(get_event_service),
):
    created = service.create_event(_payload(event))
    return {"message": "Event created successfully", "event": created}


# ==========================================================
# [2단계] 정적 라우터 (동적 /{event_id} 보다 먼저 등록)
# ==========================================================

# ✅ [RANGE] 시작일 기준 기간 조회
@router.get(
    "/range/{start_date}/{end_date}",
    response_model=EventListResponse,
    responses=_SERVER_ERROR,
)
def read_events_in_range(
    start_date: str,
    end_date: str,
    service: EventService = Depends(get_event_service),
):
    return {"events": service.list_events_in_range(start_date, end_date)}


# ==========================================================
# [3단계] 동적 라우터
# ==========================================================

# ✅ [READ] 단일 일정 조회
@router.get("/{event_id}", response_model=EventResponse, responses={**_NOT_FOUND, **_SERVER_ERROR})
def read_event(event_id: str, service: EventService = Depends(get_event_service)):
    return {"event": service.get_event(event_id)}


# ✅ [UPDATE] 일정 수정 (전체 필드 덮어쓰기)
@router.put("/{event_id}", response_model=MessageResponse, responses={**_NOT_FOUND, **_SERVER_ERROR})
def update_event(
    event_id: str,
    updated: Optional[EventUpdate] = Body(default=None),
    service: EventService = Depends(get_event_service),
):
    service.update_event(event_id, _payload(updated))
    return {"message": "Event updated successfully"}


# ✅ [DELETE] 일정 삭제
@router.delete("/{event_id}", response_model=MessageResponse, responses={**_NOT_FOUND, **_SERVER_ERROR})
def delete_event(event_id: str, service: EventService = Depends(get_event_service)):
    service.delete_event(event_id)
    return {"message": "Event deleted successfully"}
