"""
client/api_client.py

- /api 엔드포인트를 호출하는 HTTP 클라이언트 (httpx)
- 실패 응답은 서버의 {"error": "..."} 메시지를 그대로 담아 APIError 로 변환
- 테스트/임베딩 시 http_client 로 미리 구성된 httpx.Client(TestClient 등) 주입 가능
"""

from typing import Any, Dict, List, Optional

import httpx

from config.settings import settings
from schemas.events import (
    EventCreatedResponse,
    EventListResponse,
    EventOut,
    EventResponse,
    HealthResponse,
    MessageResponse,
)


class APIError(Exception):
    """API 호출 실패. message 는 서버가 준 에러 문구(없으면 None)"""

    def __init__(self, message: Optional[str], status_code: Optional[int] = None):
        super().__init__(message or f"Request failed (status={status_code})")
        self.message = message
        self.status_code = status_code


def _server_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


class EventsAPIClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.base = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = settings.CLIENT_TIMEOUT if timeout is None else timeout
        self._http = http_client

    def request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base}{path}"
        try:
            if self._http is not None:
                r = self._http.request(method, url, json=json)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    r = client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            # 네트워크 오류: 서버 메시지 없음 → 화면에서 기본 문구 사용
            raise APIError(None) from exc
        if r.is_error:
            raise APIError(_server_message(r), r.status_code)
        return r.json()

    # ==========================================================
    # 엔드포인트별 메서드
    # ==========================================================

    def list_events(self) -> List[EventOut]:
        return EventListResponse.model_validate(self.request("GET", "/events")).events

    def get_event(self, event_id: str) -> EventOut:
        return EventResponse.model_validate(self.request("GET", f"/events/{event_id}")).event

    def create_event(self, payload: Dict[str, Any]) -> EventOut:
        data = self.request("POST", "/events", json=payload)
        return EventCreatedResponse.model_validate(data).event

    def update_event(self, event_id: str, payload: Dict[str, Any]) -> str:
        data = self.request("PUT", f"/events/{event_id}", json=payload)
        return MessageResponse.model_validate(data).message

    def delete_event(self, event_id: str) -> str:
        return MessageResponse.model_validate(self.request("DELETE", f"/events/{event_id}")).message

    def list_events_in_range(self, start_date: str, end_date: str) -> List[EventOut]:
        data = self.request("GET", f"/events/range/{start_date}/{end_date}")
        return EventListResponse.model_validate(data).events

    def health(self) -> HealthResponse:
        return HealthResponse.model_validate(self.request("GET", "/health"))
