"""
services/errors.py

- 서비스 계층에서 발생시키는 도메인 예외
- HTTP 상태 코드 매핑은 middlewares/error_handler.py 에서 담당
"""


class EventServiceError(Exception):
    """일정 서비스 예외의 공통 부모"""

    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class EventValidationError(EventServiceError):
    """필수 필드 누락 (400)"""

    message = "Missing required fields"

    def __init__(self, message=None, missing=None):
        super().__init__(message)
        self.missing = list(missing or [])


class EventNotFoundError(EventServiceError):
    """대상 id 의 일정이 없음 (404)"""

    message = "Event not found"

    def __init__(self, event_id=None, message=None):
        super().__init__(message)
        self.event_id = event_id


class EventStoreError(EventServiceError):
    """DB 오류 (500) - 드라이버 메시지를 그대로 전달"""
