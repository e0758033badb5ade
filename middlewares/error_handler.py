from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.errors import EventNotFoundError, EventServiceError, EventValidationError


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def add_error_handlers(app: FastAPI):
    @app.exception_handler(EventValidationError)
    async def validation_exception_handler(request: Request, exc: EventValidationError):
        return _error(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # 잘못된 JSON/타입도 400 으로 통일
        return _error(400, _describe(exc))

    @app.exception_handler(EventNotFoundError)
    async def not_found_handler(request: Request, exc: EventNotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(EventServiceError)
    async def service_error_handler(request: Request, exc: EventServiceError):
        return _error(500, exc.message)

    # Starlette 가 응답 후 예외를 다시 올려 서버 로그에 traceback 이 남으므로 여기서는 로깅하지 않음
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        return _error(500, str(exc))
