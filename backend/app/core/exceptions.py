"""API 전역 예외 핸들러입니다. 모든 오류를 {success: false, message} 봉투로 변환합니다."""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.common import failure

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "서버 오류가 발생했습니다."
VALIDATION_ERROR_MESSAGE = "요청 값이 올바르지 않습니다."


def _first_error_message(exc: RequestValidationError | ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return VALIDATION_ERROR_MESSAGE
    first = errors[0]
    message = str(first.get("msg") or VALIDATION_ERROR_MESSAGE)
    # field_validator에서 올린 ValueError 메시지는 그대로 노출한다.
    if message.startswith("Value error, "):
        return message[len("Value error, "):]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{VALIDATION_ERROR_MESSAGE} ({loc}: {message})" if loc else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    log_level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(log_level, "[http] %s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError | ValidationError) -> JSONResponse:
    message = _first_error_message(exc)
    logger.warning("[http] %s %s -> 400 %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=failure(message))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[http] %s %s -> 500 unhandled error", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure(GENERIC_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
