import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from search_server.app.platform import exceptions as domainex
from search_server.app.platform.logging import request_id_ctx

logger = logging.getLogger(__name__)

# 도메인 예외 → (HTTP 상태, 에러 코드). 위에서부터 isinstance 로 매칭
DOMAIN_ERROR_MAP: list[tuple[type[domainex.DomainError], int, str]] = [
    (domainex.ResourceNotFound, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (domainex.IngestionError, status.HTTP_502_BAD_GATEWAY, "INGESTION_FAILED"),
    (domainex.IndexDeletionFailed, status.HTTP_502_BAD_GATEWAY, "INDEX_DELETION_FAILED"),
]


def error_envelope(message: Any, code: str = "BAD_REQUEST", details: Any = None) -> dict:
    return {
        "success": False,
        "error": {"code": code, "message": message, "details": details},
        "trace_id": request_id_ctx.get(),
    }


def _error_response(http_status: int, message: Any, code: str, details: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=http_status,
        content=error_envelope(message, code=code, details=details))


def resolve_domain_error(exc: domainex.DomainError) -> tuple[int, str]:
    for exc_type, http_status, code in DOMAIN_ERROR_MAP:
        if isinstance(exc, exc_type):
            return http_status, code
    return status.HTTP_400_BAD_REQUEST, "SERVICE_ERROR"


async def http_exception_handler(request: Request, exc: HTTPException):
    return _error_response(exc.status_code, exc.detail, f"HTTP_{exc.status_code}")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 선언되지 않은 필드, 빈 tags 등
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_CONTENT,
        "Unprocessable Entity",
        "VALIDATION_ERROR",
        details=jsonable_encoder(exc.errors()))


async def domain_exception_handler(request: Request, exc: domainex.DomainError):
    """
    도메인/유즈케이스 예외를 HTTP로 매핑.
    스토리지 엔진 쪽 실패(색인/삭제)는 502로 내려준다.
    """
    http_status, code = resolve_domain_error(exc)
    logger.warning("Domain error: %s (%s) path=%s", exc, code, request.url.path)
    return _error_response(http_status, str(exc), code)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(domainex.DomainError, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
