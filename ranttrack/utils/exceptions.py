import logging
from typing import Any

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder

from ranttrack.middleware.tracing import TRACE_ID_CTX_VAR

logger = logging.getLogger("ranttrack")


def status_to_code(status_code: int) -> str:
    mapping = {
        400: "BAD_REQUEST",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        409: "CONFLICT",
        413: "PAYLOAD_TOO_LARGE",
        415: "UNSUPPORTED_MEDIA_TYPE",
        422: "UNPROCESSABLE_ENTITY",
        429: "TOO_MANY_REQUESTS",
        500: "INTERNAL_SERVER_ERROR",
    }
    return mapping.get(status_code, f"HTTP_{status_code}")


def _current_trace_id(request: Request) -> str:
    return TRACE_ID_CTX_VAR.get() or getattr(request.state, "trace_id", "")


async def handle_http_exception(request: Request, exc: HTTPException):
    detail: Any = exc.detail
    message = detail if isinstance(detail, str) else "HTTP error"
    body = {
        "code": status_to_code(exc.status_code),
        "message": message,
        "details": detail,
        "trace_id": _current_trace_id(request),
    }
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


async def handle_validation_exception(request: Request, exc: RequestValidationError):
    body = {
        "code": status_to_code(status.HTTP_422_UNPROCESSABLE_ENTITY),
        "message": "Request validation failed",
        "details": jsonable_encoder(exc.errors()),
        "trace_id": _current_trace_id(request),
    }
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body)


async def handle_unhandled_exception(request: Request, exc: Exception):
    trace_id = _current_trace_id(request)
    logger.error({"function": "handle_unhandled_exception", "path": request.url.path, "trace_id": trace_id}, exc_info=exc)
    body = {
        "code": "INTERNAL_SERVER_ERROR",
        "message": "An unexpected error occurred",
        "details": str(exc),
        "trace_id": trace_id,
    }
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)
