# backend/utils/errors.py
import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

FORBIDDEN_ADMIN_MSG = "Solo administradores pueden realizar esta acción"

# Machine-readable kind for each status the API emits
ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_SUPPORTED",
    409: "CONFLICT",
    422: "BAD_REQUEST",
    503: "SERVICE_UNAVAILABLE",
}


class StoreUnavailableError(Exception):
    """Raised by write accessors when no database handle is available."""

    def __init__(self, message: str = "Database not available"):
        super().__init__(message)
        self.message = message


def error_response(status_code: int, detail, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"code": ERROR_CODES.get(status_code, "INTERNAL_SERVER_ERROR"), "detail": detail},
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, exc.detail, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Field-level detail: [{"loc": [...], "msg": ..., "type": ...}, ...]
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return error_response(status.HTTP_400_BAD_REQUEST, jsonable_encoder(errors))


async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    logger.error("[Database] %s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, exc.message)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
