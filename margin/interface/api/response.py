"""Response envelope and exception handlers.

Every response body is ``{"errno", "errmsg", "data"}``. ``errno`` is 0 on
success; failures carry the error's code and a message localized from
the ``lang`` query parameter.
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from margin.adapter.error import AdapterError
from margin.domain.error import (
    GENERIC_ERRNO,
    DomainError,
    DuplicateContentError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    TwoFactorAuthError,
    UnauthorizedError,
    UserRegisteredError,
    ValidationError,
)
from margin.interface.error import MissingQueryError
from margin.util.locales import translate

# Most specific class first
_HTTP_STATUS: list[tuple[type[DomainError], int]] = [
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (TwoFactorAuthError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateContentError, status.HTTP_409_CONFLICT),
    (UserRegisteredError, status.HTTP_409_CONFLICT),
    (RateLimitedError, status.HTTP_429_TOO_MANY_REQUESTS),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def success(data: Any = None) -> dict[str, Any]:
    return {"errno": 0, "errmsg": "", "data": data}


def failure(
    errno: int, message_key: str, lang: str | None, status_code: int
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"errno": errno, "errmsg": translate(lang, message_key), "data": None},
    )


def http_status_for(error: DomainError) -> int:
    for error_type, status_code in _HTTP_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _lang(request: Request) -> str | None:
    return request.query_params.get("lang")


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logfire.info(
        "Request rejected",
        path=request.url.path,
        error_type=type(exc).__name__,
        detail=exc.detail,
    )
    return failure(exc.errno, exc.message_key, _lang(request), http_status_for(exc))


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, (RequestValidationError, PydanticValidationError)):
        detail = exc.errors()
    else:
        detail = str(exc)
    logfire.info("Invalid request", path=request.url.path, detail=str(detail))
    return failure(
        GENERIC_ERRNO, "Invalid Request", _lang(request), status.HTTP_400_BAD_REQUEST
    )


async def upstream_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Collaborator failures (spam checker, mail, database)."""
    logfire.error(
        "Upstream failure",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return failure(
        GENERIC_ERRNO, "Upstream Error", _lang(request), status.HTTP_502_BAD_GATEWAY
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return failure(
        GENERIC_ERRNO, "Error", _lang(request), status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(MissingQueryError, validation_error_handler)
    app.add_exception_handler(PydanticValidationError, validation_error_handler)
    app.add_exception_handler(AdapterError, upstream_error_handler)
    app.add_exception_handler(SQLAlchemyError, upstream_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
