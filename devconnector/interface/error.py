"""Mapping from errors to HTTP responses.

Installed once by ``create_app``; routes raise and never build error
responses themselves.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logfire
import pydantic

from devconnector.adapter.error import ProviderError
from devconnector.domain.error import (
    DomainConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


def _field_name(loc: tuple) -> str:
    """Turn a pydantic error location into the offending field name."""
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts)


def _errors_response(errors: list[dict[str, str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors}
    )


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logfire.info("Validation failed", path=request.url.path, error=str(exc))
    return _errors_response([{"param": e.param, "msg": e.msg} for e in exc.errors])


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError | pydantic.ValidationError
) -> JSONResponse:
    """Collect every failing field of a malformed request."""
    errors = [
        {"param": _field_name(tuple(e["loc"])), "msg": e["msg"]} for e in exc.errors()
    ]
    logfire.info("Request validation failed", path=request.url.path, count=len(errors))
    return _errors_response(errors)


async def handle_unauthorized(request: Request, exc: UnauthorizedError) -> JSONResponse:
    logfire.info(
        "Unauthorized request", path=request.url.path, reason=exc.reason.value
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc), "reason": exc.reason.value},
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": f"{exc.resource} not found"},
    )


async def handle_conflict(request: Request, exc: DomainConflictError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


async def handle_provider_error(request: Request, exc: ProviderError) -> JSONResponse:
    logfire.error("Upstream provider failed", provider=exc.provider, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": f"Upstream {exc.provider} request failed"},
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server error"},
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register every error mapping on app."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(pydantic.ValidationError, handle_request_validation_error)
    app.add_exception_handler(UnauthorizedError, handle_unauthorized)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(DomainConflictError, handle_conflict)
    app.add_exception_handler(ProviderError, handle_provider_error)
    app.add_exception_handler(Exception, handle_unexpected)
