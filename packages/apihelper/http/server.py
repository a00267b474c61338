"""FastAPI adapters that write envelopes as HTTP responses.

The envelope status becomes the HTTP status line, so classified errors get
their mapped status and soft errors still answer 200.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from packages.apihelper.envelope import (
    ErrorInfo,
    Response,
    ResponseConfig,
    current_config,
    failure,
    success,
)
from packages.apihelper.errors import (
    ClassifiedError,
    StatusClass,
    new,
    with_code,
    with_details,
    with_message,
    with_status,
)

REQUEST_VALIDATION_FAILED = "REQUEST_VALIDATION_FAILED"


def envelope_response(envelope: Response) -> JSONResponse:
    """Render one envelope with its own status code."""
    return JSONResponse(content=envelope.to_wire(), status_code=envelope.status)


def respond_ok(data: Any) -> JSONResponse:
    """Write a successful envelope carrying ``data``."""
    return envelope_response(success(data))


def respond_error(error: BaseException, *, config: ResponseConfig | None = None) -> JSONResponse:
    """Write a failed envelope for ``error``."""
    return envelope_response(failure(error, config=config))


async def _handle_error(_: Request, exc: Exception) -> JSONResponse:
    return respond_error(exc)


async def _handle_http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        status = HTTPStatus(exc.status_code)
        code, message = status.name, status.phrase
    except ValueError:
        code, message = f"HTTP_{exc.status_code}", ""
    info = ErrorInfo(
        code=code,
        message=message,
        detail=str(exc.detail) if current_config().include_details else None,
    )
    response = envelope_response(Response(status=exc.status_code, success=False, error=info))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    error = new(
        "request validation failed",
        with_status(StatusClass.VALIDATION_FAILED),
        with_code(REQUEST_VALIDATION_FAILED),
        with_message("Request validation failed"),
        with_details(jsonable_encoder(exc.errors())),
    )
    return respond_error(error)


def install_error_handlers(app: FastAPI) -> None:
    """Encode exceptions escaping route handlers as error envelopes.

    Framework ``HTTPException``s (unknown routes, disallowed methods) keep
    their status and use the status name as code. Request validation
    failures answer 422 with the validation errors in ``details``.
    ``ClassifiedError`` is handled in the app's exception middleware. Any
    other exception reaches Starlette's server-error middleware, which sends
    the envelope and then re-raises for the server to log.
    """
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(ClassifiedError, _handle_error)
    app.add_exception_handler(Exception, _handle_error)


def create_app(*, title: str = "apihelper", version: str = "0.0.0") -> FastAPI:
    """Create a FastAPI app with envelope error handlers installed."""
    app = FastAPI(title=title, version=version)
    install_error_handlers(app)
    return app
