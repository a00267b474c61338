"""Encode success payloads and errors into response envelopes."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from packages.apihelper.errors import as_http_error
from packages.apihelper.logging import fields, get_logger, log_context

from .defaults import ResponseConfig, current_config
from .envelope import ErrorInfo, Response

_LOGGER = get_logger(__name__)


def success(data: Any) -> Response:
    """Build a successful envelope carrying ``data``."""
    return Response(status=int(HTTPStatus.OK), success=True, data=data)


def failure(error: BaseException, *, config: ResponseConfig | None = None) -> Response:
    """Build a failed envelope for ``error``.

    The first error in the chain that knows its HTTP status decides status,
    code, and message. Anything else is encoded with the configured default
    code and message and status 500. ``detail`` carries the error text only
    when ``include_details`` is enabled and is left off the wire otherwise.
    """
    config = config or current_config()
    capable = as_http_error(error)
    if capable is not None:
        info = ErrorInfo(
            code=capable.code,
            message=capable.message,
            detail=str(capable) if config.include_details else None,
            details=getattr(capable, "details", None),
        )
        return Response(status=capable.http_status, success=False, error=info)

    with log_context(
        {
            fields.EVENT: fields.UNCLASSIFIED_ERROR_EVENT,
            fields.EXCEPTION_TYPE: type(error).__name__,
            fields.ERROR_CODE: config.default_error_code,
        }
    ):
        _LOGGER.warning("Encoding unclassified error with default code")
    info = ErrorInfo(
        code=config.default_error_code,
        message=config.default_error_message,
        detail=str(error) if config.include_details else None,
    )
    return Response(
        status=int(HTTPStatus.INTERNAL_SERVER_ERROR),
        success=False,
        error=info,
    )
