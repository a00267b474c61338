"""Classified errors and a JSON response envelope for HTTP services.

Server code raises or returns ``ClassifiedError`` values, encodes them with
``failure`` (or payloads with ``success``), and a client recovers the same
code, message, and detail with ``decode`` and ``Response.err``.
"""

from packages.apihelper.envelope import (
    ErrorInfo,
    MissingPayloadError,
    PayloadDecodeError,
    Response,
    ResponseConfig,
    ResponseError,
    configure,
    decode,
    failure,
    read_data,
    success,
)
from packages.apihelper.errors import (
    ClassifiedError,
    ErrorCapability,
    HttpErrorCapability,
    StatusClass,
    as_error_capability,
    as_http_error,
    is_caused_by,
    new,
    set_default_options,
    with_args,
    with_cause,
    with_code,
    with_details,
    with_message,
    with_status,
)
from packages.apihelper.startup import apply_settings

__all__ = [
    "ClassifiedError",
    "ErrorCapability",
    "ErrorInfo",
    "HttpErrorCapability",
    "MissingPayloadError",
    "PayloadDecodeError",
    "Response",
    "ResponseConfig",
    "ResponseError",
    "StatusClass",
    "apply_settings",
    "as_error_capability",
    "as_http_error",
    "configure",
    "decode",
    "failure",
    "is_caused_by",
    "new",
    "read_data",
    "set_default_options",
    "success",
    "with_args",
    "with_cause",
    "with_code",
    "with_details",
    "with_message",
    "with_status",
]
