"""Status class to transport status mapping.

Every status class maps to exactly one HTTP status code and one gRPC-style
status name. Anything not in the tables, including unknown strings and
``THIRD_PARTY``, falls back to 500 / ``UNKNOWN``.
"""

from __future__ import annotations

from http import HTTPStatus

import grpc

from .types import StatusClass, coerce_status_class

_FALLBACK_HTTP_STATUS = HTTPStatus.INTERNAL_SERVER_ERROR
_FALLBACK_GRPC_STATUS = "UNKNOWN"

_HTTP_STATUS: dict[StatusClass, HTTPStatus] = {
    StatusClass.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
    StatusClass.INVALID_REQUEST: HTTPStatus.BAD_REQUEST,
    StatusClass.VALIDATION_FAILED: HTTPStatus.UNPROCESSABLE_ENTITY,
    StatusClass.NOT_FOUND: HTTPStatus.NOT_FOUND,
    StatusClass.ALREADY_EXISTS: HTTPStatus.CONFLICT,
    StatusClass.RACE_CONDITION: HTTPStatus.CONFLICT,
    StatusClass.UNAUTHENTICATED: HTTPStatus.UNAUTHORIZED,
    StatusClass.PERMISSION_DENIED: HTTPStatus.FORBIDDEN,
    StatusClass.RESOURCE_EXHAUSTED: HTTPStatus.TOO_MANY_REQUESTS,
    StatusClass.UNAVAILABLE: HTTPStatus.SERVICE_UNAVAILABLE,
    StatusClass.DEADLINE_EXCEEDED: HTTPStatus.GATEWAY_TIMEOUT,
    # Soft errors ride on a successful transport call.
    StatusClass.SOFT_ERROR: HTTPStatus.OK,
}

_GRPC_STATUS: dict[StatusClass, str] = {
    StatusClass.INTERNAL: "INTERNAL",
    StatusClass.INVALID_REQUEST: "INVALID_ARGUMENT",
    StatusClass.VALIDATION_FAILED: "INVALID_ARGUMENT",
    StatusClass.NOT_FOUND: "NOT_FOUND",
    StatusClass.ALREADY_EXISTS: "ALREADY_EXISTS",
    StatusClass.RACE_CONDITION: "ALREADY_EXISTS",
    StatusClass.UNAUTHENTICATED: "UNAUTHENTICATED",
    StatusClass.PERMISSION_DENIED: "PERMISSION_DENIED",
    StatusClass.RESOURCE_EXHAUSTED: "RESOURCE_EXHAUSTED",
    StatusClass.UNAVAILABLE: "UNAVAILABLE",
    StatusClass.DEADLINE_EXCEEDED: "DEADLINE_EXCEEDED",
    StatusClass.SOFT_ERROR: "OK",
}


def http_status(status_class: StatusClass | str) -> int:
    """Return the HTTP status code for one status class."""
    status = _HTTP_STATUS.get(coerce_status_class(status_class), _FALLBACK_HTTP_STATUS)
    return int(status)


def grpc_status(status_class: StatusClass | str) -> str:
    """Return the gRPC-style status name for one status class."""
    return _GRPC_STATUS.get(coerce_status_class(status_class), _FALLBACK_GRPC_STATUS)


def grpc_status_code(status_class: StatusClass | str) -> grpc.StatusCode:
    """Return the ``grpc.StatusCode`` member for one status class."""
    return grpc.StatusCode[grpc_status(status_class)]
