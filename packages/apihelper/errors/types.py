"""Canonical error classification types.

``StatusClass`` is the protocol-agnostic failure taxonomy and the single
source of truth for transport mapping. The capability protocols describe the
minimal accessor surface any error value may expose, classified or not.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class StatusClass(str, Enum):
    """Closed set of failure categories shared across transports."""

    # System / infrastructure
    INTERNAL = "INTERNAL"
    UNAVAILABLE = "UNAVAILABLE"
    DEADLINE_EXCEEDED = "DEADLINE_EXCEEDED"
    THIRD_PARTY = "THIRD_PARTY"

    # Input / validation
    INVALID_REQUEST = "INVALID_REQUEST"
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # Authentication / authorization
    UNAUTHENTICATED = "UNAUTHENTICATED"
    PERMISSION_DENIED = "PERMISSION_DENIED"

    # Resources
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    RACE_CONDITION = "RACE_CONDITION"
    RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"

    # Application-level failure carried on a successful transport call
    SOFT_ERROR = "SOFT_ERROR"


def coerce_status_class(value: StatusClass | str) -> StatusClass | str:
    """Return the enum member for ``value`` or the raw string when unknown."""
    if isinstance(value, StatusClass):
        return value
    try:
        return StatusClass(value)
    except ValueError:
        return value


@runtime_checkable
class ErrorCapability(Protocol):
    """Error exposing a machine code and human message; ``str()`` is its text."""

    @property
    def code(self) -> str:
        """Return the machine-readable error code."""

    @property
    def message(self) -> str:
        """Return the human-readable message."""


@runtime_checkable
class HttpErrorCapability(ErrorCapability, Protocol):
    """Error that also knows its HTTP status code."""

    @property
    def http_status(self) -> int:
        """Return the HTTP status code for this error."""


@runtime_checkable
class GrpcErrorCapability(ErrorCapability, Protocol):
    """Error that also knows its gRPC-style status name."""

    @property
    def grpc_status(self) -> str:
        """Return the gRPC-style status name for this error."""
