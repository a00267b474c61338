"""Public error classification API."""

from . import codes
from .chain import (
    as_classified,
    as_error_capability,
    as_grpc_error,
    as_http_error,
    is_caused_by,
    iter_error_chain,
)
from .exception import (
    BUILTIN_DEFAULT_OPTIONS,
    ClassifiedError,
    ErrorBuilder,
    ErrorFactory,
    ErrorOption,
    get_default_options,
    new,
    set_default_options,
    with_args,
    with_cause,
    with_code,
    with_details,
    with_message,
    with_status,
)
from .factories import (
    ERROR_ALREADY_EXISTS,
    ERROR_DEADLINE_EXCEEDED,
    ERROR_INTERNAL,
    ERROR_INVALID_REQUEST,
    ERROR_NOT_FOUND,
    ERROR_PERMISSION_DENIED,
    ERROR_RACE_CONDITION,
    ERROR_RESOURCE_EXHAUSTED,
    ERROR_SOFT_ERROR,
    ERROR_UNAUTHENTICATED,
    ERROR_UNAVAILABLE,
    ERROR_VALIDATION_FAILED,
    already_exists,
    custom_error,
    deadline_exceeded,
    internal,
    invalid_request,
    not_found,
    permission_denied,
    race_condition,
    resource_exhausted,
    soft_error,
    third_party,
    unauthenticated,
    unavailable,
    validation_failed,
    wrap,
)
from .grpc_adapter import abort_for_error
from .status import grpc_status, grpc_status_code, http_status
from .types import (
    ErrorCapability,
    GrpcErrorCapability,
    HttpErrorCapability,
    StatusClass,
    coerce_status_class,
)

__all__ = [
    "BUILTIN_DEFAULT_OPTIONS",
    "ClassifiedError",
    "ERROR_ALREADY_EXISTS",
    "ERROR_DEADLINE_EXCEEDED",
    "ERROR_INTERNAL",
    "ERROR_INVALID_REQUEST",
    "ERROR_NOT_FOUND",
    "ERROR_PERMISSION_DENIED",
    "ERROR_RACE_CONDITION",
    "ERROR_RESOURCE_EXHAUSTED",
    "ERROR_SOFT_ERROR",
    "ERROR_UNAUTHENTICATED",
    "ERROR_UNAVAILABLE",
    "ERROR_VALIDATION_FAILED",
    "ErrorBuilder",
    "ErrorCapability",
    "ErrorFactory",
    "ErrorOption",
    "GrpcErrorCapability",
    "HttpErrorCapability",
    "StatusClass",
    "abort_for_error",
    "already_exists",
    "as_classified",
    "as_error_capability",
    "as_grpc_error",
    "as_http_error",
    "codes",
    "coerce_status_class",
    "custom_error",
    "deadline_exceeded",
    "get_default_options",
    "grpc_status",
    "grpc_status_code",
    "http_status",
    "internal",
    "invalid_request",
    "is_caused_by",
    "iter_error_chain",
    "new",
    "not_found",
    "permission_denied",
    "race_condition",
    "resource_exhausted",
    "set_default_options",
    "soft_error",
    "third_party",
    "unauthenticated",
    "unavailable",
    "validation_failed",
    "with_args",
    "with_cause",
    "with_code",
    "with_details",
    "with_message",
    "with_status",
    "wrap",
]
