"""Convenience constructors pinned to one status class.

These bypass the process-wide default options: the status class is fixed by
the constructor and the caller supplies code, message, and cause. A missing
cause is synthesized from the status-class text so the value is never
causeless, and the rendered text is the cause's text.
"""

from __future__ import annotations

from .chain import as_classified
from .exception import ClassifiedError
from .types import StatusClass, coerce_status_class


def custom_error(
    status_class: StatusClass | str,
    code: str,
    message: str,
    cause: BaseException | None = None,
) -> ClassifiedError:
    """Create an error with an explicit status class, code, and message."""
    status_class = coerce_status_class(status_class)
    if cause is None:
        cause = Exception(str(getattr(status_class, "value", status_class)))
    return ClassifiedError(
        text=str(cause),
        status_class=status_class,
        code=code,
        message=message,
        cause=cause,
    )


def invalid_request(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create an ``INVALID_REQUEST`` error."""
    return custom_error(StatusClass.INVALID_REQUEST, code, message, cause)


def validation_failed(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create a ``VALIDATION_FAILED`` error."""
    return custom_error(StatusClass.VALIDATION_FAILED, code, message, cause)


def permission_denied(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create a ``PERMISSION_DENIED`` error."""
    return custom_error(StatusClass.PERMISSION_DENIED, code, message, cause)


def not_found(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create a ``NOT_FOUND`` error."""
    return custom_error(StatusClass.NOT_FOUND, code, message, cause)


def third_party(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create a ``THIRD_PARTY`` error."""
    return custom_error(StatusClass.THIRD_PARTY, code, message, cause)


def already_exists(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create an ``ALREADY_EXISTS`` error."""
    return custom_error(StatusClass.ALREADY_EXISTS, code, message, cause)


def soft_error(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create a ``SOFT_ERROR`` error."""
    return custom_error(StatusClass.SOFT_ERROR, code, message, cause)


def race_condition(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create a ``RACE_CONDITION`` error."""
    return custom_error(StatusClass.RACE_CONDITION, code, message, cause)


def resource_exhausted(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create a ``RESOURCE_EXHAUSTED`` error."""
    return custom_error(StatusClass.RESOURCE_EXHAUSTED, code, message, cause)


def unauthenticated(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create an ``UNAUTHENTICATED`` error."""
    return custom_error(StatusClass.UNAUTHENTICATED, code, message, cause)


def internal(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create an ``INTERNAL`` error."""
    return custom_error(StatusClass.INTERNAL, code, message, cause)


def unavailable(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create an ``UNAVAILABLE`` error."""
    return custom_error(StatusClass.UNAVAILABLE, code, message, cause)


def deadline_exceeded(code: str, message: str, cause: BaseException | None = None) -> ClassifiedError:
    """Create a ``DEADLINE_EXCEEDED`` error."""
    return custom_error(StatusClass.DEADLINE_EXCEEDED, code, message, cause)


def wrap(error: BaseException, message: str) -> ClassifiedError:
    """Prefix ``error`` with ``message`` while keeping its classification.

    The status class, code, and message come from the first classified error
    in ``error``'s chain; an unclassified chain is treated as ``INTERNAL``.
    ``error`` stays the cause, so ``is_caused_by`` still finds it.
    """
    classified = as_classified(error)
    if classified is None:
        return ClassifiedError(
            text=f"{message}: {error}",
            status_class=StatusClass.INTERNAL,
            code=StatusClass.INTERNAL.value,
            cause=error,
        )
    return ClassifiedError(
        text=f"{message}: {error}",
        status_class=classified.status_class,
        code=classified.code,
        message=classified.message,
        cause=error,
        details=classified.details,
    )


def _base(status_class: StatusClass, message: str) -> ClassifiedError:
    return custom_error(status_class, status_class.value, message)


# Shared identity targets for ``is_caused_by``; wrap them rather than raise them.
ERROR_INVALID_REQUEST = _base(StatusClass.INVALID_REQUEST, "Invalid request")
ERROR_VALIDATION_FAILED = _base(StatusClass.VALIDATION_FAILED, "Validation failed")
ERROR_PERMISSION_DENIED = _base(StatusClass.PERMISSION_DENIED, "Permission denied")
ERROR_NOT_FOUND = _base(StatusClass.NOT_FOUND, "Resource not found")
ERROR_ALREADY_EXISTS = _base(StatusClass.ALREADY_EXISTS, "Resource already exists")
ERROR_RACE_CONDITION = _base(StatusClass.RACE_CONDITION, "Race condition")
ERROR_RESOURCE_EXHAUSTED = _base(StatusClass.RESOURCE_EXHAUSTED, "Resource exhausted")
ERROR_UNAUTHENTICATED = _base(StatusClass.UNAUTHENTICATED, "Unauthenticated")
ERROR_INTERNAL = _base(StatusClass.INTERNAL, "Internal server error")
ERROR_UNAVAILABLE = _base(StatusClass.UNAVAILABLE, "Service unavailable")
ERROR_DEADLINE_EXCEEDED = _base(StatusClass.DEADLINE_EXCEEDED, "Deadline exceeded")
ERROR_SOFT_ERROR = _base(StatusClass.SOFT_ERROR, "Soft error")
