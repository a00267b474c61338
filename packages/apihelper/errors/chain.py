"""Cause-chain traversal and capability extraction.

Chains are walked outermost to innermost. A ``ClassifiedError`` continues
through its ``cause``; any other exception continues through ``__cause__``
(set by ``raise ... from ...``). Implicit ``__context__`` is not followed.
Extraction returns the first, i.e. outermost, error satisfying a capability.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from .exception import ClassifiedError
from .types import ErrorCapability, GrpcErrorCapability, HttpErrorCapability


def iter_error_chain(error: BaseException | None) -> Iterator[BaseException]:
    """Yield ``error`` and each of its causes, stopping on cycles."""
    seen: set[int] = set()
    current = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if isinstance(current, ClassifiedError):
            current = current.cause
        else:
            current = current.__cause__


def is_caused_by(
    error: BaseException | None,
    target: BaseException | type[BaseException],
) -> bool:
    """Return whether ``target`` appears anywhere in ``error``'s chain.

    An exception instance matches by identity; an exception type matches any
    instance of it.
    """
    for item in iter_error_chain(error):
        if isinstance(target, type):
            if isinstance(item, target):
                return True
        elif item is target:
            return True
    return False


def as_classified(error: BaseException | None) -> ClassifiedError | None:
    """Return the first ``ClassifiedError`` in the chain."""
    return _first(error, lambda item: isinstance(item, ClassifiedError))


def as_error_capability(error: BaseException | None) -> ErrorCapability | None:
    """Return the first error in the chain exposing code and message."""
    return _first(error, _has_error_capability)


def as_http_error(error: BaseException | None) -> HttpErrorCapability | None:
    """Return the first error in the chain that also exposes ``http_status``."""
    return _first(
        error,
        lambda item: _has_error_capability(item)
        and isinstance(item, HttpErrorCapability)
        and isinstance(item.http_status, int),
    )


def as_grpc_error(error: BaseException | None) -> GrpcErrorCapability | None:
    """Return the first error in the chain that also exposes ``grpc_status``."""
    return _first(
        error,
        lambda item: _has_error_capability(item)
        and isinstance(item, GrpcErrorCapability)
        and isinstance(item.grpc_status, str),
    )


def _has_error_capability(item: BaseException) -> bool:
    # Accessors must be values, not methods: grpc.RpcError exposes code().
    return (
        isinstance(item, ErrorCapability)
        and isinstance(item.code, str)
        and isinstance(item.message, str)
    )


def _first(error: BaseException | None, predicate: Callable[[BaseException], bool]) -> Any:
    for item in iter_error_chain(error):
        if predicate(item):
            return item
    return None
