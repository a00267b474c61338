"""Per-task logging context backed by ``contextvars``.

Values bound here are attached to every record emitted on the same thread or
asyncio task, which keeps request correlation out of individual log calls.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar("apihelper_log_context", default={})


def get_context() -> dict[str, str]:
    """Return a copy of the bound logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind values as strings; ``None`` values are skipped."""
    updated = {
        str(key): str(value) for key, value in values.items() if value is not None
    }
    if updated:
        _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **updated})


def clear_context(*keys: str) -> None:
    """Drop the given keys, or everything when no key is given."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    _LOG_CONTEXT.set(
        {key: value for key, value in _LOG_CONTEXT.get().items() if key not in keys}
    )


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of a ``with`` block."""
    token = _LOG_CONTEXT.set(dict(_LOG_CONTEXT.get()))
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)
