"""Process-wide configuration for encoding error envelopes.

``ResponseConfig`` is an immutable value; callers may pass one explicitly to
``failure``. The module-level instance is meant to be set once at startup.
Reconfiguring while requests are being encoded is last-writer-wins.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from packages.apihelper.errors import codes


@dataclass(frozen=True, slots=True)
class ResponseConfig:
    """Defaults applied when encoding errors into envelopes."""

    default_error_code: str = codes.INTERNAL_SERVER_ERROR
    default_error_message: str = codes.INTERNAL_SERVER_MESSAGE
    include_details: bool = True


_current = ResponseConfig()


def current_config() -> ResponseConfig:
    """Return the process-wide envelope configuration."""
    return _current


def set_config(config: ResponseConfig) -> None:
    """Replace the process-wide envelope configuration."""
    global _current
    _current = config


def configure(
    *,
    default_error_code: str | None = None,
    default_error_message: str | None = None,
    include_details: bool | None = None,
) -> ResponseConfig:
    """Override selected fields of the process-wide configuration.

    Fields left as ``None`` keep their current value. Returns the new config.
    """
    overrides = {
        name: value
        for name, value in (
            ("default_error_code", default_error_code),
            ("default_error_message", default_error_message),
            ("include_details", include_details),
        )
        if value is not None
    }
    set_config(replace(_current, **overrides))
    return _current
