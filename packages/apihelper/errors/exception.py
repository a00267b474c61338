"""Classified error value and its option-based construction pipeline.

Construction starts from an empty builder holding the raw text, applies the
factory's default options in registration order, then the caller's options
in call order. Each option overwrites the fields it touches, so instance
options always win over defaults. When a cause is attached, the rendered
text becomes ``"<text>: <cause>"``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .status import grpc_status, http_status
from .types import StatusClass, coerce_status_class


@dataclass(frozen=True, eq=False)
class ClassifiedError(Exception):
    """Immutable error carrying a status class, machine code, and message."""

    text: str
    status_class: StatusClass | str = StatusClass.INTERNAL
    code: str = ""
    message: str = ""
    cause: BaseException | None = None
    details: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "__cause__", self.cause)

    def __str__(self) -> str:
        return self.text

    @property
    def http_status(self) -> int:
        """Return the HTTP status code derived from the status class."""
        return http_status(self.status_class)

    @property
    def grpc_status(self) -> str:
        """Return the gRPC-style status name derived from the status class."""
        return grpc_status(self.status_class)

    @property
    def detail(self) -> str:
        """Return the rendered error text."""
        return self.text


@dataclass
class ErrorBuilder:
    """Mutable construction state that options write into."""

    text: str
    status_class: StatusClass | str = ""
    code: str = ""
    message: str = ""
    cause: BaseException | None = None
    details: Any = None

    def build(self) -> ClassifiedError:
        """Freeze the builder into a ``ClassifiedError``."""
        text = self.text
        if self.cause is not None:
            text = f"{text}: {self.cause}"
        status_class = coerce_status_class(self.status_class)
        code = self.code or str(getattr(status_class, "value", status_class))
        return ClassifiedError(
            text=text,
            status_class=status_class,
            code=code,
            message=self.message,
            cause=self.cause,
            details=self.details,
        )


ErrorOption = Callable[[ErrorBuilder], None]


def with_status(status_class: StatusClass | str) -> ErrorOption:
    """Set the status class."""

    def apply(builder: ErrorBuilder) -> None:
        builder.status_class = status_class

    return apply


def with_code(code: str) -> ErrorOption:
    """Set the machine-readable code."""

    def apply(builder: ErrorBuilder) -> None:
        builder.code = code

    return apply


def with_message(message: str) -> ErrorOption:
    """Set the human-readable message."""

    def apply(builder: ErrorBuilder) -> None:
        builder.message = message

    return apply


def with_cause(cause: BaseException | None) -> ErrorOption:
    """Attach an underlying cause; ``None`` leaves the builder untouched."""

    def apply(builder: ErrorBuilder) -> None:
        if cause is None:
            return
        builder.cause = cause

    return apply


def with_args(*args: object) -> ErrorOption:
    """Format the text ``%``-style against positional arguments."""

    def apply(builder: ErrorBuilder) -> None:
        builder.text = builder.text % args

    return apply


def with_details(details: Any) -> ErrorOption:
    """Attach structured context carried as ``error.details`` on the wire."""

    def apply(builder: ErrorBuilder) -> None:
        builder.details = details

    return apply


class ErrorFactory:
    """Builds classified errors on top of an explicit default option list."""

    def __init__(self, defaults: Iterable[ErrorOption] = ()) -> None:
        self._defaults: tuple[ErrorOption, ...] = tuple(defaults)

    @property
    def defaults(self) -> tuple[ErrorOption, ...]:
        """Return the default options in application order."""
        return self._defaults

    def set_defaults(self, *options: ErrorOption) -> None:
        """Replace the default options."""
        self._defaults = tuple(options)

    def new(self, text: str, *options: ErrorOption) -> ClassifiedError:
        """Build one error: defaults first, then ``options``."""
        builder = ErrorBuilder(text=text)
        for option in self._defaults:
            option(builder)
        for option in options:
            option(builder)
        return builder.build()


BUILTIN_DEFAULT_OPTIONS: tuple[ErrorOption, ...] = (with_status(StatusClass.INTERNAL),)

_DEFAULT_FACTORY = ErrorFactory(BUILTIN_DEFAULT_OPTIONS)


def new(text: str, *options: ErrorOption) -> ClassifiedError:
    """Build one error with the process-wide default options."""
    return _DEFAULT_FACTORY.new(text, *options)


def set_default_options(*options: ErrorOption) -> None:
    """Replace the process-wide default options.

    Meant for process startup. Concurrent reconfiguration is last-writer-wins.
    """
    _DEFAULT_FACTORY.set_defaults(*options)


def get_default_options() -> tuple[ErrorOption, ...]:
    """Return the process-wide default options."""
    return _DEFAULT_FACTORY.defaults
