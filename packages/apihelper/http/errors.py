"""Typed errors for the HTTP client adapter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpError(Exception):
    """Base error type for HTTP adapter failures."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class HttpRequestError(HttpError):
    """Request never produced a response (connect, timeout, protocol)."""

    method: str
    url: str
    cause: Exception | None = None
