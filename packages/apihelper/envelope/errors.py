"""Errors raised while extracting payloads from envelopes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PayloadError(Exception):
    """Base error for payload extraction failures."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MissingPayloadError(PayloadError):
    """Successful envelope without a ``data`` value."""


@dataclass(frozen=True)
class PayloadDecodeError(PayloadError):
    """``data`` could not be serialized or validated into the target type."""
