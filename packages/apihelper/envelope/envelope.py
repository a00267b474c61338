"""Wire envelope carrying either a payload or a structured error block.

Wire shape::

    {
      "status": <int>,
      "success": <bool>,
      "data": <any, null on failure>,
      "error": {"code": ..., "message": ..., "detail": ..., "details": ...}
    }

``error`` is omitted when absent, and so are ``detail`` and ``details``.
Which half is meaningful is decided by ``success`` alone: a successful
envelope has no error even if an ``error`` block was received, and a failed
envelope without a usable block normalizes to the ``UNKNOWN_ERROR`` sentinel.
JSON ``null`` in a scalar field decodes as that field's zero value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator, model_validator
from pydantic_core import to_json

from packages.apihelper.errors import codes


class ErrorInfo(BaseModel):
    """Structured error block of a failed envelope."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    code: str = ""
    message: str = ""
    detail: str | None = None
    details: Any = None

    @field_validator("code", "message", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        """Decode JSON null as an empty string."""
        return "" if value is None else value

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when neither code nor detail is populated."""
        return not self.code and not self.detail


UNKNOWN_ERROR_INFO = ErrorInfo(code=codes.UNKNOWN_ERROR, detail=codes.UNKNOWN_DETAIL)


@dataclass(frozen=True, eq=False)
class ResponseError(Exception):
    """Client-side error recovered from a failed envelope.

    ``str()`` is the error detail, mirroring the server-side error text.
    """

    status: int
    code: str
    message: str
    detail: str = ""
    details: Any = None

    def __str__(self) -> str:
        return self.detail

    @property
    def http_status(self) -> int:
        """Return the transport status recorded in the envelope."""
        return self.status

    @property
    def is_unknown(self) -> bool:
        """Return ``True`` when this is the normalization sentinel."""
        return self.code == codes.UNKNOWN_ERROR


class Response(BaseModel):
    """Canonical JSON response envelope.

    Missing fields default to their zero values so that a peer that omits
    them still decodes, then normalizes as a failure.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    status: int = 0
    success: bool = False
    data: Any = None
    error: ErrorInfo | None = None

    @model_validator(mode="before")
    @classmethod
    def _drop_error_on_success(cls, value: object) -> object:
        """Ignore any error block carried by a successful envelope."""
        if isinstance(value, dict) and value.get("success") is True:
            return {key: item for key, item in value.items() if key != "error"}
        return value

    @field_validator("status", "success", mode="before")
    @classmethod
    def _null_as_zero(cls, value: object, info: ValidationInfo) -> object:
        """Decode JSON null as the field's zero value."""
        if value is None:
            return 0 if info.field_name == "status" else False
        return value

    @property
    def ok(self) -> bool:
        """Return ``True`` when the envelope reports success."""
        return self.success

    @property
    def has_data(self) -> bool:
        """Return ``True`` when a payload is present."""
        return self.data is not None

    @property
    def http_status(self) -> int:
        """Return the transport status recorded in the envelope."""
        return self.status

    @property
    def error_info(self) -> ErrorInfo | None:
        """Return the normalized error block, or ``None`` on success."""
        if self.success:
            return None
        if self.error is None or self.error.is_empty:
            return UNKNOWN_ERROR_INFO
        return self.error

    @property
    def code(self) -> str:
        """Return the normalized error code, empty on success."""
        info = self.error_info
        return "" if info is None else info.code

    @property
    def message(self) -> str:
        """Return the normalized error message, empty on success."""
        info = self.error_info
        return "" if info is None else info.message

    @property
    def detail(self) -> str:
        """Return the normalized error detail, empty on success."""
        info = self.error_info
        return "" if info is None or info.detail is None else info.detail

    def err(self) -> ResponseError | None:
        """Return the envelope's error, or ``None`` when it reports success."""
        info = self.error_info
        if info is None:
            return None
        return ResponseError(
            status=self.status,
            code=info.code,
            message=info.message,
            detail=info.detail or "",
            details=info.details,
        )

    def raise_for_error(self) -> None:
        """Raise the envelope's ``ResponseError`` when it reports failure."""
        error = self.err()
        if error is not None:
            raise error

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-compatible wire mapping."""
        wire = self.model_dump(mode="json", exclude={"error"})
        if self.error is not None:
            wire["error"] = self.error.model_dump(mode="json", exclude_none=True)
        return wire

    def to_json(self) -> bytes:
        """Return the UTF-8 encoded wire body."""
        return to_json(self.to_wire())
