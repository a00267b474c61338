"""Decode received bodies into envelopes without ever raising.

A body that is empty, not JSON, not an object, or whose fields have the
wrong types becomes a failed envelope with no error block, which the
envelope then reports as the ``UNKNOWN_ERROR`` sentinel.
"""

from __future__ import annotations

from pydantic import ValidationError

from packages.apihelper.logging import fields, get_logger, log_context

from .envelope import Response

_LOGGER = get_logger(__name__)


def decode(body: bytes | str | None, *, status_code: int | None = None) -> Response:
    """Parse one response body into a ``Response``.

    ``status_code`` is the transport status as seen by the client; it is
    recorded on the envelope when the body itself cannot be decoded.
    """
    if not body:
        reason = "empty_body"
    else:
        try:
            return Response.model_validate_json(body, strict=True)
        except ValidationError as exc:
            reason = str(exc.errors()[0].get("type", "invalid"))

    status = 0 if status_code is None else status_code
    with log_context(
        {
            fields.EVENT: fields.ENVELOPE_NORMALIZED_EVENT,
            fields.REASON: reason,
            fields.BODY_LENGTH: len(body or b""),
            fields.HTTP_STATUS: status,
        }
    ):
        _LOGGER.warning("Response body is not a decodable envelope")
    return Response(status=status, success=False)
