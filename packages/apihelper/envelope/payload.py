"""Typed extraction of envelope payloads."""

from __future__ import annotations

from typing import Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .envelope import Response
from .errors import MissingPayloadError, PayloadDecodeError

T = TypeVar("T")


@overload
def read_data(response: Response, target: type[T]) -> T: ...


@overload
def read_data(response: Response, target: Any) -> Any: ...


def read_data(response: Response, target: Any) -> Any:
    """Validate ``response.data`` into ``target``.

    Raises the envelope's ``ResponseError`` when it reports failure, so a
    failed call never yields a default value. Text and byte payloads are
    parsed as JSON as-is; anything else is re-serialized first.

    Example::

        users = read_data(response, list[User])
    """
    response.raise_for_error()
    if response.data is None:
        raise MissingPayloadError(message="response data is nil")

    raw = response.data
    if isinstance(raw, (str, bytes, bytearray)):
        text = raw
    else:
        try:
            text = to_json(raw)
        except PydanticSerializationError as exc:
            raise PayloadDecodeError(
                message=f"failed to marshal response data: {exc}"
            ) from exc

    try:
        return TypeAdapter(target).validate_json(text)
    except ValidationError as exc:
        raise PayloadDecodeError(
            message=f"failed to unmarshal response data: {exc}"
        ) from exc
