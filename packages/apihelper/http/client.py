"""Envelope-aware HTTP clients over httpx.

Every response body is decoded through ``decode``, whatever its status, so
callers always get a ``Response`` back and branch on ``err()`` rather than on
HTTP status. Only transport failures raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import httpx

from packages.apihelper.envelope import Response, decode, read_data

from .errors import HttpRequestError

T = TypeVar("T")


def _request_error(exc: httpx.RequestError, method: str, url: str) -> HttpRequestError:
    try:
        request_method, request_url = exc.request.method, str(exc.request.url)
    except RuntimeError:
        # Raised by httpx when the error was created without a request.
        request_method, request_url = method.upper(), url
    return HttpRequestError(
        message=f"HTTP request failed for {request_method} {request_url}",
        method=request_method,
        url=request_url,
        cause=exc,
    )


def _decode(response: httpx.Response) -> Response:
    return decode(response.content, status_code=response.status_code)


class EnvelopeClient:
    """Synchronous client returning decoded envelopes."""

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout_seconds: float = 10.0,
        headers: Mapping[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=dict(headers or {}),
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying client when this wrapper created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> EnvelopeClient:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def request(self, method: str, url: str, **kwargs: Any) -> Response:
        """Issue one request and decode its body."""
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            raise _request_error(exc, method, url) from exc
        return _decode(response)

    def get(self, url: str, **kwargs: Any) -> Response:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> Response:
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> Response:
        return self.request("PUT", url, **kwargs)

    def patch(self, url: str, **kwargs: Any) -> Response:
        return self.request("PATCH", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> Response:
        return self.request("DELETE", url, **kwargs)

    def get_data(self, url: str, target: type[T], **kwargs: Any) -> T:
        """GET ``url`` and validate the payload into ``target``."""
        return read_data(self.get(url, **kwargs), target)


class AsyncEnvelopeClient:
    """Asynchronous client returning decoded envelopes."""

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout_seconds: float = 10.0,
        headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=dict(headers or {}),
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying client when this wrapper created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncEnvelopeClient:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def request(self, method: str, url: str, **kwargs: Any) -> Response:
        """Issue one request and decode its body."""
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            raise _request_error(exc, method, url) from exc
        return _decode(response)

    async def get(self, url: str, **kwargs: Any) -> Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> Response:
        return await self.request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> Response:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> Response:
        return await self.request("DELETE", url, **kwargs)

    async def get_data(self, url: str, target: type[T], **kwargs: Any) -> T:
        """GET ``url`` and validate the payload into ``target``."""
        return read_data(await self.get(url, **kwargs), target)
