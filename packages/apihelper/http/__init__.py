"""Public HTTP adapter API for envelope producers and consumers."""

from .client import AsyncEnvelopeClient, EnvelopeClient
from .errors import HttpError, HttpRequestError
from .server import (
    create_app,
    envelope_response,
    install_error_handlers,
    respond_error,
    respond_ok,
)

__all__ = [
    "AsyncEnvelopeClient",
    "EnvelopeClient",
    "HttpError",
    "HttpRequestError",
    "create_app",
    "envelope_response",
    "install_error_handlers",
    "respond_error",
    "respond_ok",
]
