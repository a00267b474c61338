"""Public response envelope API."""

from .builders import failure, success
from .decode import decode
from .defaults import ResponseConfig, configure, current_config, set_config
from .envelope import UNKNOWN_ERROR_INFO, ErrorInfo, Response, ResponseError
from .errors import MissingPayloadError, PayloadDecodeError, PayloadError
from .payload import read_data

__all__ = [
    "ErrorInfo",
    "MissingPayloadError",
    "PayloadDecodeError",
    "PayloadError",
    "Response",
    "ResponseConfig",
    "ResponseError",
    "UNKNOWN_ERROR_INFO",
    "configure",
    "current_config",
    "decode",
    "failure",
    "read_data",
    "set_config",
    "success",
]
