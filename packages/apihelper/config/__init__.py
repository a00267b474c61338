"""Public configuration API."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ApihelperSettings,
    ErrorSettings,
    LoggingSettings,
    ResponseSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ApihelperSettings",
    "ErrorSettings",
    "LoggingSettings",
    "ResponseSettings",
    "load_settings",
]
