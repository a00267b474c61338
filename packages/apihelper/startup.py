"""Process startup: push resolved settings into the process-wide defaults.

This is the one place that mutates global state. Call it once, before
serving requests.
"""

from __future__ import annotations

from packages.apihelper.config import ApihelperSettings, load_settings
from packages.apihelper.envelope import ResponseConfig, set_config
from packages.apihelper.errors import set_default_options, with_status
from packages.apihelper.logging import configure_logging, get_logger

_LOGGER = get_logger(__name__)


def apply_settings(settings: ApihelperSettings | None = None) -> ApihelperSettings:
    """Configure logging, envelope defaults, and error defaults.

    Loads settings from the environment and default YAML path when none are
    given. Returns the settings that were applied.
    """
    settings = settings or load_settings()

    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )
    set_config(
        ResponseConfig(
            default_error_code=settings.response.default_error_code,
            default_error_message=settings.response.default_error_message,
            include_details=settings.response.include_details,
        )
    )
    set_default_options(with_status(settings.errors.default_status))

    _LOGGER.info(
        "apihelper defaults applied (default_status=%s, include_details=%s)",
        settings.errors.default_status.value,
        settings.response.include_details,
    )
    return settings
