"""Settings loading entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import ApihelperSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ApihelperSettings:
    """Resolve settings, reading YAML from ``config_path`` when given.

    A missing YAML file is not an error; its layer is simply empty.
    """
    settings_cls: type[ApihelperSettings] = ApihelperSettings
    if config_path is not None:

        class _PathSettings(ApihelperSettings):
            model_config = SettingsConfigDict(yaml_file=Path(config_path))

        settings_cls = _PathSettings
    return settings_cls(**dict(cli_params or {}))
