"""Typed runtime settings.

Precedence: init params > ``APIHELPER_*`` environment > YAML file > model
defaults. Nested keys use ``__`` in environment variable names, for example
``APIHELPER_RESPONSE__INCLUDE_DETAILS=false``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from packages.apihelper.errors import StatusClass, codes

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "apihelper" / "apihelper.yaml"


class LoggingSettings(BaseModel):
    """Stdout logging setup."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "apihelper"
    environment: str = "dev"


class ResponseSettings(BaseModel):
    """Envelope encoding defaults for unclassified errors."""

    default_error_code: str = Field(default=codes.INTERNAL_SERVER_ERROR, min_length=1)
    default_error_message: str = codes.INTERNAL_SERVER_MESSAGE
    include_details: bool = True


class ErrorSettings(BaseModel):
    """Defaults applied to every newly constructed classified error."""

    default_status: StatusClass = StatusClass.INTERNAL


class ApihelperSettings(BaseSettings):
    """Root settings resolved from init, env, and YAML sources."""

    model_config = SettingsConfigDict(
        env_prefix="APIHELPER_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
        yaml_file=DEFAULT_CONFIG_PATH,
        yaml_file_encoding="utf-8",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    response: ResponseSettings = Field(default_factory=ResponseSettings)
    errors: ErrorSettings = Field(default_factory=ErrorSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use init > env > YAML; dotenv and secrets files are not read."""
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))
