"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (SMARTTOC__TOC__MIN_HEADINGS=2)
  3. smarttoc.yaml          (searched in cwd, then platform config dir)
  4. Hardcoded defaults

The config file is optional — all fields have sensible defaults. Invalid values
are rejected here, at load time, rather than silently degrading at render time.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from smarttoc.errors import ErrorCode, SmartTocError
from smarttoc.models.context import Position

CONFIG_FILE_NAME = "smarttoc.yaml"
DEFAULT_TITLE = "Table of Contents"


def _find_config_file() -> str | None:
    """Return the path of the first smarttoc.yaml found, or None."""
    candidates = [
        Path(CONFIG_FILE_NAME),
        Path(platformdirs.user_config_dir("smarttoc")) / CONFIG_FILE_NAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class TocSettings(BaseModel):
    post_types: list[str] = ["post", "page"]
    min_headings: int = Field(default=3, ge=1)
    position: Position = Position.BEFORE_FIRST_HEADING
    title: str = DEFAULT_TITLE
    # Hex digits kept from the md5 digest when a heading has no usable slug
    hash_length: int = Field(default=8, ge=4, le=32)


class ClientSettings(BaseModel):
    """Values forwarded untouched to the client-side script and stylesheet."""

    scroll_offset: int = Field(default=100, ge=0, le=500)
    smooth_scroll: bool = True
    custom_css: str = ""


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: SMARTTOC__TOC__POSITION=top
        env_prefix="SMARTTOC__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    toc: TocSettings = TocSettings()
    client: ClientSettings = ClientSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )


def load_settings(**overrides: Any) -> Settings:
    """Build Settings, turning validation failures into SmartTocError."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
        raise SmartTocError(
            code=ErrorCode.INVALID_CONFIG,
            message=f"Invalid configuration: {fields}",
            suggestion=(
                "Check smarttoc.yaml and SMARTTOC__* environment variables: "
                "toc.min_headings >= 1, toc.position is 'top' or 'before_first_heading', "
                "client.scroll_offset between 0 and 500."
            ),
            recoverable=False,
        ) from exc
