"""
Centralized settings for mkdo.

:class:`MkdoSettings` is the single validated source for every option the
runner reads.  Values resolve in this order (first wins):

1. Explicit keyword overrides (the CLI passes its flags here)
2. ``MKDO_*`` environment variables
3. The nearest config file (see :mod:`mkdo.core.config.loader`)
4. Field defaults

Tags:
    mkdo, configuration, settings, pydantic, validation
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mkdo.core.errors import ConfigError
from mkdo.core.models import ExtractOptions

from .loader import find_config


class MkdoSettings(BaseSettings):
    """mkdo configuration.

    All fields can be set via ``MKDO_*`` environment variables (e.g.
    ``MKDO_ROOT_DEPTH=2``) or through a config file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MKDO_",
        extra="ignore",
    )

    # ── Task document ────────────────────────────────────────────
    file: Path = Field(default=Path("mkdo.md"), description="Markdown file containing tasks")
    root_depth: int = Field(default=1, description="Heading depth that marks a task root")
    root_pattern: str = Field(default="*", description="Glob selecting root headings")
    task_separator: str = Field(default=":", description="Separator for nested task names")

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="WARNING")
    log_format: Literal["console", "json"] | None = Field(
        default=None,
        description="None picks console on a terminal, JSON otherwise",
    )

    # ── Provenance ───────────────────────────────────────────────
    config_path: Path | None = Field(default=None, exclude=True)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {value!r}")
        return level

    def extract_options(self) -> ExtractOptions:
        """Options for :func:`mkdo.parser.extractor.extract`."""
        return ExtractOptions(
            root_depth=self.root_depth,
            root_pattern=self.root_pattern,
            task_separator=self.task_separator,
        )


def get_settings(cwd: Path | None = None, **overrides: Any) -> MkdoSettings:
    """Load and validate :class:`MkdoSettings`.

    Parameters
    ----------
    cwd:
        Directory the config-file search starts from.  Defaults to cwd.
    overrides:
        Highest-priority values; ``None`` values are ignored so callers can
        pass unset CLI flags straight through.

    Raises:
        ConfigError: If the config file is unreadable or any value is invalid.
    """
    config = find_config(cwd)

    file_values: dict[str, Any] = {}
    if config is not None:
        for key, value in config.values.items():
            if key not in MkdoSettings.model_fields or key == "config_path":
                continue
            # Real env vars beat the config file
            if f"MKDO_{key.upper()}" in os.environ:
                continue
            file_values[key] = value

    explicit = {key: value for key, value in overrides.items() if value is not None}

    try:
        return MkdoSettings(
            **{
                **file_values,
                **explicit,
                "config_path": config.path if config is not None else None,
            }
        )
    except ValidationError as e:
        source = f" (config file '{config.path}')" if config is not None else ""
        raise ConfigError(f"invalid configuration{source}: {e}", cause=e) from e


__all__ = ["MkdoSettings", "get_settings"]
