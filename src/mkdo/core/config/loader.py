"""
Config-file discovery and loading.

Searches from the working directory upward for the first file that
carries mkdo configuration, stopping after the home directory.  In each
directory the candidates are checked in this order::

    package.json      ("mkdo" key)
    .mkdorc           (JSON or YAML)
    .mkdorc.json
    .mkdorc.yaml
    .mkdorc.yml
    .mkdorc.toml
    pyproject.toml    ([tool.mkdo] table)

Empty files and manifests without an mkdo section are skipped.  Keys may be
written camelCase (``rootDepth``) or snake_case (``root_depth``); they are
normalised to snake_case.

Tags:
    mkdo, configuration, config-file, discovery, loader
"""

from __future__ import annotations

import json
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from mkdo.core.errors import ConfigError

SEARCH_PLACES: tuple[str, ...] = (
    "package.json",
    ".mkdorc",
    ".mkdorc.json",
    ".mkdorc.yaml",
    ".mkdorc.yml",
    ".mkdorc.toml",
    "pyproject.toml",
)

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class ConfigFile:
    """A discovered config file and its normalised values."""

    path: Path
    values: dict[str, Any] = field(default_factory=dict)


def find_config(start: Path | None = None, stop_dir: Path | None = None) -> ConfigFile | None:
    """Return the nearest config file above *start*, or None.

    Parameters
    ----------
    start:
        Directory to start from.  Defaults to cwd.
    stop_dir:
        Last directory searched.  Defaults to the user's home directory;
        when *start* is not below it the search runs to the filesystem root.
    """
    current = (start or Path.cwd()).resolve()
    stop = (stop_dir or Path.home()).resolve()

    for directory in (current, *current.parents):
        for name in SEARCH_PLACES:
            path = directory / name
            if not path.is_file():
                continue
            values = load_config_file(path)
            if values is not None:
                return ConfigFile(path=path, values=values)
        if directory == stop:
            break
    return None


def load_config_file(path: Path) -> dict[str, Any] | None:
    """Parse one candidate file.

    Returns None when the file holds no mkdo configuration.

    Raises:
        ConfigError: If the file cannot be read or parsed, or its mkdo
            section is not a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
        data = _parse(path, text)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot load config file '{path}': {e}", context={"path": str(path)}, cause=e) from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigError(
            f"config file '{path}' must contain a mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )
    return normalize_keys(data)


def _parse(path: Path, text: str) -> Any:
    # json.JSONDecodeError and tomllib.TOMLDecodeError are both ValueErrors
    if path.name == "package.json":
        manifest = json.loads(text)
        return manifest.get("mkdo") if isinstance(manifest, dict) else None
    if path.name == "pyproject.toml":
        return tomllib.loads(text).get("tool", {}).get("mkdo")
    if path.suffix == ".json":
        return json.loads(text) if text.strip() else None
    if path.suffix == ".toml":
        return tomllib.loads(text) or None
    return yaml.safe_load(text)


def normalize_keys(values: dict[str, Any]) -> dict[str, Any]:
    """Convert camelCase keys to snake_case (``rootDepth`` → ``root_depth``)."""
    return {_CAMEL_RE.sub("_", key).lower(): value for key, value in values.items()}


__all__ = [
    "ConfigFile",
    "SEARCH_PLACES",
    "find_config",
    "load_config_file",
    "normalize_keys",
]
