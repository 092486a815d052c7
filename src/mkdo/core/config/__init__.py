"""
Configuration for mkdo: settings model plus config-file discovery.

Usage::

    from mkdo.core.config import get_settings

    settings = get_settings(cwd=Path("."), root_depth=2)
    options = settings.extract_options()
"""

from .loader import SEARCH_PLACES, ConfigFile, find_config, load_config_file, normalize_keys
from .settings import MkdoSettings, get_settings

__all__ = [
    "SEARCH_PLACES",
    "ConfigFile",
    "MkdoSettings",
    "find_config",
    "get_settings",
    "load_config_file",
    "normalize_keys",
]
