"""Public interface for the findroot configuration system."""

from __future__ import annotations

from .errors import ConfigurationError
from .loader import (
    clear_config_cache,
    get_config,
    load_config,
    locate_config_file,
    merge_configs,
    reload_config,
)
from .schema import FindRootConfig, parse_mode

__all__ = [
    "ConfigurationError",
    "clear_config_cache",
    "FindRootConfig",
    "get_config",
    "load_config",
    "locate_config_file",
    "merge_configs",
    "parse_mode",
    "reload_config",
]
