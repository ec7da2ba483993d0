"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_str
from .settings import (
    CACHE_MAX_ENTRIES_ENV,
    DYNAMIC_FAST_PATH_ENV,
    AccessorSettings,
    get_accessor_settings,
)

__all__ = [
    "AccessorSettings",
    "CACHE_MAX_ENTRIES_ENV",
    "ConfigurationError",
    "DYNAMIC_FAST_PATH_ENV",
    "env_bool",
    "env_int",
    "env_str",
    "get_accessor_settings",
]
