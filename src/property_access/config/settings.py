from __future__ import annotations

"""Accessor settings resolved from the environment."""


from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .errors import ConfigurationError
from .runtime import env_bool, env_int

CACHE_MAX_ENTRIES_ENV = "PROPERTY_ACCESS_CACHE_MAX_ENTRIES"
DYNAMIC_FAST_PATH_ENV = "PROPERTY_ACCESS_DYNAMIC_FAST_PATH"


@dataclass(frozen=True)
class AccessorSettings:
    """Tunables for the accessor subsystem.

    ``cache_max_entries`` of ``None`` keeps the getter cache unbounded for the
    life of the process; any positive value switches it to LRU eviction.
    """

    cache_max_entries: Optional[int] = None
    dynamic_fast_path: bool = True

    def __post_init__(self) -> None:
        if self.cache_max_entries is not None and self.cache_max_entries < 1:
            raise ConfigurationError.invalid_value(
                "cache_max_entries", self.cache_max_entries, "Must be a positive integer or unset"
            )


@lru_cache(maxsize=1)
def get_accessor_settings() -> AccessorSettings:
    max_entries = env_int(CACHE_MAX_ENTRIES_ENV)
    if max_entries is not None and max_entries < 1:
        raise ConfigurationError.invalid_value(CACHE_MAX_ENTRIES_ENV, max_entries, "Must be a positive integer or unset")
    fast_path = env_bool(DYNAMIC_FAST_PATH_ENV, or_value=True)
    return AccessorSettings(cache_max_entries=max_entries, dynamic_fast_path=bool(fast_path))
