"""Process-wide memo of resolved static getters.

Entries are keyed by ``(type, name, case_sensitive)`` and hold either the
resolved getter or an ``Unresolved`` marker, so a type that lacks a property
is not rescanned either. The not-found policy is applied by callers at call
time and is not part of the key.

Unbounded mode (the default) never evicts: reads are plain dictionary lookups
and inserts use ``setdefault`` under a lock, so racing resolutions of one key
all return the first stored value. Bounded mode is an LRU over the same key
and takes the lock on reads as well.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, Union

from ..access_models import require_name, require_target
from .resolution import Unresolved
from .static_accessor import StaticAccessor

logger = logging.getLogger(__name__)

CacheKey = Tuple[type, str, bool]
CachedGetter = Union[Callable[[Any], Any], Unresolved]


@dataclass(frozen=True)
class CacheStats:
    hits: int
    misses: int
    size: int


class AccessorCache:
    """Memoizes static getter resolution per type, name and case policy."""

    def __init__(self, static_accessor: Optional[StaticAccessor] = None, *, max_entries: Optional[int] = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive (got {max_entries})")
        self._static = static_accessor if static_accessor is not None else StaticAccessor()
        self._max_entries = max_entries
        self._entries: Dict[Hashable, CachedGetter] = OrderedDict() if max_entries is not None else {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def max_entries(self) -> Optional[int]:
        return self._max_entries

    def resolve_static_getter(self, cls: type, name: str, case_sensitive: bool) -> CachedGetter:
        """Return the cached getter for *name* on *cls*, scanning on first use."""
        require_target(cls, "type")
        require_name(name)
        key: CacheKey = (cls, name, bool(case_sensitive))

        cached = self._lookup(key)
        if cached is not None:
            return cached

        resolved = self._resolve(cls, name, case_sensitive)
        return self._store(key, resolved)

    def _lookup(self, key: CacheKey) -> Optional[CachedGetter]:
        if self._max_entries is None:
            cached = self._entries.get(key)
            if cached is not None:
                self._hits += 1
            return cached
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)  # type: ignore[attr-defined]
                self._hits += 1
            return cached

    def _resolve(self, cls: type, name: str, case_sensitive: bool) -> CachedGetter:
        resolved = self._static.resolve_getter(cls, name, case_sensitive)
        if isinstance(resolved, Unresolved):
            logger.debug("No readable property %r on %s (%s)", name, cls.__qualname__, resolved.value)
            return resolved
        logger.debug("Resolved getter %r on %s", resolved.name, cls.__qualname__)
        return resolved.invoke_get

    def _store(self, key: CacheKey, resolved: CachedGetter) -> CachedGetter:
        with self._lock:
            self._misses += 1
            stored = self._entries.setdefault(key, resolved)
            if self._max_entries is not None:
                self._entries.move_to_end(key)  # type: ignore[attr-defined]
                while len(self._entries) > self._max_entries:
                    evicted, _ = self._entries.popitem(last=False)  # type: ignore[call-arg]
                    logger.debug("Evicted cached getter %r", evicted)
            return stored

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> CacheStats:
        """Hit counts are approximate under contention in unbounded mode."""
        with self._lock:
            return CacheStats(hits=self._hits, misses=self._misses, size=len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


__all__ = ["AccessorCache", "CacheKey", "CacheStats", "CachedGetter"]
