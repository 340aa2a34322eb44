"""Thread-safe in-memory caches for locale data.

Architecture:
    - DataCache: (category, locale tag) -> data | None
    - CacheRegistry: hands out one DataCache per identity and tracks which
      files were already probed and which manifests were already read
    - Thread-safe using threading.RLock (reentrant lock)
    - Process-lifetime only; cleared explicitly, never expired

Value Semantics:
    A key that was never stored reads back as the MISSING sentinel. A key
    whose data is confirmed not to exist reads back as None. None counts as
    a live entry; storing MISSING deletes the entry.

Python 3.13+.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Final, final

from localeloom.specifier import LocaleSpecifier

__all__ = [
    "MISSING",
    "CacheRegistry",
    "DataCache",
    "get_cache_registry",
]

logger = logging.getLogger(__name__)


@final
class _Missing:
    """Sentinel type for "never looked up"."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

type _CacheKey = tuple[str, str]


def _locale_key(locale: LocaleSpecifier | str | None) -> str:
    return LocaleSpecifier.parse(locale).tag


class DataCache:
    """Cache of locale data keyed by category and locale.

    Transparent to caller - returns MISSING on cache miss.

    Attributes:
        hits: Number of lookups that found an entry (including None)
        misses: Number of lookups that returned MISSING
    """

    __slots__ = ("_data", "_hits", "_lock", "_misses", "_name")

    def __init__(self, name: str = "") -> None:
        """Initialize data cache.

        Args:
            name: Identity of the cache owner, used in log messages
        """
        self._name = name
        self._data: dict[_CacheKey, object] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    @property
    def name(self) -> str:
        """Identity this cache was created for."""
        return self._name

    def get(self, category: str, locale: LocaleSpecifier | str | None) -> object:
        """Get cached data.

        Thread-safe.

        Args:
            category: Data category (basename), e.g. "localeinfo"
            locale: Locale tag or specifier (None means root)

        Returns:
            Cached data, None if the data is known not to exist, or MISSING
        """
        key = (category, _locale_key(locale))
        with self._lock:
            if key in self._data:
                self._hits += 1
                return self._data[key]
            self._misses += 1
            return MISSING

    def put(self, category: str, locale: LocaleSpecifier | str | None, data: object) -> None:
        """Store data in cache.

        Thread-safe. Storing MISSING removes the entry; storing None records
        that the data does not exist.

        Args:
            category: Data category (basename)
            locale: Locale tag or specifier (None means root)
            data: Data to store, None, or MISSING
        """
        key = (category, _locale_key(locale))
        with self._lock:
            if data is MISSING:
                self._data.pop(key, None)
            else:
                self._data[key] = data

    def remove(self, category: str, locale: LocaleSpecifier | str | None) -> None:
        """Remove an entry. Equivalent to put(category, locale, MISSING)."""
        self.put(category, locale, MISSING)

    def contains(self, category: str, locale: LocaleSpecifier | str | None) -> bool:
        """Check whether an entry exists, even if its value is None.

        Does not count towards hit/miss statistics.
        """
        key = (category, _locale_key(locale))
        with self._lock:
            return key in self._data

    def categories(self, locale: LocaleSpecifier | str | None) -> frozenset[str]:
        """Categories holding non-None data for a locale."""
        tag = _locale_key(locale)
        with self._lock:
            return frozenset(
                category
                for (category, key_tag), value in self._data.items()
                if key_tag == tag and value is not None
            )

    def size(self) -> int:
        """Number of live entries (None values included)."""
        with self._lock:
            return len(self._data)

    def clear(self) -> None:
        """Clear all cached entries and reset statistics.

        Thread-safe.
        """
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe. Returns current metrics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._data),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"DataCache(name={self._name!r}, size={self.size()})"

    @property
    def hits(self) -> int:
        """Number of cache hits.

        Thread-safe.
        """
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses.

        Thread-safe.
        """
        with self._lock:
            return self._misses


class CacheRegistry:
    """Process-wide owner of every locale data cache.

    Two families of caches exist:

    - consumer caches hold merged results per (basename, requested locale)
      for one consumer (typically one package)
    - root caches hold the raw data of one specificity level per
      (basename, level tag) as found under one root

    Both are singletons per identity: asking twice for the same name returns
    the same DataCache, so repeated acquisition never resets state.

    The registry also remembers which file paths were already probed and the
    manifest of each root, so that no file is fetched twice.
    """

    __slots__ = ("_consumers", "_loaded", "_lock", "_manifests", "_roots")

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._lock = RLock()
        self._consumers: dict[str, DataCache] = {}
        self._roots: dict[str, DataCache] = {}
        self._loaded: set[str] = set()
        self._manifests: dict[str, frozenset[str] | None] = {}

    def for_consumer(self, name: str) -> DataCache:
        """Get the merged-result cache of a consumer, creating it on first use."""
        with self._lock:
            cache = self._consumers.get(name)
            if cache is None:
                logger.debug("Creating data cache for consumer %r", name)
                cache = self._consumers[name] = DataCache(name)
            return cache

    def for_root(self, root: str) -> DataCache:
        """Get the raw level-data cache of a root, creating it on first use."""
        with self._lock:
            cache = self._roots.get(root)
            if cache is None:
                logger.debug("Creating data cache for root %r", root)
                cache = self._roots[root] = DataCache(root)
            return cache

    def mark_loaded(self, path: str | None) -> None:
        """Record that a file path was probed. Invalid paths are ignored."""
        if not isinstance(path, str) or not path:
            return
        with self._lock:
            self._loaded.add(path)

    def is_loaded(self, path: str | None) -> bool:
        """Check whether a file path was already probed."""
        if not isinstance(path, str) or not path:
            return False
        with self._lock:
            return path in self._loaded

    def manifest(self, root: str) -> frozenset[str] | None | object:
        """Get the cached manifest of a root.

        Returns:
            Set of relative file paths, None if the root has no manifest,
            or MISSING if the manifest was never looked for
        """
        with self._lock:
            return self._manifests.get(root, MISSING)

    def store_manifest(self, root: str, files: frozenset[str] | None) -> None:
        """Cache the manifest of a root (None when the root has none)."""
        with self._lock:
            self._manifests[root] = files

    def size(self) -> int:
        """Total live entries across all caches."""
        with self._lock:
            caches = [*self._consumers.values(), *self._roots.values()]
        return sum(cache.size() for cache in caches)

    def clear(self) -> None:
        """Clear every cache, probed-file record and manifest.

        Cache instances stay registered, so consumers holding a reference
        observe the cleared state.
        """
        with self._lock:
            for cache in (*self._consumers.values(), *self._roots.values()):
                cache.clear()
            self._loaded.clear()
            self._manifests.clear()
        logger.debug("Locale data caches cleared")

    def reset(self) -> None:
        """Clear all state and forget every cache instance."""
        with self._lock:
            self.clear()
            self._consumers.clear()
            self._roots.clear()


_default_registry = CacheRegistry()


def get_cache_registry() -> CacheRegistry:
    """Get the process-wide cache registry."""
    return _default_registry
