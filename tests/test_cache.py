"""Tests for DataCache and CacheRegistry."""

import threading

from hypothesis import given
from hypothesis import strategies as st

from localeloom.cache import MISSING, CacheRegistry, DataCache, get_cache_registry
from localeloom.specifier import LocaleSpecifier


class TestDataCache:
    """DataCache get/put/remove semantics."""

    def test_miss_returns_missing(self) -> None:
        """Never-stored keys read back as MISSING."""
        cache = DataCache()
        assert cache.get("info", "en") is MISSING
        assert not MISSING

    def test_none_is_a_value(self) -> None:
        """None records a confirmed absence and counts as an entry."""
        cache = DataCache()
        cache.put("info", "en", None)

        assert cache.get("info", "en") is None
        assert cache.contains("info", "en")
        assert cache.size() == 1

    def test_put_missing_deletes(self) -> None:
        """Storing MISSING removes the entry."""
        cache = DataCache()
        cache.put("info", "en", {"a": 1})
        cache.put("info", "en", MISSING)

        assert cache.get("info", "en") is MISSING
        assert cache.size() == 0

    def test_remove(self) -> None:
        """remove() deletes; removing an absent key changes nothing."""
        cache = DataCache()
        cache.put("info", "en", {"a": 1})
        cache.remove("info", "en")
        cache.remove("info", "fr")
        assert len(cache) == 0

    def test_overwrite_counts_once(self) -> None:
        """Overwriting a key does not grow the cache."""
        cache = DataCache()
        cache.put("info", "en", {"a": 1})
        cache.put("info", "en", {"a": 2})

        assert cache.size() == 1
        assert cache.get("info", "en") == {"a": 2}

    def test_locale_forms_share_a_key(self) -> None:
        """Tags, POSIX identifiers and specifiers address the same entry."""
        cache = DataCache()
        cache.put("info", "en_US", {"a": 1})

        assert cache.get("info", "en-US") == {"a": 1}
        assert cache.get("info", LocaleSpecifier(language="en", region="US")) == {"a": 1}

    def test_root_key(self) -> None:
        """None and "root" address the root entry."""
        cache = DataCache()
        cache.put("info", None, {"a": 1})
        assert cache.get("info", "root") == {"a": 1}

    def test_categories(self) -> None:
        """categories() lists categories with data for a locale."""
        cache = DataCache()
        cache.put("info", "en", {"a": 1})
        cache.put("dates", "en", None)
        cache.put("numbers", "de", {"b": 2})

        assert cache.categories("en") == frozenset({"info"})

    def test_stats(self) -> None:
        """Hits and misses are counted; contains() is not."""
        cache = DataCache("pkg")
        cache.put("info", "en", {"a": 1})
        cache.get("info", "en")
        cache.get("info", "fr")
        cache.contains("info", "de")

        stats = cache.get_stats()
        assert stats == {"size": 1, "hits": 1, "misses": 1, "hit_rate": 50.0}
        assert cache.hits == 1
        assert cache.misses == 1
        assert cache.name == "pkg"

    def test_clear_resets_stats(self) -> None:
        """clear() empties the cache and its statistics."""
        cache = DataCache()
        cache.put("info", "en", {"a": 1})
        cache.get("info", "en")
        cache.clear()

        assert cache.get_stats() == {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}

    def test_repr(self) -> None:
        """repr names the cache and its size."""
        assert repr(DataCache("pkg")) == "DataCache(name='pkg', size=0)"

    @given(
        st.lists(
            st.tuples(
                st.sampled_from(["info", "dates"]),
                st.sampled_from(["root", "en", "en-US"]),
                st.sampled_from([None, {"a": 1}, MISSING]),
            ),
            max_size=30,
        )
    )
    def test_counting_invariant(self, operations: list[tuple[str, str, object]]) -> None:
        """size() equals the number of keys whose last stored value is not MISSING."""
        cache = DataCache()
        latest: dict[tuple[str, str], object] = {}
        for category, locale, value in operations:
            cache.put(category, locale, value)
            latest[category, locale] = value

        assert cache.size() == sum(1 for value in latest.values() if value is not MISSING)

    def test_concurrent_puts(self) -> None:
        """Parallel writers never lose entries."""
        cache = DataCache()

        def writer(offset: int) -> None:
            for i in range(200):
                cache.put(f"cat{offset}-{i}", "en", i)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert cache.size() == 800


class TestCacheRegistry:
    """CacheRegistry singleton-per-identity and bookkeeping."""

    def test_consumer_cache_singleton(self) -> None:
        """The same name yields the same cache."""
        registry = CacheRegistry()
        first = registry.for_consumer("pkg")
        first.put("info", "en", {"a": 1})

        second = registry.for_consumer("pkg")
        assert second is first
        assert second.get("info", "en") == {"a": 1}
        assert registry.for_consumer("other") is not first

    def test_root_cache_singleton(self) -> None:
        """The same root yields the same cache, distinct from consumer caches."""
        registry = CacheRegistry()
        assert registry.for_root("/data") is registry.for_root("/data")
        assert registry.for_root("/data") is not registry.for_consumer("/data")

    def test_loaded_paths(self) -> None:
        """Probed paths are remembered; invalid paths are ignored."""
        registry = CacheRegistry()
        registry.mark_loaded("/data/en.json")
        registry.mark_loaded(None)
        registry.mark_loaded("")

        assert registry.is_loaded("/data/en.json")
        assert not registry.is_loaded("/data/fr.json")
        assert not registry.is_loaded(None)

    def test_manifests(self) -> None:
        """Unprobed roots read MISSING; roots without manifest read None."""
        registry = CacheRegistry()
        assert registry.manifest("/data") is MISSING

        registry.store_manifest("/data", None)
        registry.store_manifest("/other", frozenset({"en/info.json"}))

        assert registry.manifest("/data") is None
        assert registry.manifest("/other") == frozenset({"en/info.json"})

    def test_clear_keeps_instances(self) -> None:
        """clear() empties state but existing cache references stay live."""
        registry = CacheRegistry()
        cache = registry.for_consumer("pkg")
        cache.put("info", "en", {"a": 1})
        registry.for_root("/data").put("info", "en", None)
        registry.mark_loaded("/data/en.json")
        registry.store_manifest("/data", None)

        assert registry.size() == 2
        registry.clear()

        assert registry.size() == 0
        assert registry.for_consumer("pkg") is cache
        assert not registry.is_loaded("/data/en.json")
        assert registry.manifest("/data") is MISSING

    def test_reset_forgets_instances(self) -> None:
        """reset() hands out fresh caches afterwards."""
        registry = CacheRegistry()
        cache = registry.for_consumer("pkg")
        registry.reset()
        assert registry.for_consumer("pkg") is not cache

    def test_default_registry(self) -> None:
        """The process-wide registry is a singleton."""
        assert get_cache_registry() is get_cache_registry()
