"""Locale data resolution and caching.

LocaleData answers one question: what is the data of category "basename"
for a locale? It walks every root (global roots first, its own root last)
and every level of the locale's specificity chain, loads whatever files
exist, and merges them from least to most specific.

Architecture:
    The resolution logic is written once, as a generator that yields the
    batches of paths it needs and receives their contents. Two drivers run
    it: one feeds it Loader.load_files() (blocking), the other awaits
    Loader.load_files_async() (concurrent). Contents always come back in
    request order, so merge order never depends on I/O completion order.

File Layout (per root):
    <root>/localemanifest.json          optional index of existing files
    <root>/<tag>.json                   whole-locale file
    <root>/<basename>.json              root-level data
    <root>/<lang|und>/[<script>/][<region>/][<variant>/]<basename>.json

Caching:
    Raw data of each (root, basename, level) lives in the per-root caches of
    the CacheRegistry; merged results live in the consumer cache under the
    exact requested locale. A confirmed absence is cached as None and never
    retried until the caches are cleared.

Python 3.13+.
"""

from __future__ import annotations

import copy
import logging
import posixpath
from collections.abc import Coroutine, Generator, Mapping, Sequence
from dataclasses import dataclass, replace
from pathlib import PurePosixPath
from threading import Lock

from localeloom.cache import MISSING, CacheRegistry, DataCache, get_cache_registry
from localeloom.codecs import decode, decode_value
from localeloom.config import LocaleDataConfig
from localeloom.constants import CONCAT_ARRAYS_SUFFIX, CROSS_ROOTS_SUFFIX
from localeloom.enums import MergeMode
from localeloom.errors import ConfigurationError, DecodeError, LoaderUnavailableError
from localeloom.loading import FileLoader, Loader
from localeloom.locale_utils import get_system_locale, likely_locale
from localeloom.merge import merge
from localeloom.registry import RootRegistry, get_root_registry
from localeloom.specifier import LocaleSpecifier, get_sublocales

__all__ = [
    "LocaleData",
    "clear_locale_data",
    "get_locale_data",
]

logger = logging.getLogger(__name__)

type LocaleDict = dict[str, object]
type LocaleInput = LocaleSpecifier | str | None

# A resolution yields batches of paths and is sent back their contents
type Resolution[T] = Generator[list[str], list[object | None], T]

# Per-call fragment store used when caching is disabled
type _LocalFragments = dict[tuple[str, str, str], LocaleDict | None]


@dataclass(frozen=True, slots=True)
class _Request:
    """Validated arguments of one load_data call."""

    basename: str
    locale: LocaleSpecifier
    mode: MergeMode
    concat_arrays: bool

    @property
    def category(self) -> str:
        """Consumer cache category; results of different merge options never alias."""
        category = self.basename
        if self.mode is MergeMode.CROSS_ROOTS:
            category += CROSS_ROOTS_SUFFIX
        if self.concat_arrays:
            category += CONCAT_ARRAYS_SUFFIX
        return category

    @property
    def cacheable(self) -> bool:
        return self.mode in (MergeMode.CASCADE, MergeMode.CROSS_ROOTS)


def _run_sync[T](resolution: Resolution[T], loader: Loader) -> T:
    """Drive a resolution to completion with blocking loads."""
    try:
        batch = next(resolution)
        while True:
            batch = resolution.send(loader.load_files(batch))
    except StopIteration as stop:
        return stop.value


async def _run_async[T](resolution: Resolution[T], loader: Loader) -> T:
    """Drive a resolution to completion with concurrent loads."""
    try:
        batch = next(resolution)
        while True:
            batch = resolution.send(await loader.load_files_async(batch))
    except StopIteration as stop:
        return stop.value


def _select_mode(*, most_specific: bool, return_one: bool, cross_roots: bool) -> MergeMode:
    if most_specific and return_one:
        msg = "most_specific and return_one cannot be combined"
        raise ConfigurationError(msg)
    if cross_roots and (most_specific or return_one):
        msg = "cross_roots cannot be combined with most_specific or return_one"
        raise ConfigurationError(msg)
    if most_specific:
        return MergeMode.MOST_SPECIFIC
    if return_one:
        return MergeMode.FIRST_FOUND
    if cross_roots:
        return MergeMode.CROSS_ROOTS
    return MergeMode.CASCADE


def _validate_basename(basename: object) -> str:
    """Validate a category name used to build file paths.

    Raises:
        ConfigurationError: If the basename is empty, padded with whitespace,
            absolute, or contains path traversal sequences
    """
    if not isinstance(basename, str) or not basename:
        msg = "basename must be a non-empty string"
        raise ConfigurationError(msg)
    if basename.strip() != basename:
        msg = f"basename contains leading/trailing whitespace: {basename!r}"
        raise ConfigurationError(msg)
    if basename.startswith(("/", "\\")) or PurePosixPath(basename).is_absolute():
        msg = f"Leading path separator not allowed in basename: {basename!r}"
        raise ConfigurationError(msg)
    if ".." in basename:
        msg = f"Path traversal sequences not allowed in basename: {basename!r}"
        raise ConfigurationError(msg)
    return basename


def _normalize_entry(entry: str) -> str:
    return posixpath.normpath(entry.replace("\\", "/")).lstrip("/")


class LocaleData:
    """Loads locale data for one consumer.

    Each consumer (typically one package) owns a private root holding the
    data it ships. Roots registered globally outrank the private root, most
    recently added first, so applications can override package data.

    Example:
        >>> config = LocaleDataConfig(sync=True)
        >>> locale_data = LocaleData("./locale", name="mypackage", config=config)
        >>> locale_data.load_data("localeinfo", "de-DE")
        {'clock': '24', 'currency': 'EUR'}
        >>> await locale_data.load_data_async("localeinfo", "en-US")
        {'clock': '12', 'currency': 'USD'}

    Thread Safety:
        Instances hold no mutable state of their own; shared state lives in
        the RootRegistry and CacheRegistry, both guarded by locks.
    """

    __slots__ = ("_caches", "_config", "_loader", "_name", "_path", "_roots")

    def __init__(
        self,
        path: str,
        *,
        name: str | None = None,
        loader: Loader | None = None,
        config: LocaleDataConfig | None = None,
        root_registry: RootRegistry | None = None,
        cache_registry: CacheRegistry | None = None,
    ) -> None:
        """Initialize locale data access.

        Args:
            path: Private root of this consumer
            name: Consumer identity for the merged-result cache (default: path)
            loader: File loader (default: FileLoader())
            config: Options (default: LocaleDataConfig())
            root_registry: Global roots (default: process-wide registry)
            cache_registry: Caches (default: process-wide registry)

        Raises:
            ConfigurationError: If path is missing or empty, or name is empty
        """
        if not isinstance(path, str) or not path:
            msg = "LocaleData requires a non-empty path to its locale data"
            raise ConfigurationError(msg)
        if name is not None and (not isinstance(name, str) or not name):
            msg = "LocaleData name must be a non-empty string when given"
            raise ConfigurationError(msg)

        self._path = path
        self._name = name if name is not None else path
        self._loader = loader if loader is not None else FileLoader()
        self._config = config if config is not None else LocaleDataConfig()
        self._roots = root_registry if root_registry is not None else get_root_registry()
        self._caches = cache_registry if cache_registry is not None else get_cache_registry()

    @property
    def name(self) -> str:
        """Consumer identity."""
        return self._name

    @property
    def loader(self) -> Loader:
        """Loader used to fetch files."""
        return self._loader

    @property
    def config(self) -> LocaleDataConfig:
        """Configuration of this instance."""
        return self._config

    def get_path(self) -> str:
        """Private root of this consumer."""
        return self._path

    def get_roots(self) -> list[str]:
        """Roots probed for data, highest precedence first.

        Read from the root registry on every call, so roots added after this
        instance was created are honored.
        """
        roots = [*self._roots.roots, self._path]
        return list(dict.fromkeys(roots))

    def is_sync(self) -> bool:
        """True if load_data() operates synchronously by default."""
        return self._config.sync and self._loader.supports_sync()

    def __repr__(self) -> str:
        return f"LocaleData(path={self._path!r}, name={self._name!r}, sync={self.is_sync()})"

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_data(
        self,
        basename: str,
        locale: LocaleInput = None,
        *,
        sync: bool | None = None,
        most_specific: bool = False,
        return_one: bool = False,
        cross_roots: bool = False,
        concat_arrays: bool | None = None,
    ) -> LocaleDict | None | Coroutine[object, object, LocaleDict | None]:
        """Load the data of a category for a locale.

        Arguments are validated immediately, even in asynchronous mode.

        Args:
            basename: Data category ("localeinfo")
            locale: Target locale (default: system locale; "root" for root)
            sync: Load synchronously (default: is_sync())
            most_specific: Return only the most specific level's own data
            return_one: Return only the least specific level's own data
            cross_roots: Merge every root's data within each level
            concat_arrays: Concatenate lists when merging (default: config)

        Returns:
            The data, or None when nothing exists; a coroutine producing the
            same when loading asynchronously

        Raises:
            ConfigurationError: If an argument is invalid or the mode flags
                conflict
            LoaderUnavailableError: If loading synchronously with a loader
                that cannot, and the cache cannot answer
        """
        request = self._prepare(
            basename, locale, most_specific, return_one, cross_roots, concat_arrays
        )
        use_sync = self.is_sync() if sync is None else sync
        if use_sync:
            return self._load_sync(request)
        return self._load_async(request)

    def load_data_sync(
        self,
        basename: str,
        locale: LocaleInput = None,
        *,
        most_specific: bool = False,
        return_one: bool = False,
        cross_roots: bool = False,
        concat_arrays: bool | None = None,
    ) -> LocaleDict | None:
        """Load the data of a category synchronously. See load_data()."""
        request = self._prepare(
            basename, locale, most_specific, return_one, cross_roots, concat_arrays
        )
        return self._load_sync(request)

    async def load_data_async(
        self,
        basename: str,
        locale: LocaleInput = None,
        *,
        most_specific: bool = False,
        return_one: bool = False,
        cross_roots: bool = False,
        concat_arrays: bool | None = None,
    ) -> LocaleDict | None:
        """Load the data of a category asynchronously. See load_data()."""
        request = self._prepare(
            basename, locale, most_specific, return_one, cross_roots, concat_arrays
        )
        return await self._load_async(request)

    def _prepare(
        self,
        basename: object,
        locale: LocaleInput,
        most_specific: bool,
        return_one: bool,
        cross_roots: bool,
        concat_arrays: bool | None,
    ) -> _Request:
        mode = _select_mode(
            most_specific=most_specific, return_one=return_one, cross_roots=cross_roots
        )
        if locale is None:
            locale = get_system_locale()
        return _Request(
            basename=_validate_basename(basename),
            locale=LocaleSpecifier.parse(locale),
            mode=mode,
            concat_arrays=(
                self._config.concat_arrays if concat_arrays is None else concat_arrays
            ),
        )

    def _load_sync(self, request: _Request) -> LocaleDict | None:
        cached = self._cached_result(request)
        if cached is not MISSING:
            return copy.deepcopy(cached)

        fetch = self._loader.supports_sync()
        if not fetch:
            request = self._cache_only_request(request)
        return _run_sync(self._resolve(request, fetch=fetch), self._loader)

    async def _load_async(self, request: _Request) -> LocaleDict | None:
        cached = self._cached_result(request)
        if cached is not MISSING:
            return copy.deepcopy(cached)
        return await _run_async(self._resolve(request, fetch=True), self._loader)

    def _merged_cache(self) -> DataCache:
        return self._caches.for_consumer(self._name)

    def _cached_result(self, request: _Request) -> object:
        if not (self._config.use_cache and request.cacheable):
            return MISSING
        cached = self._merged_cache().get(request.category, request.locale)
        logger.debug(
            "Cache %s: %s/%s",
            "miss" if cached is MISSING else "hit",
            request.category,
            request.locale.tag,
        )
        return cached

    def _cache_only_request(self, request: _Request) -> _Request:
        """Pick the locale a cache-only synchronous load can answer for.

        Raises:
            LoaderUnavailableError: If neither the locale nor its likely
                locale has anything cached
        """
        if self.check_cache(request.locale, request.basename):
            return request
        likely = LocaleSpecifier.parse(likely_locale(request.locale.tag))
        if likely != request.locale and self.check_cache(likely, request.basename):
            logger.debug(
                "Answering %s from cached data of likely locale %s",
                request.locale.tag,
                likely.tag,
            )
            return replace(request, locale=likely)
        msg = (
            f"Cannot load {request.basename!r} for {request.locale.tag} synchronously: "
            f"{type(self._loader).__name__} does not support synchronous loading "
            "and the data is not cached. Call ensure_locale() first."
        )
        raise LoaderUnavailableError(msg)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _resolve(self, request: _Request, *, fetch: bool) -> Resolution[LocaleDict | None]:
        """Find, merge and cache the data for one request.

        With fetch=False nothing is loaded: data not already cached counts as
        absent, and neither that absence nor the result is cached.
        """
        use_cache = self._config.use_cache
        local: _LocalFragments | None = None if use_cache else {}
        roots = self.get_roots()
        levels = get_sublocales(request.locale)

        if fetch:
            yield from self._load_manifests(roots)
            yield from self._load_whole_locales(roots, levels, local)

        table: dict[tuple[str, str], LocaleDict | None] = {}
        probes: list[tuple[str, LocaleSpecifier, list[str]]] = []
        complete = True

        for level in levels:
            for root in roots:
                data = self._lookup_fragment(root, request.basename, level, local)
                if data is not MISSING:
                    table[root, level.tag] = data
                elif not fetch:
                    table[root, level.tag] = None
                    complete = False
                else:
                    paths = self._split_paths(root, level, request.basename)
                    if paths:
                        probes.append((root, level, paths))
                    else:
                        table[root, level.tag] = None
                        self._store_fragment(root, request.basename, level, None, local)

        if probes:
            batch = [path for _, _, paths in probes for path in paths]
            logger.debug(
                "Probing %d file(s) for %s/%s", len(batch), request.basename, request.locale.tag
            )
            contents = yield batch
            decoded = iter(self._decode_batch(batch, contents))
            for root, level, paths in probes:
                candidates = [next(decoded) for _ in paths]
                data = next((c for c in candidates if c is not None), None)
                table[root, level.tag] = data
                self._store_fragment(root, request.basename, level, data, local)

        result = self._reduce(request, roots, levels, table)
        if use_cache and complete and request.cacheable:
            self._merged_cache().put(request.category, request.locale, result)
        return copy.deepcopy(result)

    @staticmethod
    def _reduce(
        request: _Request,
        roots: Sequence[str],
        levels: Sequence[LocaleSpecifier],
        table: Mapping[tuple[str, str], LocaleDict | None],
    ) -> LocaleDict | None:
        """Reduce the data found per (root, level) to one result."""
        per_level: list[LocaleDict | None] = []
        for level in levels:
            found = [table[root, level.tag] for root in roots if table[root, level.tag] is not None]
            if not found:
                per_level.append(None)
            elif request.mode is MergeMode.CROSS_ROOTS:
                combined: LocaleDict = {}
                for data in reversed(found):
                    combined = merge(combined, data, concat_arrays=request.concat_arrays)
                per_level.append(combined)
            else:
                per_level.append(found[0])

        present = [data for data in per_level if data is not None]
        if not present:
            return None

        match request.mode:
            case MergeMode.MOST_SPECIFIC:
                return present[-1]
            case MergeMode.FIRST_FOUND:
                return present[0]
            case _:
                result: LocaleDict = {}
                for data in present:
                    result = merge(result, data, concat_arrays=request.concat_arrays)
                return result

    def _load_manifests(self, roots: Sequence[str]) -> Resolution[None]:
        """Read the manifest of every root not yet probed for one."""
        pending = [root for root in roots if self._caches.manifest(root) is MISSING]
        if not pending:
            return
        paths = [posixpath.join(root, self._config.manifest_name) for root in pending]
        contents = yield paths
        for root, path, content in zip(pending, paths, contents, strict=True):
            files = self._parse_manifest(content, path)
            if files is not None:
                logger.debug("Manifest of %s lists %d file(s)", root, len(files))
            self._caches.store_manifest(root, files)

    @staticmethod
    def _parse_manifest(content: object, path: str) -> frozenset[str] | None:
        if content is None:
            return None
        try:
            data = decode_value(content, path)
        except DecodeError as e:
            logger.warning("Ignoring unreadable manifest: %s", e)
            return None
        match data:
            case {"files": [*entries]} | [*entries]:
                return frozenset(
                    _normalize_entry(entry) for entry in entries if isinstance(entry, str)
                )
            case _:
                logger.warning("Ignoring manifest without a file list: %s", path)
                return None

    def _is_listed(self, root: str, relative: str) -> bool:
        """False only when the root has a manifest that omits the file."""
        manifest = self._caches.manifest(root)
        if not isinstance(manifest, frozenset):
            return True
        return relative in manifest

    def _load_whole_locales(
        self,
        roots: Sequence[str],
        levels: Sequence[LocaleSpecifier],
        local: _LocalFragments | None,
    ) -> Resolution[None]:
        """Fetch the whole-locale files of every level, once per process."""
        probes: list[tuple[str, str]] = []
        for root in roots:
            for level in levels:
                for extension in self._config.extensions:
                    relative = f"{level.tag}{extension}"
                    path = posixpath.join(root, relative)
                    if not self._is_listed(root, relative):
                        continue
                    if local is None and self._caches.is_loaded(path):
                        continue
                    probes.append((root, path))
        if not probes:
            return

        contents = yield [path for _, path in probes]
        if local is None:
            for _, path in probes:
                self._caches.mark_loaded(path)
        # Applied in reverse so that earlier extensions win
        for (root, path), content in reversed(list(zip(probes, contents, strict=True))):
            data = self._decode(content, path)
            if data is not None:
                self._absorb(data, root, local)

    def _split_paths(self, root: str, level: LocaleSpecifier, basename: str) -> list[str]:
        """Candidate split-file paths for one (root, level), in extension order."""
        paths = []
        for extension in self._config.extensions:
            relative = "/".join((*level.path_segments(), f"{basename}{extension}"))
            if self._is_listed(root, relative):
                paths.append(posixpath.join(root, relative))
        return paths

    def _decode_batch(
        self, paths: Sequence[str], contents: Sequence[object | None]
    ) -> list[LocaleDict | None]:
        if self._config.use_cache:
            for path in paths:
                self._caches.mark_loaded(path)
        return [
            self._decode(content, path) for path, content in zip(paths, contents, strict=True)
        ]

    @staticmethod
    def _decode(content: object, path: str) -> LocaleDict | None:
        try:
            return decode(content, path)
        except DecodeError as e:
            logger.warning("Ignoring undecodable locale data: %s", e)
            return None

    def _lookup_fragment(
        self,
        root: str,
        basename: str,
        level: LocaleSpecifier,
        local: _LocalFragments | None,
    ) -> object:
        if local is not None:
            return local.get((root, basename, level.tag), MISSING)
        return self._caches.for_root(root).get(basename, level)

    def _store_fragment(
        self,
        root: str,
        basename: str,
        level: LocaleSpecifier,
        data: LocaleDict | None,
        local: _LocalFragments | None,
    ) -> None:
        if local is not None:
            local[root, basename, level.tag] = data
        else:
            self._caches.for_root(root).put(basename, level, data)

    def _absorb(
        self, data: Mapping[object, object], root: str, local: _LocalFragments | None
    ) -> None:
        """Store {locale: {basename: data}} as fragments of a root."""
        for tag, categories in data.items():
            if not isinstance(categories, Mapping):
                continue
            try:
                level = LocaleSpecifier.parse(tag)  # type: ignore[arg-type]
            except ConfigurationError:
                logger.warning("Ignoring data for invalid locale %r under %s", tag, root)
                continue
            for basename, value in categories.items():
                if isinstance(basename, str) and isinstance(value, Mapping):
                    self._store_fragment(root, basename, level, copy.deepcopy(dict(value)), local)

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    async def ensure_locale(self, locale: LocaleInput) -> bool:
        """Prefetch the data of a locale so synchronous loads can use it.

        For every reachable root, loads the whole-locale files of each level
        of the locale and, where the root has a manifest, every split file
        the manifest lists for those levels. Afterwards load_data(sync=True)
        can answer from cache even with a loader that cannot load
        synchronously.

        Args:
            locale: Locale to prefetch

        Returns:
            False if no root is reachable at all, True otherwise (also when
            nothing was found)

        Raises:
            ConfigurationError: If the locale is invalid
        """
        target = LocaleSpecifier.parse(locale)
        roots = [root for root in self.get_roots() if self._loader.is_reachable(root)]
        if not roots:
            logger.warning("No reachable locale data root for %s", target.tag)
            return False
        if not self._config.use_cache:
            logger.debug("Caching disabled; nothing to prefetch for %s", target.tag)
            return True

        await _run_async(self._prefetch(roots, get_sublocales(target)), self._loader)
        return True

    def _prefetch(
        self, roots: Sequence[str], levels: Sequence[LocaleSpecifier]
    ) -> Resolution[None]:
        yield from self._load_manifests(roots)
        yield from self._load_whole_locales(roots, levels, None)

        probes: list[tuple[str, LocaleSpecifier, str, list[str]]] = []
        for root in roots:
            manifest = self._caches.manifest(root)
            if not isinstance(manifest, frozenset):
                continue
            cache = self._caches.for_root(root)
            for level in levels:
                for basename, relatives in self._listed_categories(level, levels, manifest):
                    if not cache.contains(basename, level):
                        paths = [posixpath.join(root, relative) for relative in relatives]
                        probes.append((root, level, basename, paths))
        if not probes:
            return

        batch = [path for *_, paths in probes for path in paths]
        logger.debug("Prefetching %d file(s)", len(batch))
        contents = yield batch
        decoded = iter(self._decode_batch(batch, contents))
        for root, level, basename, paths in probes:
            candidates = [next(decoded) for _ in paths]
            data = next((c for c in candidates if c is not None), None)
            self._store_fragment(root, basename, level, data, None)

    def _listed_categories(
        self,
        level: LocaleSpecifier,
        levels: Sequence[LocaleSpecifier],
        manifest: frozenset[str],
    ) -> list[tuple[str, list[str]]]:
        """Basenames a manifest lists for one level, with their files in extension order.

        At the root level, whole-locale files and the manifest itself are not
        categories.
        """
        directory = "/".join(level.path_segments())
        excluded = {other.tag for other in levels} | {
            PurePosixPath(self._config.manifest_name).stem
        }
        found: dict[str, list[str]] = {}
        for extension in self._config.extensions:
            for entry in sorted(manifest):
                head, name = posixpath.split(entry)
                if head != directory or not name.endswith(extension):
                    continue
                stem = name.removesuffix(extension)
                if not stem or (level.is_root and stem in excluded):
                    continue
                found.setdefault(stem, []).append(entry)
        return list(found.items())

    def check_cache(self, locale: LocaleInput, basename: str | None = None) -> bool:
        """Check whether cached data can answer a load for a locale.

        True when the merged result for (basename, locale) is cached (even as
        None), when any non-root level of the locale has cached data in any
        root (for basename, or for any category when basename is None), or
        when a whole-locale file of such a level was already probed.

        Raises:
            ConfigurationError: If the locale is invalid
        """
        target = LocaleSpecifier.parse(locale)
        if not self._config.use_cache:
            return False

        if basename is not None:
            merged = self._merged_cache()
            variants = (
                basename,
                f"{basename}{CROSS_ROOTS_SUFFIX}",
                f"{basename}{CONCAT_ARRAYS_SUFFIX}",
                f"{basename}{CROSS_ROOTS_SUFFIX}{CONCAT_ARRAYS_SUFFIX}",
            )
            if any(merged.contains(category, target) for category in variants):
                return True

        roots = self.get_roots()
        for level in get_sublocales(target):
            if level.is_root:
                continue
            for root in roots:
                categories = self._caches.for_root(root).categories(level)
                if categories if basename is None else basename in categories:
                    return True
                if any(
                    self._caches.is_loaded(posixpath.join(root, f"{level.tag}{extension}"))
                    for extension in self._config.extensions
                ):
                    return True
        return False

    def cache_data(self, data: object, root: str) -> None:
        """Pre-populate the caches of a root.

        Args:
            data: {locale: {basename: data}}; anything else is ignored
            root: Root the data belongs to
        """
        if not isinstance(data, Mapping) or not isinstance(root, str) or not root:
            return
        self._absorb(data, root, None)

    def clear_cache(self) -> None:
        """Clear every locale data cache (shared with all consumers)."""
        self._caches.clear()


# ----------------------------------------------------------------------
# Module-level helpers
# ----------------------------------------------------------------------

_instances: dict[tuple[str, str], LocaleData] = {}
_instances_lock = Lock()


def get_locale_data(
    path: str,
    *,
    name: str | None = None,
    loader: Loader | None = None,
    config: LocaleDataConfig | None = None,
) -> LocaleData:
    """Get the LocaleData instance for a root and consumer, creating it once.

    Later calls with the same path and name return the first instance; their
    loader and config arguments are ignored.

    Raises:
        ConfigurationError: If path or name is invalid
    """
    key = (path, name if name is not None else path)
    with _instances_lock:
        instance = _instances.get(key)
        if instance is None:
            instance = LocaleData(path, name=name, loader=loader, config=config)
            _instances[key] = instance
        return instance


def clear_locale_data() -> None:
    """Clear the process-wide locale data caches."""
    get_cache_registry().clear()
