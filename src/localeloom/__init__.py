"""LocaleLoom - cascading locale data resolution and caching.

Finds the data of a category for a locale by walking an ordered list of
roots and the locale's specificity chain (root, language, region, script
combinations, full tag), then merges what it found, least specific first.
Loads synchronously or asynchronously over one shared cache.

Public API:
    LocaleData - Per-consumer resolution orchestrator
    LocaleDataConfig - Immutable options of a LocaleData
    LocaleSpecifier - Structured locale identity
    get_sublocales - Specificity chain of a locale
    merge, prune, merge_chain, merge_and_prune - Merge/prune engine
    Loader, FileLoader, MemoryLoader - File loaders
    add_global_root, remove_global_root, clear_global_roots - Root registry

Exceptions:
    LocaleDataError - Base exception class
    ConfigurationError - Invalid arguments
    LoaderUnavailableError - Synchronous load impossible and uncached
    DecodeError - Malformed data file
    DepthLimitExceededError - Data nested too deeply

Submodules:
    localeloom.cache - DataCache and CacheRegistry
    localeloom.codecs - Decoders per file extension
    localeloom.registry - RootRegistry
    localeloom.locale_utils - Locale tag helpers (Babel-backed)
"""

# Essential Public API - Minimal exports for clean namespace
from .config import LocaleDataConfig
from .enums import MergeMode
from .errors import (
    ConfigurationError,
    DecodeError,
    DepthLimitExceededError,
    LoaderUnavailableError,
    LocaleDataError,
)
from .loading import FileLoader, Loader, MemoryLoader
from .localedata import LocaleData, clear_locale_data, get_locale_data
from .merge import merge, merge_and_prune, merge_chain, prune
from .registry import add_global_root, clear_global_roots, get_global_roots, remove_global_root
from .specifier import LocaleSpecifier, get_sublocales

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localeloom")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DepthLimitExceededError",
    "FileLoader",
    "Loader",
    "LoaderUnavailableError",
    "LocaleData",
    "LocaleDataConfig",
    "LocaleDataError",
    "LocaleSpecifier",
    "MemoryLoader",
    "MergeMode",
    "__version__",
    "add_global_root",
    "clear_global_roots",
    "clear_locale_data",
    "get_global_roots",
    "get_locale_data",
    "get_sublocales",
    "merge",
    "merge_and_prune",
    "merge_chain",
    "prune",
    "remove_global_root",
]
