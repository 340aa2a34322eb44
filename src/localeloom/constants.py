"""Shared constants for LocaleLoom.

Centralizes the tags, file names and limits used by the resolver, the
merge engine and the orchestrator. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale tags
    "ROOT_TAG",
    "UNDEFINED_LANGUAGE",
    "WORLD_REGION",
    "TAG_SEPARATOR",
    # Files
    "DEFAULT_EXTENSIONS",
    "MANIFEST_FILE_NAME",
    # Cache categories
    "CROSS_ROOTS_SUFFIX",
    "CONCAT_ARRAYS_SUFFIX",
    # Depth limits
    "MAX_DEPTH",
]

# ============================================================================
# LOCALE TAGS
# ============================================================================

# Tag of the world-wide default locale (the fully absent specifier).
ROOT_TAG: str = "root"

# Placeholder language used when only region/script/variant are known.
# Region-only data lives under "<root>/und/<region>/".
UNDEFINED_LANGUAGE: str = "und"

# UN M.49 code for "World". A bare 001 region is the root locale.
WORLD_REGION: str = "001"

# Canonical tags use BCP-47 hyphens. POSIX underscores are accepted on input.
TAG_SEPARATOR: str = "-"

# ============================================================================
# FILES
# ============================================================================

# Probe order within one (root, level) pair. The first extension with content
# wins, so structured data shadows data modules of the same name.
DEFAULT_EXTENSIONS: tuple[str, ...] = (".json", ".yaml", ".yml", ".py")

# Optional per-root index of existing files: {"files": ["en/info.json", ...]}
MANIFEST_FILE_NAME: str = "localemanifest.json"

# ============================================================================
# CACHE CATEGORIES
# ============================================================================

# Cross-root results differ from cascade results for the same basename and
# locale, so they are cached under "<basename>#cross-roots".
CROSS_ROOTS_SUFFIX: str = "#cross-roots"

# Results merged with list concatenation are cached under
# "<basename>#concat-arrays".
CONCAT_ARRAYS_SUFFIX: str = "#concat-arrays"

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth walked by merge() and prune().
# Real locale data rarely nests deeper than 6 levels; 100 leaves ample margin
# below the default Python recursion limit of 1000.
MAX_DEPTH: int = 100
