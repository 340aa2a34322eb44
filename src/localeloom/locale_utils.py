"""Locale utilities bridging BCP-47 tags, POSIX identifiers and Babel.

Centralizes locale format normalization used throughout the codebase.
Locale data files and cache keys use BCP-47 tags (en-US); Babel parses
POSIX identifiers (en_US). Conversion happens here, at the boundary.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os

from localeloom.constants import TAG_SEPARATOR

__all__ = [
    "get_system_locale",
    "likely_locale",
    "normalize_locale",
    "to_bcp47",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def to_bcp47(locale_code: str) -> str:
    """Convert POSIX locale identifier to a BCP-47 tag.

    Strips any encoding (".UTF-8") or modifier ("@euro") suffix.

    Example:
        >>> to_bcp47("de_DE.UTF-8")
        'de-DE'
    """
    code = locale_code.split(".", 1)[0].split("@", 1)[0]
    return code.replace("_", TAG_SEPARATOR)


@functools.lru_cache(maxsize=256)
def likely_locale(locale_code: str) -> str:
    """Expand a partial locale tag to its most likely full form.

    Uses the CLDR likely-subtags table shipped with Babel, so "de" becomes
    "de-Latn-DE" and "zh-TW" becomes "zh-Hant-TW". Tags without an entry are
    returned unchanged (converted to BCP-47 form).

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        BCP-47 tag of the likely locale
    """
    # Lazy import: Babel loads CLDR data on first use; defer until needed
    from babel.core import get_global  # noqa: PLC0415

    likely_subtags = get_global("likely_subtags")
    posix = normalize_locale(locale_code)
    expanded = likely_subtags.get(posix)
    if expanded is None:
        return to_bcp47(posix)
    return to_bcp47(expanded)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and returns a BCP-47 tag,
    the form used for locale data paths and cache keys.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en-US" as fallback.

    Returns:
        Detected locale tag in BCP-47 format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return to_bcp47(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value.split(".")[0] not in ("C", "POSIX", ""):
            return to_bcp47(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en-US"
