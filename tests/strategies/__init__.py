"""Hypothesis strategies for LocaleLoom property-based testing.

Strategies are organized by domain:

- locales: LocaleSpecifier instances and known tags
- data: JSON-like locale data and level chains

Usage:
    from tests.strategies import locale_specifiers, locale_dicts
    from tests.strategies.data import chains
"""

from .data import chains, data_keys, locale_dicts, values
from .locales import KNOWN_TAGS, full_specifiers, locale_specifiers

__all__ = [
    "KNOWN_TAGS",
    "chains",
    "data_keys",
    "full_specifiers",
    "locale_dicts",
    "locale_specifiers",
    "values",
]
