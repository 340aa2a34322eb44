"""Enumerations for LocaleLoom type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class MergeMode(StrEnum):
    """How the data found along a locale chain is reduced to one result.

    StrEnum provides automatic string conversion: str(MergeMode.CASCADE) == "cascade"
    """

    CASCADE = "cascade"
    """Merge every level, taking each level from the first root that has it."""

    CROSS_ROOTS = "cross_roots"
    """Merge every level, combining the data of all roots within a level."""

    MOST_SPECIFIC = "most_specific"
    """Return the raw data of the most specific level only."""

    FIRST_FOUND = "first_found"
    """Return the raw data of the least specific level only (usually root)."""


class DataFormat(StrEnum):
    """Encoding of a locale data file, derived from its extension.

    StrEnum provides automatic string conversion: str(DataFormat.JSON) == "json"
    """

    JSON = "json"
    """Structured data: <basename>.json"""

    YAML = "yaml"
    """Structured data: <basename>.yaml or <basename>.yml"""

    MODULE = "module"
    """Python data module exposing get_locale_data() or DATA: <basename>.py"""


__all__ = [
    "DataFormat",
    "MergeMode",
]
