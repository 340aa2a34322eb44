"""Locale specifiers and the locale specificity hierarchy.

A LocaleSpecifier is the structured identity of a locale: language, script,
region and variant, any of which may be absent. Locale data is merged along
the specificity hierarchy computed by get_sublocales():

    root
    language
    und-region
    language-script
    language-region
    und-region-variant
    language-script-region
    language-region-variant
    language-script-region-variant

Parsing of individual tags is delegated to Babel's parse_locale(); this
module only decides which ancestors a tag has and in what order.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from localeloom.constants import ROOT_TAG, TAG_SEPARATOR, UNDEFINED_LANGUAGE, WORLD_REGION
from localeloom.errors import ConfigurationError
from localeloom.locale_utils import normalize_locale

__all__ = ["LocaleSpecifier", "get_sublocales"]

_SUBTAG_SPLIT = re.compile(r"[-_]")

# Components each specificity level requires, least to most specific.
_LEVELS: tuple[tuple[str, ...], ...] = (
    (),
    ("language",),
    ("region",),
    ("language", "script"),
    ("language", "region"),
    ("region", "variant"),
    ("language", "script", "region"),
    ("language", "region", "variant"),
    ("language", "script", "region", "variant"),
)


@dataclass(frozen=True, slots=True)
class LocaleSpecifier:
    """Structured locale identity.

    All components are optional. The fully absent specifier is the root
    (world-wide default) locale.

    Attributes:
        language: ISO 639 language code, lowercase ("en")
        script: ISO 15924 script code, title case ("Hant")
        region: ISO 3166 or UN M.49 region code ("US", "419")
        variant: Registered variant subtag, uppercase ("POSIX")
    """

    language: str | None = None
    script: str | None = None
    region: str | None = None
    variant: str | None = None

    @classmethod
    def parse(cls, value: LocaleSpecifier | str | None) -> LocaleSpecifier:
        """Build a specifier from a tag.

        Accepts BCP-47 tags ("zh-Hant-TW"), POSIX identifiers ("de_DE.UTF-8"),
        bare regions ("US", "001"), the literal "root", None (root), and
        existing specifiers (returned unchanged).

        Raises:
            ConfigurationError: If the tag is empty or cannot be parsed
        """
        match value:
            case LocaleSpecifier():
                return value
            case None:
                return cls()
            case str() if value.strip() == ROOT_TAG:
                return cls()
            case str() if value.strip():
                return cls._from_tag(value.strip())
            case str():
                msg = "Locale tag cannot be empty"
                raise ConfigurationError(msg)
            case _:
                msg = f"Locale must be a string or LocaleSpecifier, got {type(value).__name__}"
                raise ConfigurationError(msg)

    @classmethod
    def _from_tag(cls, tag: str) -> LocaleSpecifier:
        # Lazy import: Babel loads CLDR data on first use; defer until needed
        from babel.core import parse_locale  # noqa: PLC0415

        if _is_languageless(tag):
            tag = f"{UNDEFINED_LANGUAGE}{TAG_SEPARATOR}{tag}"
        try:
            language, region, script, variant, *_ = parse_locale(normalize_locale(tag))
        except ValueError as e:
            msg = f"Invalid locale tag: {tag!r}"
            raise ConfigurationError(msg) from e

        if language == UNDEFINED_LANGUAGE:
            language = None
        if language is None and script is None and variant is None and region == WORLD_REGION:
            return cls()
        return cls(language=language, script=script, region=region, variant=variant)

    @property
    def is_root(self) -> bool:
        """True for the world-wide default locale."""
        return (
            self.language is None
            and self.script is None
            and self.region is None
            and self.variant is None
        )

    @property
    def tag(self) -> str:
        """Canonical BCP-47 tag ("root" for the root locale)."""
        if self.is_root:
            return ROOT_TAG
        parts = [self.language or UNDEFINED_LANGUAGE]
        parts.extend(p for p in (self.script, self.region, self.variant) if p)
        return TAG_SEPARATOR.join(parts)

    def path_segments(self) -> tuple[str, ...]:
        """Directory segments holding split-by-part files for this locale.

        Example:
            >>> LocaleSpecifier.parse("zh-Hant-TW").path_segments()
            ('zh', 'Hant', 'TW')
            >>> LocaleSpecifier.parse("und-DE").path_segments()
            ('und', 'DE')
        """
        if self.is_root:
            return ()
        parts = [self.language or UNDEFINED_LANGUAGE]
        parts.extend(p for p in (self.script, self.region, self.variant) if p)
        return tuple(parts)

    def specificity(self) -> int:
        """Number of present components (0 for root)."""
        return sum(
            1 for p in (self.language, self.script, self.region, self.variant) if p
        )

    def __str__(self) -> str:
        return self.tag


def _is_languageless(tag: str) -> bool:
    """Check whether a tag starts with a region or script instead of a language.

    "US", "001", "Latn-RS" and "US-POSIX" carry no language. "EN-US" does:
    BCP-47 is case-insensitive, so an uppercase pair followed by a region is
    a language.
    """
    parts = _SUBTAG_SPLIT.split(tag.split(".", 1)[0])
    first = parts[0]
    if len(first) == 3 and first.isdigit():
        return True
    if len(first) == 4 and first.isalpha() and first.istitle():
        return True
    if len(first) == 2 and first.isalpha() and first.isupper():
        if len(parts) == 1:
            return True
        following = parts[1]
        region_like = len(following) == 2 or (len(following) == 3 and following.isdigit())
        return not region_like and len(following) != 4
    return False


def get_sublocales(locale: LocaleSpecifier | str | None) -> tuple[LocaleSpecifier, ...]:
    """List the locales whose data is merged to form the data for a locale.

    Ordered from least to most specific. Levels whose components the input
    lacks are omitted, duplicates keep their first position, and the input
    itself is always last.

    Args:
        locale: Locale tag or specifier

    Returns:
        Tuple of specifiers starting with root and ending with the input

    Example:
        >>> [s.tag for s in get_sublocales("en-US")]
        ['root', 'en', 'und-US', 'en-US']
    """
    target = LocaleSpecifier.parse(locale)
    seen: set[str] = set()
    result: list[LocaleSpecifier] = []

    for components in _LEVELS:
        values = {name: getattr(target, name) for name in components}
        if not all(values.values()):
            continue
        level = LocaleSpecifier(**values)
        if level.tag not in seen:
            seen.add(level.tag)
            result.append(level)

    if target.tag not in seen:
        result.append(target)
    return tuple(result)
