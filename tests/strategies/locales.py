"""Hypothesis strategies for locale identities.

Generates LocaleSpecifier instances directly from components, so tests of
the specificity resolver do not depend on tag parsing.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - locale_shape: Which components are present (e.g. "lang+region")
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from localeloom.specifier import LocaleSpecifier

LANGUAGES = ["en", "de", "fr", "zh", "sr", "es", "ja"]
SCRIPTS = ["Latn", "Hant", "Hans", "Cyrl"]
REGIONS = ["US", "DE", "TW", "RS", "419", "GB"]
VARIANTS = ["POSIX", "VALENCIA", "1901"]

# BCP-47 tags Babel's parse_locale() accepts, with their expected specifiers
KNOWN_TAGS: dict[str, LocaleSpecifier] = {
    "en": LocaleSpecifier(language="en"),
    "en-US": LocaleSpecifier(language="en", region="US"),
    "en_US": LocaleSpecifier(language="en", region="US"),
    "de_DE.UTF-8": LocaleSpecifier(language="de", region="DE"),
    "zh-Hant-TW": LocaleSpecifier(language="zh", script="Hant", region="TW"),
    "sr-Latn": LocaleSpecifier(language="sr", script="Latn"),
    "es-419": LocaleSpecifier(language="es", region="419"),
}


@st.composite
def locale_specifiers(draw: st.DrawFn) -> LocaleSpecifier:
    """Generate specifiers with any combination of components.

    Events emitted:
    - locale_shape={root|lang|lang+script|...}: present components
    """
    language = draw(st.none() | st.sampled_from(LANGUAGES))
    script = draw(st.none() | st.sampled_from(SCRIPTS))
    region = draw(st.none() | st.sampled_from(REGIONS))
    variant = draw(st.none() | st.sampled_from(VARIANTS))

    names = [
        name
        for name, value in (
            ("lang", language),
            ("script", script),
            ("region", region),
            ("variant", variant),
        )
        if value
    ]
    event(f"locale_shape={'+'.join(names) or 'root'}")

    return LocaleSpecifier(language=language, script=script, region=region, variant=variant)


def full_specifiers() -> st.SearchStrategy[LocaleSpecifier]:
    """Generate specifiers with all four components present."""
    return st.builds(
        LocaleSpecifier,
        language=st.sampled_from(LANGUAGES),
        script=st.sampled_from(SCRIPTS),
        region=st.sampled_from(REGIONS),
        variant=st.sampled_from(VARIANTS),
    )
