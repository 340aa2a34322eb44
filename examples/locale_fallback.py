"""LocaleData Example - Cascading Locale Data.

Demonstrates how locale data cascades from root to the requested locale,
how application roots override package data, and how asynchronous loaders
are prefetched for synchronous use.

Scenarios covered:
1. Cascade, most-specific and least-specific lookups
2. Application overrides through a global root
3. Whole-locale files and asynchronous prefetching

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
import tempfile
from pathlib import Path

from localeloom import (
    FileLoader,
    LocaleData,
    LocaleDataConfig,
    MemoryLoader,
    add_global_root,
    clear_global_roots,
    clear_locale_data,
)


def _write(root: Path, relative: str, data: dict[str, object]) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def example_1_cascade() -> None:
    """Example 1: Data merged from root to en-US."""
    print("=" * 60)
    print("Example 1: Cascade (root -> en -> en-US)")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _write(root, "localeinfo.json", {"clock": "24", "currency": "EUR"})
        _write(root, "en/localeinfo.json", {"clock": "12"})
        _write(root, "en/US/localeinfo.json", {"currency": "USD"})

        locale_data = LocaleData(str(root), config=LocaleDataConfig(sync=True))

        print(f"\n  cascade:       {locale_data.load_data('localeinfo', 'en-US')}")
        specific = locale_data.load_data("localeinfo", "en-US", most_specific=True)
        print(f"  most_specific: {specific}")
        print(f"  return_one:    {locale_data.load_data('localeinfo', 'en-US', return_one=True)}")
        print(f"  en-GB:         {locale_data.load_data('localeinfo', 'en-GB')}")


def example_2_overrides() -> None:
    """Example 2: An application root outranks package data."""
    print("\n" + "=" * 60)
    print("Example 2: Application overrides")
    print("=" * 60)

    loader = MemoryLoader(
        {
            "package/locale/localeinfo.json": {"clock": "24", "currency": "EUR"},
            "package/locale/en/localeinfo.json": {"clock": "12", "week_start": "sun"},
            "app/locale/en/localeinfo.json": {"clock": "24"},
        }
    )
    locale_data = LocaleData(
        "package/locale", name="package", loader=loader, config=LocaleDataConfig(sync=True)
    )
    print(f"\n  before: {locale_data.load_data('localeinfo', 'en')}")

    add_global_root("app/locale")
    clear_locale_data()
    print(f"  after:  {locale_data.load_data('localeinfo', 'en')}")
    print(f"  cross:  {locale_data.load_data('localeinfo', 'en', cross_roots=True)}")
    clear_global_roots()


async def example_3_prefetch() -> None:
    """Example 3: Prefetch a whole-locale file, then read synchronously."""
    print("\n" + "=" * 60)
    print("Example 3: Asynchronous prefetch")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _write(
            root,
            "de-DE.json",
            {
                "root": {"localeinfo": {"clock": "12"}},
                "de": {"localeinfo": {"clock": "24", "decimal": ","}},
                "de-DE": {"localeinfo": {"currency": "EUR"}},
            },
        )
        locale_data = LocaleData(str(root), loader=FileLoader(sync=False))

        print(f"\n  ensure_locale: {await locale_data.ensure_locale('de-DE')}")
        print(f"  sync load:     {locale_data.load_data('localeinfo', 'de-DE', sync=True)}")


if __name__ == "__main__":
    example_1_cascade()
    example_2_overrides()
    asyncio.run(example_3_prefetch())
