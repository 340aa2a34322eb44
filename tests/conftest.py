"""Pytest configuration for LocaleLoom test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Global State:
The process-wide root and cache registries are reset around every test, so
no test observes roots or cached data left behind by another.
"""

from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from localeloom.cache import get_cache_registry
from localeloom.registry import get_root_registry
from tests.helpers.loaders import CountingLoader

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    import os

    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def reset_registries() -> Iterator[None]:
    """Reset the process-wide root and cache registries around each test."""
    get_root_registry().reset()
    get_cache_registry().reset()
    yield
    get_root_registry().reset()
    get_cache_registry().reset()


@pytest.fixture
def info_files() -> dict[str, object]:
    """Category "info" split across root, en and en-US levels."""
    return {
        "locale/info.json": '{"a": "b", "c": "d"}',
        "locale/en/info.json": '{"a": "b en"}',
        "locale/en/US/info.json": '{"c": "d en-US"}',
    }


@pytest.fixture
def counting_loader(info_files: dict[str, object]) -> CountingLoader:
    """Counting loader serving the info_files fixture."""
    return CountingLoader(info_files)
