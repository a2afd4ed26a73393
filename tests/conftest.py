"""Pytest configuration for the localekeys test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from localekeys.core.version import VersionProfile
from localekeys.enums import Era
from localekeys.tables import LegacyKeyTables, load_legacy_tables
from tests.helpers.fakes import FakeHostRegistry, RecordingDispatcher

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

# CI profile: fast feedback for GitHub Actions (50 examples)
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
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def legacy_profile() -> VersionProfile:
    """1.12.2 host: legacy era with first-class potion data."""
    return VersionProfile(raw_version="1.12.2", era=Era.LEGACY, has_base_potion_data=True)


@pytest.fixture
def old_legacy_profile() -> VersionProfile:
    """1.8.8 host: legacy era, potions identified by durability."""
    return VersionProfile(raw_version="1.8.8", era=Era.LEGACY)


@pytest.fixture
def modern_profile() -> VersionProfile:
    """1.20.4 host: modern era with every capability."""
    return VersionProfile(
        raw_version="1.20.4",
        era=Era.MODERN,
        has_base_potion_data=True,
        has_repackaged_namespace=True,
        is_post_short_accessor=True,
    )


@pytest.fixture
def tables() -> LegacyKeyTables:
    """Bundled legacy tables."""
    return load_legacy_tables()


@pytest.fixture
def host() -> FakeHostRegistry:
    """Modern host registry with a handful of items and every probe material."""
    return FakeHostRegistry.modern()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    """Dispatcher recording every delivered payload."""
    return RecordingDispatcher()
