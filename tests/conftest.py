"""Pytest configuration for the localegen test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 300 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from localegen.catalog import LocaleCatalog, MemoryStorage

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=300,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
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
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def en_catalog() -> LocaleCatalog:
    """Default catalog with one nested group and one top-level string."""
    return LocaleCatalog.from_mapping(
        {
            "home": {"title": "Welcome", "body": "Hello"},
            "nav": {"sign-in": "Sign in", "footer": {"copyright": "(c) News"}},
            "title": "News",
        }
    )


@pytest.fixture
def fr_catalog() -> LocaleCatalog:
    """Partial translation of ``en_catalog``."""
    return LocaleCatalog.from_mapping(
        {
            "home": {"title": "Bienvenue"},
            "nav": {"sign-in": "Connexion"},
        }
    )


@pytest.fixture
def storage(en_catalog: LocaleCatalog, fr_catalog: LocaleCatalog) -> MemoryStorage:
    return MemoryStorage({"en": en_catalog, "fr": fr_catalog}, default_locale="en")


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    """Directory holding one catalog per supported file format."""
    directory = tmp_path / "locales"
    directory.mkdir()
    (directory / "en.toml").write_text(
        '[home]\ntitle = "Welcome"\nbody = "Hello"\n',
        encoding="utf-8",
    )
    (directory / "fr.yaml").write_text(
        "home:\n  title: Bienvenue\n",
        encoding="utf-8",
    )
    (directory / "de.json").write_text(
        '{"home": {"body": "Hallo"}}',
        encoding="utf-8",
    )
    return directory
