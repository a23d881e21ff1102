"""Pytest configuration for translatable test suite.

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

Shared fixtures build the greetings corpus used across modules and isolate
the process-wide configuration and translation cells between tests.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from translatable.config import CONFIG_KEYS
from translatable.constants import ENV_PREFIX
from translatable.runtime import reset_shared_state

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
# SHARED STATE ISOLATION
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_shared_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear TRANSLATABLE_* variables and the process-wide cells per test."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(f"{ENV_PREFIX}{key.upper()}", raising=False)
    reset_shared_state()
    yield
    reset_shared_state()


# =============================================================================
# CORPUS FIXTURES
# =============================================================================

GREETINGS_TOML = """\
[greetings.formal]
aa = "Nice to meet you."
es = "Bueno conocerte."

[greetings.informal]
aa = "What's good {user}?"
"""


@pytest.fixture
def translations_dir(tmp_path: Path) -> Path:
    """Translation root containing greetings.toml."""
    root = tmp_path / "translations"
    root.mkdir()
    (root / "greetings.toml").write_text(GREETINGS_TOML, encoding="utf-8")
    return root


@pytest.fixture
def project_dir(
    tmp_path: Path, translations_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Working directory whose default ./translations is the greetings corpus."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
