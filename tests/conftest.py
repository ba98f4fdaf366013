"""Pytest configuration for the stateprop test suite.

Hypothesis runs at two levels here: the suite's own property tests draw
command sequences, and the checker under test runs a nested Hypothesis
search per call. Profile budgets therefore stay modest, and tests that
drive StatefulChecker pass their own small settings.

Profiles (selected by HYPOTHESIS_PROFILE, else "ci" when CI=true, else "dev"):
- dev: 200 examples
- ci: 50 examples, derandomized so nested searches replay identically
- verbose: 100 examples with progress output

Every example executes real commands whose cost is dominated by setup and
cleanup rather than by Hypothesis, so no profile sets a deadline.

Tests marked @pytest.mark.fuzz (long sequences, depth limits, large
budgets) are skipped unless selected with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_BASE_PROFILE = {
    "phases": [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    "deadline": None,
}

_PROFILES = {
    "dev": {"max_examples": 200, "derandomize": False},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "derandomize": False, "verbosity": Verbosity.verbose},
}

for _name, _overrides in _PROFILES.items():
    settings.register_profile(_name, **_BASE_PROFILE, **_overrides)


def _selected_profile() -> str:
    """Name of the profile to load for this run."""
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_selected_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: long-running generation and depth-limit tests (pytest -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz tests unless the -m expression mentions fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test: run with pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
