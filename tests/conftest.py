"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed json_normalize package.
"""

import pytest

from json_normalize.settings import get_settings


def pytest_addoption(parser):
    """Add gated perf test option."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf-marked tests unless --run-perf is set."""
    if config.getoption("--run-perf"):
        return
    skip_perf = pytest.mark.skip(reason="perf tests gated; pass --run-perf")
    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_perf)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so monkeypatched environment variables take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
