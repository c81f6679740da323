import os
import sys
import time

import pytest

# Add the project root to the path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shopflow import config
from shopflow.config import get_retry_count, get_timeouts, resolve_profiles
from shopflow.data import DataGenerator
from shopflow.logging_config import get_logger

logger = get_logger()

_CACHED_GETTERS = (
    config.get_base_url,
    config.get_timeouts,
    config.get_retry_count,
    config.get_worker_count,
    config.get_capture_policy,
)

suite_started_key = pytest.StashKey[float]()


def pytest_addoption(parser):
    parser.addoption(
        "--profile",
        action="append",
        default=[],
        help="Run profile to execute browser tests against (repeatable, or 'all')",
    )


def pytest_configure(config):
    from playwright.async_api import expect

    config.stash[suite_started_key] = time.monotonic()
    expect.set_options(timeout=get_timeouts().expect_ms)


def pytest_generate_tests(metafunc):
    if "run_profile" in metafunc.fixturenames:
        profiles = resolve_profiles(metafunc.config.getoption("profile"))
        metafunc.parametrize("run_profile", profiles, ids=[p.name for p in profiles])


def pytest_collection_modifyitems(config, items):
    """Give every browser test the retry budget and per-test timeout."""
    retries = get_retry_count()
    test_timeout = get_timeouts().test_seconds
    for item in items:
        if item.get_closest_marker("e2e") is None:
            continue
        if item.get_closest_marker("flaky") is None and retries > 0:
            item.add_marker(pytest.mark.flaky(reruns=retries))
        if item.get_closest_marker("timeout") is None:
            item.add_marker(pytest.mark.timeout(test_timeout))


def pytest_runtest_setup(item):
    elapsed = time.monotonic() - item.config.stash[suite_started_key]
    suite_limit = get_timeouts().suite_seconds
    if elapsed > suite_limit:
        pytest.exit(f"Suite timeout of {suite_limit}s exceeded", returncode=1)


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item so fixtures can tell if the test failed."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
    if report.failed and report.when == "call":
        logger.error(f"{item.nodeid} failed")


@pytest.fixture
def generator():
    """A seeded data generator so failures can be reproduced."""
    return DataGenerator(seed=1234)


@pytest.fixture
def unseeded_generator():
    return DataGenerator()


@pytest.fixture
def clean_config(monkeypatch):
    """Clear cached configuration before and after a test that changes the environment."""
    for name in (
        "CI",
        "SHOPFLOW_BASE_URL",
        "SHOPFLOW_RETRIES",
        "SHOPFLOW_WORKERS",
        "SHOPFLOW_TRACE",
        "SHOPFLOW_SCREENSHOT",
        "SHOPFLOW_VIDEO",
        "SHOPFLOW_PROFILES",
        "SHOPFLOW_TEST_TIMEOUT",
        "SHOPFLOW_SUITE_TIMEOUT",
        "SHOPFLOW_EXPECT_TIMEOUT_MS",
    ):
        monkeypatch.delenv(name, raising=False)
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
    yield monkeypatch
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
