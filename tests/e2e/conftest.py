"""E2E test configuration and fixtures for the purchase-flow suite.

IMPORTANT: Due to pytest-asyncio event loop conflicts, DO NOT use session-scoped
Playwright fixtures (browser, browser_context, page) in e2e tests. They cause deadlocks.

Each test gets its own ``async_playwright()`` instance, browser and context via
the ``page`` fixture, built from the run profile the test is parametrized with.
"""

from contextlib import asynccontextmanager
import os
import re
import socket
import sys
import threading
import time

import httpx
from playwright.async_api import async_playwright
import pytest
import pytest_asyncio

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from shopflow.config import (
    get_artifacts_dir,
    get_capture_policy,
    get_profile,
    get_timeouts,
    is_headless,
)
from shopflow.logging_config import get_logger
from fake_store import create_app

logger = get_logger()

MOBILE_PROFILE = "mobile-chrome"


@pytest.fixture(scope="session")
def fake_store():
    """Start the fake storefront on a free local port."""
    import uvicorn

    # Find available port
    sock = socket.socket()
    sock.bind(("", 0))
    port = sock.getsockname()[1]
    sock.close()

    app = create_app()

    # Start server in thread
    def run_server():
        uvicorn.run(app, host="127.0.0.1", port=port, log_level="error")

    server_thread = threading.Thread(target=run_server, daemon=True)
    server_thread.start()

    # Wait for server to start
    server_url = f"http://127.0.0.1:{port}"
    for _ in range(30):  # Wait up to 30 seconds
        try:
            response = httpx.get(server_url, timeout=1)
            if response.status_code == 200:
                break
        except (httpx.RequestError, httpx.HTTPStatusError):
            time.sleep(1)
    else:
        raise RuntimeError("Fake store failed to start")

    yield server_url


@pytest.fixture
def store_url(fake_store):
    """Base URL the page objects navigate against. Live tests override this."""
    return fake_store


def _test_failed(node) -> bool:
    reports = (getattr(node, "rep_setup", None), getattr(node, "rep_call", None))
    return any(report is not None and report.failed for report in reports)


def _artifact_slug(nodeid: str, attempt: int) -> str:
    slug = re.sub(r"[^A-Za-z0-9_.-]+", "-", nodeid).strip("-")
    return f"{slug}-attempt{attempt}"


@asynccontextmanager
async def profile_page(request, profile, base_url):
    """Open a page for ``profile`` and apply the capture policy when the test ends."""
    policy = get_capture_policy()
    timeouts = get_timeouts()
    attempt = getattr(request.node, "execution_count", 1)
    test_dir = get_artifacts_dir() / _artifact_slug(request.node.nodeid, attempt)
    video_dir = test_dir / "videos" if policy.video != "off" else None

    async with async_playwright() as p:
        browser = await getattr(p, profile.browser).launch(headless=is_headless())
        context = await browser.new_context(
            **profile.context_options(p.devices, base_url=base_url, video_dir=video_dir)
        )
        context.set_default_timeout(timeouts.action_ms)
        context.set_default_navigation_timeout(timeouts.navigation_ms)

        tracing = policy.should_trace(attempt)
        if tracing:
            await context.tracing.start(screenshots=True, snapshots=True, sources=True)

        page = await context.new_page()
        try:
            yield page
        finally:
            failed = _test_failed(request.node)

            if policy.keep_screenshot(failed) and not page.is_closed():
                test_dir.mkdir(parents=True, exist_ok=True)
                name = "failure.png" if failed else "final.png"
                await page.screenshot(path=str(test_dir / name), full_page=True)

            if tracing:
                if policy.keep_trace(failed):
                    trace_path = test_dir / "trace.zip"
                    await context.tracing.stop(path=str(trace_path))
                    logger.info(f"Trace saved: {trace_path}")
                else:
                    await context.tracing.stop()

            video = page.video
            await context.close()
            if video is not None and not policy.keep_video(failed):
                await video.delete()

            await browser.close()


@pytest_asyncio.fixture
async def page(request, run_profile, store_url):
    """A page for the run profile this test is parametrized with."""
    async with profile_page(request, run_profile, store_url) as page:
        yield page


@pytest_asyncio.fixture
async def mobile_page(request, store_url):
    """A page on a mobile profile, whatever profiles were selected for the run."""
    async with profile_page(request, get_profile(MOBILE_PROFILE), store_url) as page:
        yield page
