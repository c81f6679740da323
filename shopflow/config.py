"""Run configuration: target site, timeouts, retries, capture policy and run profiles.

Values come from environment variables (or a local .env file) and are cached;
tests that change the environment must call ``cache_clear()`` on the getter they exercise.
"""

from functools import lru_cache
import os
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

DEFAULT_BASE_URL = "https://automationexercise.com"

# Viewports narrower than this are treated as mobile by the page objects
MOBILE_BREAKPOINT = 768

BrowserName = Literal["chromium", "firefox", "webkit"]


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.lower() in ("true", "1", "yes")


@lru_cache()
def get_base_url() -> str:
    """Get the base URL of the storefront under test."""
    base_url = os.getenv("SHOPFLOW_BASE_URL", DEFAULT_BASE_URL)

    if not base_url.startswith(("http://", "https://")):
        raise ValueError(
            f"Invalid SHOPFLOW_BASE_URL: {base_url}. Must start with http:// or https://"
        )

    return base_url.rstrip("/")


class Timeouts(BaseModel):
    """Timeout budget for one run. Test and suite budgets are in seconds, the rest in ms."""

    model_config = ConfigDict(frozen=True)

    test_seconds: int = 120
    suite_seconds: int = 3600
    expect_ms: int = 15_000
    action_ms: int = 20_000
    navigation_ms: int = 60_000
    element_ms: int = 10_000
    page_ready_ms: int = 15_000
    dom_ready_ms: int = 30_000
    network_idle_ms: int = 15_000


@lru_cache()
def get_timeouts() -> Timeouts:
    """Get the timeout budget, allowing the coarse budgets to be overridden."""
    overrides = {}
    if os.getenv("SHOPFLOW_TEST_TIMEOUT"):
        overrides["test_seconds"] = int(os.environ["SHOPFLOW_TEST_TIMEOUT"])
    if os.getenv("SHOPFLOW_SUITE_TIMEOUT"):
        overrides["suite_seconds"] = int(os.environ["SHOPFLOW_SUITE_TIMEOUT"])
    if os.getenv("SHOPFLOW_EXPECT_TIMEOUT_MS"):
        overrides["expect_ms"] = int(os.environ["SHOPFLOW_EXPECT_TIMEOUT_MS"])
    return Timeouts(**overrides)


def is_ci() -> bool:
    return _env_flag("CI", False)


@lru_cache()
def get_retry_count() -> int:
    """Number of reruns granted to a failed e2e test: 2 on CI, 1 locally."""
    value = os.getenv("SHOPFLOW_RETRIES")
    if value:
        return int(value)
    return 2 if is_ci() else 1


@lru_cache()
def get_worker_count() -> int:
    """Number of pytest-xdist workers.

    The live storefront is shared and rate limited, so runs are sequential
    unless SHOPFLOW_WORKERS says otherwise.
    """
    value = os.getenv("SHOPFLOW_WORKERS")
    if value:
        return int(value)
    return 1


TraceMode = Literal["off", "on", "retain-on-failure", "on-first-retry"]
ScreenshotMode = Literal["off", "on", "only-on-failure"]
VideoMode = Literal["off", "on", "retain-on-failure"]


class CapturePolicy(BaseModel):
    """When traces, screenshots and videos are kept for a test."""

    model_config = ConfigDict(frozen=True)

    trace: TraceMode = "on-first-retry"
    screenshot: ScreenshotMode = "only-on-failure"
    video: VideoMode = "retain-on-failure"

    def should_trace(self, attempt: int) -> bool:
        if self.trace == "off":
            return False
        if self.trace == "on-first-retry":
            return attempt == 2
        return True

    def keep_trace(self, failed: bool) -> bool:
        return self.trace != "retain-on-failure" or failed

    def keep_screenshot(self, failed: bool) -> bool:
        if self.screenshot == "off":
            return False
        return self.screenshot == "on" or failed

    def keep_video(self, failed: bool) -> bool:
        if self.video == "off":
            return False
        return self.video == "on" or failed


@lru_cache()
def get_capture_policy() -> CapturePolicy:
    overrides = {}
    for field, env_name in (
        ("trace", "SHOPFLOW_TRACE"),
        ("screenshot", "SHOPFLOW_SCREENSHOT"),
        ("video", "SHOPFLOW_VIDEO"),
    ):
        if os.getenv(env_name):
            overrides[field] = os.environ[env_name]
    return CapturePolicy(**overrides)


def is_headless() -> bool:
    return _env_flag("SHOPFLOW_HEADLESS", True)


def ignore_https_errors() -> bool:
    return _env_flag("SHOPFLOW_IGNORE_HTTPS_ERRORS", True)


def get_artifacts_dir() -> Path:
    """Directory for screenshots, videos, traces and machine-readable results."""
    return Path(os.getenv("SHOPFLOW_ARTIFACTS_DIR", "test-results"))


def get_report_dir() -> Path:
    """Directory for the HTML report."""
    return Path(os.getenv("SHOPFLOW_REPORT_DIR", "playwright-report"))


class Viewport(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int
    height: int


class RunProfile(BaseModel):
    """One (browser engine, device or viewport) target the suite runs against."""

    model_config = ConfigDict(frozen=True)

    name: str
    browser: BrowserName
    device: Optional[str] = None
    viewport: Optional[Viewport] = None

    @property
    def is_mobile(self) -> bool:
        return self.name.startswith("mobile-")

    def context_options(
        self,
        devices: Mapping[str, Mapping[str, Any]],
        base_url: Optional[str] = None,
        video_dir: Optional[Path] = None,
    ) -> Dict[str, Any]:
        """Build keyword arguments for ``browser.new_context``.

        Args:
            devices: Playwright's device descriptor registry (``playwright.devices``)
            base_url: Base URL for relative navigation
            video_dir: Directory to record videos into, or None for no recording

        Returns:
            Keyword arguments for ``Browser.new_context``
        """
        options: Dict[str, Any] = {}
        if self.device:
            descriptor = dict(devices[self.device])
            descriptor.pop("default_browser_type", None)
            options.update(descriptor)
        if self.viewport:
            options["viewport"] = self.viewport.model_dump()

        options["ignore_https_errors"] = ignore_https_errors()
        if base_url:
            options["base_url"] = base_url
        if video_dir is not None:
            options["record_video_dir"] = str(video_dir)
            if "viewport" in options:
                options["record_video_size"] = dict(options["viewport"])
        return options


_DESKTOP = Viewport(width=1920, height=1080)

RUN_PROFILES: Tuple[RunProfile, ...] = (
    RunProfile(name="desktop-chromium", browser="chromium", device="Desktop Chrome", viewport=_DESKTOP),
    RunProfile(name="desktop-firefox", browser="firefox", device="Desktop Firefox", viewport=_DESKTOP),
    RunProfile(name="desktop-webkit", browser="webkit", device="Desktop Safari", viewport=_DESKTOP),
    RunProfile(name="mobile-chrome", browser="chromium", device="Pixel 5"),
    RunProfile(name="mobile-safari", browser="webkit", device="iPhone 13 Pro"),
    RunProfile(
        name="mobile-android",
        browser="chromium",
        device="Pixel 5",
        viewport=Viewport(width=393, height=851),
    ),
)

DEFAULT_PROFILE = "desktop-chromium"


def get_profile(name: str) -> RunProfile:
    """Look up a run profile by name."""
    for profile in RUN_PROFILES:
        if profile.name == name:
            return profile
    valid = ", ".join(p.name for p in RUN_PROFILES)
    raise KeyError(f"Unknown run profile '{name}'. Valid profiles: {valid}")


def resolve_profiles(names: Optional[list] = None) -> Tuple[RunProfile, ...]:
    """Resolve ``--profile`` values; ``all`` selects every profile, nothing selects the default."""
    if not names:
        env_value = os.getenv("SHOPFLOW_PROFILES", "")
        names = [n.strip() for n in env_value.split(",") if n.strip()]
    if not names:
        return (get_profile(DEFAULT_PROFILE),)
    if "all" in names:
        return RUN_PROFILES
    seen = []
    for name in names:
        profile = get_profile(name)
        if profile not in seen:
            seen.append(profile)
    return tuple(seen)
