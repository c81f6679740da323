"""Interaction helpers shared by every page object.

Page objects hold a ``PageActions`` instance rather than inheriting from a
common base class. All waits, clicks and reads go through it so that timeout
and retry behaviour is the same on every screen.
"""

from pathlib import Path
from typing import Awaitable, Callable, Dict, Optional, TypeVar

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from shopflow.config import MOBILE_BREAKPOINT, get_artifacts_dir, get_timeouts
from shopflow.exceptions import OptionNotFoundError
from shopflow.logging_config import get_logger
from shopflow.retry import BackoffPolicy, retry_operation

T = TypeVar("T")

_HAS_OPTION_JS = """
(el, value) => Array.from(el.options || []).some(o => o.value === value || o.label === value)
"""


class PageActions:
    """Resilient interaction primitives bound to one Playwright page."""

    def __init__(
        self,
        page: Page,
        backoff: Optional[BackoffPolicy] = None,
        artifacts_dir: Optional[Path] = None,
    ):
        self.page = page
        self.timeouts = get_timeouts()
        self.backoff = backoff or BackoffPolicy()
        self.artifacts_dir = artifacts_dir or get_artifacts_dir()
        self.logger = get_logger()

    async def goto(self, url: str) -> None:
        """Navigate to ``url`` (relative to the context's base URL) and wait for DOM ready."""
        await self.page.goto(
            url, wait_until="domcontentloaded", timeout=self.timeouts.navigation_ms
        )

    async def wait_for_element(self, locator: Locator, timeout: Optional[int] = None) -> None:
        """Wait until the element is visible.

        Raises:
            playwright TimeoutError: if the element is not visible within ``timeout`` ms
                (0 waits without limit)
        """
        await locator.wait_for(
            state="visible", timeout=timeout if timeout is not None else self.timeouts.element_ms
        )

    async def click_element(self, locator: Locator) -> None:
        await locator.wait_for(state="visible")
        await locator.wait_for(state="attached")
        await locator.click(force=False)

    async def select_option(self, locator: Locator, value: str) -> None:
        """Select the option whose value or label equals ``value``.

        Raises:
            OptionNotFoundError: if no option matches
        """
        await locator.wait_for(state="visible")
        if not await locator.evaluate(_HAS_OPTION_JS, value):
            raise OptionNotFoundError(value, str(locator))
        await locator.select_option(value)

    async def fill_input(self, locator: Locator, text: str) -> None:
        await locator.wait_for(state="visible")
        await locator.fill("")
        await locator.fill(text)

    async def get_text_content(self, locator: Locator) -> str:
        await locator.wait_for(state="visible")
        text = await locator.text_content()
        return (text or "").strip()

    async def get_input_value(self, locator: Locator) -> str:
        return await locator.input_value()

    async def is_visible(self, locator: Locator) -> bool:
        """Return whether the element is visible; lookup failures count as not visible."""
        try:
            return await locator.is_visible()
        except PlaywrightError as e:
            self.logger.debug(f"Visibility check failed for {locator}: {e}")
            return False

    async def scroll_into_view(self, locator: Locator) -> None:
        await locator.scroll_into_view_if_needed()

    def get_viewport_size(self) -> Optional[Dict[str, int]]:
        return self.page.viewport_size

    def is_mobile_viewport(self) -> bool:
        viewport = self.get_viewport_size()
        return viewport["width"] < MOBILE_BREAKPOINT if viewport else False

    async def wait_for_page_load(self) -> None:
        """Wait for DOM ready, then give network idle a shorter, non-fatal budget."""
        await self.page.wait_for_load_state("domcontentloaded", timeout=self.timeouts.dom_ready_ms)
        try:
            await self.page.wait_for_load_state(
                "networkidle", timeout=self.timeouts.network_idle_ms
            )
        except PlaywrightTimeoutError:
            self.logger.warning("Network idle timeout reached, continuing...")

    async def pause(self, milliseconds: int) -> None:
        await self.page.wait_for_timeout(milliseconds)

    async def take_screenshot(self, name: str) -> Path:
        """Save a full-page screenshot as ``<artifacts_dir>/<name>.png``."""
        self.artifacts_dir.mkdir(parents=True, exist_ok=True)
        path = self.artifacts_dir / f"{name}.png"
        await self.page.screenshot(path=str(path), full_page=True)
        self.logger.info(f"Screenshot saved: {path}")
        return path

    async def get_title(self) -> str:
        return await self.page.title()

    def get_current_url(self) -> str:
        return self.page.url

    async def retry_operation(
        self, operation: Callable[[], Awaitable[T]], max_retries: int = 3
    ) -> T:
        return await retry_operation(operation, max_retries=max_retries, policy=self.backoff)

    async def safe_click(self, locator: Locator) -> None:
        await self.retry_operation(lambda: self.click_element(locator))

    async def wait_for_element_with_retry(
        self, locator: Locator, timeout: Optional[int] = None
    ) -> None:
        await self.retry_operation(lambda: self.wait_for_element(locator, timeout))
