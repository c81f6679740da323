"""Landing page: navigation into products and cart, including the collapsed mobile menu."""

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from shopflow.pages.actions import PageActions


class HomePage:
    """The storefront's landing page."""

    def __init__(self, page: Page, actions: PageActions = None):
        self.page = page
        self.actions = actions or PageActions(page)

        # Header links appear more than once on the page
        self.products_link = page.locator('a[href="/products"]').first
        self.cart_link = page.locator('a[href="/view_cart"]').first

        self.mobile_menu_toggle = page.locator(".navbar-toggle")
        self.logo = page.locator(".logo")
        self.header = page.locator("header")

    async def navigate(self) -> None:
        await self.actions.goto("/")
        await self.actions.wait_for_page_load()

    async def is_loaded(self) -> bool:
        """Return whether the logo became visible within the page-ready budget."""
        try:
            await self.actions.wait_for_element(self.logo, self.actions.timeouts.page_ready_ms)
            return True
        except PlaywrightTimeoutError:
            return False

    async def navigate_to_products(self) -> None:
        if self.actions.is_mobile_viewport():
            await self._open_mobile_menu()

        await self.actions.scroll_into_view(self.products_link)
        await self.actions.click_element(self.products_link)
        await self.actions.wait_for_page_load()

    async def navigate_to_cart(self) -> None:
        if self.actions.is_mobile_viewport():
            await self._open_mobile_menu()

        await self.actions.scroll_into_view(self.cart_link)
        await self.actions.click_element(self.cart_link)
        await self.actions.wait_for_page_load()

    async def _open_mobile_menu(self) -> None:
        if await self.actions.is_visible(self.mobile_menu_toggle):
            await self.actions.click_element(self.mobile_menu_toggle)
            # Menu expands with an animation
            await self.actions.pause(500)

    async def get_header_text(self) -> str:
        return await self.actions.get_text_content(self.header)

    async def is_logo_visible(self) -> bool:
        return await self.actions.is_visible(self.logo)
