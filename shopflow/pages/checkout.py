"""Checkout review page."""

from playwright.async_api import Page

from shopflow.pages.actions import PageActions


class CheckoutPage:
    def __init__(self, page: Page, actions: PageActions = None):
        self.page = page
        self.actions = actions or PageActions(page)

        self.place_order_button = page.locator('a[href="/payment"]').first

    async def wait_for_checkout_page(self) -> None:
        await self.actions.wait_for_element(
            self.place_order_button, self.actions.timeouts.page_ready_ms
        )

    async def click_place_order_button(self) -> None:
        await self.actions.click_element(self.place_order_button)
