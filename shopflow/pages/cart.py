"""Shopping cart: line items, checkout, and the register/login hand-off."""

from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from shopflow.pages.actions import PageActions


class CartPage:
    """Cart contents and the checkout button.

    When a guest proceeds to checkout the storefront either shows a
    "Register / Login" modal or navigates straight to ``/login``; both are
    handled here.
    """

    def __init__(self, page: Page, actions: PageActions = None):
        self.page = page
        self.actions = actions or PageActions(page)

        self.cart_table = page.locator("#cart_info_table")
        self.cart_items = page.locator("#cart_info tbody tr")
        self.proceed_to_checkout_button = page.locator(".btn.btn-default.check_out")
        self.register_login_modal = page.locator(".modal-content")
        self.modal_register_login_link = page.locator('.modal-body a[href="/login"]')
        self.register_login_link = page.locator('a[href="/login"]').first

    async def wait_for_cart_page(self) -> None:
        await self.actions.wait_for_element(self.cart_table, self.actions.timeouts.page_ready_ms)

    async def get_cart_item_count(self) -> int:
        """Return the number of line items, or 0 if none shows up within 5 seconds."""
        try:
            await self.actions.wait_for_element(self.cart_items.first, 5000)
        except PlaywrightTimeoutError:
            return 0
        return await self.cart_items.count()

    async def get_item_quantity(self, item_index: int = 0) -> int:
        quantity = self.cart_items.nth(item_index).locator(".cart_quantity button")
        return int(await self.actions.get_text_content(quantity))

    async def get_item_name(self, item_index: int = 0) -> str:
        name = self.cart_items.nth(item_index).locator(".cart_description h4 a")
        return await self.actions.get_text_content(name)

    async def get_item_price(self, item_index: int = 0) -> str:
        price = self.cart_items.nth(item_index).locator(".cart_price p")
        return await self.actions.get_text_content(price)

    async def get_item_total(self, item_index: int = 0) -> str:
        total = self.cart_items.nth(item_index).locator(".cart_total_price")
        return await self.actions.get_text_content(total)

    async def is_cart_empty(self) -> bool:
        return await self.get_cart_item_count() == 0

    async def proceed_to_checkout(self) -> None:
        await self.actions.scroll_into_view(self.proceed_to_checkout_button)
        await self.actions.click_element(self.proceed_to_checkout_button)
        await self.actions.pause(1000)

    async def is_register_login_modal_visible(self) -> bool:
        """Return True if the register/login modal is showing or the login page is already open."""
        await self.actions.pause(500)

        modal_visible = await self.actions.is_visible(self.register_login_modal)
        on_login_page = "/login" in self.actions.get_current_url()

        return modal_visible or on_login_page

    async def click_register_login(self) -> None:
        """Follow the register/login link, preferring the modal's link when it is showing."""
        if await self.actions.is_visible(self.modal_register_login_link):
            await self.actions.click_element(self.modal_register_login_link)
        else:
            await self.actions.click_element(self.register_login_link)

        await self.actions.wait_for_page_load()

    async def remove_item(self, item_index: int = 0) -> None:
        remove_button = self.cart_items.nth(item_index).locator(".cart_quantity_delete")
        await self.actions.click_element(remove_button)
        await self.actions.pause(1000)

    async def verify_cart_item(
        self, expected_quantity: int, expected_name: Optional[str] = None
    ) -> bool:
        """Check the first line item's quantity and, optionally, that its name contains ``expected_name``."""
        try:
            if await self.get_item_quantity(0) != expected_quantity:
                return False
            if expected_name:
                return expected_name in await self.get_item_name(0)
        except (PlaywrightError, ValueError):
            return False
        return True
