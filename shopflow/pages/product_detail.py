"""Single product page: quantity entry and add-to-cart."""

from playwright.async_api import Page

from shopflow.exceptions import InvalidQuantityError, ValueMismatchError
from shopflow.pages.actions import PageActions


class ProductDetailPage:
    """Product details, quantity input and the "Added!" modal."""

    def __init__(self, page: Page, actions: PageActions = None):
        self.page = page
        self.actions = actions or PageActions(page)

        self.product_name = page.locator(".product-information h2")
        self.product_price = page.locator(".product-information span span")
        self.product_details = page.locator(".product-information")

        self.quantity_input = page.locator("#quantity")
        self.add_to_cart_button = page.locator('button:has-text("Add to cart")')

        self.success_modal = page.locator(".modal-content")
        self.view_cart_button = page.locator('a:has-text("View Cart")')
        self.continue_shopping_button = page.locator('button:has-text("Continue Shopping")')

    async def wait_for_product_detail_page(self) -> None:
        await self.actions.wait_for_element(
            self.product_details, self.actions.timeouts.page_ready_ms
        )
        await self.actions.wait_for_element(self.product_name)

    async def get_product_name(self) -> str:
        return await self.actions.get_text_content(self.product_name)

    async def get_product_price(self) -> str:
        return await self.actions.get_text_content(self.product_price)

    async def get_current_quantity(self) -> str:
        return await self.actions.get_input_value(self.quantity_input)

    async def set_quantity(self, quantity: int) -> None:
        """Type ``quantity`` into the quantity field and verify it reads back unchanged.

        Args:
            quantity: Positive whole number of items

        Raises:
            InvalidQuantityError: if ``quantity`` is not a positive int; the page is not touched
            ValueMismatchError: if the field holds a different value after filling
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidQuantityError(f"Quantity must be a positive integer, got {quantity!r}")

        await self.actions.wait_for_element(self.quantity_input)

        await self.quantity_input.clear()
        await self.quantity_input.fill(str(quantity))

        set_value = await self.get_current_quantity()
        if set_value != str(quantity):
            raise ValueMismatchError("quantity", str(quantity), set_value)

    async def add_to_cart(self) -> None:
        """Click "Add to cart" and wait for the confirmation modal."""
        await self.actions.scroll_into_view(self.add_to_cart_button)
        await self.actions.click_element(self.add_to_cart_button)
        await self.actions.wait_for_element(self.success_modal)

    async def is_success_modal_visible(self) -> bool:
        return await self.actions.is_visible(self.success_modal)

    async def click_view_cart(self) -> None:
        await self.actions.wait_for_element(self.view_cart_button)
        await self.actions.click_element(self.view_cart_button)
        await self.actions.wait_for_page_load()

    async def click_continue_shopping(self) -> None:
        await self.actions.click_element(self.continue_shopping_button)
        # Modal fades out
        await self.actions.pause(500)

    async def get_availability(self) -> str:
        return await self._product_fact("Availability")

    async def get_condition(self) -> str:
        return await self._product_fact("Condition")

    async def get_brand(self) -> str:
        return await self._product_fact("Brand")

    async def _product_fact(self, label: str) -> str:
        fact = self.page.locator(f'.product-information p:has-text("{label}")')
        return await self.actions.get_text_content(fact)

    async def add_product_to_cart(self, quantity: int) -> None:
        await self.set_quantity(quantity)
        await self.add_to_cart()
