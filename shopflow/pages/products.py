"""All Products listing and search."""

from typing import List

from playwright.async_api import Page

from shopflow.logging_config import get_logger
from shopflow.pages.actions import PageActions

logger = get_logger()


class ProductsPage:
    def __init__(self, page: Page, actions: PageActions = None):
        self.page = page
        self.actions = actions or PageActions(page)

        self.page_title = page.locator(".title.text-center")
        self.products_list = page.locator(".features_items")
        self.product_items = page.locator(".features_items .product-image-wrapper")
        self.search_input = page.locator("#search_product")
        self.search_button = page.locator("#submit_search")

    async def wait_for_products_page(self) -> None:
        await self.actions.wait_for_element(self.page_title, self.actions.timeouts.page_ready_ms)
        await self.actions.wait_for_element(self.products_list)

    async def get_product_count(self) -> int:
        await self.actions.wait_for_element(self.product_items.first)
        return await self.product_items.count()

    async def get_product_name(self, index: int) -> str:
        name = self.product_items.nth(index).locator(".productinfo p")
        return await self.actions.get_text_content(name)

    async def get_product_price(self, index: int) -> str:
        price = self.product_items.nth(index).locator(".productinfo h2")
        return await self.actions.get_text_content(price)

    async def view_product_by_index(self, index: int) -> None:
        await self.actions.wait_for_element(self.product_items.first)

        product = self.product_items.nth(index)
        await self.actions.scroll_into_view(product)

        view_button = product.locator('a:has-text("View Product")')
        await self.actions.click_element(view_button)
        await self.actions.wait_for_page_load()

    async def view_third_product(self) -> None:
        await self.view_product_by_index(2)

    async def search_product(self, search_term: str) -> None:
        await self.actions.fill_input(self.search_input, search_term)
        await self.actions.click_element(self.search_button)
        await self.actions.wait_for_page_load()

    async def has_correct_title(self) -> bool:
        title_text = await self.actions.get_text_content(self.page_title)
        logger.info(f'Products page title: "{title_text}"')
        return "ALL PRODUCTS" in title_text.upper()

    async def get_all_product_names(self) -> List[str]:
        await self.actions.wait_for_element(self.product_items.first)
        count = await self.product_items.count()
        return [await self.get_product_name(i) for i in range(count)]
