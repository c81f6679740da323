"""Account Created! confirmation page."""

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from shopflow.pages.actions import PageActions


class AccountCreatedPage:
    def __init__(self, page: Page, actions: PageActions = None):
        self.page = page
        self.actions = actions or PageActions(page)

        self.account_created_title = page.locator('[data-qa="account-created"]')
        self.continue_button = page.locator('[data-qa="continue-button"]')
        self.success_message = page.locator(".title.text-center")

    async def wait_for_account_created_page(self) -> None:
        await self.actions.wait_for_element(
            self.account_created_title, self.actions.timeouts.page_ready_ms
        )

    async def get_account_created_title(self) -> str:
        await self.actions.wait_for_element(self.account_created_title)
        return await self.actions.get_text_content(self.account_created_title)

    async def get_success_message(self) -> str:
        await self.actions.wait_for_element(self.success_message)
        return await self.actions.get_text_content(self.success_message)

    async def click_continue(self) -> None:
        await self.actions.scroll_into_view(self.continue_button)
        await self.actions.click_element(self.continue_button)
        await self.actions.wait_for_page_load()

    async def is_account_created(self) -> bool:
        try:
            await self.actions.wait_for_element(self.account_created_title, 5000)
        except PlaywrightTimeoutError:
            return False
        return True
