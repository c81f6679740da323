"""Login / New User Signup page."""

from playwright.async_api import Page

from shopflow.pages.actions import PageActions


class LoginPage:
    """Only the "New User Signup!" half of the page is used by the purchase flow."""

    def __init__(self, page: Page, actions: PageActions = None):
        self.page = page
        self.actions = actions or PageActions(page)

        self.signup_user_title = page.locator("h2", has_text="New User Signup!")
        self.signup_name = page.locator('[data-qa="signup-name"]')
        self.signup_email = page.locator('[data-qa="signup-email"]')
        self.signup_button = page.locator('[data-qa="signup-button"]')

    async def wait_for_login_page(self) -> None:
        await self.actions.wait_for_element(
            self.signup_user_title, self.actions.timeouts.page_ready_ms
        )

    async def get_title_sign_up(self) -> str:
        return await self.actions.get_text_content(self.signup_user_title)

    async def fill_signup_form(self, name: str, email: str) -> None:
        """Start registration with a name and email; leads to the account information form."""
        await self.actions.fill_input(self.signup_name, name)
        await self.actions.fill_input(self.signup_email, email)
        await self.actions.click_element(self.signup_button)
