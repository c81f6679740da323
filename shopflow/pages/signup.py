"""Enter Account Information form shown after the initial signup."""

from playwright.async_api import Page

from shopflow.data.models import GeneratedUser
from shopflow.pages.actions import PageActions


class SignUpPage:
    """Account details form.

    Name and email arrive pre-filled from the login page and are only read
    back here, never typed.
    """

    def __init__(self, page: Page, actions: PageActions = None):
        self.page = page
        self.actions = actions or PageActions(page)

        self.sign_up_title = page.locator("h2", has_text="Enter Account Information")

        self.name = page.locator('[data-qa="name"]')
        self.email = page.locator('[data-qa="email"]')
        self.password = page.locator('[data-qa="password"]')

        self.dob_day = page.locator('[data-qa="days"]')
        self.dob_month = page.locator('[data-qa="months"]')
        self.dob_year = page.locator('[data-qa="years"]')

        self.first_name = page.locator('[data-qa="first_name"]')
        self.last_name = page.locator('[data-qa="last_name"]')
        self.company = page.locator('[data-qa="company"]')

        self.address1 = page.locator('[data-qa="address"]')
        self.address2 = page.locator('[data-qa="address2"]')
        self.country = page.locator('[data-qa="country"]')
        self.state = page.locator('[data-qa="state"]')
        self.city = page.locator('[data-qa="city"]')
        self.zipcode = page.locator('[data-qa="zipcode"]')
        self.mobile_number = page.locator('[data-qa="mobile_number"]')

        self.create_account_button = page.locator('[data-qa="create-account"]')

    async def get_title_sign_up_page(self) -> str:
        return await self.actions.get_text_content(self.sign_up_title)

    async def wait_for_sign_up_page(self) -> None:
        await self.actions.wait_for_element(self.sign_up_title, self.actions.timeouts.page_ready_ms)

    async def select_title(self, title: str) -> None:
        """Tick the Mr / Mrs radio button."""
        await self.actions.click_element(self.page.locator(f'input[value="{title}"]'))

    async def select_date_of_birth(self, day: str, month: str, year: str) -> None:
        await self.actions.select_option(self.dob_day, day)
        await self.actions.select_option(self.dob_month, month)
        await self.actions.select_option(self.dob_year, year)

    async def validate_name_and_email(self, expected_name: str, expected_email: str) -> bool:
        """Return whether the pre-filled name and email equal the expected values exactly."""
        actual_name = await self.actions.get_input_value(self.name)
        actual_email = await self.actions.get_input_value(self.email)
        return actual_name == expected_name and actual_email == expected_email

    async def fill_signup_form(self, user: GeneratedUser) -> None:
        """Fill every account field from ``user`` and submit the form."""
        await self.select_title(user.title)

        await self.actions.fill_input(self.password, user.password)
        await self.select_date_of_birth(user.day, user.month, user.year)

        await self.actions.fill_input(self.first_name, user.first_name)
        await self.actions.fill_input(self.last_name, user.last_name)
        await self.actions.fill_input(self.company, user.company)

        await self.actions.fill_input(self.address1, user.address1)
        await self.actions.fill_input(self.address2, user.address2)
        await self.actions.select_option(self.country, user.country)
        await self.actions.fill_input(self.state, user.state)
        await self.actions.fill_input(self.city, user.city)
        await self.actions.fill_input(self.zipcode, user.zipcode)
        await self.actions.fill_input(self.mobile_number, user.mobile_number)

        await self.actions.click_element(self.create_account_button)
