"""Payment form and order confirmation."""

from playwright.async_api import Page

from shopflow.pages.actions import PageActions


class PaymentPage:
    """Card entry form; after paying, the same URL space shows "Order Placed!"."""

    def __init__(self, page: Page, actions: PageActions = None):
        self.page = page
        self.actions = actions or PageActions(page)

        self.name_on_card = page.locator('[data-qa="name-on-card"]')
        self.card_number = page.locator('[data-qa="card-number"]')
        self.cvc = page.locator('[data-qa="cvc"]')
        self.expiration_month = page.locator('[data-qa="expiry-month"]')
        self.expiration_year = page.locator('[data-qa="expiry-year"]')
        self.pay_and_confirm_order_button = page.locator('[data-qa="pay-button"]')
        self.successful_message = page.locator('[data-qa="order-placed"]')

    async def wait_for_payment_page(self) -> None:
        await self.actions.wait_for_element(self.name_on_card, self.actions.timeouts.page_ready_ms)

    async def fill_payment_form(
        self, name: str, card_number: str, cvc: str, month: str, year: str
    ) -> None:
        """Fill the card form and submit payment.

        Args:
            name: Cardholder name
            card_number: Card number digits
            cvc: 3 or 4 digit security code
            month: Expiry month (MM)
            year: Expiry year (YYYY)
        """
        await self.actions.fill_input(self.name_on_card, name)
        await self.actions.fill_input(self.card_number, card_number)
        await self.actions.fill_input(self.cvc, cvc)
        await self.actions.fill_input(self.expiration_month, month)
        await self.actions.fill_input(self.expiration_year, year)

        await self.actions.click_element(self.pay_and_confirm_order_button)

    async def get_successful_message(self) -> str:
        return await self.actions.get_text_content(self.successful_message)
