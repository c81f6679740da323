"""The scripted purchase journey.

Home -> Products -> Product detail -> Cart -> Register/Login -> Sign up ->
Account created -> Cart (again, now signed in) -> Checkout -> Payment ->
Order placed.

Each stage receives the live page and the run's ``PurchaseContext``, drives
one screen, and checks the state it expects to land in. A failed check
raises ``StageAssertionError`` and nothing after it runs.
"""

from pathlib import Path
from typing import Awaitable, Callable, Tuple

from playwright.async_api import Page
from pydantic import BaseModel, ConfigDict, Field

from shopflow.config import get_artifacts_dir
from shopflow.data.models import GeneratedUser
from shopflow.exceptions import StageAssertionError
from shopflow.logging_config import get_logger, log_stage_result, log_step
from shopflow.pages import (
    AccountCreatedPage,
    CartPage,
    CheckoutPage,
    HomePage,
    LoginPage,
    PageActions,
    PaymentPage,
    ProductDetailPage,
    ProductsPage,
    SignUpPage,
)

logger = get_logger()

ACCOUNT_CREATED_TEXT = "Account Created!"
ORDER_PLACED_TEXT = "Order Placed!"
SIGNUP_TITLE_TEXT = "New User Signup!"
ACCOUNT_INFO_TITLE_TEXT = "Enter Account Information"


class PurchaseContext(BaseModel):
    """Values threaded through every stage of one purchase run."""

    model_config = ConfigDict(frozen=True)

    quantity: int = Field(ge=1)
    user: GeneratedUser
    artifacts_dir: Path = Field(default_factory=get_artifacts_dir)


Stage = Callable[[Page, PurchaseContext], Awaitable[None]]


def _check(stage: str, condition: bool, message: str) -> None:
    if not condition:
        log_stage_result(stage, False, {"check": message})
        raise StageAssertionError(stage, message)


async def open_home(page: Page, context: PurchaseContext) -> None:
    home = HomePage(page)
    await home.navigate()
    _check("home", await home.is_loaded(), "Home page should load successfully")


async def browse_products(page: Page, context: PurchaseContext) -> None:
    await HomePage(page).navigate_to_products()

    products = ProductsPage(page)
    await products.wait_for_products_page()
    _check("products", await products.has_correct_title(), "Products page should display correct title")

    count = await products.get_product_count()
    _check("products", count > 2, f"At least three products should be displayed, found {count}")

    third_product = await products.get_product_name(2)
    _check("products", bool(third_product), "Third product name should be defined")
    log_stage_result("products", True, {"product_count": count, "selected": third_product})


async def add_product_to_cart(page: Page, context: PurchaseContext) -> None:
    await ProductsPage(page).view_third_product()

    detail = ProductDetailPage(page)
    await detail.wait_for_product_detail_page()
    name = await detail.get_product_name()
    _check("product_detail", bool(name), "Product detail page should display a product name")

    await detail.set_quantity(context.quantity)
    current = await detail.get_current_quantity()
    _check(
        "product_detail",
        current == str(context.quantity),
        f"Quantity should be {context.quantity}, field shows {current}",
    )

    await detail.add_to_cart()
    _check(
        "product_detail",
        await detail.is_success_modal_visible(),
        "Success modal should appear after adding to cart",
    )
    log_stage_result("product_detail", True, {"product": name, "quantity": context.quantity})


async def review_cart(page: Page, context: PurchaseContext) -> None:
    await ProductDetailPage(page).click_view_cart()

    cart = CartPage(page, PageActions(page, artifacts_dir=context.artifacts_dir))
    await cart.wait_for_cart_page()

    item_count = await cart.get_cart_item_count()
    _check("cart", item_count > 0, "Cart should contain items")

    cart_quantity = await cart.get_item_quantity(0)
    _check(
        "cart",
        cart_quantity == context.quantity,
        f"Cart quantity should be {context.quantity}, got {cart_quantity}",
    )

    await cart.proceed_to_checkout()
    _check(
        "cart",
        await cart.is_register_login_modal_visible(),
        "Register/Login modal or page should appear",
    )

    viewport = cart.actions.get_viewport_size() or {"width": 800, "height": 600}
    await cart.actions.take_screenshot(f"checkout-modal-{viewport['width']}x{viewport['height']}")


async def start_registration(page: Page, context: PurchaseContext) -> None:
    await CartPage(page).click_register_login()

    login = LoginPage(page)
    await login.wait_for_login_page()
    title = await login.get_title_sign_up()
    _check("register_login", SIGNUP_TITLE_TEXT in title, f"Expected '{SIGNUP_TITLE_TEXT}', got '{title}'")

    await login.fill_signup_form(context.user.name, context.user.email)


async def complete_sign_up(page: Page, context: PurchaseContext) -> None:
    signup = SignUpPage(page)
    await signup.wait_for_sign_up_page()

    title = await signup.get_title_sign_up_page()
    _check("sign_up", ACCOUNT_INFO_TITLE_TEXT in title, f"Expected '{ACCOUNT_INFO_TITLE_TEXT}', got '{title}'")

    prefilled = await signup.validate_name_and_email(context.user.name, context.user.email)
    _check("sign_up", prefilled, "Name and Email should be pre-filled")

    await signup.fill_signup_form(context.user)


async def confirm_account(page: Page, context: PurchaseContext) -> None:
    account_created = AccountCreatedPage(page)
    await account_created.wait_for_account_created_page()

    title = await account_created.get_account_created_title()
    _check("account_created", ACCOUNT_CREATED_TEXT in title, f"Expected '{ACCOUNT_CREATED_TEXT}', got '{title}'")

    await account_created.click_continue()


async def return_to_cart(page: Page, context: PurchaseContext) -> None:
    # Checkout has to be started again once the user is signed in
    await HomePage(page).navigate_to_cart()

    cart = CartPage(page)
    await cart.wait_for_cart_page()
    _check("cart_again", not await cart.is_cart_empty(), "Cart should still hold the product after sign up")

    await cart.proceed_to_checkout()


async def place_order(page: Page, context: PurchaseContext) -> None:
    checkout = CheckoutPage(page)
    await checkout.wait_for_checkout_page()
    await checkout.click_place_order_button()


async def pay(page: Page, context: PurchaseContext) -> None:
    payment = PaymentPage(page)
    await payment.wait_for_payment_page()

    user = context.user
    await payment.fill_payment_form(
        user.name,
        user.card_number,
        user.cvv,
        str(user.expiry_month),
        str(user.expiry_year),
    )


async def verify_order_placed(page: Page, context: PurchaseContext) -> None:
    message = await PaymentPage(page).get_successful_message()
    _check("order_placed", ORDER_PLACED_TEXT in message, f"Expected '{ORDER_PLACED_TEXT}', got '{message}'")


PURCHASE_STAGES: Tuple[Tuple[str, Stage], ...] = (
    ("Navigating to homepage", open_home),
    ("Navigating to products page", browse_products),
    ("Viewing product details and adding to cart", add_product_to_cart),
    ("Reviewing cart and proceeding to checkout", review_cart),
    ("Opening register/login and starting signup", start_registration),
    ("Filling account information", complete_sign_up),
    ("Confirming account creation", confirm_account),
    ("Returning to cart as a signed-in user", return_to_cart),
    ("Placing the order", place_order),
    ("Submitting payment", pay),
    ("Verifying order confirmation", verify_order_placed),
)


async def run_purchase_flow(
    page: Page,
    context: PurchaseContext,
    stages: Tuple[Tuple[str, Stage], ...] = PURCHASE_STAGES,
) -> None:
    """Run every stage in order; the first failing stage stops the run."""
    logger.info(f"Starting purchase flow with quantity {context.quantity} for {context.user.email}")

    total = len(stages)
    for number, (description, stage) in enumerate(stages, start=1):
        log_step(number, total, description)
        await stage(page, context)

    logger.info("Purchase flow completed")
