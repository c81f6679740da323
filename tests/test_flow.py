"""Flow sequencing and context tests that need no browser."""

from pydantic import ValidationError
import pytest

from shopflow.exceptions import StageAssertionError
from shopflow.flow import PURCHASE_STAGES, PurchaseContext, _check, run_purchase_flow


@pytest.fixture
def context(generator, tmp_path):
    return PurchaseContext(quantity=3, user=generator.generate_user_data(), artifacts_dir=tmp_path)


def test_stage_order():
    names = [stage.__name__ for _, stage in PURCHASE_STAGES]

    assert names == [
        "open_home",
        "browse_products",
        "add_product_to_cart",
        "review_cart",
        "start_registration",
        "complete_sign_up",
        "confirm_account",
        "return_to_cart",
        "place_order",
        "pay",
        "verify_order_placed",
    ]


def test_context_rejects_zero_quantity(generator):
    with pytest.raises(ValidationError):
        PurchaseContext(quantity=0, user=generator.generate_user_data())


def test_context_is_immutable(context):
    with pytest.raises(ValidationError):
        context.quantity = 5


def test_check_passes_silently():
    _check("cart", True, "Cart should contain items")


def test_check_raises_with_stage(caplog):
    with caplog.at_level("WARNING", logger="shopflow"):
        with pytest.raises(StageAssertionError) as exc_info:
            _check("cart", False, "Cart should contain items")

    assert exc_info.value.stage == "cart"
    assert str(exc_info.value) == "[cart] Cart should contain items"
    assert "Cart should contain items" in caplog.text


async def test_stages_run_in_order_with_shared_context(context):
    seen = []

    async def first(page, ctx):
        seen.append(("first", page, ctx.quantity))

    async def second(page, ctx):
        seen.append(("second", page, ctx.quantity))

    await run_purchase_flow("page", context, (("one", first), ("two", second)))

    assert seen == [("first", "page", 3), ("second", "page", 3)]


async def test_failure_aborts_remaining_stages(context):
    seen = []

    async def failing(page, ctx):
        seen.append("failing")
        _check("products", False, "At least three products should be displayed, found 0")

    async def later(page, ctx):
        seen.append("later")

    with pytest.raises(StageAssertionError):
        await run_purchase_flow(None, context, (("products", failing), ("later", later)))

    assert seen == ["failing"]


async def test_steps_are_logged(context, caplog):
    async def noop(page, ctx):
        pass

    with caplog.at_level("INFO", logger="shopflow"):
        await run_purchase_flow(None, context, (("Navigating to homepage", noop),))

    assert "Step 1/1" in caplog.text
    assert "Navigating to homepage" in caplog.text
