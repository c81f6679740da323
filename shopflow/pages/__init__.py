"""Page objects for the storefront screens visited by the purchase flow."""

from .account_created import AccountCreatedPage
from .actions import PageActions
from .cart import CartPage
from .checkout import CheckoutPage
from .home import HomePage
from .login import LoginPage
from .payment import PaymentPage
from .product_detail import ProductDetailPage
from .products import ProductsPage
from .signup import SignUpPage

__all__ = [
    "AccountCreatedPage",
    "CartPage",
    "CheckoutPage",
    "HomePage",
    "LoginPage",
    "PageActions",
    "PaymentPage",
    "ProductDetailPage",
    "ProductsPage",
    "SignUpPage",
]
