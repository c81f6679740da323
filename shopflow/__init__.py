"""Page-object driven purchase flow suite for the automationexercise.com storefront."""

__version__ = "0.1.0"
