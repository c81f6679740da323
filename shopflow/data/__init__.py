"""Fixture data generation for the purchase flow."""

from .generator import DataGenerator, random_quantity, random_user, unique_email
from .models import COUNTRIES, DateOfBirth, GeneratedCreditCard, GeneratedReview, GeneratedUser

__all__ = [
    "COUNTRIES",
    "DataGenerator",
    "DateOfBirth",
    "GeneratedCreditCard",
    "GeneratedReview",
    "GeneratedUser",
    "random_quantity",
    "random_user",
    "unique_email",
]
