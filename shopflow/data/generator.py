"""Randomized fixture data for the purchase flow.

Every ``DataGenerator`` owns its own ``Faker`` instance, so generators are
independent of each other and safe to use from separate test workers. Pass a
``seed`` to get reproducible output.
"""

from datetime import date
import re
import string
import time
from typing import Any, Dict, Optional, Sequence, TypeVar
import unicodedata

from faker import Faker

from shopflow.data.models import (
    COUNTRIES,
    TITLES,
    DateOfBirth,
    GeneratedCreditCard,
    GeneratedReview,
    GeneratedUser,
)
from shopflow.exceptions import InvalidRangeError

T = TypeVar("T")

MIN_AGE = 18
MAX_AGE = 80

SEARCH_TERMS = ("shirt", "jeans", "dress", "top", "tshirt", "men", "women", "kids")

CARD_TYPES = ("visa16", "mastercard", "amex", "discover")


def _email_local_part(*names: str) -> str:
    """Fold names to a lower-case ASCII ``first.last`` local part."""
    parts = []
    for name in names:
        folded = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
        cleaned = re.sub(r"[^a-z0-9]", "", folded.lower())
        if cleaned:
            parts.append(cleaned)
    return ".".join(parts) or "user"


class DataGenerator:
    """Generates users, cards, quantities and other fixture values."""

    def __init__(self, seed: Optional[int] = None, locale: str = "en_US"):
        self.faker = Faker(locale)
        if seed is not None:
            self.faker.seed_instance(seed)

    def generate_random_quantity(self, min_value: int = 1, max_value: int = 20) -> int:
        """Return a quantity drawn uniformly from [min_value, max_value]."""
        return self.generate_number(min_value, max_value)

    def generate_number(self, min_value: int, max_value: int) -> int:
        """Return an integer drawn uniformly from [min_value, max_value]."""
        if min_value > max_value:
            raise InvalidRangeError(min_value, max_value)
        return self.faker.random_int(min=min_value, max=max_value)

    def generate_user_data(self) -> GeneratedUser:
        """Generate a full registration and checkout profile.

        The first name and title follow a randomly chosen gender, the email is
        derived from the chosen first and last name plus a numeric suffix, and
        the date of birth puts the user between 18 and 80 years old.
        """
        gender = self.faker.random_element(tuple(TITLES))
        if gender == "male":
            first_name = self.faker.first_name_male()
        else:
            first_name = self.faker.first_name_female()
        last_name = self.faker.last_name()

        # The storefront keeps every account, so common names need a numeric suffix
        local_part = _email_local_part(first_name, last_name) + self.faker.numerify("######")
        email = f"{local_part}@{self.faker.free_email_domain()}"

        return GeneratedUser(
            gender=gender,
            name=f"{first_name} {last_name}",
            email=email.lower(),
            title=TITLES[gender],
            password=self.faker.password(length=12),
            first_name=first_name,
            last_name=last_name,
            date_of_birth=self.generate_date_of_birth(),
            company=self.faker.company(),
            address1=self.faker.street_address(),
            address2=self.faker.secondary_address(),
            country=self.faker.random_element(COUNTRIES),
            state=self.faker.state(),
            city=self.faker.city(),
            zipcode=self.faker.zipcode(),
            mobile_number=self.faker.phone_number(),
            credit_card=self.generate_credit_card(),
        )

    def generate_date_of_birth(self) -> DateOfBirth:
        birth_date = self.faker.date_of_birth(minimum_age=MIN_AGE, maximum_age=MAX_AGE)
        return DateOfBirth(
            day=str(birth_date.day),
            month=str(birth_date.month),
            year=str(birth_date.year),
        )

    def generate_credit_card(self) -> GeneratedCreditCard:
        """Generate card details for the payment form.

        Month and year are drawn independently, so the pair is not guaranteed
        to be a coherent expiry date. The year is always after the current one.
        """
        card_type = self.faker.random_element(CARD_TYPES)
        return GeneratedCreditCard(
            number=self.faker.credit_card_number(card_type=card_type),
            cvv=self.faker.credit_card_security_code(card_type=card_type),
            expiry_month=self.faker.future_date().month,
            expiry_year=date.today().year + self.faker.random_int(min=1, max=5),
        )

    def generate_review(self) -> GeneratedReview:
        return GeneratedReview(
            name=self.faker.name(),
            email=self.faker.email(),
            review=self.faker.paragraph(),
        )

    def generate_search_term(self) -> str:
        return self.faker.random_element(SEARCH_TERMS)

    def generate_comment(self) -> str:
        return " ".join(self.faker.sentences(nb=2))

    def generate_unique_email(self) -> str:
        """Build an email that will not collide with earlier runs."""
        timestamp = int(time.time() * 1000)
        suffix = self.faker.lexify("?????", letters=string.ascii_lowercase + string.digits)
        return f"test.user.{timestamp}.{suffix}@example.com"

    def generate_boolean(self) -> bool:
        return self.faker.pybool()

    def select_random(self, items: Sequence[T]) -> T:
        if not items:
            raise InvalidRangeError(0, -1, "Cannot select from an empty sequence")
        return self.faker.random_element(items)

    def generate_test_data(self, scenario: str) -> Dict[str, Any]:
        """Bundle fixture values for a named scenario.

        Args:
            scenario: One of ``purchase``, ``registration`` or ``review``

        Returns:
            The scenario's fixture values, or an empty dict for unknown scenarios
        """
        if scenario == "purchase":
            return {
                "quantity": self.generate_random_quantity(),
                "user": self.generate_user_data(),
                "card": self.generate_credit_card(),
            }
        if scenario == "registration":
            return {
                "user": self.generate_user_data(),
                "dob": self.generate_date_of_birth(),
            }
        if scenario == "review":
            return {"review": self.generate_review()}
        return {}


default_generator = DataGenerator()


def random_quantity(min_value: int = 1, max_value: int = 20) -> int:
    return default_generator.generate_random_quantity(min_value, max_value)


def random_user() -> GeneratedUser:
    return default_generator.generate_user_data()


def unique_email() -> str:
    return default_generator.generate_unique_email()
