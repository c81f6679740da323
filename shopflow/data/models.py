"""Fixture value models produced by the data generator."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

COUNTRIES = (
    "India",
    "United States",
    "Canada",
    "Australia",
    "Israel",
    "New Zealand",
    "Singapore",
)

TITLES = {"male": "Mr", "female": "Mrs"}

Gender = Literal["male", "female"]


class GeneratedCreditCard(BaseModel):
    """Synthetic card details for form filling; not valid for a real gateway."""

    model_config = ConfigDict(frozen=True)

    number: str = Field(pattern=r"^\d{12,19}$")
    cvv: str = Field(pattern=r"^\d{3,4}$")
    expiry_month: int = Field(ge=1, le=12)
    expiry_year: int


class DateOfBirth(BaseModel):
    """Date of birth split into the form's day/month/year strings (month is 1-based)."""

    model_config = ConfigDict(frozen=True)

    day: str
    month: str
    year: str


class GeneratedUser(BaseModel):
    """A complete registration and checkout profile for one test run."""

    model_config = ConfigDict(frozen=True)

    gender: Gender
    name: str
    email: EmailStr
    title: Literal["Mr", "Mrs"]
    password: str
    first_name: str
    last_name: str
    date_of_birth: DateOfBirth
    company: str
    address1: str
    address2: str
    country: str
    state: str
    city: str
    zipcode: str
    mobile_number: str
    credit_card: GeneratedCreditCard

    @field_validator("email")
    @classmethod
    def lower_case_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("country")
    @classmethod
    def known_country(cls, value: str) -> str:
        if value not in COUNTRIES:
            raise ValueError(f"Country must be one of {', '.join(COUNTRIES)}")
        return value

    @model_validator(mode="after")
    def title_matches_gender(self) -> "GeneratedUser":
        if self.title != TITLES[self.gender]:
            raise ValueError(f"Title {self.title} does not match gender {self.gender}")
        return self

    @property
    def day(self) -> str:
        return self.date_of_birth.day

    @property
    def month(self) -> str:
        return self.date_of_birth.month

    @property
    def year(self) -> str:
        return self.date_of_birth.year

    @property
    def card_number(self) -> str:
        return self.credit_card.number

    @property
    def cvv(self) -> str:
        return self.credit_card.cvv

    @property
    def expiry_month(self) -> int:
        return self.credit_card.expiry_month

    @property
    def expiry_year(self) -> int:
        return self.credit_card.expiry_year


class GeneratedReview(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: EmailStr
    review: str
