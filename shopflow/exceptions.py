"""Exceptions raised by the shopflow suite.

Timeouts and rejected interactions are not wrapped: they surface as
Playwright's own ``TimeoutError`` and ``Error``.
"""

from typing import Any


class ShopflowError(Exception):
    """Base exception for shopflow errors."""


class InvalidRangeError(ShopflowError, ValueError):
    """A generator was asked for a value from an empty or inverted range."""

    def __init__(self, minimum: Any, maximum: Any, message: str = ""):
        super().__init__(message or f"Invalid range: min ({minimum}) is greater than max ({maximum})")
        self.minimum = minimum
        self.maximum = maximum


class InvalidQuantityError(ShopflowError, ValueError):
    """A product quantity that the storefront cannot accept."""


class ValueMismatchError(ShopflowError):
    """A value read back from the page differs from the value that was written."""

    def __init__(self, field: str, expected: Any, actual: Any):
        super().__init__(f"Failed to set {field}. Expected: {expected}, Got: {actual}")
        self.field = field
        self.expected = expected
        self.actual = actual


class OptionNotFoundError(ShopflowError, LookupError):
    """No <option> in a select element matches the requested value."""

    def __init__(self, value: str, selector: str = ""):
        where = f" in {selector}" if selector else ""
        super().__init__(f"No option matching '{value}'{where}")
        self.value = value


class StageAssertionError(AssertionError):
    """A purchase-flow stage observed a state other than the expected one."""

    def __init__(self, stage: str, message: str):
        super().__init__(f"[{stage}] {message}")
        self.stage = stage
