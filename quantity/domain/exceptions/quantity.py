from typing import Any

from .base import DomainException


class QuantityError(DomainException):
    """Base exception for quantity-related errors."""

    pass


class MalformedQuantityError(QuantityError, ValueError):
    """Raised when a string or number is not a valid decimal literal."""

    def __init__(self, value: Any, reason: str):
        self.value = value

        super().__init__(f"Malformed quantity {value!r}: {reason}")


class PrecisionOverflowError(QuantityError):
    """Raised in strict mode when a value has more fractional digits than allowed."""

    def __init__(self, value: Any, denomination: int):
        self.value = value
        self.denomination = denomination

        super().__init__(
            f"Value {value!r} cannot be represented with denomination {denomination} "
            f"without dropping fractional digits"
        )


class QuantityDivisionByZeroError(QuantityError, ZeroDivisionError):
    def __init__(self, dividend: Any):
        self.dividend = dividend

        super().__init__(f"Cannot divide quantity {dividend} by zero")


class InvalidDenominationError(QuantityError, ValueError):
    def __init__(self, denomination: Any):
        self.denomination = denomination

        super().__init__(
            f"Denomination must be a non-negative integer, got: {denomination!r}"
        )


class InvalidQuantityError(QuantityError, TypeError):
    """Raised when an operand or raw value has an unsupported type."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid quantity: {reason}")
