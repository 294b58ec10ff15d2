from .base import DomainException
from .quantity import (
    InvalidDenominationError,
    InvalidQuantityError,
    MalformedQuantityError,
    PrecisionOverflowError,
    QuantityDivisionByZeroError,
    QuantityError,
)
from .token import TokenError, TokenNotFoundError

__all__ = [
    "DomainException",
    "QuantityError",
    "MalformedQuantityError",
    "PrecisionOverflowError",
    "QuantityDivisionByZeroError",
    "InvalidDenominationError",
    "InvalidQuantityError",
    "TokenError",
    "TokenNotFoundError",
]
