from quantity.domain.exceptions import (
    MalformedQuantityError,
    PrecisionOverflowError,
    QuantityDivisionByZeroError,
    QuantityError,
)
from quantity.domain.models import TokenInfo
from quantity.domain.values import Denominated, Quantity

__all__ = [
    "Quantity",
    "Denominated",
    "TokenInfo",
    "QuantityError",
    "MalformedQuantityError",
    "PrecisionOverflowError",
    "QuantityDivisionByZeroError",
]
