import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from quantity.domain.exceptions.quantity import (
    InvalidDenominationError,
    InvalidQuantityError,
    MalformedQuantityError,
    QuantityDivisionByZeroError,
)

from .token import Denominated

# Thousands separators accepted in the integer part of a parsed string.
GROUPING_CHARACTERS = frozenset(",_' \u00a0\u202f")

_DIGITS = re.compile(r"[0-9]*")


def _validate_denomination(denomination: Any) -> int:
    if (
        isinstance(denomination, bool)
        or not isinstance(denomination, int)
        or denomination < 0
    ):
        raise InvalidDenominationError(denomination)

    return denomination


def _ensure_quantity(value: Any, operation: str) -> "Quantity":
    if not isinstance(value, Quantity):
        raise InvalidQuantityError(
            f"{operation} requires a Quantity operand, got {type(value).__name__}"
        )

    return value


def _div_toward_zero(numerator: int, divisor: int) -> int:
    result = abs(numerator) // abs(divisor)

    return result if (numerator < 0) == (divisor < 0) else -result


def plain_notation(value: Union[int, float, Decimal]) -> str:
    """
    Render a number as plain decimal text (no exponent), e.g. 1e-07 -> '0.0000001'.
    Floats use their shortest round-tripping representation.
    """
    if isinstance(value, float):
        value = Decimal(repr(value))

    return format(Decimal(value), "f")


@dataclass(eq=False)
class Quantity:
    """
    Exact fixed-point amount: the represented value is ``raw / 10 ** denomination``.

    Every operator comes in two flavours: a pure static form that returns a new
    Quantity (``Quantity.add(a, b)``, ``a + b``) and an in-place form that rescales
    and mutates the receiver, returning it for chaining (``a.add_(b)``, ``a += b``).
    Operands are always aligned to a common denomination before their raw integers
    are combined, so quantities of different precision mix without loss.
    """

    raw: Optional[int] = None
    denomination: int = 0

    def __post_init__(self) -> None:
        if self.raw is None:
            self.raw = 0
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise InvalidQuantityError(
                f"raw value must be an integer, got {type(self.raw).__name__}"
            )

        _validate_denomination(self.denomination)

    # ------------- derived parts -------------

    @property
    def integer(self) -> int:
        """Integer part of the value, truncated toward zero."""
        return _div_toward_zero(self.raw, 10**self.denomination)

    @property
    def fractional(self) -> int:
        """Magnitude of the fractional part, as digits at denomination width."""
        return abs(self.raw) % 10**self.denomination

    def is_zero(self) -> bool:
        return self.raw == 0

    # ------------- parsing -------------

    def from_string(self, value: str) -> "Quantity":
        """
        Parse a decimal literal into this instance, keeping its denomination.

        Grouping characters in the integer part ("12,456") are ignored.
        Fractional digits are positional: "1.5" at denomination 4 is raw 15000
        and digits beyond the denomination are truncated.

        :param value: Decimal text, e.g. "12,456.00055"
        :return: self

        :raises MalformedQuantityError: If the text is not a decimal literal
        """
        if not isinstance(value, str):
            raise MalformedQuantityError(value, "expected a string")

        text = value.strip()
        negative = text.startswith("-")
        if text and text[0] in "+-":
            text = text[1:]

        parts = text.split(".")
        if len(parts) > 2:
            raise MalformedQuantityError(value, "multiple decimal points")

        integer_part = "".join(c for c in parts[0] if c not in GROUPING_CHARACTERS)
        fractional_part = parts[1] if len(parts) == 2 else ""

        if not integer_part and not fractional_part:
            raise MalformedQuantityError(value, "no digits")
        if not _DIGITS.fullmatch(integer_part):
            raise MalformedQuantityError(value, "invalid characters in integer part")
        if not _DIGITS.fullmatch(fractional_part):
            raise MalformedQuantityError(
                value, "invalid characters in fractional part"
            )

        fractional_digits = fractional_part.ljust(self.denomination, "0")[
            : self.denomination
        ]
        raw = int(integer_part or "0") * 10**self.denomination + int(
            fractional_digits or "0"
        )

        self.raw = -raw if negative else raw
        return self

    def from_number(self, value: Union[int, float]) -> "Quantity":
        """
        Parse a native number through its decimal text, so 245.598 yields
        exactly the digits "245.598" rather than its binary approximation.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MalformedQuantityError(value, "expected an int or a float")
        if isinstance(value, float) and not math.isfinite(value):
            raise MalformedQuantityError(value, "value is not finite")

        return self.from_string(plain_notation(value))

    @classmethod
    def from_decimal(cls, value: Decimal, denomination: int) -> "Quantity":
        if not isinstance(value, Decimal):
            raise MalformedQuantityError(value, "expected a Decimal")
        if not value.is_finite():
            raise MalformedQuantityError(value, "value is not finite")

        return cls(denomination=denomination).from_string(plain_notation(value))

    # ------------- formatting -------------

    def to_string(self) -> str:
        sign = "-" if self.raw < 0 else ""
        integer, fractional = divmod(abs(self.raw), 10**self.denomination)

        if fractional == 0:
            return f"{sign}{integer}"

        digits = str(fractional).rjust(self.denomination, "0").rstrip("0")
        return f"{sign}{integer}.{digits}"

    def to_number(self) -> float:
        """Lossy: values beyond float precision are rounded by the float parser."""
        return float(self.to_string())

    def to_decimal(self) -> Decimal:
        return Decimal(self.to_string())

    def clone(self) -> "Quantity":
        return Quantity(self.raw, self.denomination)

    def __str__(self) -> str:
        return self.to_string()

    def __float__(self) -> float:
        return self.to_number()

    def __copy__(self) -> "Quantity":
        return self.clone()

    # ------------- denomination -------------

    def convert_(self, denomination: int) -> "Quantity":
        """Rescale in place; lowering the denomination truncates toward zero."""
        _validate_denomination(denomination)

        if denomination > self.denomination:
            self.raw *= 10 ** (denomination - self.denomination)
        elif denomination < self.denomination:
            self.raw = _div_toward_zero(
                self.raw, 10 ** (self.denomination - denomination)
            )

        self.denomination = denomination
        return self

    @staticmethod
    def convert(quantity: "Quantity", denomination: int) -> "Quantity":
        return _ensure_quantity(quantity, "conversion").clone().convert_(denomination)

    @staticmethod
    def same_denomination(
        a: "Quantity", b: "Quantity"
    ) -> tuple["Quantity", "Quantity"]:
        """Copies of both operands at the larger of their denominations."""
        _ensure_quantity(a, "alignment")
        _ensure_quantity(b, "alignment")

        denomination = max(a.denomination, b.denomination)

        return Quantity.convert(a, denomination), Quantity.convert(b, denomination)

    # ------------- arithmetic (in place) -------------

    def add_(self, other: "Quantity") -> "Quantity":
        a, b = Quantity.same_denomination(self, other)

        self.raw = a.raw + b.raw
        self.denomination = a.denomination
        return self

    def sub_(self, other: "Quantity") -> "Quantity":
        a, b = Quantity.same_denomination(self, other)

        self.raw = a.raw - b.raw
        self.denomination = a.denomination
        return self

    def mul_(self, other: "Quantity") -> "Quantity":
        # The raw product is already scaled by the sum of both denominations.
        _ensure_quantity(other, "multiplication")

        self.raw *= other.raw
        self.denomination += other.denomination
        return self

    def div_(self, other: "Quantity", denomination: Optional[int] = None) -> "Quantity":
        """
        Divide in place, truncating toward zero.

        :param other: Divisor
        :param denomination: Result denomination (default: the larger of both operands)
        :return: self

        :raises QuantityDivisionByZeroError: If the divisor is zero
        """
        _ensure_quantity(other, "division")

        if other.raw == 0:
            raise QuantityDivisionByZeroError(self)

        if denomination is None:
            denomination = max(self.denomination, other.denomination)
        _validate_denomination(denomination)

        shift = denomination - self.denomination + other.denomination
        if shift >= 0:
            self.raw = _div_toward_zero(self.raw * 10**shift, other.raw)
        else:
            self.raw = _div_toward_zero(self.raw, other.raw * 10**-shift)

        self.denomination = denomination
        return self

    def pow_(self, exponent: int) -> "Quantity":
        """
        Raise to an integer power in place.
        Negative exponents take the reciprocal of the positive power, truncated like div.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise InvalidQuantityError(
                f"exponent must be an integer, got {type(exponent).__name__}"
            )

        if exponent >= 0:
            self.raw **= exponent
            self.denomination *= exponent
            return self

        if self.raw == 0:
            raise QuantityDivisionByZeroError(Quantity(1, 0))

        positive = Quantity.pow(self, -exponent)
        reciprocal = Quantity.div(Quantity(1, 0), positive)

        self.raw = reciprocal.raw
        self.denomination = reciprocal.denomination
        return self

    def trunc_(self) -> "Quantity":
        """Drop the fractional part, keeping the denomination."""
        scale = 10**self.denomination

        self.raw = _div_toward_zero(self.raw, scale) * scale
        return self

    # ------------- arithmetic (pure) -------------

    @staticmethod
    def add(a: "Quantity", b: "Quantity") -> "Quantity":
        return _ensure_quantity(a, "addition").clone().add_(b)

    @staticmethod
    def sub(a: "Quantity", b: "Quantity") -> "Quantity":
        return _ensure_quantity(a, "subtraction").clone().sub_(b)

    @staticmethod
    def mul(a: "Quantity", b: "Quantity") -> "Quantity":
        return _ensure_quantity(a, "multiplication").clone().mul_(b)

    @staticmethod
    def div(
        a: "Quantity", b: "Quantity", denomination: Optional[int] = None
    ) -> "Quantity":
        return _ensure_quantity(a, "division").clone().div_(b, denomination)

    @staticmethod
    def pow(quantity: "Quantity", exponent: int) -> "Quantity":
        return _ensure_quantity(quantity, "power").clone().pow_(exponent)

    @staticmethod
    def trunc(quantity: "Quantity") -> "Quantity":
        return _ensure_quantity(quantity, "truncation").clone().trunc_()

    # ------------- comparison -------------

    @staticmethod
    def eq(a: "Quantity", b: "Quantity") -> bool:
        x, y = Quantity.same_denomination(a, b)
        return x.raw == y.raw

    @staticmethod
    def lt(a: "Quantity", b: "Quantity") -> bool:
        x, y = Quantity.same_denomination(a, b)
        return x.raw < y.raw

    @staticmethod
    def le(a: "Quantity", b: "Quantity") -> bool:
        x, y = Quantity.same_denomination(a, b)
        return x.raw <= y.raw

    @staticmethod
    def gt(a: "Quantity", b: "Quantity") -> bool:
        return not Quantity.le(a, b)

    @staticmethod
    def ge(a: "Quantity", b: "Quantity") -> bool:
        return not Quantity.lt(a, b)

    @staticmethod
    def min(*quantities: "Quantity") -> Optional["Quantity"]:
        """The numerically smallest quantity, or None when none are given."""
        result = None

        for quantity in quantities:
            if result is None or Quantity.lt(quantity, result):
                result = quantity

        return result

    @staticmethod
    def max(*quantities: "Quantity") -> Optional["Quantity"]:
        """The numerically largest quantity, or None when none are given."""
        result = None

        for quantity in quantities:
            if result is None or Quantity.lt(result, quantity):
                result = quantity

        return result

    @staticmethod
    def is_quantity_of(quantity: "Quantity", token: Denominated) -> bool:
        """Precision-format check: compares denominations, not values."""
        return quantity.denomination == token.denomination

    # ------------- operators -------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.eq(self, other)

    def __lt__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.lt(self, other)

    def __le__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.le(self, other)

    def __gt__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.gt(self, other)

    def __ge__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.ge(self, other)

    def __add__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.add(self, other)

    def __sub__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.sub(self, other)

    def __mul__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.mul(self, other)

    def __truediv__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.div(self, other)

    def __pow__(self, exponent: int) -> "Quantity":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return Quantity.pow(self, exponent)

    def __iadd__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add_(other)

    def __isub__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.sub_(other)

    def __imul__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.mul_(other)

    def __itruediv__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.div_(other)

    def __ipow__(self, exponent: int) -> "Quantity":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow_(exponent)

    def __trunc__(self) -> "Quantity":
        return Quantity.trunc(self)
