from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from quantity.domain.exceptions import MalformedQuantityError, PrecisionOverflowError
from quantity.domain.values import Quantity
from quantity.domain.values.quantity import plain_notation

ParsableValue = Union[str, int, float, Decimal]


@dataclass(frozen=True)
class PrecisionPolicy:
    """Policy defining how quantities are parsed and divided."""

    division_denomination: Optional[int] = None
    strict_parsing: bool = False

    def __post_init__(self):
        if self.division_denomination is not None and self.division_denomination < 0:
            raise ValueError(
                f"Division denomination cannot be negative: {self.division_denomination}"
            )


class PrecisionService:
    """
    Domain service for precision-sensitive quantity operations.
    """

    def __init__(self, policy: PrecisionPolicy = None):
        self._policy = policy or PrecisionPolicy()

    @property
    def policy(self) -> PrecisionPolicy:
        return self._policy

    def parse(self, value: ParsableValue, denomination: int) -> Quantity:
        """
        Parse a value into a quantity of the given denomination.

        :param value: Decimal text, native number or Decimal
        :param denomination: Number of fractional digits of the result
        :return: Parsed quantity

        :raises MalformedQuantityError: If the value is not a decimal literal
        :raises PrecisionOverflowError: If strict parsing is on and digits would be dropped
        """
        quantity = self._build(value, denomination)

        if self._policy.strict_parsing:
            width = self._fractional_width(value)

            if width > denomination:
                exact = self._build(value, width)

                if not Quantity.eq(quantity, exact):
                    raise PrecisionOverflowError(value, denomination)

        return quantity

    def divide(self, a: Quantity, b: Quantity) -> Quantity:
        """
        Divide two quantities, truncating to the policy's division denomination
        (never coarser than the larger operand denomination).

        :raises QuantityDivisionByZeroError: If b is zero
        """
        target = self._policy.division_denomination

        if target is not None:
            target = max(target, a.denomination, b.denomination)

        return Quantity.div(a, b, target)

    def validate_precision(self, quantity: Quantity, expected: int) -> bool:
        """
        Check if a quantity is representable at the expected denomination.

        :param quantity: Quantity to check
        :param expected: Expected denomination (e.g., 2 for cents)

        :return: bool(does precision match our expectations?)
        """
        return Quantity.eq(Quantity.convert(quantity, expected), quantity)

    @staticmethod
    def _build(value: ParsableValue, denomination: int) -> Quantity:
        if isinstance(value, str):
            return Quantity(denomination=denomination).from_string(value)
        if isinstance(value, Decimal):
            return Quantity.from_decimal(value, denomination)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Quantity(denomination=denomination).from_number(value)

        raise MalformedQuantityError(value, "unsupported value type")

    @staticmethod
    def _fractional_width(value: ParsableValue) -> int:
        text = value if isinstance(value, str) else plain_notation(value)

        return len(text.strip().partition(".")[2])
