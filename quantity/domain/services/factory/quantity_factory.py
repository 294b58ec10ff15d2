from decimal import Decimal
from typing import Optional

from quantity.domain.services.precision_service import PrecisionService
from quantity.domain.values import Denominated, Quantity


class QuantityFactory:
    def __init__(
        self, precision_service: PrecisionService, default_denomination: int = 12
    ):
        self._precision = precision_service
        self._default_denomination = default_denomination

    def create(self, raw: int, denomination: Optional[int] = None) -> Quantity:
        return Quantity(raw, self._denomination(denomination))

    def from_string(self, value: str, denomination: Optional[int] = None) -> Quantity:
        return self._precision.parse(value, self._denomination(denomination))

    def from_float(self, value: float, denomination: Optional[int] = None) -> Quantity:
        return self._precision.parse(value, self._denomination(denomination))

    def from_decimal(
        self, value: Decimal, denomination: Optional[int] = None
    ) -> Quantity:
        return self._precision.parse(value, self._denomination(denomination))

    def for_token(self, value: str, token: Denominated) -> Quantity:
        """Parse a value at the token's own denomination."""
        return self._precision.parse(value, token.denomination)

    def _denomination(self, denomination: Optional[int]) -> int:
        if denomination is None:
            return self._default_denomination

        return denomination
