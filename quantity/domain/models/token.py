from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TokenInfo:
    """
    Descriptor of a token as known to the registry.
    Only the denomination matters to quantities; the rest is informational.
    """

    process_id: str
    denomination: int
    ticker: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.process_id:
            raise ValueError("Token process id cannot be empty")
        if (
            isinstance(self.denomination, bool)
            or not isinstance(self.denomination, int)
            or self.denomination < 0
        ):
            raise ValueError(
                f"Token denomination must be a non-negative integer: {self.denomination!r}"
            )

        if self.ticker is not None:
            object.__setattr__(self, "ticker", self.ticker.upper())

    def __str__(self) -> str:
        return self.ticker or self.process_id
