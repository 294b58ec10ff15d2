from typing import Protocol, runtime_checkable


@runtime_checkable
class Denominated(Protocol):
    """Anything exposing the number of fractional digits its amounts use."""

    @property
    def denomination(self) -> int: ...
