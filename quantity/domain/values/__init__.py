from .quantity import Quantity
from .token import Denominated

__all__ = [
    "Quantity",
    "Denominated",
]
