from .token import TokenInfo

__all__ = [
    "TokenInfo",
]
