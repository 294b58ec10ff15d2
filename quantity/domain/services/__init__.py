from .precision_service import PrecisionPolicy, PrecisionService

__all__ = [
    "PrecisionPolicy",
    "PrecisionService",
]
