from abc import ABC, abstractmethod
from typing import Optional

from quantity.domain.models import TokenInfo


class TokenRegistry(ABC):
    @abstractmethod
    async def get(self, token_id: str) -> Optional[TokenInfo]:
        """
        Get the descriptor of a token by its id, if the registry knows it at all.
        """
        raise NotImplementedError()
