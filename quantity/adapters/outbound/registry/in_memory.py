from typing import Iterable, Optional

from quantity.app.ports.outbound.token_registry import TokenRegistry
from quantity.domain.models import TokenInfo
from quantity.shared.logging import get_logger

logger = get_logger(__name__)


class InMemoryTokenRegistry(TokenRegistry):
    """Token registry backed by a process-local dict, keyed by process id."""

    def __init__(self, tokens: Iterable[TokenInfo] = ()):
        self._tokens: dict[str, TokenInfo] = {}

        for token in tokens:
            self.register(token)

    def register(self, token: TokenInfo) -> None:
        if token.process_id in self._tokens:
            logger.debug("token_replaced", token_id=token.process_id)

        self._tokens[token.process_id] = token

    async def get(self, token_id: str) -> Optional[TokenInfo]:
        return self._tokens.get(token_id)

    def __len__(self) -> int:
        return len(self._tokens)
