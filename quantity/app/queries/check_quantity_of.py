from dataclasses import dataclass

from quantity.app.ports.outbound.token_registry import TokenRegistry
from quantity.domain.exceptions import TokenNotFoundError
from quantity.domain.models import TokenInfo
from quantity.domain.values import Quantity
from quantity.shared.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class IsQuantityOfQuery:
    quantity: Quantity
    token_id: str


class IsQuantityOfQueryHandler:
    def __init__(self, token_registry: TokenRegistry):
        self._registry = token_registry

    async def handle(self, query: IsQuantityOfQuery) -> bool:
        """
        Check whether a quantity is denominated like a registered token.

        :param query: Query with the quantity and the token id to check against.
        :return: bool(does the quantity use the token's denomination?)

        :raises TokenNotFoundError: If the registry does not know the token
        """
        token = await self._get_token(query.token_id)
        matches = Quantity.is_quantity_of(query.quantity, token)

        logger.debug(
            "quantity_denomination_checked",
            token_id=query.token_id,
            quantity_denomination=query.quantity.denomination,
            token_denomination=token.denomination,
            matches=matches,
        )

        return matches

    async def _get_token(self, token_id: str) -> TokenInfo:
        token = await self._registry.get(token_id)

        if token is not None:
            return token

        logger.warning("token_not_found", token_id=token_id)
        raise TokenNotFoundError(token_id)
