import pytest

from quantity.adapters.outbound.registry.in_memory import InMemoryTokenRegistry
from quantity.domain.models import TokenInfo


@pytest.mark.asyncio
async def test_get_returns_registered_token():
    token = TokenInfo(process_id="token-a", denomination=3)
    registry = InMemoryTokenRegistry([token])

    assert await registry.get("token-a") == token
    assert await registry.get("token-b") is None


@pytest.mark.asyncio
async def test_register_replaces_existing_token():
    registry = InMemoryTokenRegistry([TokenInfo(process_id="token-a", denomination=3)])

    registry.register(TokenInfo(process_id="token-a", denomination=6))

    assert len(registry) == 1
    assert (await registry.get("token-a")).denomination == 6
