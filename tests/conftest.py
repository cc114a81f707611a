"""Shared fixtures for registry tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from product_registry.core.collaborators import (
    BlockClock,
    RecordingSettlement,
    StaticAuthorityVerifier,
)
from product_registry.core.state import RegistryState
from product_registry.models.product import ProductDraft
from product_registry.services.registry import ProductRegistry

CREATOR = "ST1TEST"
AUTHORITY = "ST2TEST"


def make_draft(**overrides) -> ProductDraft:
    """Build a valid draft, replacing any fields given as overrides."""
    values = {
        "name": "WidgetA",
        "hash": bytes([1] * 32),
        "max_quantity": 1000,
        "origin": "FactoryX",
        "batch_id": "Batch001",
        "description": "High quality widget",
        "product_type": "electronics",
        "category": "gadgets",
        "location": "CityZ",
        "currency": "STX",
        "min_quantity": 100,
        "expiry": 100000,
        "weight": 500,
        "dimensions": "10x10x10",
        "material": "Plastic",
        "certification": "ISO9001",
    }
    values.update(overrides)
    return ProductDraft(**values)


@pytest.fixture
def clock() -> BlockClock:
    return BlockClock()


@pytest.fixture
def verifier() -> StaticAuthorityVerifier:
    return StaticAuthorityVerifier({CREATOR})


@pytest.fixture
def settlement() -> RecordingSettlement:
    return RecordingSettlement()


@pytest.fixture
def registry(
    clock: BlockClock,
    verifier: StaticAuthorityVerifier,
    settlement: RecordingSettlement,
) -> ProductRegistry:
    """Fresh registry with default capacity and fee, no authority bound."""
    return ProductRegistry(
        state=RegistryState(max_products=10000, creation_fee=500),
        clock=clock,
        verifier=verifier,
        settlement=settlement,
        null_identity="SP000000000000000000002Q6VF78",
    )


@pytest.fixture
def bound_registry(registry: ProductRegistry) -> ProductRegistry:
    """Registry with the authority already bound."""
    registry.set_authority_contract(AUTHORITY)
    return registry


@pytest_asyncio.fixture
async def client(registry: ProductRegistry) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, backed by the test registry."""
    from product_registry.main import app

    app.state.registry = registry
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.state.registry = None


@pytest.fixture
def draft_factory():
    """Factory for valid drafts with per-test overrides."""
    return make_draft
