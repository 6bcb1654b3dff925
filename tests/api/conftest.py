"""Fixtures for API tests: the app with its stores replaced by mocks."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from salonstock.api.dependencies import (
    get_advisor,
    get_catalog,
    get_order_store,
    get_registry,
)
from salonstock.api.main import app
from salonstock.application.services import PurchaseListRegistry
from salonstock.core.services import ReorderAdvisor

SESSION_ID = "sess-1"


@pytest.fixture
def products(make_product):
    return {
        "P1": make_product("P1", "S1", cost_price=120.0, name="Shampoo 1L"),
        "P2": make_product("P2", "S2", cost_price=85.5, name="Color Cream 7.1"),
        "P3": make_product("P3", "S1", cost_price=240.0, name="Bleach Powder"),
    }


@pytest.fixture
def api_catalog(catalog, products):
    catalog.get_product.side_effect = lambda product_id: products.get(product_id)
    return catalog


@pytest.fixture
def advisor():
    mock = AsyncMock(spec=ReorderAdvisor)
    mock.stock_levels.return_value = {}
    mock.suggest.return_value = []
    return mock


@pytest.fixture
def registry(order_store, api_catalog, clock) -> PurchaseListRegistry:
    return PurchaseListRegistry(
        order_store=order_store,
        catalog=api_catalog,
        ttl_seconds=3600,
        clock=clock,
    )


@pytest.fixture
async def api_client(
    registry, api_catalog, order_store, advisor
) -> AsyncGenerator[AsyncClient, None]:
    overrides = {
        get_registry: lambda: registry,
        get_catalog: lambda: api_catalog,
        get_order_store: lambda: order_store,
        get_advisor: lambda: advisor,
    }
    app.dependency_overrides.update(overrides)
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-Session-ID": SESSION_ID},
    ) as ac:
        yield ac
    for dependency in overrides:
        app.dependency_overrides.pop(dependency, None)
