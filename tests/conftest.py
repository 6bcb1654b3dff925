"""Pytest configuration and fixtures."""

from collections.abc import Callable
from datetime import date, datetime
from unittest.mock import AsyncMock

import pytest

from salonstock.application.services import reset_services
from salonstock.config import reset_settings
from salonstock.core.entities import (
    Product,
    PurchaseOrder,
    PurchaseOrderRequest,
    PurchaseOrderStatus,
)

TODAY = date(2024, 3, 15)
YESTERDAY = date(2024, 3, 14)


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Each test starts with fresh settings and no purchasing sessions."""
    reset_settings()
    reset_services()
    yield
    reset_services()
    reset_settings()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def yesterday() -> date:
    return YESTERDAY


@pytest.fixture
def clock() -> Callable[[], date]:
    return lambda: TODAY


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Build catalog products with sensible defaults."""

    def _make(
        product_id: str = "P1",
        supplier_id: str = "S1",
        cost_price: float = 10.0,
        name: str | None = None,
        barcode: str | None = None,
    ) -> Product:
        return Product(
            id=product_id,
            name=name or f"Product {product_id}",
            barcode=barcode or f"885{product_id}",
            supplier_id=supplier_id,
            cost_price=cost_price,
        )

    return _make


def order_from_request(request: PurchaseOrderRequest, order_id: str) -> PurchaseOrder:
    return PurchaseOrder(
        id=order_id,
        order_date=request.order_date,
        supplier_id=request.supplier_id,
        supplier_name=f"Supplier {request.supplier_id}",
        store_id=request.store_id,
        created_by_id=request.created_by_id,
        items=list(request.items),
        status=PurchaseOrderStatus.ORDERED,
        notes=request.notes,
        created_at=datetime(2024, 3, 15, 9, 0, 0),
    )


@pytest.fixture
def order_store() -> AsyncMock:
    """Purchase order store that accepts every request."""
    store = AsyncMock()
    counter = {"n": 0}

    async def _create(request: PurchaseOrderRequest) -> PurchaseOrder:
        counter["n"] += 1
        return order_from_request(request, f"po_{counter['n']:04d}")

    store.create_order.side_effect = _create
    return store


@pytest.fixture
def catalog() -> AsyncMock:
    """Catalog reader whose costs can be set per product through ``catalog.costs``."""
    reader = AsyncMock()
    reader.costs = {}

    async def _cost(product_id: str) -> float | None:
        return reader.costs.get(product_id)

    reader.get_product_cost.side_effect = _cost
    return reader
