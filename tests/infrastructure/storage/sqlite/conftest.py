"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from salonstock.core.entities import Product, Supplier
from salonstock.infrastructure.storage.sqlite import (
    SQLiteCatalogStore,
    SQLiteInventoryStore,
    SQLitePurchaseOrderStore,
    close_pool,
    open_pool,
)
from salonstock.infrastructure.storage.sqlite.migrations import initialize_database


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> AsyncGenerator[Path, None]:
    """Migrated database with the global pool bound to it."""
    await initialize_database(temp_db_path, create_backup_before=False)
    await open_pool(temp_db_path, pool_size=2, busy_timeout=5000)
    try:
        yield temp_db_path
    finally:
        await close_pool()


@pytest.fixture
def catalog_store(initialized_db) -> SQLiteCatalogStore:
    return SQLiteCatalogStore()


@pytest.fixture
def inventory_store(initialized_db) -> SQLiteInventoryStore:
    return SQLiteInventoryStore()


@pytest.fixture
def purchase_order_store(initialized_db) -> SQLitePurchaseOrderStore:
    return SQLitePurchaseOrderStore()


@pytest.fixture
async def seeded_catalog(catalog_store) -> SQLiteCatalogStore:
    """Two suppliers and three products."""
    await catalog_store.create_supplier(Supplier(id="S1", name="Salon Supply", phone="02-111"))
    await catalog_store.create_supplier(Supplier(id="S2", name="Color House"))
    for product in (
        Product(id="P1", name="Shampoo 1L", barcode="8850001", supplier_id="S1", cost_price=120.0),
        Product(id="P2", name="Color Cream 7.1", barcode="8850002", supplier_id="S2", cost_price=85.5),
        Product(id="P3", name="Bleach Powder", barcode="8850003", supplier_id="S1", cost_price=240.0),
    ):
        await catalog_store.create_product(product)
    return catalog_store
