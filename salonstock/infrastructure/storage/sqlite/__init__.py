"""SQLite storage implementations."""

from salonstock.infrastructure.storage.sqlite.catalog_store import SQLiteCatalogStore
from salonstock.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
    open_pool,
)
from salonstock.infrastructure.storage.sqlite.inventory_store import SQLiteInventoryStore
from salonstock.infrastructure.storage.sqlite.purchase_order_store import (
    SQLitePurchaseOrderStore,
)

# Singleton instances
_catalog_store: SQLiteCatalogStore | None = None
_inventory_store: SQLiteInventoryStore | None = None
_purchase_order_store: SQLitePurchaseOrderStore | None = None


async def get_catalog_store() -> SQLiteCatalogStore:
    """Get singleton catalog store instance."""
    global _catalog_store
    if _catalog_store is None:
        _catalog_store = SQLiteCatalogStore()
    return _catalog_store


async def get_inventory_store() -> SQLiteInventoryStore:
    """Get singleton inventory store instance."""
    global _inventory_store
    if _inventory_store is None:
        _inventory_store = SQLiteInventoryStore()
    return _inventory_store


async def get_purchase_order_store() -> SQLitePurchaseOrderStore:
    """Get singleton purchase order store instance."""
    global _purchase_order_store
    if _purchase_order_store is None:
        _purchase_order_store = SQLitePurchaseOrderStore()
    return _purchase_order_store


__all__ = [
    # Connection
    "ConnectionPool",
    "open_pool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteCatalogStore",
    "SQLiteInventoryStore",
    "SQLitePurchaseOrderStore",
    # Factory functions
    "get_catalog_store",
    "get_inventory_store",
    "get_purchase_order_store",
]
