"""Storage infrastructure implementations."""

from salonstock.infrastructure.storage.sqlite import (
    SQLiteCatalogStore,
    SQLiteInventoryStore,
    SQLitePurchaseOrderStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
    open_pool,
)

__all__ = [
    # SQLite stores
    "SQLiteCatalogStore",
    "SQLiteInventoryStore",
    "SQLitePurchaseOrderStore",
    # Connection pool
    "open_pool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
