"""Core interfaces (ports) for dependency injection."""

from salonstock.core.interfaces.catalog_store import ICatalogReader, ICatalogStore
from salonstock.core.interfaces.inventory_store import IInventoryStore
from salonstock.core.interfaces.purchase_order_store import IPurchaseOrderStore

__all__ = [
    # Catalog interfaces
    "ICatalogReader",
    "ICatalogStore",
    # Ledger interfaces
    "IInventoryStore",
    # Purchase order interfaces
    "IPurchaseOrderStore",
]
