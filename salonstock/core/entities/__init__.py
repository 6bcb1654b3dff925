"""Core domain entities."""

from salonstock.core.entities.catalog import Product, ProductUsage, Supplier
from salonstock.core.entities.inventory import InventoryRecord, ReorderCandidate
from salonstock.core.entities.purchase_list import PurchaseListEntry
from salonstock.core.entities.purchase_order import (
    OPEN_STATUSES,
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderReceipt,
    PurchaseOrderRequest,
    PurchaseOrderStatus,
    ReceiptLine,
)

__all__ = [
    # Catalog entities
    "Product",
    "ProductUsage",
    "Supplier",
    # Inventory entities
    "InventoryRecord",
    "ReorderCandidate",
    # Purchase list entities
    "PurchaseListEntry",
    # Purchase order entities
    "OPEN_STATUSES",
    "PurchaseOrder",
    "PurchaseOrderItem",
    "PurchaseOrderReceipt",
    "PurchaseOrderRequest",
    "PurchaseOrderStatus",
    "ReceiptLine",
]
