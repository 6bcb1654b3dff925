"""Purchase order domain entities."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field


class PurchaseOrderStatus(str, Enum):
    """Lifecycle of a purchase order."""

    ORDERED = "ordered"
    PARTIALLY_RECEIVED = "partially_received"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


OPEN_STATUSES = frozenset(
    {PurchaseOrderStatus.ORDERED, PurchaseOrderStatus.PARTIALLY_RECEIVED}
)


class PurchaseOrderItem(BaseModel):
    """Line snapshot captured when the order is materialized."""

    product_id: str
    product_name: str
    barcode: str
    quantity: int = Field(..., ge=1)
    cost_price_at_order: float = 0.0  # never re-read from the catalog
    is_received: bool = False

    @property
    def line_total(self) -> float:
        return self.quantity * self.cost_price_at_order


class PurchaseOrderRequest(BaseModel):
    """Create request handed to the purchase order store."""

    order_date: date
    supplier_id: str
    created_by_id: str
    store_id: str
    items: list[PurchaseOrderItem] = Field(default_factory=list)
    notes: str | None = None


class PurchaseOrder(BaseModel):
    """A purchase document sent to one supplier for one store."""

    id: str
    order_date: date
    completed_date: date | None = None
    supplier_id: str
    supplier_name: str
    store_id: str
    created_by_id: str
    items: list[PurchaseOrderItem] = Field(default_factory=list)
    status: PurchaseOrderStatus = PurchaseOrderStatus.ORDERED
    notes: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def total_amount(self) -> float:
        """Order value at the costs captured on the lines."""
        return sum(item.line_total for item in self.items)

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_STATUSES

    @property
    def pending_items(self) -> list[PurchaseOrderItem]:
        return [item for item in self.items if not item.is_received]


class ReceiptLine(BaseModel):
    """Units of one product delivered against an order."""

    product_id: str
    quantity: int = Field(..., ge=1)


class PurchaseOrderReceipt(BaseModel):
    """Order state after a delivery was recorded."""

    order: PurchaseOrder
    received_product_ids: list[str] = Field(default_factory=list)
    skipped_product_ids: list[str] = Field(default_factory=list)
