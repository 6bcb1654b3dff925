"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from datetime import date

from pydantic import BaseModel, Field


class AddToPurchaseListRequest(BaseModel):
    """Add a catalog product to the session's purchase list."""

    product_id: str = Field(..., min_length=1, description="Catalog product ID")
    quantity: int = Field(
        default=1,
        description="Units to add; values below 1 are raised to 1",
    )
    added_at: date | None = Field(
        default=None,
        description="Day bucket for the entry (default: today)",
    )


class UpdatePurchaseListQuantityRequest(BaseModel):
    """Replace the quantity of one purchase list entry."""

    quantity: int = Field(
        ...,
        description="New quantity; negative values become 0, which keeps the entry but skips it",
    )


class CreatePurchaseOrderRequest(BaseModel):
    """Order one supplier's purchase list entries of one day."""

    supplier_id: str = Field(..., min_length=1, description="Supplier to order from")
    created_by_id: str = Field(..., min_length=1, description="User placing the order")
    store_id: str = Field(..., min_length=1, description="Receiving store")
    order_date: date | None = Field(
        default=None,
        description="Day bucket to order (default: today)",
    )


class CreateAllPurchaseOrdersRequest(BaseModel):
    """Order every supplier's purchase list entries of one day."""

    created_by_id: str = Field(..., min_length=1, description="User placing the orders")
    store_id: str = Field(..., min_length=1, description="Receiving store")
    order_date: date | None = Field(
        default=None,
        description="Day bucket to order (default: today)",
    )


class ReceivedItemRequest(BaseModel):
    """One product delivered against a purchase order."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1, description="Units delivered")


class ReceivePurchaseOrderRequest(BaseModel):
    """Record a (possibly partial) delivery of a purchase order."""

    items: list[ReceivedItemRequest] = Field(..., min_length=1)
    received_by_id: str | None = Field(default=None, description="User receiving the goods")
    notes: str | None = Field(default=None, max_length=2000)
