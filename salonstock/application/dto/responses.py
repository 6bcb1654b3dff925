"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field


class ProductSummaryResponse(BaseModel):
    """Product facts shown next to a purchase list entry."""

    id: str
    name: str
    barcode: str
    supplier_id: str
    cost_price: float
    usage: str
    image_url: str | None = None


class PurchaseListEntryResponse(BaseModel):
    """One line of the purchase list."""

    product: ProductSummaryResponse
    quantity: int = Field(..., description="Units to order; 0 means skipped")
    supplier_id: str = Field(..., description="Supplier captured when the entry was created")
    added_at: date = Field(..., description="Day bucket of the entry")
    current_stock: int | None = Field(
        default=None, description="Stock in the requested store, when a store was given"
    )


class PurchaseListResponse(BaseModel):
    """Purchase list contents for the current session."""

    entries: list[PurchaseListEntryResponse] = Field(default_factory=list)
    count: int = Field(..., description="Number of distinct entries, not units")
    dates: list[date] = Field(default_factory=list, description="Days present in the list")


class PurchaseOrderItemResponse(BaseModel):
    """Line of a purchase order."""

    product_id: str
    product_name: str
    barcode: str
    quantity: int
    cost_price_at_order: float
    line_total: float
    is_received: bool


class PurchaseOrderResponse(BaseModel):
    """Purchase order DTO."""

    id: str
    order_date: date
    completed_date: date | None = None
    supplier_id: str
    supplier_name: str
    store_id: str
    created_by_id: str
    status: str
    notes: str | None = None
    items: list[PurchaseOrderItemResponse] = Field(default_factory=list)
    total_amount: float
    pending_item_count: int = Field(..., description="Lines not yet received")
    created_at: datetime


class PurchaseOrderListResponse(BaseModel):
    """Page of purchase orders."""

    orders: list[PurchaseOrderResponse] = Field(default_factory=list)
    total: int
    limit: int
    offset: int


class SupplierFailureResponse(BaseModel):
    """A supplier whose order could not be created."""

    supplier_id: str
    error_code: str
    message: str


class MaterializationResponse(BaseModel):
    """Outcome of ordering every supplier of one day."""

    order_date: date
    orders: list[PurchaseOrderResponse] = Field(default_factory=list)
    attempted_supplier_ids: list[str] = Field(default_factory=list)
    failed: list[SupplierFailureResponse] = Field(default_factory=list)
    partial: bool = Field(
        ...,
        description="True when at least one supplier failed; its items were cleared and must be re-added",
    )


class ReceivePurchaseOrderResponse(BaseModel):
    """Purchase order after a delivery was recorded."""

    order: PurchaseOrderResponse
    received_product_ids: list[str] = Field(default_factory=list)
    skipped_product_ids: list[str] = Field(
        default_factory=list,
        description="Lines already received before this delivery",
    )


class ReorderSuggestionResponse(BaseModel):
    """A product below its minimum stock."""

    product: ProductSummaryResponse
    store_id: str
    current_stock: int
    minimum_stock: int
    shortfall: int
    suggested_quantity: int


class ReorderSuggestionListResponse(BaseModel):
    """Reorder suggestions for a store."""

    store_id: str
    suggestions: list[ReorderSuggestionResponse] = Field(default_factory=list)
    total: int


class SupplierSuggestionGroupResponse(BaseModel):
    """Reorder suggestions of one supplier."""

    supplier_id: str
    suggestions: list[ReorderSuggestionResponse] = Field(default_factory=list)


class ReorderSuggestionGroupsResponse(BaseModel):
    """Reorder suggestions of a store, one group per supplier."""

    store_id: str
    groups: list[SupplierSuggestionGroupResponse] = Field(default_factory=list)
    total: int = Field(..., description="Suggestions across all groups")


class ComponentHealthResponse(BaseModel):
    """Health of one backing component."""

    name: str
    status: str
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ComponentHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. EMPTY_ORDER)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
