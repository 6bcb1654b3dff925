"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from salonstock.application.dto.requests import (
    AddToPurchaseListRequest,
    CreateAllPurchaseOrdersRequest,
    CreatePurchaseOrderRequest,
    ReceivedItemRequest,
    ReceivePurchaseOrderRequest,
    UpdatePurchaseListQuantityRequest,
)
from salonstock.application.dto.responses import (
    ComponentHealthResponse,
    ErrorResponse,
    HealthResponse,
    MaterializationResponse,
    ProductSummaryResponse,
    PurchaseListEntryResponse,
    PurchaseListResponse,
    PurchaseOrderItemResponse,
    PurchaseOrderListResponse,
    PurchaseOrderResponse,
    ReceivePurchaseOrderResponse,
    ReorderSuggestionGroupsResponse,
    ReorderSuggestionListResponse,
    ReorderSuggestionResponse,
    SupplierFailureResponse,
    SupplierSuggestionGroupResponse,
)

__all__ = [
    # Requests
    "AddToPurchaseListRequest",
    "UpdatePurchaseListQuantityRequest",
    "CreatePurchaseOrderRequest",
    "CreateAllPurchaseOrdersRequest",
    "ReceivedItemRequest",
    "ReceivePurchaseOrderRequest",
    # Responses
    "ProductSummaryResponse",
    "PurchaseListEntryResponse",
    "PurchaseListResponse",
    "PurchaseOrderItemResponse",
    "PurchaseOrderResponse",
    "PurchaseOrderListResponse",
    "SupplierFailureResponse",
    "MaterializationResponse",
    "ReceivePurchaseOrderResponse",
    "ReorderSuggestionResponse",
    "ReorderSuggestionListResponse",
    "SupplierSuggestionGroupResponse",
    "ReorderSuggestionGroupsResponse",
    "ComponentHealthResponse",
    "HealthResponse",
    "ErrorResponse",
]
