"""
Domain exceptions for Salon Stock.

Provides specific exception types for different error scenarios.
"""

from datetime import date
from typing import Any


class SalonStockError(Exception):
    """Base exception for all Salon Stock errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(SalonStockError):
    """Base exception for storage operations."""

    pass


class ProductNotFoundError(StorageError):
    """Product not found in the catalog."""

    def __init__(self, product_id: str):
        super().__init__(
            f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )


class PurchaseOrderNotFoundError(StorageError):
    """Purchase order not found in storage."""

    def __init__(self, order_id: str):
        super().__init__(
            f"Purchase order not found: {order_id}",
            code="PURCHASE_ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Purchasing Exceptions
class PurchasingError(SalonStockError):
    """Base exception for purchase list and order materialization."""

    pass


class EmptyOrderError(PurchasingError):
    """Nothing in the purchase list qualifies for an order."""

    def __init__(self, order_date: date, supplier_id: str | None = None):
        super().__init__(
            "No items with quantity >= 1 for this selection",
            code="EMPTY_ORDER",
            details={
                "supplier_id": supplier_id,
                "order_date": order_date.isoformat(),
            },
        )
        self.supplier_id = supplier_id
        self.order_date = order_date


class OrderCreationError(PurchasingError):
    """The purchase order store refused or failed the create request."""

    def __init__(self, supplier_id: str, reason: str):
        super().__init__(
            f"Failed to create purchase order for supplier {supplier_id}: {reason}",
            code="ORDER_CREATION_FAILED",
            details={"supplier_id": supplier_id, "reason": reason},
        )
        self.supplier_id = supplier_id
        self.reason = reason


# Receiving Exceptions
class ReceivingError(SalonStockError):
    """Base exception for receiving goods against a purchase order."""

    pass


class PurchaseOrderClosedError(ReceivingError):
    """Purchase order no longer accepts receipts."""

    def __init__(self, order_id: str, status: str):
        super().__init__(
            f"Purchase order {order_id} is {status} and cannot be received",
            code="PURCHASE_ORDER_CLOSED",
            details={"order_id": order_id, "status": status},
        )


class OrderItemNotFoundError(ReceivingError):
    """Received product is not a line of the purchase order."""

    def __init__(self, order_id: str, product_id: str):
        super().__init__(
            f"Product {product_id} is not on purchase order {order_id}",
            code="ORDER_ITEM_NOT_FOUND",
            details={"order_id": order_id, "product_id": product_id},
        )


# Validation Exceptions
class ValidationError(SalonStockError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class ConfigurationError(SalonStockError):
    """Configuration error."""

    pass
