"""Unit tests for domain exceptions."""

from datetime import date

import pytest

from salonstock.core.exceptions import (
    DatabaseError,
    EmptyOrderError,
    OrderCreationError,
    OrderItemNotFoundError,
    ProductNotFoundError,
    PurchaseOrderClosedError,
    PurchaseOrderNotFoundError,
    PurchasingError,
    ReceivingError,
    SalonStockError,
    StorageError,
    ValidationError,
)


class TestSalonStockError:
    """Tests for base SalonStockError exception."""

    def test_basic_initialization(self):
        error = SalonStockError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "SalonStockError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = SalonStockError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = SalonStockError("Test error", code="TEST_CODE", details={"extra": "info"})
        assert error.to_dict() == {
            "error": "TEST_CODE",
            "message": "Test error",
            "details": {"extra": "info"},
        }


class TestPurchasingErrors:
    def test_empty_order_for_supplier(self):
        error = EmptyOrderError(date(2024, 6, 1), "S1")
        assert isinstance(error, PurchasingError)
        assert error.code == "EMPTY_ORDER"
        assert error.details == {"supplier_id": "S1", "order_date": "2024-06-01"}
        assert error.supplier_id == "S1"

    def test_empty_order_for_whole_day(self):
        error = EmptyOrderError(date(2024, 6, 1))
        assert error.supplier_id is None
        assert error.details["supplier_id"] is None

    def test_order_creation(self):
        error = OrderCreationError("S1", "connection reset")
        assert error.code == "ORDER_CREATION_FAILED"
        assert "S1" in error.message
        assert error.reason == "connection reset"


class TestNotFoundErrors:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ProductNotFoundError("P1"), "PRODUCT_NOT_FOUND"),
            (PurchaseOrderNotFoundError("po_1"), "PURCHASE_ORDER_NOT_FOUND"),
        ],
    )
    def test_codes(self, error, code):
        assert isinstance(error, StorageError)
        assert error.code == code

    def test_database_error(self):
        error = DatabaseError("insert", "disk full")
        assert error.details == {"operation": "insert", "error": "disk full"}


class TestReceivingErrors:
    def test_closed(self):
        error = PurchaseOrderClosedError("po_1", "completed")
        assert isinstance(error, ReceivingError)
        assert error.code == "PURCHASE_ORDER_CLOSED"
        assert "completed" in error.message

    def test_item_not_found(self):
        error = OrderItemNotFoundError("po_1", "P9")
        assert error.details == {"order_id": "po_1", "product_id": "P9"}


class TestValidationError:
    def test_truncates_value(self):
        error = ValidationError("quantity", "must be an integer", "x" * 500)
        assert error.code == "VALIDATION_ERROR"
        assert len(error.details["value"]) == 100

    def test_none_value(self):
        error = ValidationError("product_id", "must be a non-empty string")
        assert error.details["value"] is None


def test_hierarchy():
    for exc_class in (StorageError, PurchasingError, ReceivingError, ValidationError):
        assert issubclass(exc_class, SalonStockError)
