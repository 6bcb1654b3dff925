"""Tests for ReceivePurchaseOrderUseCase."""

from datetime import date, datetime
from unittest.mock import AsyncMock

import pytest

from salonstock.application.dto.requests import (
    ReceivedItemRequest,
    ReceivePurchaseOrderRequest,
)
from salonstock.application.use_cases import ReceivePurchaseOrderUseCase
from salonstock.core.entities import (
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderReceipt,
    PurchaseOrderStatus,
    ReceiptLine,
)
from salonstock.core.exceptions import OrderItemNotFoundError, PurchaseOrderClosedError


def make_order(status=PurchaseOrderStatus.ORDERED, received=(False, False)) -> PurchaseOrder:
    return PurchaseOrder(
        id="po_1",
        order_date=date(2024, 6, 1),
        supplier_id="S1",
        supplier_name="Salon Supply",
        store_id="store1",
        created_by_id="u1",
        items=[
            PurchaseOrderItem(
                product_id="P1", product_name="Shampoo", barcode="1",
                quantity=3, cost_price_at_order=5.0, is_received=received[0],
            ),
            PurchaseOrderItem(
                product_id="P2", product_name="Conditioner", barcode="2",
                quantity=2, cost_price_at_order=6.0, is_received=received[1],
            ),
        ],
        status=status,
        created_at=datetime(2024, 6, 1, 10, 0),
    )


@pytest.fixture
def mock_order_store():
    return AsyncMock()


@pytest.fixture
def use_case(mock_order_store, clock):
    return ReceivePurchaseOrderUseCase(order_store=mock_order_store, clock=clock)


def receive(*items: tuple[str, int], notes: str | None = None) -> ReceivePurchaseOrderRequest:
    return ReceivePurchaseOrderRequest(
        items=[ReceivedItemRequest(product_id=pid, quantity=qty) for pid, qty in items],
        received_by_id="u2",
        notes=notes,
    )


class TestReceivePurchaseOrderUseCase:
    async def test_passes_delivery_to_store(self, use_case, mock_order_store, today):
        mock_order_store.receive_items.return_value = PurchaseOrderReceipt(
            order=make_order(status=PurchaseOrderStatus.COMPLETED, received=(True, True)),
            received_product_ids=["P1", "P2"],
        )

        result = await use_case.execute("po_1", receive(("P1", 3), ("P2", 2), notes="ok"))

        mock_order_store.receive_items.assert_awaited_once_with(
            "po_1",
            [
                ReceiptLine(product_id="P1", quantity=3),
                ReceiptLine(product_id="P2", quantity=2),
            ],
            received_on=today,
            notes="ok",
        )
        assert result.order.status == PurchaseOrderStatus.COMPLETED
        assert result.received_product_ids == ["P1", "P2"]

    async def test_reports_skipped_lines(self, use_case, mock_order_store):
        mock_order_store.receive_items.return_value = PurchaseOrderReceipt(
            order=make_order(status=PurchaseOrderStatus.COMPLETED, received=(True, True)),
            received_product_ids=["P2"],
            skipped_product_ids=["P1"],
        )

        result = await use_case.execute("po_1", receive(("P1", 3), ("P2", 2)))

        assert result.skipped_product_ids == ["P1"]
        assert result.received_product_ids == ["P2"]

    @pytest.mark.parametrize(
        "error",
        [
            PurchaseOrderClosedError("po_1", "completed"),
            OrderItemNotFoundError("po_1", "P9"),
        ],
    )
    async def test_store_errors_propagate(self, use_case, mock_order_store, error):
        mock_order_store.receive_items.side_effect = error
        with pytest.raises(type(error)):
            await use_case.execute("po_1", receive(("P9", 1)))

    async def test_to_response(self, use_case, mock_order_store):
        mock_order_store.receive_items.return_value = PurchaseOrderReceipt(
            order=make_order(
                status=PurchaseOrderStatus.PARTIALLY_RECEIVED, received=(False, True)
            ),
            received_product_ids=["P2"],
        )
        result = await use_case.execute("po_1", receive(("P2", 2)))
        response = use_case.to_response(result)
        assert response.order.status == "partially_received"
        assert response.order.pending_item_count == 1
        assert response.received_product_ids == ["P2"]
        assert response.order.total_amount == 27.0
