"""Tests for SQLite purchase order store."""

import asyncio
from datetime import date

import pytest

from salonstock.core.entities import (
    PurchaseOrderItem,
    PurchaseOrderRequest,
    PurchaseOrderStatus,
    ReceiptLine,
)
from salonstock.core.exceptions import (
    OrderItemNotFoundError,
    PurchaseOrderClosedError,
    PurchaseOrderNotFoundError,
    ValidationError,
)

DELIVERED = date(2024, 6, 5)


def make_request(supplier_id: str = "S1", store_id: str = "store1") -> PurchaseOrderRequest:
    return PurchaseOrderRequest(
        order_date=date(2024, 6, 1),
        supplier_id=supplier_id,
        created_by_id="u1",
        store_id=store_id,
        items=[
            PurchaseOrderItem(
                product_id="P3", product_name="Bleach Powder", barcode="8850003",
                quantity=2, cost_price_at_order=240.0,
            ),
            PurchaseOrderItem(
                product_id="P1", product_name="Shampoo 1L", barcode="8850001",
                quantity=5, cost_price_at_order=120.0,
            ),
        ],
    )


class TestSQLitePurchaseOrderStore:
    """Tests for SQLitePurchaseOrderStore."""

    async def test_create_order(self, seeded_catalog, purchase_order_store):
        order = await purchase_order_store.create_order(make_request())

        assert order.id.startswith("po_")
        assert order.status == PurchaseOrderStatus.ORDERED
        assert order.supplier_name == "Salon Supply"
        assert order.completed_date is None
        assert order.total_amount == 1080.0

    async def test_get_order_keeps_line_order(self, seeded_catalog, purchase_order_store):
        created = await purchase_order_store.create_order(make_request())

        fetched = await purchase_order_store.get_order(created.id)

        assert fetched is not None
        assert fetched.order_date == date(2024, 6, 1)
        assert [i.product_id for i in fetched.items] == ["P3", "P1"]
        assert fetched.items[1].cost_price_at_order == 120.0
        assert not any(i.is_received for i in fetched.items)

    async def test_unknown_supplier_name(self, initialized_db, purchase_order_store):
        order = await purchase_order_store.create_order(make_request(supplier_id="S404"))
        assert order.supplier_name == "Unknown"

    async def test_empty_request_rejected(self, initialized_db, purchase_order_store):
        request = make_request().model_copy(update={"items": []})
        with pytest.raises(ValidationError):
            await purchase_order_store.create_order(request)

    async def test_get_missing_order(self, initialized_db, purchase_order_store):
        assert await purchase_order_store.get_order("po_missing") is None

    async def test_ids_are_unique(self, seeded_catalog, purchase_order_store):
        first = await purchase_order_store.create_order(make_request())
        second = await purchase_order_store.create_order(make_request())
        assert first.id != second.id

    async def test_list_orders_filters(self, seeded_catalog, purchase_order_store):
        await purchase_order_store.create_order(make_request("S1", "store1"))
        await purchase_order_store.create_order(make_request("S2", "store1"))
        await purchase_order_store.create_order(make_request("S1", "store2"))

        by_store = await purchase_order_store.list_orders(store_id="store1")
        by_supplier = await purchase_order_store.list_orders(supplier_id="S1")

        assert len(by_store) == 2
        assert {o.store_id for o in by_supplier} == {"store1", "store2"}

    async def test_list_orders_newest_first(self, seeded_catalog, purchase_order_store):
        first = await purchase_order_store.create_order(make_request())
        second = await purchase_order_store.create_order(make_request())
        orders = await purchase_order_store.list_orders()
        assert [o.id for o in orders] == [second.id, first.id]


def lines(*items: tuple[str, int]) -> list[ReceiptLine]:
    return [ReceiptLine(product_id=pid, quantity=qty) for pid, qty in items]


class TestReceiveItems:
    """Tests for recording deliveries."""

    async def test_partial_then_complete(self, seeded_catalog, purchase_order_store, inventory_store):
        order = await purchase_order_store.create_order(make_request())

        first = await purchase_order_store.receive_items(
            order.id, lines(("P3", 2)), received_on=DELIVERED
        )
        assert first.received_product_ids == ["P3"]
        assert first.order.status == PurchaseOrderStatus.PARTIALLY_RECEIVED
        assert first.order.completed_date is None
        assert [i.is_received for i in first.order.items] == [True, False]

        second = await purchase_order_store.receive_items(
            order.id, lines(("P1", 5)), received_on=DELIVERED, notes="all boxes in"
        )
        assert second.order.status == PurchaseOrderStatus.COMPLETED
        assert second.order.completed_date == DELIVERED
        assert second.order.notes == "all boxes in"

        fetched = await purchase_order_store.get_order(order.id)
        assert fetched.status == PurchaseOrderStatus.COMPLETED
        assert all(i.is_received for i in fetched.items)
        assert await inventory_store.get_current_stock("P3", "store1") == 2
        assert await inventory_store.get_current_stock("P1", "store1") == 5

    async def test_received_quantity_added_to_existing_stock(
        self, seeded_catalog, purchase_order_store, inventory_store
    ):
        await inventory_store.adjust_stock("P1", "store1", 3)
        order = await purchase_order_store.create_order(make_request())

        await purchase_order_store.receive_items(order.id, lines(("P1", 4)), received_on=DELIVERED)

        assert await inventory_store.get_current_stock("P1", "store1") == 7

    async def test_received_line_skipped(self, seeded_catalog, purchase_order_store, inventory_store):
        order = await purchase_order_store.create_order(make_request())
        await purchase_order_store.receive_items(order.id, lines(("P1", 5)), received_on=DELIVERED)

        receipt = await purchase_order_store.receive_items(
            order.id, lines(("P1", 5), ("P3", 2)), received_on=DELIVERED
        )

        assert receipt.skipped_product_ids == ["P1"]
        assert receipt.received_product_ids == ["P3"]
        assert await inventory_store.get_current_stock("P1", "store1") == 5

    async def test_concurrent_receipts_count_once(
        self, seeded_catalog, purchase_order_store, inventory_store
    ):
        order = await purchase_order_store.create_order(make_request())

        receipts = await asyncio.gather(
            purchase_order_store.receive_items(order.id, lines(("P1", 5)), received_on=DELIVERED),
            purchase_order_store.receive_items(order.id, lines(("P1", 5)), received_on=DELIVERED),
        )

        assert sorted(len(r.received_product_ids) for r in receipts) == [0, 1]
        assert sorted(len(r.skipped_product_ids) for r in receipts) == [0, 1]
        assert await inventory_store.get_current_stock("P1", "store1") == 5

    async def test_concurrent_full_receipts_close_once(
        self, seeded_catalog, purchase_order_store, inventory_store
    ):
        order = await purchase_order_store.create_order(make_request())
        delivery = lines(("P3", 2), ("P1", 5))

        outcomes = await asyncio.gather(
            purchase_order_store.receive_items(order.id, delivery, received_on=DELIVERED),
            purchase_order_store.receive_items(order.id, delivery, received_on=DELIVERED),
            return_exceptions=True,
        )

        assert sum(isinstance(o, PurchaseOrderClosedError) for o in outcomes) == 1
        assert await inventory_store.get_current_stock("P1", "store1") == 5
        assert await inventory_store.get_current_stock("P3", "store1") == 2

    async def test_unknown_product_writes_nothing(
        self, seeded_catalog, purchase_order_store, inventory_store
    ):
        order = await purchase_order_store.create_order(make_request())

        with pytest.raises(OrderItemNotFoundError):
            await purchase_order_store.receive_items(
                order.id, lines(("P1", 5), ("P2", 1)), received_on=DELIVERED, notes="x"
            )

        fetched = await purchase_order_store.get_order(order.id)
        assert fetched.status == PurchaseOrderStatus.ORDERED
        assert fetched.notes is None
        assert not any(i.is_received for i in fetched.items)
        assert await inventory_store.get_current_stock("P1", "store1") == 0

    async def test_closed_order_rejected(self, seeded_catalog, purchase_order_store):
        order = await purchase_order_store.create_order(make_request())
        await purchase_order_store.receive_items(
            order.id, lines(("P3", 2), ("P1", 5)), received_on=DELIVERED
        )

        with pytest.raises(PurchaseOrderClosedError):
            await purchase_order_store.receive_items(
                order.id, lines(("P1", 1)), received_on=DELIVERED
            )

    async def test_missing_order(self, initialized_db, purchase_order_store):
        with pytest.raises(PurchaseOrderNotFoundError):
            await purchase_order_store.receive_items(
                "po_gone", lines(("P1", 1)), received_on=DELIVERED
            )

    async def test_listed_by_status(self, seeded_catalog, purchase_order_store):
        order = await purchase_order_store.create_order(make_request())
        await purchase_order_store.receive_items(order.id, lines(("P3", 2)), received_on=DELIVERED)

        partial = await purchase_order_store.list_orders(
            status=PurchaseOrderStatus.PARTIALLY_RECEIVED
        )

        assert [o.id for o in partial] == [order.id]
