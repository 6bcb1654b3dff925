"""SQLite implementation of purchase order storage."""

import uuid
from datetime import date, datetime

import aiosqlite

from salonstock.config import get_logger, get_settings
from salonstock.core.entities.purchase_order import (
    OPEN_STATUSES,
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderReceipt,
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
from salonstock.core.interfaces.purchase_order_store import IPurchaseOrderStore
from salonstock.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from salonstock.infrastructure.storage.sqlite.inventory_store import add_stock

logger = get_logger(__name__)


def new_order_id() -> str:
    return f"po_{uuid.uuid4().hex[:12]}"


class SQLitePurchaseOrderStore(IPurchaseOrderStore):
    """
    SQLite implementation of purchase orders.

    An order and its lines are written in one transaction. Lines keep their
    request order through ``line_no``. Receiving marks lines and raises
    store stock in one transaction as well.
    """

    async def create_order(self, request: PurchaseOrderRequest) -> PurchaseOrder:
        if not request.items:
            raise ValidationError("items", "a purchase order needs at least one item")

        order_id = new_order_id()
        created_at = datetime.utcnow()

        async with get_transaction() as conn:
            cursor = await conn.execute(
                "SELECT name FROM suppliers WHERE id = ?", (request.supplier_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                supplier_name = get_settings().purchasing.unknown_supplier_name
                logger.warning(
                    "purchase_order_supplier_unknown",
                    supplier_id=request.supplier_id,
                )
            else:
                supplier_name = row["name"]

            await conn.execute(
                """
                INSERT INTO purchase_orders (
                    id, order_date, completed_date, supplier_id, supplier_name,
                    store_id, created_by_id, status, notes, created_at
                ) VALUES (?, ?, NULL, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    order_id,
                    request.order_date.isoformat(),
                    request.supplier_id,
                    supplier_name,
                    request.store_id,
                    request.created_by_id,
                    PurchaseOrderStatus.ORDERED.value,
                    request.notes,
                    created_at.isoformat(),
                ),
            )
            await conn.executemany(
                """
                INSERT INTO purchase_order_items (
                    order_id, line_no, product_id, product_name, barcode,
                    quantity, cost_price_at_order, is_received
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        order_id,
                        line_no,
                        item.product_id,
                        item.product_name,
                        item.barcode,
                        item.quantity,
                        item.cost_price_at_order,
                        int(item.is_received),
                    )
                    for line_no, item in enumerate(request.items, start=1)
                ],
            )

        order = PurchaseOrder(
            id=order_id,
            order_date=request.order_date,
            supplier_id=request.supplier_id,
            supplier_name=supplier_name,
            store_id=request.store_id,
            created_by_id=request.created_by_id,
            items=[item.model_copy() for item in request.items],
            status=PurchaseOrderStatus.ORDERED,
            notes=request.notes,
            created_at=created_at,
        )
        logger.info(
            "purchase_order_created",
            order_id=order_id,
            supplier_id=request.supplier_id,
            store_id=request.store_id,
            items=len(order.items),
        )
        return order

    async def get_order(self, order_id: str) -> PurchaseOrder | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM purchase_orders WHERE id = ?", (order_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            items = await self._load_items(conn, order_id)
            return self._row_to_order(row, items)

    async def list_orders(
        self,
        store_id: str | None = None,
        supplier_id: str | None = None,
        status: PurchaseOrderStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[PurchaseOrder]:
        query = "SELECT * FROM purchase_orders WHERE 1=1"
        params: list = []

        if store_id:
            query += " AND store_id = ?"
            params.append(store_id)
        if supplier_id:
            query += " AND supplier_id = ?"
            params.append(supplier_id)
        if status:
            query += " AND status = ?"
            params.append(status.value)

        query += " ORDER BY created_at DESC, rowid DESC LIMIT ? OFFSET ?"
        params.extend([limit, offset])

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            orders = []
            for row in rows:
                items = await self._load_items(conn, row["id"])
                orders.append(self._row_to_order(row, items))
            return orders

    async def receive_items(
        self,
        order_id: str,
        lines: list[ReceiptLine],
        received_on: date,
        notes: str | None = None,
    ) -> PurchaseOrderReceipt:
        received: list[str] = []
        skipped: list[str] = []

        async with get_transaction() as conn:
            # A write first, so concurrent receipts of this order queue here
            cursor = await conn.execute(
                "UPDATE purchase_orders SET notes = COALESCE(?, notes) WHERE id = ?",
                (notes, order_id),
            )
            if cursor.rowcount == 0:
                raise PurchaseOrderNotFoundError(order_id)

            cursor = await conn.execute(
                "SELECT status, store_id FROM purchase_orders WHERE id = ?", (order_id,)
            )
            row = await cursor.fetchone()
            status = PurchaseOrderStatus(row["status"])
            if status not in OPEN_STATUSES:
                raise PurchaseOrderClosedError(order_id, status.value)
            store_id = row["store_id"]

            cursor = await conn.execute(
                "SELECT DISTINCT product_id FROM purchase_order_items WHERE order_id = ?",
                (order_id,),
            )
            ordered = {r["product_id"] for r in await cursor.fetchall()}
            for line in lines:
                if line.product_id not in ordered:
                    raise OrderItemNotFoundError(order_id, line.product_id)

            for line in lines:
                cursor = await conn.execute(
                    """
                    UPDATE purchase_order_items SET is_received = 1
                    WHERE order_id = ? AND is_received = 0 AND line_no = (
                        SELECT MIN(line_no) FROM purchase_order_items
                        WHERE order_id = ? AND product_id = ? AND is_received = 0
                    )
                    """,
                    (order_id, order_id, line.product_id),
                )
                if cursor.rowcount != 1:
                    skipped.append(line.product_id)
                    continue
                await add_stock(conn, line.product_id, store_id, line.quantity)
                received.append(line.product_id)

            cursor = await conn.execute(
                """
                SELECT COUNT(*) AS pending FROM purchase_order_items
                WHERE order_id = ? AND is_received = 0
                """,
                (order_id,),
            )
            pending = (await cursor.fetchone())["pending"]
            if pending == 0:
                status = PurchaseOrderStatus.COMPLETED
                completed_date = received_on.isoformat()
            else:
                status = PurchaseOrderStatus.PARTIALLY_RECEIVED
                completed_date = None
            await conn.execute(
                "UPDATE purchase_orders SET status = ?, completed_date = ? WHERE id = ?",
                (status.value, completed_date, order_id),
            )

            cursor = await conn.execute(
                "SELECT * FROM purchase_orders WHERE id = ?", (order_id,)
            )
            row = await cursor.fetchone()
            order = self._row_to_order(row, await self._load_items(conn, order_id))

        logger.info(
            "purchase_order_items_received",
            order_id=order_id,
            status=order.status.value,
            received=received,
            skipped=skipped,
        )
        return PurchaseOrderReceipt(
            order=order,
            received_product_ids=received,
            skipped_product_ids=skipped,
        )

    @staticmethod
    async def _load_items(
        conn: aiosqlite.Connection, order_id: str
    ) -> list[PurchaseOrderItem]:
        cursor = await conn.execute(
            """
            SELECT * FROM purchase_order_items
            WHERE order_id = ?
            ORDER BY line_no
            """,
            (order_id,),
        )
        rows = await cursor.fetchall()
        return [
            PurchaseOrderItem(
                product_id=row["product_id"],
                product_name=row["product_name"],
                barcode=row["barcode"],
                quantity=int(row["quantity"]),
                cost_price_at_order=float(row["cost_price_at_order"]),
                is_received=bool(row["is_received"]),
            )
            for row in rows
        ]

    @staticmethod
    def _row_to_order(
        row: aiosqlite.Row, items: list[PurchaseOrderItem]
    ) -> PurchaseOrder:
        created_at = datetime.utcnow()
        if row["created_at"]:
            try:
                created_at = datetime.fromisoformat(row["created_at"])
            except (ValueError, TypeError):
                pass

        completed_date = None
        if row["completed_date"]:
            completed_date = date.fromisoformat(row["completed_date"])

        return PurchaseOrder(
            id=row["id"],
            order_date=date.fromisoformat(row["order_date"]),
            completed_date=completed_date,
            supplier_id=row["supplier_id"],
            supplier_name=row["supplier_name"],
            store_id=row["store_id"],
            created_by_id=row["created_by_id"],
            items=items,
            status=PurchaseOrderStatus(row["status"]),
            notes=row["notes"],
            created_at=created_at,
        )
