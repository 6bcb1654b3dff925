"""SQLite implementation of the per-store inventory ledger."""

from datetime import datetime

import aiosqlite

from salonstock.config import get_logger
from salonstock.core.entities.inventory import InventoryRecord
from salonstock.core.interfaces.inventory_store import IInventoryStore
from salonstock.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


async def add_stock(
    conn: aiosqlite.Connection, product_id: str, store_id: str, delta: int
) -> None:
    """Apply a stock delta on the caller's connection, clamped at zero."""
    await conn.execute(
        """
        INSERT INTO inventory_records (
            product_id, store_id, current_stock, minimum_stock, last_updated
        ) VALUES (?, ?, MAX(0, ?), 0, ?)
        ON CONFLICT(product_id, store_id) DO UPDATE SET
            current_stock = MAX(0, current_stock + ?),
            last_updated = excluded.last_updated
        """,
        (product_id, store_id, delta, datetime.utcnow().isoformat(), delta),
    )


class SQLiteInventoryStore(IInventoryStore):
    """SQLite implementation of inventory record storage."""

    async def get_record(
        self, product_id: str, store_id: str
    ) -> InventoryRecord | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM inventory_records
                WHERE product_id = ? AND store_id = ?
                """,
                (product_id, store_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_record(row)

    async def get_current_stock(self, product_id: str, store_id: str) -> int:
        record = await self.get_record(product_id, store_id)
        return record.current_stock if record else 0

    async def list_records(
        self, store_id: str, limit: int = 100, offset: int = 0
    ) -> list[InventoryRecord]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM inventory_records
                WHERE store_id = ?
                ORDER BY product_id
                LIMIT ? OFFSET ?
                """,
                (store_id, limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_record(row) for row in rows]

    async def list_below_minimum(
        self, store_id: str, supplier_id: str | None = None, limit: int = 100
    ) -> list[InventoryRecord]:
        query = """
            SELECT r.* FROM inventory_records r
            JOIN products p ON p.id = r.product_id
            WHERE r.store_id = ? AND r.current_stock < r.minimum_stock
        """
        params: list = [store_id]
        if supplier_id:
            query += " AND p.supplier_id = ?"
            params.append(supplier_id)
        query += " ORDER BY (r.minimum_stock - r.current_stock) DESC, p.name LIMIT ?"
        params.append(limit)

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_record(row) for row in rows]

    async def upsert_record(self, record: InventoryRecord) -> InventoryRecord:
        record.last_updated = datetime.utcnow()
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO inventory_records (
                    product_id, store_id, current_stock, minimum_stock, last_updated
                ) VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(product_id, store_id) DO UPDATE SET
                    current_stock = excluded.current_stock,
                    minimum_stock = excluded.minimum_stock,
                    last_updated = excluded.last_updated
                """,
                (
                    record.product_id,
                    record.store_id,
                    record.current_stock,
                    record.minimum_stock,
                    record.last_updated.isoformat(),
                ),
            )
        logger.info(
            "inventory_record_upserted",
            product_id=record.product_id,
            store_id=record.store_id,
            current_stock=record.current_stock,
            minimum_stock=record.minimum_stock,
        )
        return record

    async def adjust_stock(
        self, product_id: str, store_id: str, delta: int
    ) -> InventoryRecord:
        async with get_transaction() as conn:
            await add_stock(conn, product_id, store_id, delta)
            cursor = await conn.execute(
                """
                SELECT * FROM inventory_records
                WHERE product_id = ? AND store_id = ?
                """,
                (product_id, store_id),
            )
            row = await cursor.fetchone()

        record = self._row_to_record(row)
        logger.info(
            "inventory_stock_adjusted",
            product_id=product_id,
            store_id=store_id,
            delta=delta,
            current_stock=record.current_stock,
        )
        return record

    @staticmethod
    def _row_to_record(row: aiosqlite.Row) -> InventoryRecord:
        last_updated = datetime.utcnow()
        if row["last_updated"]:
            try:
                last_updated = datetime.fromisoformat(row["last_updated"])
            except (ValueError, TypeError):
                pass

        return InventoryRecord(
            product_id=row["product_id"],
            store_id=row["store_id"],
            current_stock=int(row["current_stock"]),
            minimum_stock=int(row["minimum_stock"]),
            last_updated=last_updated,
        )
