"""SQLite implementation of the product catalog."""

from datetime import datetime

import aiosqlite

from salonstock.config import get_logger
from salonstock.core.entities.catalog import Product, ProductUsage, Supplier
from salonstock.core.interfaces.catalog_store import ICatalogStore
from salonstock.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteCatalogStore(ICatalogStore):
    """SQLite implementation of product and supplier storage."""

    async def create_product(self, product: Product) -> Product:
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO products (
                    id, name, barcode, supplier_id, cost_price, category_id,
                    usage, description, image_url, last_updated
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    product.id,
                    product.name,
                    product.barcode,
                    product.supplier_id,
                    product.cost_price,
                    product.category_id,
                    product.usage.value,
                    product.description,
                    product.image_url,
                    product.last_updated.isoformat(),
                ),
            )
        logger.info(
            "product_created",
            product_id=product.id,
            barcode=product.barcode,
            supplier_id=product.supplier_id,
        )
        return product

    async def get_product(self, product_id: str) -> Product | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM products WHERE id = ?", (product_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_product(row) if row else None

    async def get_product_by_barcode(self, barcode: str) -> Product | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM products WHERE barcode = ?", (barcode,)
            )
            row = await cursor.fetchone()
            return self._row_to_product(row) if row else None

    async def get_product_cost(self, product_id: str) -> float | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT cost_price FROM products WHERE id = ?", (product_id,)
            )
            row = await cursor.fetchone()
            return float(row["cost_price"]) if row else None

    async def list_products(
        self,
        supplier_id: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Product]:
        query = "SELECT * FROM products"
        params: list = []
        if supplier_id:
            query += " WHERE supplier_id = ?"
            params.append(supplier_id)
        query += " ORDER BY name LIMIT ? OFFSET ?"
        params.extend([limit, offset])

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_product(row) for row in rows]

    async def create_supplier(self, supplier: Supplier) -> Supplier:
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO suppliers (
                    id, name, contact_person, phone, email, address, line_id
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    supplier.id,
                    supplier.name,
                    supplier.contact_person,
                    supplier.phone,
                    supplier.email,
                    supplier.address,
                    supplier.line_id,
                ),
            )
        logger.info("supplier_created", supplier_id=supplier.id, name=supplier.name)
        return supplier

    async def get_supplier(self, supplier_id: str) -> Supplier | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM suppliers WHERE id = ?", (supplier_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_supplier(row) if row else None

    async def list_suppliers(self) -> list[Supplier]:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM suppliers ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_supplier(row) for row in rows]

    @staticmethod
    def _row_to_product(row: aiosqlite.Row) -> Product:
        last_updated = datetime.utcnow()
        if row["last_updated"]:
            try:
                last_updated = datetime.fromisoformat(row["last_updated"])
            except (ValueError, TypeError):
                pass

        return Product(
            id=row["id"],
            name=row["name"],
            barcode=row["barcode"],
            supplier_id=row["supplier_id"],
            cost_price=float(row["cost_price"] or 0.0),
            category_id=row["category_id"],
            usage=ProductUsage(row["usage"]),
            description=row["description"],
            image_url=row["image_url"],
            last_updated=last_updated,
        )

    @staticmethod
    def _row_to_supplier(row: aiosqlite.Row) -> Supplier:
        return Supplier(
            id=row["id"],
            name=row["name"],
            contact_person=row["contact_person"],
            phone=row["phone"],
            email=row["email"],
            address=row["address"],
            line_id=row["line_id"],
        )
