"""Tests for SQLite inventory store."""

from salonstock.core.entities import InventoryRecord


class TestSQLiteInventoryStore:
    """Tests for SQLiteInventoryStore."""

    async def test_upsert_and_get(self, seeded_catalog, inventory_store):
        await inventory_store.upsert_record(
            InventoryRecord(product_id="P1", store_id="store1", current_stock=4, minimum_stock=6)
        )
        record = await inventory_store.get_record("P1", "store1")
        assert record is not None
        assert record.current_stock == 4
        assert record.minimum_stock == 6

    async def test_upsert_overwrites(self, seeded_catalog, inventory_store):
        await inventory_store.upsert_record(
            InventoryRecord(product_id="P1", store_id="store1", current_stock=4, minimum_stock=6)
        )
        await inventory_store.upsert_record(
            InventoryRecord(product_id="P1", store_id="store1", current_stock=9, minimum_stock=2)
        )
        record = await inventory_store.get_record("P1", "store1")
        assert (record.current_stock, record.minimum_stock) == (9, 2)

    async def test_current_stock_defaults_to_zero(self, seeded_catalog, inventory_store):
        assert await inventory_store.get_current_stock("P1", "store1") == 0

    async def test_stores_are_separate(self, seeded_catalog, inventory_store):
        await inventory_store.upsert_record(
            InventoryRecord(product_id="P1", store_id="store1", current_stock=4)
        )
        assert await inventory_store.get_current_stock("P1", "store2") == 0

    async def test_adjust_creates_record(self, seeded_catalog, inventory_store):
        record = await inventory_store.adjust_stock("P2", "store1", 5)
        assert record.current_stock == 5
        assert record.minimum_stock == 0

    async def test_adjust_adds_to_existing(self, seeded_catalog, inventory_store):
        await inventory_store.upsert_record(
            InventoryRecord(product_id="P1", store_id="store1", current_stock=2, minimum_stock=5)
        )
        record = await inventory_store.adjust_stock("P1", "store1", 3)
        assert record.current_stock == 5
        assert record.minimum_stock == 5

    async def test_adjust_never_goes_negative(self, seeded_catalog, inventory_store):
        await inventory_store.adjust_stock("P1", "store1", 2)
        record = await inventory_store.adjust_stock("P1", "store1", -10)
        assert record.current_stock == 0

    async def test_list_below_minimum(self, seeded_catalog, inventory_store):
        for product_id, current, minimum in (("P1", 1, 3), ("P2", 0, 6), ("P3", 8, 2)):
            await inventory_store.upsert_record(
                InventoryRecord(
                    product_id=product_id,
                    store_id="store1",
                    current_stock=current,
                    minimum_stock=minimum,
                )
            )
        below = await inventory_store.list_below_minimum("store1")
        assert [r.product_id for r in below] == ["P2", "P1"]

    async def test_below_minimum_supplier_filter_before_limit(
        self, seeded_catalog, inventory_store
    ):
        # P1 and P3 belong to S1 and have the larger shortfalls
        for product_id, current, minimum in (("P1", 0, 10), ("P3", 0, 8), ("P2", 2, 3)):
            await inventory_store.upsert_record(
                InventoryRecord(
                    product_id=product_id,
                    store_id="store1",
                    current_stock=current,
                    minimum_stock=minimum,
                )
            )

        below = await inventory_store.list_below_minimum("store1", supplier_id="S2", limit=1)

        assert [r.product_id for r in below] == ["P2"]

    async def test_list_records(self, seeded_catalog, inventory_store):
        await inventory_store.adjust_stock("P3", "store1", 1)
        await inventory_store.adjust_stock("P1", "store1", 1)
        await inventory_store.adjust_stock("P2", "store2", 1)
        records = await inventory_store.list_records("store1")
        assert [r.product_id for r in records] == ["P1", "P3"]
