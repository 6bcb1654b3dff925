"""Abstract interface for the per-store inventory ledger."""

from abc import ABC, abstractmethod

from salonstock.core.entities.inventory import InventoryRecord


class IInventoryStore(ABC):
    """Interface for inventory record persistence."""

    @abstractmethod
    async def get_record(
        self, product_id: str, store_id: str
    ) -> InventoryRecord | None:
        """Get the inventory record of a product in a store."""
        pass

    @abstractmethod
    async def get_current_stock(self, product_id: str, store_id: str) -> int:
        """Current stock of a product in a store, 0 when no record exists."""
        pass

    @abstractmethod
    async def list_records(
        self, store_id: str, limit: int = 100, offset: int = 0
    ) -> list[InventoryRecord]:
        """List inventory records of a store with pagination."""
        pass

    @abstractmethod
    async def list_below_minimum(
        self, store_id: str, supplier_id: str | None = None, limit: int = 100
    ) -> list[InventoryRecord]:
        """
        List records of a store where current_stock < minimum_stock.

        Largest shortfall first. The supplier filter applies before the limit.
        """
        pass

    @abstractmethod
    async def upsert_record(self, record: InventoryRecord) -> InventoryRecord:
        """Create or replace the record for (product_id, store_id)."""
        pass

    @abstractmethod
    async def adjust_stock(
        self, product_id: str, store_id: str, delta: int
    ) -> InventoryRecord:
        """
        Add delta to current stock.

        Creates the record with minimum_stock 0 when missing. Stock never
        drops below zero.
        """
        pass
