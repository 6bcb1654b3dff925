"""Inventory ledger entities."""

from datetime import datetime

from pydantic import BaseModel, Field

from salonstock.core.entities.catalog import Product


class InventoryRecord(BaseModel):
    """Stock level of one product in one store."""

    product_id: str  # FK → products.id
    store_id: str
    current_stock: int = Field(default=0, ge=0)
    minimum_stock: int = Field(default=0, ge=0)
    last_updated: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_below_minimum(self) -> bool:
        return self.current_stock < self.minimum_stock

    @property
    def shortfall(self) -> int:
        """Units missing to reach the minimum stock."""
        return max(0, self.minimum_stock - self.current_stock)


class ReorderCandidate(BaseModel):
    """A below-minimum product suggested for the purchase list."""

    product: Product
    store_id: str
    current_stock: int
    minimum_stock: int

    @property
    def shortfall(self) -> int:
        return max(0, self.minimum_stock - self.current_stock)

    @property
    def suggested_quantity(self) -> int:
        return max(1, self.shortfall)
