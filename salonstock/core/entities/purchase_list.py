"""Purchase list (reorder cart) entities."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from salonstock.core.entities.catalog import Product


class PurchaseListEntry(BaseModel):
    """
    One line of the purchase list.

    Entries are immutable; quantity changes produce a new entry. The
    aggregation key is ``(product.id, added_at)``: the same product added on
    the same day merges into one entry, on another day it opens a new one.
    ``supplier_id`` is copied from the product when the entry is created and
    is never refreshed from the catalog afterwards.
    """

    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int
    supplier_id: str
    added_at: date

    @property
    def key(self) -> tuple[str, date]:
        return (self.product.id, self.added_at)

    @property
    def is_orderable(self) -> bool:
        """Zero-quantity entries stay visible but are never ordered."""
        return self.quantity > 0

    def with_quantity(self, quantity: int) -> "PurchaseListEntry":
        return self.model_copy(update={"quantity": quantity})

    def with_added_quantity(self, quantity: int) -> "PurchaseListEntry":
        """Merge a same-day add; the result never drops below one."""
        return self.with_quantity(max(1, self.quantity + max(1, quantity)))
