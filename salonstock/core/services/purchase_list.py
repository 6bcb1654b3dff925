"""
Purchase list (reorder cart).

Accumulates products to reorder across browsing sessions, bucketed by the
calendar day they were added. One instance belongs to one session; it is
never shared as a module-level singleton.
"""

import threading
from collections.abc import Callable, Iterable, Iterator
from datetime import date

from salonstock.config import get_logger
from salonstock.core.entities.catalog import Product
from salonstock.core.entities.purchase_list import PurchaseListEntry
from salonstock.core.exceptions import ValidationError

logger = get_logger(__name__)


def _require_id(field: str, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, "must be a non-empty string", value)


def _require_int(field: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "must be an integer", value)


class PurchaseList:
    """
    Session-owned collection of purchase list entries.

    Entries keep insertion order. Each operation is atomic under an
    internal lock; callers that need a multi-step sequence to be atomic
    (filter, submit, clear) must serialize it themselves, see
    ``OrderMaterializer``.
    """

    def __init__(self, clock: Callable[[], date] = date.today) -> None:
        self._clock = clock
        self._entries: list[PurchaseListEntry] = []
        self._lock = threading.RLock()

    def _index_of(self, product_id: str, added_at: date) -> int | None:
        for index, entry in enumerate(self._entries):
            if entry.product.id == product_id and entry.added_at == added_at:
                return index
        return None

    # Mutations

    def add(
        self,
        product: Product,
        quantity: int = 1,
        added_at: date | None = None,
    ) -> PurchaseListEntry:
        """
        Add a product to the list.

        Args:
            product: Catalog product; its supplier becomes the entry's supplier.
            quantity: Units to add, floored to 1.
            added_at: Day bucket, defaults to today.

        Returns:
            The created or merged entry.
        """
        _require_id("product.id", product.id)
        _require_id("product.supplier_id", product.supplier_id)
        _require_int("quantity", quantity)
        day = added_at or self._clock()

        with self._lock:
            index = self._index_of(product.id, day)
            if index is None:
                entry = PurchaseListEntry(
                    product=product,
                    quantity=max(1, quantity),
                    supplier_id=product.supplier_id,
                    added_at=day,
                )
                self._entries.append(entry)
                merged = False
            else:
                entry = self._entries[index].with_added_quantity(quantity)
                self._entries[index] = entry
                merged = True

        logger.debug(
            "purchase_list_entry_added",
            product_id=product.id,
            added_at=day.isoformat(),
            quantity=entry.quantity,
            merged=merged,
        )
        return entry

    def remove(self, product_id: str, added_at: date) -> None:
        """Remove the entry with this key. Absent keys are ignored."""
        _require_id("product_id", product_id)
        with self._lock:
            index = self._index_of(product_id, added_at)
            if index is not None:
                del self._entries[index]

    def update_quantity(
        self, product_id: str, added_at: date, quantity: int
    ) -> PurchaseListEntry | None:
        """
        Replace an entry's quantity, floored to 0.

        Zero keeps the entry visible but excludes it from the next order.
        Returns None when no entry has this key.
        """
        _require_id("product_id", product_id)
        _require_int("quantity", quantity)
        with self._lock:
            index = self._index_of(product_id, added_at)
            if index is None:
                return None
            entry = self._entries[index].with_quantity(max(0, quantity))
            self._entries[index] = entry
            return entry

    def discard(self, entries: Iterable[PurchaseListEntry]) -> int:
        """
        Remove entries previously read from this list.

        An entry is removed only while the list still holds that exact
        entry object under its key. Entries replaced since the snapshot was
        taken (a merge or quantity update) are kept.

        Returns:
            Number of entries removed.
        """
        snapshot = list(entries)
        removed = 0
        with self._lock:
            for entry in snapshot:
                index = self._index_of(*entry.key)
                if index is None:
                    continue
                if self._entries[index] is entry:
                    del self._entries[index]
                    removed += 1
                else:
                    logger.warning(
                        "purchase_list_entry_changed",
                        product_id=entry.product.id,
                        added_at=entry.added_at.isoformat(),
                        snapshot_quantity=entry.quantity,
                        current_quantity=self._entries[index].quantity,
                    )
        return removed

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    # Queries

    @property
    def entries(self) -> tuple[PurchaseListEntry, ...]:
        """Snapshot of all entries in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def get(self, product_id: str, added_at: date) -> PurchaseListEntry | None:
        with self._lock:
            index = self._index_of(product_id, added_at)
            return None if index is None else self._entries[index]

    def entries_for_supplier(self, supplier_id: str) -> list[PurchaseListEntry]:
        """All entries of a supplier, any day, in insertion order."""
        with self._lock:
            return [e for e in self._entries if e.supplier_id == supplier_id]

    def entries_for_date(self, added_at: date) -> list[PurchaseListEntry]:
        with self._lock:
            return [e for e in self._entries if e.added_at == added_at]

    def slice(self, supplier_id: str, added_at: date) -> list[PurchaseListEntry]:
        """Entries of one supplier added on one day, zero quantities included."""
        with self._lock:
            return [
                e
                for e in self._entries
                if e.supplier_id == supplier_id and e.added_at == added_at
            ]

    def orderable_entries(
        self, added_at: date, supplier_id: str | None = None
    ) -> list[PurchaseListEntry]:
        """Entries of a day with quantity > 0, optionally for one supplier."""
        entries = (
            self.entries_for_date(added_at)
            if supplier_id is None
            else self.slice(supplier_id, added_at)
        )
        return [e for e in entries if e.is_orderable]

    def dates(self) -> list[date]:
        """Distinct days present in the list, in first-seen order."""
        with self._lock:
            return list(dict.fromkeys(e.added_at for e in self._entries))

    def total_entry_count(self) -> int:
        """Number of distinct entries, not the sum of quantities."""
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.total_entry_count()

    def __iter__(self) -> Iterator[PurchaseListEntry]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        with self._lock:
            return self._index_of(*key) is not None
