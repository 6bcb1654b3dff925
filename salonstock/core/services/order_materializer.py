"""
Order materialization.

Turns a day's slice of a purchase list into purchase orders, one per
supplier, and clears the consumed slice from the list.

Two entry points:

* ``materialize_for_supplier`` orders one supplier's picks of one day. It
  is all-or-nothing: if the store rejects the order the list is untouched.
* ``materialize_all_for_date`` orders every supplier's picks of one day.
  Partitions are submitted independently and there is no rollback: orders
  that succeeded stay created, failures are reported in the result, and
  the whole day is cleared from the list afterwards either way. Items of a
  failed supplier must be re-added by the user.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from salonstock.config import get_logger
from salonstock.core.entities.purchase_list import PurchaseListEntry
from salonstock.core.entities.purchase_order import (
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderRequest,
)
from salonstock.core.exceptions import EmptyOrderError, OrderCreationError
from salonstock.core.interfaces.catalog_store import ICatalogReader
from salonstock.core.interfaces.purchase_order_store import IPurchaseOrderStore
from salonstock.core.services.purchase_list import PurchaseList

logger = get_logger(__name__)


@dataclass
class MaterializationResult:
    """Outcome of ordering every supplier of one day."""

    succeeded: list[PurchaseOrder] = field(default_factory=list)
    failed_supplier_ids: list[str] = field(default_factory=list)
    errors: dict[str, OrderCreationError] = field(default_factory=dict)
    attempted_supplier_ids: list[str] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_supplier_ids)


def partition_by_supplier(
    entries: list[PurchaseListEntry],
) -> dict[str, list[PurchaseListEntry]]:
    """Group entries by supplier, keeping list order inside each group."""
    groups: dict[str, list[PurchaseListEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.supplier_id, []).append(entry)
    return groups


class OrderMaterializer:
    """
    Converts purchase list slices into purchase orders.

    Each materialize call holds a lock for its whole duration, so calls on
    the same list never interleave. The slice read before submitting is
    removed with ``PurchaseList.discard``; an entry changed while the store
    call was in flight survives the clear.
    """

    def __init__(
        self,
        purchase_list: PurchaseList,
        order_store: IPurchaseOrderStore,
        catalog: ICatalogReader,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._purchase_list = purchase_list
        self._order_store = order_store
        self._catalog = catalog
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def purchase_list(self) -> PurchaseList:
        return self._purchase_list

    async def materialize_for_supplier(
        self,
        supplier_id: str,
        created_by_id: str,
        order_date: date,
        store_id: str,
    ) -> PurchaseOrder:
        """
        Order one supplier's entries added on ``order_date``.

        Raises:
            EmptyOrderError: No entry of the slice has quantity > 0.
            OrderCreationError: The store rejected the order; the list is
                left unchanged.
        """
        async with self._lock:
            day_slice = self._purchase_list.slice(supplier_id, order_date)
            orderable = self._purchase_list.orderable_entries(order_date, supplier_id)
            if not orderable:
                logger.info(
                    "purchase_order_nothing_to_order",
                    supplier_id=supplier_id,
                    order_date=order_date.isoformat(),
                )
                raise EmptyOrderError(order_date, supplier_id)

            order = await self._submit(supplier_id, orderable, created_by_id, store_id)

            # Zero-quantity entries belong to the slice and go with it
            removed = self._purchase_list.discard(day_slice)
            logger.info(
                "purchase_list_slice_cleared",
                supplier_id=supplier_id,
                order_date=order_date.isoformat(),
                removed=removed,
            )
            return order

    async def materialize_all_for_date(
        self,
        created_by_id: str,
        order_date: date,
        store_id: str,
    ) -> MaterializationResult:
        """
        Order every supplier's entries added on ``order_date``.

        One order per supplier. A failing supplier does not stop the
        others and does not roll back orders already created. The day's
        entries are cleared after all suppliers were attempted, including
        the failed ones; compare ``attempted_supplier_ids`` with
        ``failed_supplier_ids`` to report partial completion.

        Raises:
            EmptyOrderError: No entry of the day has quantity > 0.
        """
        async with self._lock:
            day_slice = self._purchase_list.entries_for_date(order_date)
            orderable = self._purchase_list.orderable_entries(order_date)
            if not orderable:
                logger.info(
                    "purchase_order_nothing_to_order",
                    order_date=order_date.isoformat(),
                )
                raise EmptyOrderError(order_date)

            result = MaterializationResult()
            for supplier_id, entries in partition_by_supplier(orderable).items():
                result.attempted_supplier_ids.append(supplier_id)
                try:
                    order = await self._submit(
                        supplier_id, entries, created_by_id, store_id
                    )
                except OrderCreationError as e:
                    result.failed_supplier_ids.append(supplier_id)
                    result.errors[supplier_id] = e
                    continue
                result.succeeded.append(order)

            removed = self._purchase_list.discard(day_slice)
            logger.info(
                "purchase_orders_materialized_for_date",
                order_date=order_date.isoformat(),
                attempted=len(result.attempted_supplier_ids),
                created=len(result.succeeded),
                failed=result.failed_supplier_ids,
                removed=removed,
            )
            return result

    async def _build_items(
        self, entries: list[PurchaseListEntry]
    ) -> list[PurchaseOrderItem]:
        items: list[PurchaseOrderItem] = []
        for entry in entries:
            cost = await self._catalog.get_product_cost(entry.product.id)
            if cost is None:
                logger.warning(
                    "product_cost_unavailable",
                    product_id=entry.product.id,
                    fallback_cost=entry.product.cost_price,
                )
                cost = entry.product.cost_price
            items.append(
                PurchaseOrderItem(
                    product_id=entry.product.id,
                    product_name=entry.product.name,
                    barcode=entry.product.barcode,
                    quantity=entry.quantity,
                    cost_price_at_order=cost,
                    is_received=False,
                )
            )
        return items

    async def _submit(
        self,
        supplier_id: str,
        entries: list[PurchaseListEntry],
        created_by_id: str,
        store_id: str,
    ) -> PurchaseOrder:
        """Build and submit one supplier's create request."""
        try:
            request = PurchaseOrderRequest(
                order_date=self._clock(),
                supplier_id=supplier_id,
                created_by_id=created_by_id,
                store_id=store_id,
                items=await self._build_items(entries),
            )
            order = await self._order_store.create_order(request)
        except OrderCreationError:
            raise
        except Exception as e:
            logger.error(
                "purchase_order_creation_failed",
                supplier_id=supplier_id,
                store_id=store_id,
                error=str(e),
            )
            raise OrderCreationError(supplier_id, str(e)) from e

        logger.info(
            "purchase_order_materialized",
            order_id=order.id,
            supplier_id=supplier_id,
            store_id=store_id,
            items=len(order.items),
            total=order.total_amount,
        )
        return order
