"""
Reorder suggestions.

Lists products whose store stock fell below the configured minimum so they
can be added to a purchase list. Read-only: never touches the ledger.
"""

from salonstock.config import get_logger
from salonstock.core.entities.inventory import ReorderCandidate
from salonstock.core.interfaces.catalog_store import ICatalogReader
from salonstock.core.interfaces.inventory_store import IInventoryStore

logger = get_logger(__name__)


class ReorderAdvisor:
    """Builds below-minimum reorder candidates for a store."""

    def __init__(
        self,
        catalog: ICatalogReader,
        inventory_store: IInventoryStore,
    ) -> None:
        self._catalog = catalog
        self._inventory_store = inventory_store

    async def suggest(
        self,
        store_id: str,
        supplier_id: str | None = None,
        limit: int = 200,
    ) -> list[ReorderCandidate]:
        """
        Suggest products to reorder for a store.

        Args:
            store_id: Store whose ledger is inspected.
            supplier_id: Only products ordered from this supplier.
            limit: Maximum number of candidates, applied after the supplier
                filter.

        Returns:
            Candidates sorted by shortfall (largest first), then name.
        """
        records = await self._inventory_store.list_below_minimum(
            store_id, supplier_id=supplier_id, limit=limit
        )

        candidates: list[ReorderCandidate] = []
        for record in records:
            product = await self._catalog.get_product(record.product_id)
            if product is None:
                logger.warning(
                    "reorder_candidate_without_product",
                    product_id=record.product_id,
                    store_id=store_id,
                )
                continue
            candidates.append(
                ReorderCandidate(
                    product=product,
                    store_id=store_id,
                    current_stock=record.current_stock,
                    minimum_stock=record.minimum_stock,
                )
            )

        candidates.sort(key=lambda c: (-c.shortfall, c.product.name))
        logger.info(
            "reorder_suggestions_built",
            store_id=store_id,
            supplier_id=supplier_id,
            count=len(candidates),
        )
        return candidates

    async def stock_levels(
        self, product_ids: list[str], store_id: str
    ) -> dict[str, int]:
        """Current stock per product, shown next to purchase list entries."""
        levels: dict[str, int] = {}
        for product_id in dict.fromkeys(product_ids):
            levels[product_id] = await self._inventory_store.get_current_stock(
                product_id, store_id
            )
        return levels

    @staticmethod
    def group_by_supplier(
        candidates: list[ReorderCandidate],
    ) -> dict[str, list[ReorderCandidate]]:
        """Group candidates per supplier, keeping their order."""
        groups: dict[str, list[ReorderCandidate]] = {}
        for candidate in candidates:
            groups.setdefault(candidate.product.supplier_id, []).append(candidate)
        return groups
