"""Add To Purchase List Use Case."""

from dataclasses import dataclass

from salonstock.application.dto.mappers import entry_response
from salonstock.application.dto.requests import AddToPurchaseListRequest
from salonstock.application.dto.responses import PurchaseListEntryResponse
from salonstock.config import get_logger
from salonstock.core.entities import PurchaseListEntry
from salonstock.core.exceptions import ProductNotFoundError
from salonstock.core.interfaces import ICatalogReader
from salonstock.core.services import PurchaseList

logger = get_logger(__name__)


@dataclass
class AddToPurchaseListResult:
    """Result of adding a product to a purchase list."""

    entry: PurchaseListEntry
    entry_count: int


class AddToPurchaseListUseCase:
    """Resolve a catalog product and add it to a session's purchase list."""

    def __init__(
        self,
        purchase_list: PurchaseList,
        catalog: ICatalogReader | None = None,
    ):
        self._purchase_list = purchase_list
        self._catalog = catalog

    async def _get_catalog(self) -> ICatalogReader:
        if self._catalog is None:
            from salonstock.infrastructure.storage.sqlite import get_catalog_store

            self._catalog = await get_catalog_store()
        return self._catalog

    async def execute(self, request: AddToPurchaseListRequest) -> AddToPurchaseListResult:
        catalog = await self._get_catalog()
        product = await catalog.get_product(request.product_id)
        if product is None:
            raise ProductNotFoundError(request.product_id)

        entry = self._purchase_list.add(
            product,
            quantity=request.quantity,
            added_at=request.added_at,
        )
        logger.info(
            "purchase_list_item_added",
            product_id=product.id,
            supplier_id=entry.supplier_id,
            added_at=entry.added_at.isoformat(),
            quantity=entry.quantity,
        )
        return AddToPurchaseListResult(
            entry=entry,
            entry_count=self._purchase_list.total_entry_count(),
        )

    def to_response(self, result: AddToPurchaseListResult) -> PurchaseListEntryResponse:
        return entry_response(result.entry)
