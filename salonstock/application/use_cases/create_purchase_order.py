"""Create Purchase Order Use Case - one supplier, one day."""

from collections.abc import Callable
from datetime import date

from salonstock.application.dto.mappers import order_response
from salonstock.application.dto.requests import CreatePurchaseOrderRequest
from salonstock.application.dto.responses import PurchaseOrderResponse
from salonstock.config import get_logger
from salonstock.core.entities import PurchaseOrder
from salonstock.core.services import OrderMaterializer

logger = get_logger(__name__)


class CreatePurchaseOrderUseCase:
    """
    Turn one supplier's purchase list entries of one day into an order.

    On success the supplier's entries of that day are removed from the
    list. On failure the list is left as it was.
    """

    def __init__(
        self,
        materializer: OrderMaterializer,
        clock: Callable[[], date] = date.today,
    ):
        self._materializer = materializer
        self._clock = clock

    async def execute(self, request: CreatePurchaseOrderRequest) -> PurchaseOrder:
        order_date = request.order_date or self._clock()
        logger.info(
            "create_purchase_order_started",
            supplier_id=request.supplier_id,
            store_id=request.store_id,
            order_date=order_date.isoformat(),
        )
        return await self._materializer.materialize_for_supplier(
            supplier_id=request.supplier_id,
            created_by_id=request.created_by_id,
            order_date=order_date,
            store_id=request.store_id,
        )

    def to_response(self, result: PurchaseOrder) -> PurchaseOrderResponse:
        return order_response(result)
