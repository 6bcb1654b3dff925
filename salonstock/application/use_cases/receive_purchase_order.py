"""Receive Purchase Order Use Case - record a delivery against an order."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from salonstock.application.dto.mappers import order_response
from salonstock.application.dto.requests import ReceivePurchaseOrderRequest
from salonstock.application.dto.responses import ReceivePurchaseOrderResponse
from salonstock.config import get_logger
from salonstock.core.entities import PurchaseOrder, ReceiptLine
from salonstock.core.interfaces import IPurchaseOrderStore

logger = get_logger(__name__)


@dataclass
class ReceivePurchaseOrderResult:
    """Result of receiving goods."""

    order: PurchaseOrder
    received_product_ids: list[str] = field(default_factory=list)
    skipped_product_ids: list[str] = field(default_factory=list)


class ReceivePurchaseOrderUseCase:
    """
    Mark order lines received and add the delivered units to store stock.

    The store applies the whole delivery atomically: an unknown product
    rejects it without touching stock, and a line received by an earlier or
    concurrent delivery is skipped instead of being counted twice.
    """

    def __init__(
        self,
        order_store: IPurchaseOrderStore | None = None,
        clock: Callable[[], date] = date.today,
    ):
        self._order_store = order_store
        self._clock = clock

    async def _get_order_store(self) -> IPurchaseOrderStore:
        if self._order_store is None:
            from salonstock.infrastructure.storage.sqlite import get_purchase_order_store

            self._order_store = await get_purchase_order_store()
        return self._order_store

    async def execute(
        self, order_id: str, request: ReceivePurchaseOrderRequest
    ) -> ReceivePurchaseOrderResult:
        logger.info(
            "receive_purchase_order_started",
            order_id=order_id,
            items=len(request.items),
            received_by_id=request.received_by_id,
        )

        # 1. Translate the delivery
        lines = [
            ReceiptLine(product_id=item.product_id, quantity=item.quantity)
            for item in request.items
        ]

        # 2. Mark lines and raise stock in one store call
        order_store = await self._get_order_store()
        receipt = await order_store.receive_items(
            order_id, lines, received_on=self._clock(), notes=request.notes
        )

        logger.info(
            "receive_purchase_order_complete",
            order_id=order_id,
            status=receipt.order.status.value,
            received=len(receipt.received_product_ids),
            skipped=len(receipt.skipped_product_ids),
            pending=len(receipt.order.pending_items),
        )
        return ReceivePurchaseOrderResult(
            order=receipt.order,
            received_product_ids=receipt.received_product_ids,
            skipped_product_ids=receipt.skipped_product_ids,
        )

    def to_response(self, result: ReceivePurchaseOrderResult) -> ReceivePurchaseOrderResponse:
        return ReceivePurchaseOrderResponse(
            order=order_response(result.order),
            received_product_ids=result.received_product_ids,
            skipped_product_ids=result.skipped_product_ids,
        )
