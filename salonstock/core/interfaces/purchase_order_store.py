"""Abstract interface for purchase order storage."""

from abc import ABC, abstractmethod
from datetime import date

from salonstock.core.entities.purchase_order import (
    PurchaseOrder,
    PurchaseOrderReceipt,
    PurchaseOrderRequest,
    PurchaseOrderStatus,
    ReceiptLine,
)


class IPurchaseOrderStore(ABC):
    """Durable record of purchase orders."""

    @abstractmethod
    async def create_order(self, request: PurchaseOrderRequest) -> PurchaseOrder:
        """
        Create a purchase order from a create request.

        The store assigns the id, resolves the supplier name and sets the
        status to ORDERED.
        """
        pass

    @abstractmethod
    async def get_order(self, order_id: str) -> PurchaseOrder | None:
        """Get purchase order by ID with its items."""
        pass

    @abstractmethod
    async def list_orders(
        self,
        store_id: str | None = None,
        supplier_id: str | None = None,
        status: PurchaseOrderStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[PurchaseOrder]:
        """List purchase orders, newest first."""
        pass

    @abstractmethod
    async def receive_items(
        self,
        order_id: str,
        lines: list[ReceiptLine],
        received_on: date,
        notes: str | None = None,
    ) -> PurchaseOrderReceipt:
        """
        Record a delivery against an open order.

        Marking a line received and adding its units to the order's store
        stock happen in one atomic step, and a line is marked at most once.
        A line that is already received is reported as skipped and leaves
        stock untouched. The order becomes COMPLETED (dated ``received_on``)
        once no line is pending, PARTIALLY_RECEIVED otherwise.

        Raises:
            PurchaseOrderNotFoundError: Unknown order id.
            PurchaseOrderClosedError: Order is completed or cancelled.
            OrderItemNotFoundError: A delivered product is not on the order.
                Nothing is written in that case.
        """
        pass
