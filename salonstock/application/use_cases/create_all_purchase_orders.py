"""Create All Purchase Orders Use Case - every supplier, one day."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from salonstock.application.dto.mappers import order_response
from salonstock.application.dto.requests import CreateAllPurchaseOrdersRequest
from salonstock.application.dto.responses import (
    MaterializationResponse,
    SupplierFailureResponse,
)
from salonstock.config import get_logger
from salonstock.core.services import MaterializationResult, OrderMaterializer

logger = get_logger(__name__)


@dataclass
class CreateAllPurchaseOrdersResult:
    """Materialization outcome plus the day it was run for."""

    order_date: date
    materialization: MaterializationResult


class CreateAllPurchaseOrdersUseCase:
    """
    Order every supplier's purchase list entries of one day.

    Suppliers are ordered independently. A failed supplier is reported in
    the result while the others' orders stay created, and the whole day is
    removed from the list either way.
    """

    def __init__(
        self,
        materializer: OrderMaterializer,
        clock: Callable[[], date] = date.today,
    ):
        self._materializer = materializer
        self._clock = clock

    async def execute(
        self, request: CreateAllPurchaseOrdersRequest
    ) -> CreateAllPurchaseOrdersResult:
        order_date = request.order_date or self._clock()
        logger.info(
            "create_all_purchase_orders_started",
            store_id=request.store_id,
            order_date=order_date.isoformat(),
        )
        result = await self._materializer.materialize_all_for_date(
            created_by_id=request.created_by_id,
            order_date=order_date,
            store_id=request.store_id,
        )
        if result.is_partial:
            logger.warning(
                "create_all_purchase_orders_partial",
                order_date=order_date.isoformat(),
                failed_supplier_ids=result.failed_supplier_ids,
            )
        return CreateAllPurchaseOrdersResult(order_date=order_date, materialization=result)

    def to_response(self, result: CreateAllPurchaseOrdersResult) -> MaterializationResponse:
        materialization = result.materialization
        return MaterializationResponse(
            order_date=result.order_date,
            orders=[order_response(order) for order in materialization.succeeded],
            attempted_supplier_ids=list(materialization.attempted_supplier_ids),
            failed=[
                SupplierFailureResponse(
                    supplier_id=supplier_id,
                    error_code=materialization.errors[supplier_id].code,
                    message=materialization.errors[supplier_id].message,
                )
                for supplier_id in materialization.failed_supplier_ids
            ],
            partial=materialization.is_partial,
        )
