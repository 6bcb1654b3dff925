"""Purchase order endpoints."""

from fastapi import APIRouter, Depends, Query

from salonstock.api.dependencies import (
    get_order_store,
    get_receive_purchase_order_use_case,
)
from salonstock.application.dto.mappers import order_response
from salonstock.application.dto.requests import ReceivePurchaseOrderRequest
from salonstock.application.dto.responses import (
    ErrorResponse,
    PurchaseOrderListResponse,
    PurchaseOrderResponse,
    ReceivePurchaseOrderResponse,
)
from salonstock.application.use_cases import ReceivePurchaseOrderUseCase
from salonstock.core.entities import PurchaseOrderStatus
from salonstock.core.exceptions import PurchaseOrderNotFoundError
from salonstock.core.interfaces import IPurchaseOrderStore

router = APIRouter(prefix="/api/purchase-orders", tags=["purchase-orders"])


@router.get("", response_model=PurchaseOrderListResponse)
async def list_purchase_orders(
    store_id: str | None = None,
    supplier_id: str | None = None,
    status: PurchaseOrderStatus | None = None,
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    store: IPurchaseOrderStore = Depends(get_order_store),
) -> PurchaseOrderListResponse:
    """List purchase orders, newest first."""
    orders = await store.list_orders(
        store_id=store_id,
        supplier_id=supplier_id,
        status=status,
        limit=limit,
        offset=offset,
    )
    return PurchaseOrderListResponse(
        orders=[order_response(o) for o in orders],
        total=len(orders),
        limit=limit,
        offset=offset,
    )


@router.get(
    "/{order_id}",
    response_model=PurchaseOrderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_purchase_order(
    order_id: str,
    store: IPurchaseOrderStore = Depends(get_order_store),
) -> PurchaseOrderResponse:
    order = await store.get_order(order_id)
    if order is None:
        raise PurchaseOrderNotFoundError(order_id)
    return order_response(order)


@router.post(
    "/{order_id}/receive",
    response_model=ReceivePurchaseOrderResponse,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def receive_purchase_order(
    order_id: str,
    request: ReceivePurchaseOrderRequest,
    use_case: ReceivePurchaseOrderUseCase = Depends(get_receive_purchase_order_use_case),
) -> ReceivePurchaseOrderResponse:
    """Mark delivered lines received and add them to store stock."""
    result = await use_case.execute(order_id, request)
    return use_case.to_response(result)
