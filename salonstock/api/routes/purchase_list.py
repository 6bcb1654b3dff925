"""Purchase list (reorder cart) endpoints.

The list belongs to the caller's session, identified by the session header.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response, status

from salonstock.api.dependencies import (
    get_add_to_purchase_list_use_case,
    get_advisor,
    get_create_all_purchase_orders_use_case,
    get_create_purchase_order_use_case,
    get_purchasing_session,
    get_registry,
    get_session_id,
)
from salonstock.application.dto.mappers import entry_response
from salonstock.application.dto.requests import (
    AddToPurchaseListRequest,
    CreateAllPurchaseOrdersRequest,
    CreatePurchaseOrderRequest,
    UpdatePurchaseListQuantityRequest,
)
from salonstock.application.dto.responses import (
    ErrorResponse,
    MaterializationResponse,
    PurchaseListEntryResponse,
    PurchaseListResponse,
    PurchaseOrderResponse,
)
from salonstock.application.services import PurchaseListRegistry, PurchasingSession
from salonstock.application.use_cases import (
    AddToPurchaseListUseCase,
    CreateAllPurchaseOrdersUseCase,
    CreatePurchaseOrderUseCase,
)
from salonstock.core.services import ReorderAdvisor

router = APIRouter(prefix="/api/purchase-list", tags=["purchase-list"])


@router.get("", response_model=PurchaseListResponse)
async def get_purchase_list(
    supplier_id: str | None = None,
    added_at: date | None = None,
    store_id: str | None = None,
    session: PurchasingSession = Depends(get_purchasing_session),
    advisor: ReorderAdvisor = Depends(get_advisor),
) -> PurchaseListResponse:
    """
    List purchase list entries in insertion order.

    Filter by supplier and/or day. When ``store_id`` is given each entry
    carries the product's current stock in that store.
    """
    purchase_list = session.purchase_list
    entries = list(purchase_list.entries)
    if supplier_id is not None:
        entries = [e for e in entries if e.supplier_id == supplier_id]
    if added_at is not None:
        entries = [e for e in entries if e.added_at == added_at]

    levels: dict[str, int] = {}
    if store_id:
        levels = await advisor.stock_levels([e.product.id for e in entries], store_id)

    return PurchaseListResponse(
        entries=[entry_response(e, levels.get(e.product.id)) for e in entries],
        count=purchase_list.total_entry_count(),
        dates=purchase_list.dates(),
    )


@router.post(
    "/items",
    response_model=PurchaseListEntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
async def add_to_purchase_list(
    request: AddToPurchaseListRequest,
    use_case: AddToPurchaseListUseCase = Depends(get_add_to_purchase_list_use_case),
) -> PurchaseListEntryResponse:
    """Add a product; same product on the same day merges quantities."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.patch(
    "/items/{product_id}/{added_at}",
    response_model=PurchaseListEntryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_purchase_list_quantity(
    product_id: str,
    added_at: date,
    request: UpdatePurchaseListQuantityRequest,
    session: PurchasingSession = Depends(get_purchasing_session),
) -> PurchaseListEntryResponse:
    """Replace an entry's quantity. 0 keeps the entry but skips it when ordering."""
    entry = session.purchase_list.update_quantity(product_id, added_at, request.quantity)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Purchase list entry not found: {product_id} on {added_at.isoformat()}",
        )
    return entry_response(entry)


@router.delete(
    "/items/{product_id}/{added_at}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_from_purchase_list(
    product_id: str,
    added_at: date,
    session: PurchasingSession = Depends(get_purchasing_session),
) -> Response:
    """Remove an entry. Removing a missing entry succeeds."""
    session.purchase_list.remove(product_id, added_at)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def discard_purchase_list(
    session_id: str = Depends(get_session_id),
    registry: PurchaseListRegistry = Depends(get_registry),
) -> Response:
    """Discard the session's purchase list, for example on sign-out."""
    registry.drop(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/orders",
    response_model=PurchaseOrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def create_purchase_order(
    request: CreatePurchaseOrderRequest,
    use_case: CreatePurchaseOrderUseCase = Depends(get_create_purchase_order_use_case),
) -> PurchaseOrderResponse:
    """Order one supplier's entries of one day and clear them from the list."""
    order = await use_case.execute(request)
    return use_case.to_response(order)


@router.post(
    "/orders/all",
    response_model=MaterializationResponse,
    responses={422: {"model": ErrorResponse}},
)
async def create_all_purchase_orders(
    request: CreateAllPurchaseOrdersRequest,
    use_case: CreateAllPurchaseOrdersUseCase = Depends(
        get_create_all_purchase_orders_use_case
    ),
) -> MaterializationResponse:
    """
    Order every supplier's entries of one day.

    The day is cleared from the list even when some suppliers failed;
    ``partial`` and ``failed`` tell which items must be re-added.
    """
    result = await use_case.execute(request)
    return use_case.to_response(result)
