"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status

from salonstock.application.services import (
    PurchaseListRegistry,
    PurchasingSession,
    get_purchase_list_registry,
    get_reorder_advisor,
)
from salonstock.application.use_cases import (
    AddToPurchaseListUseCase,
    CreateAllPurchaseOrdersUseCase,
    CreatePurchaseOrderUseCase,
    ReceivePurchaseOrderUseCase,
)
from salonstock.config import Settings, get_settings
from salonstock.core.interfaces import (
    ICatalogReader,
    IPurchaseOrderStore,
)
from salonstock.core.services import ReorderAdvisor
from salonstock.infrastructure.storage.sqlite import (
    get_catalog_store,
    get_purchase_order_store,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Store dependencies
async def get_catalog() -> ICatalogReader:
    return await get_catalog_store()


async def get_order_store() -> IPurchaseOrderStore:
    return await get_purchase_order_store()


# Purchasing session
def get_registry() -> PurchaseListRegistry:
    """Get the process-wide purchase list registry."""
    return get_purchase_list_registry()


def get_session_id(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> str:
    """Read the purchasing session id from the configured header."""
    header = settings.purchasing.session_header
    session_id = (request.headers.get(header) or "").strip()
    if not session_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing session header {header}",
        )
    return session_id


async def get_purchasing_session(
    session_id: str = Depends(get_session_id),
    registry: PurchaseListRegistry = Depends(get_registry),
) -> PurchasingSession:
    return await registry.get_session(session_id)


# Service dependencies
async def get_advisor() -> ReorderAdvisor:
    return await get_reorder_advisor()


# Use case dependencies
def get_add_to_purchase_list_use_case(
    session: PurchasingSession = Depends(get_purchasing_session),
    catalog: ICatalogReader = Depends(get_catalog),
) -> AddToPurchaseListUseCase:
    return AddToPurchaseListUseCase(purchase_list=session.purchase_list, catalog=catalog)


def get_create_purchase_order_use_case(
    session: PurchasingSession = Depends(get_purchasing_session),
) -> CreatePurchaseOrderUseCase:
    return CreatePurchaseOrderUseCase(materializer=session.materializer, clock=session.clock)


def get_create_all_purchase_orders_use_case(
    session: PurchasingSession = Depends(get_purchasing_session),
) -> CreateAllPurchaseOrdersUseCase:
    return CreateAllPurchaseOrdersUseCase(
        materializer=session.materializer, clock=session.clock
    )


def get_receive_purchase_order_use_case(
    order_store: IPurchaseOrderStore = Depends(get_order_store),
) -> ReceivePurchaseOrderUseCase:
    return ReceivePurchaseOrderUseCase(order_store=order_store)
