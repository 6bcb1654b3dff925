"""API route modules."""

from salonstock.api.routes.health import router as health_router
from salonstock.api.routes.inventory import router as inventory_router
from salonstock.api.routes.purchase_list import router as purchase_list_router
from salonstock.api.routes.purchase_orders import router as purchase_orders_router

__all__ = [
    "health_router",
    "inventory_router",
    "purchase_list_router",
    "purchase_orders_router",
]
