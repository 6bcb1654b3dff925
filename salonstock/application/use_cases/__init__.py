"""Application use cases."""

from salonstock.application.use_cases.add_to_purchase_list import (
    AddToPurchaseListResult,
    AddToPurchaseListUseCase,
)
from salonstock.application.use_cases.create_all_purchase_orders import (
    CreateAllPurchaseOrdersResult,
    CreateAllPurchaseOrdersUseCase,
)
from salonstock.application.use_cases.create_purchase_order import CreatePurchaseOrderUseCase
from salonstock.application.use_cases.receive_purchase_order import (
    ReceivePurchaseOrderResult,
    ReceivePurchaseOrderUseCase,
)

__all__ = [
    "AddToPurchaseListUseCase",
    "AddToPurchaseListResult",
    "CreatePurchaseOrderUseCase",
    "CreateAllPurchaseOrdersUseCase",
    "CreateAllPurchaseOrdersResult",
    "ReceivePurchaseOrderUseCase",
    "ReceivePurchaseOrderResult",
]
