"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from salonstock.application.services import (
    PurchaseListRegistry,
    PurchasingSession,
    get_purchase_list_registry,
    get_reorder_advisor,
    reset_purchase_list_registry,
    reset_services,
)
from salonstock.application.use_cases import (
    AddToPurchaseListUseCase,
    CreateAllPurchaseOrdersUseCase,
    CreatePurchaseOrderUseCase,
    ReceivePurchaseOrderUseCase,
)

__all__ = [
    # Use Cases
    "AddToPurchaseListUseCase",
    "CreatePurchaseOrderUseCase",
    "CreateAllPurchaseOrdersUseCase",
    "ReceivePurchaseOrderUseCase",
    # Session carts
    "PurchaseListRegistry",
    "PurchasingSession",
    "get_purchase_list_registry",
    "reset_purchase_list_registry",
    # Service factories
    "get_reorder_advisor",
    "reset_services",
]
