"""
Core business logic services.

Layer-pure services that depend only on:
- salonstock/core/entities/*
- salonstock/core/interfaces/*
- salonstock/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from salonstock.core.services.order_materializer import (
    MaterializationResult,
    OrderMaterializer,
    partition_by_supplier,
)
from salonstock.core.services.purchase_list import PurchaseList
from salonstock.core.services.reorder_advisor import ReorderAdvisor

__all__ = [
    # Purchase list
    "PurchaseList",
    # Order materialization
    "OrderMaterializer",
    "MaterializationResult",
    "partition_by_supplier",
    # Reorder suggestions
    "ReorderAdvisor",
]
