"""Inventory endpoints used while building a purchase list."""

from fastapi import APIRouter, Depends, Query

from salonstock.api.dependencies import get_advisor, get_app_settings
from salonstock.application.dto.mappers import suggestion_response
from salonstock.application.dto.responses import (
    ReorderSuggestionGroupsResponse,
    ReorderSuggestionListResponse,
    SupplierSuggestionGroupResponse,
)
from salonstock.config import Settings
from salonstock.core.services import ReorderAdvisor

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("/reorder-suggestions", response_model=ReorderSuggestionListResponse)
async def get_reorder_suggestions(
    store_id: str = Query(..., min_length=1),
    supplier_id: str | None = None,
    limit: int | None = Query(default=None, ge=1),
    advisor: ReorderAdvisor = Depends(get_advisor),
    settings: Settings = Depends(get_app_settings),
) -> ReorderSuggestionListResponse:
    """Products below their minimum stock, largest shortfall first."""
    candidates = await advisor.suggest(
        store_id,
        supplier_id=supplier_id,
        limit=limit or settings.purchasing.suggestion_limit,
    )
    return ReorderSuggestionListResponse(
        store_id=store_id,
        suggestions=[suggestion_response(c) for c in candidates],
        total=len(candidates),
    )


@router.get(
    "/reorder-suggestions/by-supplier",
    response_model=ReorderSuggestionGroupsResponse,
)
async def get_reorder_suggestions_by_supplier(
    store_id: str = Query(..., min_length=1),
    limit: int | None = Query(default=None, ge=1),
    advisor: ReorderAdvisor = Depends(get_advisor),
    settings: Settings = Depends(get_app_settings),
) -> ReorderSuggestionGroupsResponse:
    """Reorder suggestions grouped per supplier, one group per future order."""
    candidates = await advisor.suggest(
        store_id, limit=limit or settings.purchasing.suggestion_limit
    )
    groups = ReorderAdvisor.group_by_supplier(candidates)
    return ReorderSuggestionGroupsResponse(
        store_id=store_id,
        groups=[
            SupplierSuggestionGroupResponse(
                supplier_id=supplier_id,
                suggestions=[suggestion_response(c) for c in group],
            )
            for supplier_id, group in groups.items()
        ],
        total=len(candidates),
    )
