"""Entity to response DTO conversion shared by several use cases."""

from salonstock.application.dto.responses import (
    ProductSummaryResponse,
    PurchaseListEntryResponse,
    PurchaseOrderItemResponse,
    PurchaseOrderResponse,
    ReorderSuggestionResponse,
)
from salonstock.core.entities import (
    Product,
    PurchaseListEntry,
    PurchaseOrder,
    ReorderCandidate,
)


def product_summary(product: Product) -> ProductSummaryResponse:
    return ProductSummaryResponse(
        id=product.id,
        name=product.name,
        barcode=product.barcode,
        supplier_id=product.supplier_id,
        cost_price=product.cost_price,
        usage=product.usage.value,
        image_url=product.image_url,
    )


def entry_response(
    entry: PurchaseListEntry, current_stock: int | None = None
) -> PurchaseListEntryResponse:
    return PurchaseListEntryResponse(
        product=product_summary(entry.product),
        quantity=entry.quantity,
        supplier_id=entry.supplier_id,
        added_at=entry.added_at,
        current_stock=current_stock,
    )


def order_response(order: PurchaseOrder) -> PurchaseOrderResponse:
    return PurchaseOrderResponse(
        id=order.id,
        order_date=order.order_date,
        completed_date=order.completed_date,
        supplier_id=order.supplier_id,
        supplier_name=order.supplier_name,
        store_id=order.store_id,
        created_by_id=order.created_by_id,
        status=order.status.value,
        notes=order.notes,
        items=[
            PurchaseOrderItemResponse(
                product_id=item.product_id,
                product_name=item.product_name,
                barcode=item.barcode,
                quantity=item.quantity,
                cost_price_at_order=item.cost_price_at_order,
                line_total=item.line_total,
                is_received=item.is_received,
            )
            for item in order.items
        ],
        total_amount=order.total_amount,
        pending_item_count=len(order.pending_items),
        created_at=order.created_at,
    )


def suggestion_response(candidate: ReorderCandidate) -> ReorderSuggestionResponse:
    return ReorderSuggestionResponse(
        product=product_summary(candidate.product),
        store_id=candidate.store_id,
        current_stock=candidate.current_stock,
        minimum_stock=candidate.minimum_stock,
        shortfall=candidate.shortfall,
        suggested_quantity=candidate.suggested_quantity,
    )
