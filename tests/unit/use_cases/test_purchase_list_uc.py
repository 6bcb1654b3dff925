"""Tests for the purchase list use cases."""

from datetime import date

import pytest

from salonstock.application.dto.requests import (
    AddToPurchaseListRequest,
    CreateAllPurchaseOrdersRequest,
    CreatePurchaseOrderRequest,
)
from salonstock.application.use_cases import (
    AddToPurchaseListUseCase,
    CreateAllPurchaseOrdersUseCase,
    CreatePurchaseOrderUseCase,
)
from salonstock.core.exceptions import EmptyOrderError, ProductNotFoundError
from salonstock.core.services import OrderMaterializer, PurchaseList

D = date(2024, 6, 1)


@pytest.fixture
def purchase_list(clock) -> PurchaseList:
    return PurchaseList(clock=clock)


@pytest.fixture
def materializer(purchase_list, order_store, catalog, clock) -> OrderMaterializer:
    return OrderMaterializer(purchase_list, order_store, catalog, clock=clock)


class TestAddToPurchaseListUseCase:
    async def test_adds_catalog_product(self, purchase_list, catalog, make_product, today):
        catalog.get_product.return_value = make_product("P1", "S1")
        use_case = AddToPurchaseListUseCase(purchase_list=purchase_list, catalog=catalog)

        result = await use_case.execute(AddToPurchaseListRequest(product_id="P1", quantity=2))

        assert result.entry.quantity == 2
        assert result.entry.added_at == today
        assert result.entry_count == 1
        response = use_case.to_response(result)
        assert response.product.id == "P1"
        assert response.supplier_id == "S1"

    async def test_explicit_day(self, purchase_list, catalog, make_product):
        catalog.get_product.return_value = make_product("P1")
        use_case = AddToPurchaseListUseCase(purchase_list=purchase_list, catalog=catalog)
        result = await use_case.execute(
            AddToPurchaseListRequest(product_id="P1", quantity=-1, added_at=D)
        )
        assert result.entry.key == ("P1", D)
        assert result.entry.quantity == 1

    async def test_unknown_product(self, purchase_list, catalog):
        catalog.get_product.return_value = None
        use_case = AddToPurchaseListUseCase(purchase_list=purchase_list, catalog=catalog)
        with pytest.raises(ProductNotFoundError):
            await use_case.execute(AddToPurchaseListRequest(product_id="P404"))
        assert len(purchase_list) == 0


class TestCreatePurchaseOrderUseCase:
    async def test_defaults_to_today(self, purchase_list, materializer, make_product, clock, today):
        purchase_list.add(make_product("P1", "S1"), 3)
        use_case = CreatePurchaseOrderUseCase(materializer=materializer, clock=clock)

        order = await use_case.execute(
            CreatePurchaseOrderRequest(supplier_id="S1", created_by_id="u1", store_id="st1")
        )

        response = use_case.to_response(order)
        assert response.status == "ordered"
        assert response.order_date == today
        assert response.items[0].quantity == 3
        assert response.total_amount == 30.0
        assert len(purchase_list) == 0

    async def test_empty_selection(self, materializer, clock):
        use_case = CreatePurchaseOrderUseCase(materializer=materializer, clock=clock)
        with pytest.raises(EmptyOrderError):
            await use_case.execute(
                CreatePurchaseOrderRequest(
                    supplier_id="S1", created_by_id="u1", store_id="st1", order_date=D
                )
            )


class TestCreateAllPurchaseOrdersUseCase:
    async def test_reports_failed_suppliers(self, purchase_list, materializer, make_product, order_store, clock):
        purchase_list.add(make_product("P1", "S1"), 1, added_at=D)
        purchase_list.add(make_product("P2", "S2"), 1, added_at=D)
        accept = order_store.create_order.side_effect

        async def _reject_s1(request):
            if request.supplier_id == "S1":
                raise RuntimeError("rejected")
            return await accept(request)

        order_store.create_order.side_effect = _reject_s1
        use_case = CreateAllPurchaseOrdersUseCase(materializer=materializer, clock=clock)

        result = await use_case.execute(
            CreateAllPurchaseOrdersRequest(created_by_id="u1", store_id="st1", order_date=D)
        )
        response = use_case.to_response(result)

        assert response.order_date == D
        assert [o.supplier_id for o in response.orders] == ["S2"]
        assert [f.supplier_id for f in response.failed] == ["S1"]
        assert response.failed[0].error_code == "ORDER_CREATION_FAILED"
        assert response.partial is True
        assert response.attempted_supplier_ids == ["S1", "S2"]
        assert len(purchase_list) == 0
