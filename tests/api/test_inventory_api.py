"""API tests for inventory endpoints."""

from salonstock.core.entities import ReorderCandidate


class TestReorderSuggestions:
    async def test_suggestions(self, api_client, advisor, products):
        advisor.suggest.return_value = [
            ReorderCandidate(
                product=products["P2"], store_id="store1", current_stock=0, minimum_stock=6
            ),
            ReorderCandidate(
                product=products["P1"], store_id="store1", current_stock=1, minimum_stock=3
            ),
        ]

        response = await api_client.get(
            "/api/inventory/reorder-suggestions", params={"store_id": "store1"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert [s["product"]["id"] for s in body["suggestions"]] == ["P2", "P1"]
        assert body["suggestions"][0]["suggested_quantity"] == 6
        advisor.suggest.assert_awaited_once_with("store1", supplier_id=None, limit=200)

    async def test_supplier_and_limit(self, api_client, advisor):
        await api_client.get(
            "/api/inventory/reorder-suggestions",
            params={"store_id": "store1", "supplier_id": "S1", "limit": 5},
        )
        advisor.suggest.assert_awaited_once_with("store1", supplier_id="S1", limit=5)

    async def test_store_required(self, api_client):
        response = await api_client.get("/api/inventory/reorder-suggestions")
        assert response.status_code == 422


class TestReorderSuggestionsBySupplier:
    async def test_grouped_per_supplier(self, api_client, advisor, products):
        advisor.suggest.return_value = [
            ReorderCandidate(
                product=products["P2"], store_id="store1", current_stock=0, minimum_stock=6
            ),
            ReorderCandidate(
                product=products["P1"], store_id="store1", current_stock=1, minimum_stock=3
            ),
            ReorderCandidate(
                product=products["P3"], store_id="store1", current_stock=0, minimum_stock=1
            ),
        ]

        response = await api_client.get(
            "/api/inventory/reorder-suggestions/by-supplier", params={"store_id": "store1"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert [g["supplier_id"] for g in body["groups"]] == ["S2", "S1"]
        assert [s["product"]["id"] for s in body["groups"][1]["suggestions"]] == ["P1", "P3"]
        advisor.suggest.assert_awaited_once_with("store1", limit=200)

    async def test_no_suggestions(self, api_client):
        response = await api_client.get(
            "/api/inventory/reorder-suggestions/by-supplier", params={"store_id": "store1"}
        )
        assert response.json() == {"store_id": "store1", "groups": [], "total": 0}
