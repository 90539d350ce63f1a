import pytest
from fastapi.testclient import TestClient

from careprice.data.catalog import store
from careprice.main import app


@pytest.fixture
def client(monkeypatch, catalog):
    monkeypatch.setattr(store, "_catalog", catalog)
    return TestClient(app)


def _ids(body):
    return [r["hospital"]["id"] for r in body["results"]]


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "running"
    assert client.get("/health").json() == {"status": "healthy"}


class TestSearchRoute:
    def test_cash_search(self, client):
        response = client.get("/api/search", params={"procedure": "72148", "zip_code": "10001"})
        assert response.status_code == 200

        body = response.json()
        assert body["count"] == 3
        assert body["sort_by"] == "price"
        assert body["price_type"] == "cash"
        assert "cash prices" in body["price_note"]
        assert body["procedure"]["cpt_code"] == "72148"
        assert body["best_price_hospital_id"] == "h_medium"
        assert _ids(body) == ["h_medium", "h_far", "h_main"]

        first = body["results"][0]
        assert first["rank"] == 1
        assert first["is_best_price"] is True
        assert first["price_info"] == {"type": "cash", "value": 1200}
        assert first["formatted_price"] == "$1,200"
        assert first["price_label"] == "Cash Price"
        assert first["price_subtext"] == "Pay directly without insurance"
        assert first["distance"] == "medium"
        assert first["distance_label"] == "5-15 miles"
        assert first["gross_charge"] == 2400

    def test_plan_search(self, client):
        body = client.get("/api/search", params={
            "procedure": "72148", "zip_code": "10001", "insurance": "aetna", "plan": "PPO",
        }).json()
        main = next(r for r in body["results"] if r["hospital"]["id"] == "h_main")
        assert main["price_info"] == {"type": "plan_range", "min": 800, "max": 1000, "planName": "PPO"}
        assert main["price_label"] == "PPO Plan Rate"
        assert main["price_subtext"] == "Negotiated rate range for your plan"
        assert main["formatted_price"] == "$800 - $1,000"
        assert main["distance"] == "close"

    def test_insurance_range_search(self, client):
        body = client.get("/api/search", params={
            "procedure": "72148", "zip_code": "10001", "insurance": "aetna",
        }).json()
        assert body["price_type"] == "insurance_range"
        assert body["results"][0]["price_info"] == {"type": "insurance_range", "min": 650, "max": 950}

    def test_sort_by_rating_keeps_best_price(self, client):
        body = client.get("/api/search", params={
            "procedure": "72148", "zip_code": "10001", "sort_by": "rating",
        }).json()
        assert _ids(body) == ["h_far", "h_main", "h_medium"]
        assert [r["rank"] for r in body["results"]] == [1, 2, 3]
        assert body["best_price_hospital_id"] == "h_medium"

    def test_sort_by_distance(self, client):
        body = client.get("/api/search", params={
            "procedure": "72148", "zip_code": "10001", "sort_by": "distance",
        }).json()
        assert [r["distance"] for r in body["results"]] == ["close", "medium", "far"]

    def test_selected_suggestion_is_searched_by_code(self, client):
        body = client.get("/api/search", params={
            "procedure": "MRI Brain with and without Contrast (70553)", "zip_code": "10001",
        }).json()
        assert body["procedure"]["cpt_code"] == "70553"
        assert _ids(body) == ["h_main"]

    def test_no_match_is_an_empty_result(self, client):
        response = client.get("/api/search", params={"procedure": "zzz-no-such-code", "zip_code": "10001"})
        assert response.status_code == 200
        assert response.json()["count"] == 0
        assert response.json()["results"] == []

    @pytest.mark.parametrize("params,field", [
        ({"procedure": "72148", "zip_code": "123"}, "zip_code"),
        ({"procedure": "   ", "zip_code": "10001"}, "procedure"),
        ({"procedure": "72148", "zip_code": "10001", "insurance": "medicare"}, "insurance"),
    ])
    def test_invalid_query_is_rejected(self, client, params, field):
        response = client.get("/api/search", params=params)
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid search query")
        assert field in response.json()["detail"]

    def test_unknown_sort_option(self, client):
        response = client.get("/api/search", params={
            "procedure": "72148", "zip_code": "10001", "sort_by": "name",
        })
        assert response.status_code == 422


class TestProcedureRoutes:
    def test_list_all(self, client):
        assert len(client.get("/api/procedures").json()["procedures"]) == 3

    def test_autocomplete(self, client):
        body = client.get("/api/procedures", params={"q": "mri"}).json()
        assert [p["cpt_code"] for p in body["procedures"]] == ["72148", "70553"]

    def test_get_by_code(self, client):
        assert client.get("/api/procedures/72148").json()["insights"] == ["Shop around"]
        assert client.get("/api/procedures/00000").status_code == 404

    def test_stats(self, client):
        body = client.get("/api/procedures/72148/stats").json()
        assert body["count"] == 3
        assert body["min"] == 1200
        assert client.get("/api/procedures/99999/stats").status_code == 404

    def test_insurance_options(self, client):
        providers = client.get("/api/insurance").json()["providers"]
        assert [p["value"] for p in providers] == ["cash", "aetna", "bcbs", "uhc", "cigna", "humana"]
        assert providers[2]["plans"] == ["PPO", "HMO", "POS"]


class TestHospitalRoutes:
    def test_list_and_search(self, client):
        assert len(client.get("/api/hospitals").json()["hospitals"]) == 4
        body = client.get("/api/hospitals", params={"search": "h_far"}).json()
        assert [h["id"] for h in body["hospitals"]] == ["h_far"]

    def test_detail_includes_prices(self, client):
        body = client.get("/api/hospitals/h_main").json()
        assert body["dataFreshness"] == "2026-09-01"
        assert body["prices"]["72148"]["cash_price"] == 1500

    def test_missing_hospital(self, client):
        response = client.get("/api/hospitals/nope")
        assert response.status_code == 404
        assert response.json()["detail"] == "Hospital not found"

    def test_financial_assistance_uses_camel_case_key(self, client):
        listed = client.get("/api/hospitals").json()["hospitals"]
        detail = client.get("/api/hospitals/h_main").json()
        searched = [r["hospital"] for r in client.get("/api/search", params={
            "procedure": "72148", "zip_code": "10001",
        }).json()["results"]]

        for hospital in listed + [detail] + searched:
            assert "financialAssistance" in hospital
            assert "financial_assistance" not in hospital

        main = next(h for h in searched if h["id"] == "h_main")
        assert main["financialAssistance"]["discountPercent"] == 50
        assert detail["financialAssistance"]["available"] is True
        assert next(h for h in listed if h["id"] == "h_far")["financialAssistance"] is None
