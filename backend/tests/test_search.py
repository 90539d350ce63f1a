"""
End-to-end tests for search_hospitals() against a small in-memory catalog,
plus validation of the SearchParams query contract.
"""

import pytest
from pydantic import ValidationError

from careprice.data.catalog.store import Catalog
from careprice.models import CashPrice, Distance, InsuranceRange, PlanRange, SearchParams
from careprice.services.pricing import display_price
from careprice.services.search import search_hospitals
from conftest import make_hospital, make_price


def _params(**overrides):
    data = {"procedure": "72148", "zip_code": "10001", "insurance": "cash"}
    data.update(overrides)
    return SearchParams(**data)


def _by_id(results):
    return {r.hospital.id: r for r in results}


# ---------------------------------------------------------------------------
# Worked scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_cash_price(self, catalog):
        results = _by_id(search_hospitals(_params(), catalog))
        assert results["h_main"].price_info == CashPrice(value=1500)

    def test_insurance_without_plan_aggregates(self, catalog):
        results = _by_id(search_hospitals(_params(insurance="aetna"), catalog))
        assert results["h_main"].price_info == InsuranceRange(min=700, max=1000)

    def test_insurance_with_plan(self, catalog):
        results = _by_id(search_hospitals(_params(insurance="aetna", plan="PPO"), catalog))
        assert results["h_main"].price_info == PlanRange(min=800, max=1000, plan_name="PPO")

    def test_unknown_procedure_returns_empty(self, catalog):
        assert search_hospitals(_params(procedure="zzz-no-such-code"), catalog) == []

    def test_distance_tiers(self, catalog):
        results = _by_id(search_hospitals(_params(), catalog))
        assert results["h_main"].distance == Distance.CLOSE
        assert results["h_medium"].distance == Distance.MEDIUM
        assert results["h_far"].distance == Distance.FAR


# ---------------------------------------------------------------------------
# Orchestration behaviour
# ---------------------------------------------------------------------------

class TestSearchHospitals:
    def test_hospitals_without_the_procedure_are_skipped(self, catalog):
        ids = [r.hospital.id for r in search_hospitals(_params(), catalog)]
        assert "h_no_mri" not in ids
        assert len(ids) == 3

    def test_results_sorted_by_price_with_stable_ties(self, catalog):
        results = search_hospitals(_params(), catalog)
        assert [r.hospital.id for r in results] == ["h_medium", "h_far", "h_main"]

    def test_mixed_price_shapes_sort_by_display_price(self, catalog):
        results = search_hospitals(_params(insurance="aetna"), catalog)
        assert [r.hospital.id for r in results] == ["h_medium", "h_main", "h_far"]
        assert results[-1].price_info == CashPrice(value=1200)
        prices = [display_price(r.price_info) for r in results]
        assert prices == sorted(prices)

    def test_provider_missing_or_without_plans_falls_back_to_cash(self, catalog):
        results = _by_id(search_hospitals(_params(insurance="bcbs"), catalog))
        assert results["h_main"].price_info == CashPrice(value=1500)
        assert results["h_medium"].price_info == CashPrice(value=1200)

    def test_unknown_plan_aggregates(self, catalog):
        results = _by_id(search_hospitals(_params(insurance="aetna", plan="EPO"), catalog))
        assert results["h_main"].price_info == InsuranceRange(min=700, max=1000)

    def test_every_result_has_exactly_one_price_shape(self, catalog):
        for insurance, plan in [("cash", None), ("aetna", None), ("aetna", "HMO"), ("cigna", "PPO")]:
            for result in search_hospitals(_params(insurance=insurance, plan=plan), catalog):
                info = result.price_info
                if info.type == "cash":
                    assert not hasattr(info, "min") and not hasattr(info, "max")
                else:
                    assert not hasattr(info, "value")
                    assert info.min is not None and info.max is not None

    def test_matched_by_name(self, catalog):
        results = search_hospitals(_params(procedure="colonoscopy"), catalog)
        assert [r.hospital.id for r in results] == ["h_no_mri"]
        assert results[0].procedure.cpt_code == "45378"

    def test_search_is_idempotent(self, catalog):
        params = _params(insurance="aetna")
        assert search_hospitals(params, catalog) == search_hospitals(params, catalog)

    def test_results_reference_catalog_records(self, catalog):
        result = search_hospitals(_params(), catalog)[0]
        assert result.hospital is catalog.get_hospital(result.hospital.id)
        assert result.procedure is catalog.get_procedure("72148")

    def test_inverted_catalog_range_does_not_crash(self, procedures):
        bad = make_hospital("bad", prices={
            "72148": make_price(100, insurance_rates={"aetna": {"PPO": {"min": 500, "max": 10}}}),
        })
        results = search_hospitals(_params(insurance="aetna"), Catalog(procedures, [bad]))
        assert results[0].price_info == InsuranceRange(min=500, max=10)

    def test_uses_builtin_catalog_by_default(self):
        results = search_hospitals(SearchParams(procedure="72148", zip_code="27705"))
        assert results
        assert all(r.procedure.cpt_code == "72148" for r in results)


# ---------------------------------------------------------------------------
# Query validation
# ---------------------------------------------------------------------------

class TestSearchParams:
    def test_procedure_is_trimmed(self):
        assert _params(procedure="  mri  ").procedure == "mri"

    @pytest.mark.parametrize("procedure", ["", "   ", "\t"])
    def test_blank_procedure_rejected(self, procedure):
        with pytest.raises(ValidationError):
            _params(procedure=procedure)

    @pytest.mark.parametrize("zip_code", ["1000", "100011", "abcde", "10 01", "", "１２３４５"])
    def test_malformed_zip_rejected(self, zip_code):
        with pytest.raises(ValidationError):
            _params(zip_code=zip_code)

    def test_unknown_insurance_rejected(self):
        with pytest.raises(ValidationError):
            _params(insurance="medicare")

    def test_blank_plan_becomes_none(self):
        assert _params(insurance="aetna", plan="  ").plan is None

    def test_defaults_to_cash(self):
        assert SearchParams(procedure="72148", zip_code="10001").insurance == "cash"

    def test_params_are_immutable(self):
        params = _params()
        with pytest.raises(ValidationError):
            params.zip_code = "99999"
