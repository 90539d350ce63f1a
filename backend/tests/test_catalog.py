import json

import pytest
from careprice.data.catalog import store
from careprice.data.catalog.store import Catalog, CatalogError, get_catalog, load_catalog
from pydantic import ValidationError
from conftest import make_hospital, make_price


def _hospital_record(hospital_id, prices=None, **overrides):
    record = {
        "id": hospital_id,
        "name": f"Hospital {hospital_id}",
        "address": "1 Main St",
        "city": "Durham",
        "state": "NC",
        "zip": "27710",
        "phone": "(919) 555-0100",
        "rating": 4.0,
        "dataFreshness": "2026-09-01",
        "coordinates": {"lat": 36.0, "lng": -78.9},
        "prices": prices or {},
    }
    record.update(overrides)
    return record


def _write_snapshot(tmp_path, procedures, hospitals):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"procedures": procedures, "hospitals": hospitals}))
    return path


MRI = {"cpt_code": "72148", "name": "MRI Lumbar Spine", "category": "Imaging",
       "description": "", "insights": []}


class TestBuiltinCatalog:
    def test_loads_and_validates(self):
        catalog = load_catalog()
        assert len(catalog.procedures) >= 10
        assert len(catalog.hospitals) == 9

    def test_keeps_source_order(self):
        catalog = load_catalog()
        assert catalog.procedures[0].cpt_code == "72148"
        assert catalog.hospitals[0].id == "duke_main"

    def test_hospital_prices_are_attached(self):
        hospital = load_catalog().get_hospital("duke_main")
        price = hospital.prices["72148"]
        assert price.cash_price > 0
        assert set(price.insurance_rates["aetna"]) == {"PPO", "HMO", "EPO"}

    def test_records_are_read_only(self):
        catalog = load_catalog()
        procedure = catalog.get_procedure("72148")
        assert isinstance(procedure.insights, tuple)
        with pytest.raises(ValidationError):
            procedure.insights = ()
        with pytest.raises(ValidationError):
            catalog.hospitals[0].rating = 1

    def test_get_catalog_is_a_singleton(self, monkeypatch):
        monkeypatch.setattr(store, "_catalog", None)
        assert get_catalog() is get_catalog()


class TestSnapshotLoading:
    def test_loads_json_snapshot(self, tmp_path):
        path = _write_snapshot(tmp_path, [MRI], [
            _hospital_record("a", prices={"72148": make_price(900, insurance_rates={
                "aetna": {"PPO": {"min": 500, "max": 700}},
            })}),
        ])
        catalog = load_catalog(path)
        assert catalog.get_procedure("72148").name == "MRI Lumbar Spine"
        assert catalog.get_hospital("a").prices["72148"].insurance_rates["aetna"]["PPO"].max == 700

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "nope.json")

    def test_not_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("not json")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_malformed_record(self, tmp_path):
        path = _write_snapshot(tmp_path, [MRI], [_hospital_record("a", rating=7)])
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_null_section_is_empty(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"procedures": None, "hospitals": []}))
        catalog = load_catalog(path)
        assert catalog.procedures == ()
        assert catalog.hospitals == ()

    def test_section_that_is_not_a_list(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"procedures": {"72148": MRI}, "hospitals": "none"}))
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(path)
        assert exc_info.value.problems == [
            f"snapshot {path}: 'procedures' must be a list",
            f"snapshot {path}: 'hospitals' must be a list",
        ]


class TestConsistencyChecks:
    def test_inverted_plan_range(self, tmp_path):
        path = _write_snapshot(tmp_path, [MRI], [
            _hospital_record("a", prices={"72148": make_price(900, insurance_rates={
                "aetna": {"PPO": {"min": 700, "max": 500}},
            })}),
        ])
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(path)
        assert exc_info.value.problems == ["a/72148: aetna PPO min > max"]

    def test_duplicates_and_negative_prices_are_all_reported(self, tmp_path):
        path = _write_snapshot(tmp_path, [MRI, MRI], [
            _hospital_record("a", prices={"72148": make_price(-1, gross_charge=10)}),
            _hospital_record("a"),
        ])
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(path)
        problems = exc_info.value.problems
        assert "duplicate procedure code 72148" in problems
        assert "duplicate hospital id a" in problems
        assert "a/72148: negative cash_price" in problems


class TestLookups:
    def test_get_missing_records(self, catalog):
        assert catalog.get_procedure("00000") is None
        assert catalog.get_hospital("nope") is None

    def test_search_hospitals_by_name_city_or_address(self):
        catalog = Catalog([], [
            make_hospital("a", name="Duke Raleigh Hospital", city="Raleigh"),
            make_hospital("b", name="UNC Medical Center", city="Chapel Hill", address="101 Manning Dr"),
        ])
        assert [h.id for h in catalog.search_hospitals("raleigh")] == ["a"]
        assert [h.id for h in catalog.search_hospitals("manning")] == ["b"]
        assert catalog.search_hospitals("charlotte") == []

    def test_search_procedures(self, catalog):
        assert [p.cpt_code for p in catalog.search_procedures("mri")] == ["72148", "70553"]

    def test_regional_stats(self, catalog):
        stats = catalog.get_regional_stats("72148")
        assert stats == {"min": 1200, "max": 1500, "median": 1200, "average": 1300, "count": 3}

    def test_regional_stats_for_unpriced_code(self, catalog):
        assert catalog.get_regional_stats("99999") is None
