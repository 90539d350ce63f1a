import pytest

from careprice.data.catalog.store import Catalog
from careprice.models import Hospital, Procedure


def make_hospital(hospital_id, zip_code="27710", rating=4.0, prices=None, **overrides):
    data = {
        "id": hospital_id,
        "name": f"Hospital {hospital_id}",
        "address": "1 Main St",
        "city": "Durham",
        "state": "NC",
        "zip": zip_code,
        "phone": "(919) 555-0100",
        "rating": rating,
        "dataFreshness": "2026-09-01",
        "coordinates": {"lat": 36.0, "lng": -78.9},
        "prices": prices or {},
    }
    data.update(overrides)
    return Hospital.model_validate(data)


def make_price(cash_price, gross_charge=None, insurance_rates=None):
    return {
        "gross_charge": gross_charge if gross_charge is not None else cash_price * 2,
        "cash_price": cash_price,
        "insurance_rates": insurance_rates or {},
    }


@pytest.fixture
def aetna_rates():
    """Two Aetna plans for the lumbar MRI."""
    return {
        "aetna": {
            "PPO": {"min": 800, "max": 1000},
            "HMO": {"min": 700, "max": 900},
        },
    }


@pytest.fixture
def procedures():
    return [
        Procedure(cpt_code="72148", name="MRI Lumbar Spine without Contrast", category="Imaging",
                  description="Lower back MRI", insights=["Shop around"]),
        Procedure(cpt_code="70553", name="MRI Brain with and without Contrast", category="Imaging"),
        Procedure(cpt_code="45378", name="Colonoscopy, Diagnostic", category="Gastroenterology"),
    ]


@pytest.fixture
def hospitals(aetna_rates):
    return [
        make_hospital("h_main", zip_code="10002", rating=4.5, prices={
            "72148": make_price(1500, gross_charge=3600, insurance_rates=aetna_rates),
            "70553": make_price(2200),
        }, financialAssistance={"available": True, "discountPercent": 50}),
        make_hospital("h_medium", zip_code="10200", rating=3.5, prices={
            "72148": make_price(1200, insurance_rates={
                "aetna": {"PPO": {"min": 650, "max": 950}},
                "bcbs": {},
            }),
        }),
        make_hospital("h_far", zip_code="20000", rating=4.9, prices={
            "72148": make_price(1200),
        }),
        make_hospital("h_no_mri", zip_code="10001", rating=5.0, prices={
            "45378": make_price(1400),
        }),
    ]


@pytest.fixture
def catalog(procedures, hospitals):
    return Catalog(procedures, hospitals)
