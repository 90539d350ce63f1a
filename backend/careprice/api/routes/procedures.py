from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from careprice.data.catalog.store import get_catalog
from careprice.models import Procedure
from careprice.services.pricing import INSURANCE_PLANS, INSURANCE_PROVIDERS

router = APIRouter()


class ProcedureListResponse(BaseModel):
    procedures: List[Procedure]


class RegionalStats(BaseModel):
    cpt_code: str
    min: float
    max: float
    median: float
    average: float
    count: int


class InsuranceOption(BaseModel):
    value: str
    label: str
    plans: List[str]


class InsuranceListResponse(BaseModel):
    providers: List[InsuranceOption]


@router.get("/procedures", response_model=ProcedureListResponse)
def list_procedures(q: Optional[str] = Query(None, description="Name, category or CPT code fragment")):
    """Autocomplete procedures, or list all if no query provided."""
    catalog = get_catalog()
    if q is None:
        return ProcedureListResponse(procedures=list(catalog.procedures))
    return ProcedureListResponse(procedures=catalog.search_procedures(q))


@router.get("/procedures/{cpt_code}", response_model=Procedure)
def get_procedure_by_code(cpt_code: str):
    procedure = get_catalog().get_procedure(cpt_code)
    if not procedure:
        raise HTTPException(status_code=404, detail="Procedure not found")
    return procedure


@router.get("/procedures/{cpt_code}/stats", response_model=RegionalStats)
def get_procedure_stats(cpt_code: str):
    """Regional cash price statistics for a procedure."""
    stats = get_catalog().get_regional_stats(cpt_code)
    if not stats:
        raise HTTPException(status_code=404, detail="No prices found for procedure")
    return RegionalStats(cpt_code=cpt_code, **stats)


@router.get("/insurance", response_model=InsuranceListResponse)
def list_insurance_options():
    """Insurance providers and the plan types each one offers."""
    providers = [InsuranceOption(value="cash", label="Cash Price (No Insurance)", plans=[])]
    for value, label in INSURANCE_PROVIDERS.items():
        providers.append(InsuranceOption(value=value, label=label, plans=INSURANCE_PLANS[value]))
    return InsuranceListResponse(providers=providers)
