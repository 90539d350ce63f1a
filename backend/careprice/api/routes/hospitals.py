from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from careprice.data.catalog.store import get_catalog
from careprice.models import Coordinates, FinancialAssistance, Hospital

router = APIRouter()


class HospitalSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    rating: float
    coordinates: Coordinates
    financial_assistance: Optional[FinancialAssistance] = Field(default=None, alias="financialAssistance")

    @classmethod
    def from_hospital(cls, hospital: Hospital) -> "HospitalSummary":
        return cls(
            id=hospital.id,
            name=hospital.name,
            address=hospital.address,
            city=hospital.city,
            state=hospital.state,
            zip=hospital.zip,
            phone=hospital.phone,
            rating=hospital.rating,
            coordinates=hospital.coordinates,
            financial_assistance=hospital.financial_assistance,
        )


class HospitalListResponse(BaseModel):
    hospitals: List[HospitalSummary]


@router.get("/hospitals", response_model=HospitalListResponse)
def list_hospitals(search: Optional[str] = Query(None, description="Search query")):
    """Search hospitals or list all if no search query provided."""
    catalog = get_catalog()
    if search:
        results = catalog.search_hospitals(search)
    else:
        results = catalog.hospitals

    return HospitalListResponse(hospitals=[HospitalSummary.from_hospital(h) for h in results])


@router.get("/hospitals/{hospital_id}", response_model=Hospital)
def get_hospital_by_id(hospital_id: str):
    """Get a specific hospital by ID, including its full price table."""
    hospital = get_catalog().get_hospital(hospital_id)
    if not hospital:
        raise HTTPException(status_code=404, detail="Hospital not found")

    return hospital
