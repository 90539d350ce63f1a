"""
Data model shared by the catalog, the search services and the API.

Catalog records (Procedure, Hospital, ProcedurePrice) are frozen once loaded:
fields cannot be reassigned and list-like fields are tuples. The price
mappings stay plain dicts; nothing after the loader writes to them.
PriceInfo is a discriminated union on ``type``: a cash price carries a single
``value``, the two range shapes carry ``min``/``max`` and nothing else.
"""

import re
from datetime import date
from enum import Enum
from typing import Annotated, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

CASH = "cash"

InsuranceProvider = Literal["aetna", "bcbs", "uhc", "cigna", "humana"]
InsuranceSelection = Literal["cash", "aetna", "bcbs", "uhc", "cigna", "humana"]

ZIP_CODE_PATTERN = re.compile(r"^[0-9]{5}$")


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ============================================================================
# Catalog records
# ============================================================================

class Procedure(_Record):
    cpt_code: str
    name: str
    category: str
    description: str = ""
    insights: Tuple[str, ...] = ()


class PlanPriceRange(_Record):
    min: float
    max: float


# provider -> plan name -> negotiated range
InsuranceRates = Dict[str, Dict[str, PlanPriceRange]]


class ProcedurePrice(_Record):
    gross_charge: float
    cash_price: float
    insurance_rates: InsuranceRates = Field(default_factory=dict)


class Coordinates(_Record):
    lat: float
    lng: float


class FinancialAssistance(_Record):
    available: bool
    discount_percent: Optional[float] = Field(default=None, alias="discountPercent")
    eligibility_criteria: Optional[str] = Field(default=None, alias="eligibilityCriteria")
    program_name: Optional[str] = Field(default=None, alias="programName")
    income_threshold: Optional[str] = Field(default=None, alias="incomeThreshold")


class Hospital(_Record):
    id: str
    name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    rating: float = Field(ge=0, le=5)
    data_freshness: date = Field(alias="dataFreshness")
    coordinates: Coordinates
    financial_assistance: Optional[FinancialAssistance] = Field(default=None, alias="financialAssistance")
    prices: Dict[str, ProcedurePrice] = Field(default_factory=dict)


# ============================================================================
# Derived values
# ============================================================================

class CashPrice(_Record):
    type: Literal["cash"] = "cash"
    value: float


class PlanRange(_Record):
    type: Literal["plan_range"] = "plan_range"
    min: float
    max: float
    plan_name: str = Field(alias="planName")


class InsuranceRange(_Record):
    type: Literal["insurance_range"] = "insurance_range"
    min: float
    max: float


PriceInfo = Annotated[Union[CashPrice, PlanRange, InsuranceRange], Field(discriminator="type")]


class Distance(str, Enum):
    """Coarse proximity tier; see careprice.services.distance."""
    CLOSE = "close"
    MEDIUM = "medium"
    FAR = "far"


class HospitalResult(_Record):
    hospital: Hospital
    price_info: PriceInfo
    distance: Distance
    procedure: Procedure


# ============================================================================
# Query contract
# ============================================================================

class SearchParams(_Record):
    """A validated search query. Construction raises pydantic.ValidationError on bad input."""
    procedure: str
    zip_code: str
    insurance: InsuranceSelection = CASH
    plan: Optional[str] = None

    @field_validator("procedure")
    @classmethod
    def procedure_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("procedure must not be empty")
        return v

    @field_validator("zip_code")
    @classmethod
    def zip_is_five_digits(cls, v):
        v = v.strip()
        if not ZIP_CODE_PATTERN.match(v):
            raise ValueError("zip_code must be a 5-digit ZIP code")
        return v

    @field_validator("plan")
    @classmethod
    def blank_plan_is_none(cls, v):
        if v is None:
            return None
        return v.strip() or None
