"""
Search route - ranks hospitals by what a procedure would cost the user.

The heavy lifting lives in careprice.services; this module validates the
query, picks the sort order and shapes each result for display.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, ValidationError

from careprice.api.routes.hospitals import HospitalSummary
from careprice.models import Distance, PriceInfo, Procedure, SearchParams
from careprice.services.distance import distance_label
from careprice.services.matcher import normalize_procedure_query
from careprice.services.pricing import display_price, format_currency, price_label, price_note, price_subtext
from careprice.services.ranking import SortOption, best_price_hospital_id, confidence_score, sort_results
from careprice.services.search import search_hospitals

logger = logging.getLogger(__name__)

router = APIRouter()


class SearchResultItem(BaseModel):
    rank: int
    hospital: HospitalSummary
    price_info: PriceInfo
    display_price: float
    price_label: str
    price_subtext: str
    formatted_price: str
    gross_charge: float
    distance: Distance
    distance_label: str
    confidence_score: int
    is_best_price: bool


class SearchResponse(BaseModel):
    count: int
    sort_by: SortOption
    procedure: Optional[Procedure] = None
    price_type: Optional[str] = None
    price_note: Optional[str] = None
    best_price_hospital_id: Optional[str] = None
    results: List[SearchResultItem]


def _format_price(price_info) -> str:
    if price_info.type == "cash":
        return format_currency(price_info.value)
    return f"{format_currency(price_info.min)} - {format_currency(price_info.max)}"


def _validation_detail(error: ValidationError) -> str:
    messages = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        messages.append(f"{field}: {err['msg']}")
    return "Invalid search query - " + "; ".join(messages)


@router.get("/search", response_model=SearchResponse)
def search(
    procedure: str = Query(..., description="Procedure name or CPT code"),
    zip_code: str = Query(..., description="5-digit ZIP code"),
    insurance: str = Query("cash", description="'cash' or an insurance provider id"),
    plan: Optional[str] = Query(None, description="Plan type, e.g. PPO"),
    sort_by: SortOption = Query(SortOption.PRICE),
):
    """
    Search hospitals offering a procedure, with prices for the user's insurance.

    An unmatched procedure is a normal empty result, not an error.
    """
    try:
        params = SearchParams(
            procedure=normalize_procedure_query(procedure),
            zip_code=zip_code,
            insurance=insurance,
            plan=plan,
        )
    except ValidationError as e:
        logger.info(f"Rejected search query: {e.error_count()} errors")
        raise HTTPException(status_code=400, detail=_validation_detail(e))

    results = search_hospitals(params)
    if not results:
        return SearchResponse(count=0, sort_by=sort_by, results=[])

    best_id = best_price_hospital_id(results)
    matched = results[0].procedure
    price_type = results[0].price_info.type

    items = []
    for rank, result in enumerate(sort_results(results, sort_by), start=1):
        items.append(SearchResultItem(
            rank=rank,
            hospital=HospitalSummary.from_hospital(result.hospital),
            price_info=result.price_info,
            display_price=display_price(result.price_info),
            price_label=price_label(result.price_info),
            price_subtext=price_subtext(result.price_info),
            formatted_price=_format_price(result.price_info),
            gross_charge=result.hospital.prices[matched.cpt_code].gross_charge,
            distance=result.distance,
            distance_label=distance_label(result.distance),
            confidence_score=confidence_score(result.hospital.data_freshness),
            is_best_price=result.hospital.id == best_id,
        ))

    return SearchResponse(
        count=len(items),
        sort_by=sort_by,
        procedure=matched,
        price_type=price_type,
        price_note=price_note(price_type),
        best_price_hospital_id=best_id,
        results=items,
    )
