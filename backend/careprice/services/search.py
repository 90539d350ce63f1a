"""
End-to-end hospital search: procedure match, then price and distance for
every hospital that lists the procedure, returned cheapest first.
"""

import logging
from typing import List, Optional

from careprice.data.catalog.store import Catalog, get_catalog
from careprice.models import HospitalResult, SearchParams
from careprice.services.distance import classify_distance
from careprice.services.matcher import match_procedure
from careprice.services.pricing import resolve_price
from careprice.services.ranking import sort_by_price

logger = logging.getLogger(__name__)


def search_hospitals(params: SearchParams, catalog: Optional[Catalog] = None) -> List[HospitalResult]:
    """
    Run one search against the catalog.

    Args:
        params: A validated query. Blank procedures and malformed ZIP codes
            are rejected when SearchParams is constructed.
        catalog: Catalog to search; defaults to the process-wide one.

    Returns:
        One result per hospital that prices the matched procedure, sorted by
        display price. An unmatched procedure gives an empty list.
    """
    catalog = catalog or get_catalog()

    procedure = match_procedure(catalog.procedures, params.procedure)
    if procedure is None:
        logger.info(f"No procedure matches '{params.procedure}'")
        return []

    results = []
    for hospital in catalog.hospitals:
        procedure_price = hospital.prices.get(procedure.cpt_code)
        if procedure_price is None:
            continue

        price_info = resolve_price(
            procedure_price.insurance_rates,
            procedure_price.cash_price,
            params.insurance,
            params.plan,
        )
        results.append(HospitalResult(
            hospital=hospital,
            price_info=price_info,
            distance=classify_distance(params.zip_code, hospital.zip),
            procedure=procedure,
        ))

    logger.info(
        f"Search for '{params.procedure}' matched {procedure.cpt_code}: "
        f"{len(results)} hospitals ({params.insurance}{'/' + params.plan if params.plan else ''})"
    )
    return sort_by_price(results)
