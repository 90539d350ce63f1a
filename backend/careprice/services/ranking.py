"""
Ordering of search results.

All sorts are stable (Python's sorted) and return a new list, so the
caller's original ordering stays usable as the baseline.
"""

from datetime import date
from enum import Enum
from typing import List, Optional, Sequence

from careprice.models import Distance, HospitalResult
from careprice.services.pricing import display_price

DISTANCE_ORDER = {
    Distance.CLOSE: 0,
    Distance.MEDIUM: 1,
    Distance.FAR: 2,
}


class SortOption(str, Enum):
    PRICE = "price"
    DISTANCE = "distance"
    RATING = "rating"


def sort_by_price(results: Sequence[HospitalResult]) -> List[HospitalResult]:
    return sorted(results, key=lambda r: display_price(r.price_info))


def sort_by_distance(results: Sequence[HospitalResult]) -> List[HospitalResult]:
    return sorted(results, key=lambda r: DISTANCE_ORDER[r.distance])


def sort_by_rating(results: Sequence[HospitalResult]) -> List[HospitalResult]:
    # negate instead of reverse=True so equal ratings keep their input order
    return sorted(results, key=lambda r: -r.hospital.rating)


_SORTERS = {
    SortOption.PRICE: sort_by_price,
    SortOption.DISTANCE: sort_by_distance,
    SortOption.RATING: sort_by_rating,
}


def sort_results(results: Sequence[HospitalResult], sort_by: SortOption = SortOption.PRICE) -> List[HospitalResult]:
    return _SORTERS[SortOption(sort_by)](results)


def best_price_hospital_id(results: Sequence[HospitalResult]) -> Optional[str]:
    """Id of the hospital with the lowest display price (first one on ties)."""
    if not results:
        return None
    return sort_by_price(results)[0].hospital.id


def confidence_score(data_freshness: date, today: Optional[date] = None) -> int:
    """How much to trust a hospital's published prices, based on their age in days."""
    today = today or date.today()
    days_old = (today - data_freshness).days

    if days_old <= 30:
        return 95
    if days_old <= 60:
        return 85
    if days_old <= 90:
        return 75
    if days_old <= 180:
        return 60
    return 50
