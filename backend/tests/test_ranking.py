"""
Tests for result ordering: price, distance and rating sorts, plus the
best-price and data-confidence helpers.
"""

from datetime import date

import pytest
from careprice.models import CashPrice, Distance, HospitalResult, InsuranceRange, PlanRange
from careprice.services.pricing import display_price
from careprice.services.ranking import (
    SortOption,
    best_price_hospital_id,
    confidence_score,
    sort_results,
)
from conftest import make_hospital


def _result(procedures, hospital_id, price_info, distance=Distance.FAR, rating=4.0):
    return HospitalResult(
        hospital=make_hospital(hospital_id, rating=rating),
        price_info=price_info,
        distance=distance,
        procedure=procedures[0],
    )


@pytest.fixture
def results(procedures):
    return [
        _result(procedures, "a", CashPrice(value=900), Distance.FAR, rating=3.0),
        _result(procedures, "b", InsuranceRange(min=700, max=1000), Distance.MEDIUM, rating=4.5),
        _result(procedures, "c", PlanRange(min=900, max=950, plan_name="PPO"), Distance.CLOSE, rating=4.5),
        _result(procedures, "d", CashPrice(value=700), Distance.MEDIUM, rating=5.0),
        _result(procedures, "e", CashPrice(value=1200), Distance.CLOSE, rating=3.0),
    ]


def _ids(results):
    return [r.hospital.id for r in results]


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

class TestSortByPrice:
    def test_ascending_display_price(self, results):
        prices = [display_price(r.price_info) for r in sort_results(results, SortOption.PRICE)]
        assert prices == sorted(prices)

    def test_ties_keep_input_order(self, results):
        assert _ids(sort_results(results, "price")) == ["b", "d", "a", "c", "e"]

    def test_input_is_not_mutated(self, results):
        before = _ids(results)
        sorted_results = sort_results(results, SortOption.PRICE)
        assert _ids(results) == before
        assert sorted_results is not results

    def test_default_sort_is_price(self, results):
        assert _ids(sort_results(results)) == _ids(sort_results(results, SortOption.PRICE))


class TestSortByDistance:
    def test_close_before_medium_before_far(self, results):
        tiers = [r.distance for r in sort_results(results, SortOption.DISTANCE)]
        assert tiers == [Distance.CLOSE, Distance.CLOSE, Distance.MEDIUM, Distance.MEDIUM, Distance.FAR]

    def test_ties_keep_input_order(self, results):
        assert _ids(sort_results(results, SortOption.DISTANCE)) == ["c", "e", "b", "d", "a"]


class TestSortByRating:
    def test_descending_rating_with_stable_ties(self, results):
        assert _ids(sort_results(results, SortOption.RATING)) == ["d", "b", "c", "a", "e"]

    def test_empty_input(self):
        assert sort_results([], SortOption.RATING) == []


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestBestPrice:
    def test_lowest_display_price_first_on_ties(self, results):
        assert best_price_hospital_id(results) == "b"

    def test_no_results(self):
        assert best_price_hospital_id([]) is None


class TestConfidenceScore:
    @pytest.mark.parametrize("freshness,expected", [
        (date(2026, 10, 19), 95),
        (date(2026, 9, 19), 95),
        (date(2026, 9, 1), 85),
        (date(2026, 7, 21), 75),
        (date(2026, 5, 1), 60),
        (date(2025, 10, 19), 50),
    ])
    def test_score_by_age(self, freshness, expected):
        assert confidence_score(freshness, today=date(2026, 10, 19)) == expected
