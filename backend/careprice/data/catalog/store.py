"""
Catalog store - the read-only snapshot of procedures and hospitals.

The catalog is loaded once per process (see get_catalog) either from the
built-in data modules next to this file or from a JSON snapshot:

    {"procedures": [...], "hospitals": [{..., "prices": {...}}, ...]}

Records are validated into frozen pydantic models at load time. Consistency
problems (duplicate ids, inverted plan ranges, negative prices) are collected
and raised together as a CatalogError; the search services assume a clean
catalog and never check again.
"""

import json
import logging
import statistics
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError

from careprice import config
from careprice.data.catalog.hospitals import HOSPITAL_PRICES, HOSPITALS
from careprice.data.catalog.procedures import PROCEDURES
from careprice.models import Hospital, Procedure
from careprice.services.matcher import search_procedures

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """The catalog snapshot is malformed or internally inconsistent."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__(f"Invalid catalog ({len(problems)} problems): " + "; ".join(problems))


class Catalog:
    """Immutable, ordered collections of procedures and hospitals."""

    def __init__(self, procedures: Sequence[Procedure], hospitals: Sequence[Hospital]):
        # tuples keep load order, which the first-match procedure search depends on
        self.procedures = tuple(procedures)
        self.hospitals = tuple(hospitals)
        self._procedures_by_code = {p.cpt_code: p for p in self.procedures}
        self._hospitals_by_id = {h.id: h for h in self.hospitals}

    def get_procedure(self, cpt_code: str) -> Optional[Procedure]:
        return self._procedures_by_code.get(cpt_code)

    def get_hospital(self, hospital_id: str) -> Optional[Hospital]:
        return self._hospitals_by_id.get(hospital_id)

    def search_procedures(self, query: str) -> List[Procedure]:
        return search_procedures(self.procedures, query)

    def search_hospitals(self, query: str) -> List[Hospital]:
        """Search hospitals by name, city, or address."""
        query_lower = query.lower()
        results = []
        for hospital in self.hospitals:
            if (query_lower in hospital.name.lower() or
                query_lower in hospital.city.lower() or
                query_lower in hospital.address.lower()):
                results.append(hospital)
        return results

    def get_regional_stats(self, cpt_code: str) -> Optional[Dict]:
        """Cash price statistics for a procedure across every hospital that lists it."""
        prices = sorted(
            h.prices[cpt_code].cash_price for h in self.hospitals if cpt_code in h.prices
        )
        if not prices:
            return None

        return {
            "min": min(prices),
            "max": max(prices),
            "median": statistics.median(prices),
            "average": round(sum(prices) / len(prices), 2),
            "count": len(prices),
        }


def _builtin_records() -> Dict[str, List[Dict]]:
    hospitals = [
        dict(hospital, prices=HOSPITAL_PRICES.get(hospital["id"], {}))
        for hospital in HOSPITALS
    ]
    return {"procedures": PROCEDURES, "hospitals": hospitals}


def _read_snapshot(path: Path) -> Dict[str, List[Dict]]:
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise CatalogError([f"cannot read snapshot {path}: {e}"]) from e

    if not isinstance(data, dict):
        raise CatalogError([f"snapshot {path} must be a JSON object"])

    sections = {}
    problems = []
    for name in ("procedures", "hospitals"):
        section = data.get(name)
        if section is None:
            section = []
        if not isinstance(section, list):
            problems.append(f"snapshot {path}: '{name}' must be a list")
        sections[name] = section
    if problems:
        raise CatalogError(problems)
    return sections


def _check_consistency(procedures: List[Procedure], hospitals: List[Hospital]) -> List[str]:
    problems = []

    seen_codes = set()
    for procedure in procedures:
        if procedure.cpt_code in seen_codes:
            problems.append(f"duplicate procedure code {procedure.cpt_code}")
        seen_codes.add(procedure.cpt_code)

    seen_ids = set()
    for hospital in hospitals:
        if hospital.id in seen_ids:
            problems.append(f"duplicate hospital id {hospital.id}")
        seen_ids.add(hospital.id)

        for code, price in hospital.prices.items():
            where = f"{hospital.id}/{code}"
            if price.cash_price < 0:
                problems.append(f"{where}: negative cash_price")
            if price.gross_charge < 0:
                problems.append(f"{where}: negative gross_charge")
            for provider, plans in price.insurance_rates.items():
                for plan, plan_range in plans.items():
                    if plan_range.min > plan_range.max:
                        problems.append(f"{where}: {provider} {plan} min > max")
                    if plan_range.min < 0:
                        problems.append(f"{where}: {provider} {plan} negative min")

    return problems


def load_catalog(path: Optional[Path] = None) -> Catalog:
    """Load and validate a catalog from a JSON snapshot, or the built-in data if no path is given."""
    raw = _read_snapshot(Path(path)) if path else _builtin_records()
    source = str(path) if path else "built-in data"

    try:
        procedures = [Procedure.model_validate(p) for p in raw["procedures"]]
        hospitals = [Hospital.model_validate(h) for h in raw["hospitals"]]
    except ValidationError as e:
        raise CatalogError([f"{err['loc']}: {err['msg']}" for err in e.errors()]) from e

    problems = _check_consistency(procedures, hospitals)
    if problems:
        raise CatalogError(problems)

    logger.info(f"Loaded catalog from {source}: {len(procedures)} procedures, {len(hospitals)} hospitals")
    return Catalog(procedures, hospitals)


# Singleton instance
_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Get the process-wide catalog, loading it on first use."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config.CATALOG_PATH)
    return _catalog
