"""Procedure lookup: exact/first-match resolution for searches, and autocomplete."""

import re
from typing import List, Optional, Sequence

from careprice.models import Procedure

# "MRI Lumbar Spine (72148)" - the form an autocomplete suggestion is submitted in
SELECTED_SUGGESTION_PATTERN = re.compile(r"\((\d{5})\)")


def match_procedure(procedures: Sequence[Procedure], query: str) -> Optional[Procedure]:
    """
    Return the first procedure, in catalog order, that matches the query.

    A procedure matches when its code equals the query, when its name contains
    the query (case-insensitive), or when the query contains its code. This is
    first-match, not best-match. An empty query matches the first procedure,
    so callers must reject blank input before getting here.
    """
    query_lower = query.lower()
    for procedure in procedures:
        if (procedure.cpt_code == query or
                query_lower in procedure.name.lower() or
                procedure.cpt_code.lower() in query_lower):
            return procedure
    return None


def search_procedures(procedures: Sequence[Procedure], query: str) -> List[Procedure]:
    """Autocomplete: all procedures whose name, category or code contains the query."""
    query = query.strip()
    if not query:
        return []

    query_lower = query.lower()
    return [
        p for p in procedures
        if (query_lower in p.name.lower() or
            query in p.cpt_code or
            query_lower in p.category.lower())
    ]


def normalize_procedure_query(text: str) -> str:
    """Pull the CPT code out of a selected suggestion, otherwise return the trimmed text."""
    match = SELECTED_SUGGESTION_PATTERN.search(text)
    if match:
        return match.group(1)
    return text.strip()
