"""
Proximity tiers between a user and a hospital.

This is a ZIP-prefix heuristic standing in for geographic distance: ZIP codes
sharing a 3-digit prefix share a sectional center facility, so they are
treated as close; a shared 2-digit prefix is treated as the same broader
region. Hospital coordinates are not used here.
"""

from careprice.models import Distance

DISTANCE_LABELS = {
    Distance.CLOSE: "< 5 miles",
    Distance.MEDIUM: "5-15 miles",
    Distance.FAR: "15+ miles",
}


def classify_distance(user_zip: str, hospital_zip: str) -> Distance:
    if user_zip[:3] == hospital_zip[:3]:
        return Distance.CLOSE
    if user_zip[:2] == hospital_zip[:2]:
        return Distance.MEDIUM
    return Distance.FAR


def distance_label(distance: Distance) -> str:
    return DISTANCE_LABELS[Distance(distance)]
