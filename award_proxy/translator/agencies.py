"""Awarding agency short codes.

USAspending matches toptier agencies by their full name, so the common short
codes clients send are expanded here. Anything not in the table is passed
through untouched and left for the upstream to match.
"""

from __future__ import annotations

from typing import Optional

from ..models import AgencyFilter

# Keys are uppercase; lookups uppercase the input first, so "DoD" hits "DOD".
AGENCY_NAMES: dict[str, str] = {
    "USAID": "U.S. Agency for International Development",
    "HHS": "DEPARTMENT OF HEALTH AND HUMAN SERVICES",
    "VA": "DEPARTMENT OF VETERANS AFFAIRS",
    "DHS": "DEPARTMENT OF HOMELAND SECURITY",
    "STATE": "DEPARTMENT OF STATE",
    "DOD": "DEPARTMENT OF DEFENSE",
}


def resolve_agency_name(agency: str) -> str:
    """Map a short code to the agency's full name, or return the input unchanged."""
    return AGENCY_NAMES.get(agency.upper(), agency)


def build_agency_filters(agency: Optional[str]) -> Optional[list[AgencyFilter]]:
    """Build the awarding/toptier agency filter list.

    Returns None (not an empty list) when no agency was given so the
    ``agencies`` key is left out of the query entirely.
    """
    if not agency:
        return None
    return [AgencyFilter(type="awarding", tier="toptier", name=resolve_agency_name(agency))]
