"""Filter and payload assembly for the spending_by_award search.

Scope policy:
    addressable  Contracts and IDVs in the IT/management consulting NAICS
                 codes, firm-fixed-price only. This is the default.
    full         All definitive contracts and purchase orders (A-D), no
                 NAICS or pricing restriction.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..models import (
    AwardFilters,
    AwardSearchPayload,
    AwardSearchRequest,
    NaicsFilter,
    Scope,
    TimePeriod,
)
from .agencies import build_agency_filters
from .fiscal_year import fiscal_year_windows, resolve_fiscal_years

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50

RESULT_FIELDS = [
    "Award ID",
    "Recipient Name",
    "Award Amount",
    "Action Date",
    "Description",
    "Award Type",
    "Period of Performance Start Date",
    "Period of Performance End Date",
    "NAICS",
    "PSC",
]

CONTRACT_AWARD_TYPE_CODES = ["A", "B", "C", "D"]
IDV_AWARD_TYPE_CODES = ["IDV_A", "IDV_B", "IDV_C", "IDV_D"]
ADDRESSABLE_AWARD_TYPE_CODES = CONTRACT_AWARD_TYPE_CODES + IDV_AWARD_TYPE_CODES

# Computer systems design (5415xx), management consulting (5416xx), R&D (541715)
ADDRESSABLE_NAICS_CODES = [
    "541511",
    "541512",
    "541513",
    "541519",
    "541611",
    "541618",
    "541715",
]

# J = Firm Fixed Price
ADDRESSABLE_PRICING_TYPE_CODES = ["J"]


def build_filters(
    vendor: str,
    time_period: list[TimePeriod],
    agency: Optional[str] = None,
    scope: Scope = "addressable",
) -> AwardFilters:
    """Assemble the USAspending ``filters`` object for one vendor search."""
    filters = AwardFilters(
        recipient_search_text=[vendor],
        time_period=time_period,
        agencies=build_agency_filters(agency),
    )

    if scope == "addressable":
        filters.award_type_codes = list(ADDRESSABLE_AWARD_TYPE_CODES)
        filters.naics_codes = NaicsFilter(require=list(ADDRESSABLE_NAICS_CODES))
        filters.contract_pricing_type_codes = list(ADDRESSABLE_PRICING_TYPE_CODES)
    else:
        filters.award_type_codes = list(CONTRACT_AWARD_TYPE_CODES)

    return filters


def build_payload(
    request: AwardSearchRequest,
    reference_date: Optional[date] = None,
    default_limit: int = DEFAULT_LIMIT,
) -> AwardSearchPayload:
    """Translate a validated search request into the outbound query payload.

    Args:
        request: Validated inbound search.
        reference_date: "Today" for the fiscal year fallback. Defaults to date.today().
        default_limit: Page size used when the request's limit is missing or 0.

    Returns:
        AwardSearchPayload requesting page 1 sorted by award amount, descending.
    """
    start_fy, end_fy = resolve_fiscal_years(
        fy=request.fy,
        fy_start=request.fy_start,
        fy_end=request.fy_end,
        reference_date=reference_date,
    )
    time_period = fiscal_year_windows(start_fy, end_fy)
    if not time_period:
        logger.warning(
            "empty_time_period fy_start=%s fy_end=%s vendor=%r",
            start_fy,
            end_fy,
            request.vendor,
        )

    filters = build_filters(
        vendor=request.vendor,
        time_period=time_period,
        agency=request.agency,
        scope=request.scope,
    )

    return AwardSearchPayload(
        fields=list(RESULT_FIELDS),
        filters=filters,
        limit=request.limit or default_limit,
        page=1,
        sort="Award Amount",
        order="desc",
    )
