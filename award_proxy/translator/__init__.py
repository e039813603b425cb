"""Translate a simplified award search into a USAspending query payload."""

from .agencies import AGENCY_NAMES, build_agency_filters, resolve_agency_name
from .filters import (
    ADDRESSABLE_AWARD_TYPE_CODES,
    ADDRESSABLE_NAICS_CODES,
    ADDRESSABLE_PRICING_TYPE_CODES,
    CONTRACT_AWARD_TYPE_CODES,
    RESULT_FIELDS,
    build_filters,
    build_payload,
)
from .fiscal_year import (
    MAX_FISCAL_YEAR_SPAN,
    FiscalYearRangeError,
    fiscal_year_window,
    fiscal_year_windows,
    resolve_fiscal_years,
)

__all__ = [
    "AGENCY_NAMES",
    "ADDRESSABLE_AWARD_TYPE_CODES",
    "ADDRESSABLE_NAICS_CODES",
    "ADDRESSABLE_PRICING_TYPE_CODES",
    "CONTRACT_AWARD_TYPE_CODES",
    "FiscalYearRangeError",
    "MAX_FISCAL_YEAR_SPAN",
    "RESULT_FIELDS",
    "build_agency_filters",
    "build_filters",
    "build_payload",
    "fiscal_year_window",
    "fiscal_year_windows",
    "resolve_agency_name",
    "resolve_fiscal_years",
]
