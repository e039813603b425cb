"""Pydantic models for the award search request and relay response."""

from .award_search import (
    AgencyFilter,
    AwardFilters,
    AwardSearchPayload,
    AwardSearchRequest,
    NaicsFilter,
    RelayResponse,
    Scope,
    TimePeriod,
)

__all__ = [
    "AgencyFilter",
    "AwardFilters",
    "AwardSearchPayload",
    "AwardSearchRequest",
    "NaicsFilter",
    "RelayResponse",
    "Scope",
    "TimePeriod",
]
