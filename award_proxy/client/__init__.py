"""Outbound USAspending.gov API client."""

from .usaspending import SPENDING_BY_AWARD_URL, UpstreamResult, search_spending_by_award

__all__ = ["SPENDING_BY_AWARD_URL", "UpstreamResult", "search_spending_by_award"]
