"""Award search models: inbound request, outbound USAspending payload, relay response."""

from typing import Any, Literal, Optional
from pydantic import BaseModel, Field, field_validator

Scope = Literal["addressable", "full"]


class AwardSearchRequest(BaseModel):
    """Simplified award search as posted by the client."""

    vendor: str = Field(..., min_length=1, description="Recipient name or UEI to search for")
    agency: Optional[str] = Field(None, description="Awarding agency short code or full name")
    fy: Optional[int] = Field(None, description="Single fiscal year")
    fy_start: Optional[int] = Field(None, description="First fiscal year of a range")
    fy_end: Optional[int] = Field(None, description="Last fiscal year of a range")
    scope: Scope = Field(default="addressable", description="addressable or full")
    limit: Optional[int] = Field(None, description="Page size; falsy means the configured default")

    model_config = {"extra": "ignore"}

    @field_validator("scope", mode="before")
    @classmethod
    def _null_scope_is_default(cls, value: Any) -> Any:
        return "addressable" if value is None else value


class TimePeriod(BaseModel):
    """One US federal fiscal year, Oct 1 through Sep 30."""

    start_date: str = Field(..., description="YYYY-10-01 of the prior calendar year")
    end_date: str = Field(..., description="YYYY-09-30 of the fiscal year")


class AgencyFilter(BaseModel):
    type: str = "awarding"
    tier: str = "toptier"
    name: str


class NaicsFilter(BaseModel):
    require: list[str] = Field(default_factory=list)


class AwardFilters(BaseModel):
    """USAspending `filters` object.

    Optional keys left as None are dropped on serialization, so a request
    without an agency carries no `agencies` key at all.
    """

    recipient_search_text: list[str]
    time_period: list[TimePeriod]
    agencies: Optional[list[AgencyFilter]] = None
    award_type_codes: Optional[list[str]] = None
    naics_codes: Optional[NaicsFilter] = None
    contract_pricing_type_codes: Optional[list[str]] = None


class AwardSearchPayload(BaseModel):
    """Body POSTed to /api/v2/search/spending_by_award/."""

    fields: list[str]
    filters: AwardFilters
    limit: int
    page: int = 1
    sort: str = "Award Amount"
    order: str = "desc"

    def to_request_json(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class RelayResponse(BaseModel):
    """What the proxy sends back to its caller on the passthrough path."""

    ok: bool
    status: int
    request: dict[str, Any] = Field(..., description="Echo of the outbound payload")
    results: list[Any] = Field(default_factory=list)
    raw: Any = Field(default_factory=dict, description="Full upstream body")
