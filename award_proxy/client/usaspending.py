"""USAspending.gov spending_by_award search.

Public API, no key required (DATA Act mandated).
Docs: https://api.usaspending.gov
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from ..config.config import USASPENDING_SEARCH_URL

logger = logging.getLogger(__name__)

SPENDING_BY_AWARD_URL = USASPENDING_SEARCH_URL


@dataclass
class UpstreamResult:
    """Status and decoded body of one upstream call.

    Attributes:
        status_code: HTTP status returned by USAspending.
        ok: True for any 2xx status.
        data: Decoded JSON body, or {} when the body was not valid JSON.
    """

    status_code: int
    ok: bool
    data: Any = field(default_factory=dict)


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning(
            "upstream_body_unparseable status=%s error=%s", response.status_code, exc
        )
        return {}


async def search_spending_by_award(
    payload: dict[str, Any],
    url: str = SPENDING_BY_AWARD_URL,
    client: Optional[httpx.AsyncClient] = None,
) -> UpstreamResult:
    """POST a search payload to USAspending and return its status and body.

    Non-2xx responses are returned, not raised, so the caller can relay them.
    Transport errors (connect failures, timeouts) propagate.

    Args:
        payload: JSON-ready spending_by_award request body.
        url: Endpoint to call.
        client: Optional shared AsyncClient; a short-lived one is opened otherwise.
    """
    start = time.monotonic()
    headers = {"Content-Type": "application/json"}

    try:
        if client is not None:
            response = await client.post(url, json=payload, headers=headers)
        else:
            async with httpx.AsyncClient() as own_client:
                response = await own_client.post(url, json=payload, headers=headers)
    except httpx.HTTPError as exc:
        duration_ms = (time.monotonic() - start) * 1000
        logger.error(
            "upstream_call url=%s status=error duration_ms=%.0f result=failure error=%s",
            url,
            duration_ms,
            exc,
        )
        raise

    duration_ms = (time.monotonic() - start) * 1000
    result = UpstreamResult(
        status_code=response.status_code,
        ok=response.is_success,
        data=_decode_body(response),
    )
    logger.log(
        logging.INFO if result.ok else logging.WARNING,
        "upstream_call url=%s status=%d duration_ms=%.0f result=%s",
        url,
        response.status_code,
        duration_ms,
        "success" if result.ok else "failure",
    )
    return result
