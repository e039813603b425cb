"""Award search request handler.

``handle(method, body)`` is the whole proxy: validate the inbound search,
translate it into a spending_by_award payload, make one upstream call and
relay the result. Hosting layers only parse HTTP and serialize the returned
``(status_code, body)`` pair.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Union

import httpx
from pydantic import ValidationError

from .client import search_spending_by_award
from .config import Config, load_config
from .models import AwardSearchRequest, RelayResponse
from .translator import FiscalYearRangeError, build_payload

logger = logging.getLogger(__name__)

Body = Union[Mapping[str, Any], str, bytes, None]
HandlerResult = tuple[int, dict[str, Any]]


def _parse_body(body: Body) -> dict[str, Any]:
    """Decode the inbound body into a dict. Anything that isn't a JSON object becomes {}."""
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return dict(body)

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if not body.strip():
        return {}

    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as exc:
        logger.warning("request_body_unparseable error=%s", exc)
        return {}

    if not isinstance(parsed, dict):
        logger.warning("request_body_not_object type=%s", type(parsed).__name__)
        return {}
    return parsed


def _validation_detail(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]


def _error(status_code: int, message: str, **extra: Any) -> HandlerResult:
    return status_code, {"error": message, **extra}


async def handle(
    method: str,
    body: Body,
    config: Optional[Config] = None,
    client: Optional[httpx.AsyncClient] = None,
    reference_date: Optional[date] = None,
) -> HandlerResult:
    """Handle one award search.

    Args:
        method: HTTP method of the inbound request. Only POST is served.
        body: Parsed JSON mapping, raw JSON text/bytes, or None.
        config: Settings; loaded from the environment when omitted.
        client: Optional AsyncClient for the upstream call.
        reference_date: "Today" for the fiscal year fallback.

    Returns:
        (status_code, json_body). 405 and 400 for client errors, the upstream's
        own status for relayed responses, 500 for anything unexpected.
    """
    if method.upper() != "POST":
        logger.info("request_rejected reason=method method=%s", method)
        return _error(405, "Use POST")

    try:
        data = _parse_body(body)

        if not data.get("vendor"):
            logger.info("request_rejected reason=missing_vendor")
            return _error(400, "vendor is required")

        try:
            search = AwardSearchRequest.model_validate(data)
        except ValidationError as exc:
            logger.info("request_rejected reason=invalid_fields errors=%d", exc.error_count())
            return _error(400, "invalid request", detail=_validation_detail(exc))

        if config is None:
            config = load_config()

        logger.info(
            "request_received vendor=%r agency=%r scope=%s",
            search.vendor,
            search.agency,
            search.scope,
        )
        start = time.monotonic()

        try:
            payload = build_payload(
                search,
                reference_date=reference_date,
                default_limit=config.default_limit,
            )
        except FiscalYearRangeError as exc:
            logger.info("request_rejected reason=fiscal_year_span error=%s", exc)
            return _error(400, "fiscal year range too large", detail=str(exc))

        request_json = payload.to_request_json()

        upstream = await search_spending_by_award(
            request_json,
            url=config.usaspending_url,
            client=client,
        )

        raw = upstream.data
        results = raw.get("results") if isinstance(raw, dict) else None
        if not isinstance(results, list):
            results = []
        relay = RelayResponse(
            ok=upstream.ok,
            status=upstream.status_code,
            request=request_json,
            results=results,
            raw=raw,
        )

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            "request_complete status=%d count=%d duration_ms=%.0f",
            relay.status,
            len(relay.results),
            duration_ms,
        )
        return upstream.status_code, relay.model_dump()

    except Exception as exc:
        logger.error("Proxy error: %s", exc, exc_info=True)
        return 500, {"ok": False, "error": "Proxy error", "detail": str(exc)}
