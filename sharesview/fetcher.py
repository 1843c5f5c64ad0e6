"""
Remote fetch of the shares-outstanding concept through the relay.

``fetch_concept`` never raises for network or payload problems; it returns
the decoded JSON payload or a ``Failure``.
"""

from __future__ import annotations
import logging
from typing import Any, Optional, Union

import httpx

from sharesview.config import Settings, get_settings
from sharesview.jsonio import loads_strict
from sharesview.load_metrics import LoadMetrics
from sharesview.models import ErrorKind, Failure
from sharesview.url_utils import build_concept_url, build_relay_url

log = logging.getLogger("sharesview.fetcher")


def build_client(settings: Settings) -> httpx.AsyncClient:
    """AsyncClient with the descriptive User-Agent the SEC asks for."""
    kwargs = {"headers": {"User-Agent": settings.user_agent}}
    if settings.http_timeout is not None:
        kwargs["timeout"] = settings.http_timeout
    return httpx.AsyncClient(**kwargs)


def relay_url_for(cik: str, settings: Settings) -> str:
    upstream = build_concept_url(cik, settings.sec_api_base)
    return build_relay_url(upstream, settings.relay_url)


async def fetch_concept(
    cik: str,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
    metrics: Optional[LoadMetrics] = None,
) -> Union[Any, Failure]:
    """GET the company-concept JSON for *cik* (unpadded) via the relay."""
    settings = settings or get_settings()
    url = relay_url_for(cik, settings)
    if client is None:
        async with build_client(settings) as own_client:
            return await _get_json(own_client, cik, url, metrics)
    return await _get_json(client, cik, url, metrics)


async def _get_json(
    client: httpx.AsyncClient,
    cik: str,
    url: str,
    metrics: Optional[LoadMetrics],
) -> Union[Any, Failure]:
    log.info("fetching shares concept cik=%s url=%s", cik, url)
    try:
        resp = await client.get(url)
    except httpx.HTTPError as e:
        log.error("fetch error cik=%s: %s", cik, e)
        return Failure(ErrorKind.TRANSPORT_FAILURE, f"{type(e).__name__}: {e}", cik=cik)

    if metrics:
        metrics.upstream_status = resp.status_code
        metrics.payload_bytes = len(resp.content)
    if not resp.is_success:
        log.error("fetch failed cik=%s status=%d", cik, resp.status_code)
        return Failure(
            ErrorKind.TRANSPORT_FAILURE,
            f"relay returned HTTP {resp.status_code}",
            cik=cik,
            status=resp.status_code,
        )

    try:
        return loads_strict(resp.content)
    except ValueError as e:
        log.error("invalid JSON body cik=%s: %s", cik, e)
        return Failure(ErrorKind.MALFORMED_PAYLOAD, f"invalid JSON: {e}", cik=cik)
