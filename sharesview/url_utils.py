"""
URL construction for the SEC company-concept endpoint and the relay.

The upstream URL is passed to the relay as its ``url`` query parameter,
escaped the way ``encodeURIComponent`` does (only ``A-Za-z0-9-_.!~*'()``
survive unescaped).
"""

from __future__ import annotations
from urllib.parse import quote, urlparse

from sharesview.identifier import pad_cik

CONCEPT_PATH = "dei/EntityCommonStockSharesOutstanding"

_URI_COMPONENT_SAFE = "!*'()"


def build_concept_url(cik: str, api_base: str) -> str:
    """``{api_base}/CIK{10-digit}/dei/EntityCommonStockSharesOutstanding.json``"""
    return f"{api_base.rstrip('/')}/CIK{pad_cik(cik)}/{CONCEPT_PATH}.json"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_relay_url(upstream_url: str, relay_url: str) -> str:
    """Wrap *upstream_url* as the ``url`` parameter of *relay_url*."""
    sep = "&" if urlparse(relay_url).query else "?"
    return f"{relay_url}{sep}url={encode_uri_component(upstream_url)}"
