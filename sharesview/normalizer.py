"""
Shapes raw shares-outstanding payloads into an ``ExtremaResult``.

Two entry points:
- ``normalize_concept``: the company-concept JSON from the API. Filters to
  fiscal years after 2020 with numeric values and picks max/min.
- ``normalize_static``: the bundled ``data.json``, which already carries
  max/min. Only the entity name is re-cased.

Both return a ``Failure`` instead of raising on bad data.
"""

from __future__ import annotations
import logging
import math
from typing import Any, List, Optional, Tuple, Union

from sharesview.models import ErrorKind, ExtremaResult, Failure, Observation

log = logging.getLogger("sharesview.normalizer")

FY_CUTOFF = 2020
EMPTY_WINDOW_DETAIL = "No shares data found for the period after 2020."


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def title_case(name: str) -> str:
    """Lower-case, then capitalize the first character of each space-separated token."""
    return " ".join(word[:1].upper() + word[1:] for word in name.lower().split(" "))


def observation_window(shares: List[Any]) -> List[Observation]:
    """Observations with fy > 2020 and a numeric val, in original order."""
    window = []
    for item in shares:
        if not isinstance(item, dict):
            continue
        fy, val = item.get("fy"), item.get("val")
        if _is_number(fy) and fy > FY_CUTOFF and _is_number(val):
            window.append(Observation(fy=fy, val=val))
    return window


def pick_extrema(window: List[Observation]) -> Tuple[Observation, Observation]:
    """Return (max, min). On ties the earliest observation wins."""
    hi = lo = window[0]
    for obs in window[1:]:
        if obs.val > hi.val:
            hi = obs
        if obs.val < lo.val:
            lo = obs
    return hi, lo


def normalize_concept(raw: Any, cik: Optional[str] = None) -> Union[ExtremaResult, Failure]:
    if not isinstance(raw, dict):
        return _malformed(cik, f"payload is {type(raw).__name__}, expected object")

    entity_name = raw.get("entityName")
    if not isinstance(entity_name, str):
        return _malformed(cik, "entityName missing or not a string")

    units = raw.get("units")
    shares = units.get("shares") if isinstance(units, dict) else None
    if not isinstance(shares, list):
        return _malformed(cik, "units.shares missing or not a list")

    window = observation_window(shares)
    if not window:
        log.warning("empty observation window cik=%s entries=%d", cik, len(shares))
        return Failure(ErrorKind.EMPTY_WINDOW, EMPTY_WINDOW_DETAIL, cik=cik)

    hi, lo = pick_extrema(window)
    log.debug("cik=%s window=%d max=%s min=%s", cik, len(window), hi, lo)
    return ExtremaResult(entity_name=title_case(entity_name), max=hi, min=lo)


def normalize_static(data: Any) -> Union[ExtremaResult, Failure]:
    """Trust the pre-computed max/min in *data*; only re-case the name."""
    if not isinstance(data, dict):
        return _static_invalid(f"data.json is {type(data).__name__}, expected object")

    entity_name = data.get("entityName")
    if not isinstance(entity_name, str):
        return _static_invalid("entityName missing or not a string")

    picked = {}
    for key in ("max", "min"):
        rec = data.get(key)
        if not isinstance(rec, dict):
            return _static_invalid(f"{key} missing or not an object")
        if not _is_number(rec.get("val")):
            return _static_invalid(f"{key}.val missing or not numeric")
        fy = rec.get("fy")
        if fy is None or isinstance(fy, (dict, list)):
            return _static_invalid(f"{key}.fy missing or not a scalar")
        picked[key] = Observation(fy=fy, val=rec["val"])

    return ExtremaResult(
        entity_name=title_case(entity_name),
        max=picked["max"],
        min=picked["min"],
    )


def _malformed(cik: Optional[str], detail: str) -> Failure:
    log.warning("malformed payload cik=%s: %s", cik, detail)
    return Failure(ErrorKind.MALFORMED_PAYLOAD, detail, cik=cik)


def _static_invalid(detail: str) -> Failure:
    log.warning("invalid static dataset: %s", detail)
    return Failure(ErrorKind.STATIC_LOAD_FAILURE, detail)
