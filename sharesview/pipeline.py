"""
One page load: resolve CIK -> fetch or load default -> normalize -> view.

Every load starts in the loading state and ends in exactly one of
content or error.
"""

from __future__ import annotations
import logging
from typing import Optional

import httpx

from sharesview.config import Settings, get_settings
from sharesview.fetcher import fetch_concept
from sharesview.identifier import resolve_cik
from sharesview.load_metrics import LoadMetrics
from sharesview.models import ErrorKind, Failure, LoadOutcome
from sharesview.normalizer import normalize_concept, normalize_static
from sharesview.presentation import ViewModel, apply_outcome, show_loading
from sharesview.static_loader import load_static_data

log = logging.getLogger("sharesview.pipeline")


async def load_remote(
    cik: str,
    client: Optional[httpx.AsyncClient],
    settings: Settings,
    metrics: LoadMetrics,
) -> LoadOutcome:
    try:
        with metrics.stage("fetch"):
            payload = await fetch_concept(cik, client=client, settings=settings, metrics=metrics)
        if isinstance(payload, Failure):
            return payload
        with metrics.stage("normalize"):
            return normalize_concept(payload, cik=cik)
    except Exception as e:
        log.exception("unexpected error processing cik=%s", cik)
        return Failure(ErrorKind.MALFORMED_PAYLOAD, f"{type(e).__name__}: {e}", cik=cik)


def load_default(settings: Settings, metrics: LoadMetrics) -> LoadOutcome:
    try:
        with metrics.stage("load_static"):
            data = load_static_data(settings.data_path)
        if isinstance(data, Failure):
            return data
        with metrics.stage("normalize"):
            return normalize_static(data)
    except Exception as e:
        log.exception("unexpected error loading default dataset")
        return Failure(ErrorKind.STATIC_LOAD_FAILURE, f"{type(e).__name__}: {e}")


async def load_view(
    raw_cik: Optional[str],
    view: Optional[ViewModel] = None,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
    metrics: Optional[LoadMetrics] = None,
) -> ViewModel:
    """Populate *view* for the given raw ``CIK`` query value (may be None)."""
    settings = settings or get_settings()
    view = view if view is not None else ViewModel()
    metrics = metrics or LoadMetrics()

    show_loading(view)
    cik = resolve_cik(raw_cik)
    if cik is not None:
        metrics.path, metrics.cik = "remote", cik
        outcome = await load_remote(cik, client, settings, metrics)
    else:
        if raw_cik:
            log.info("ignoring invalid CIK %r, using default dataset", raw_cik)
        metrics.path = "static"
        outcome = load_default(settings, metrics)

    if isinstance(outcome, Failure):
        log.warning("load failed kind=%s cik=%s status=%s detail=%s",
                    outcome.kind.value, outcome.cik, outcome.status, outcome.detail)

    with metrics.stage("render"):
        apply_outcome(view, outcome)
    metrics.outcome = view.state.value
    metrics.log_summary()
    return view
