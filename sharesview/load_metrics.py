"""
Timings for a single page load.

Records the path taken (remote or static), the relay's status and body
size, and how long each stage ran; ``log_summary`` emits one line per load.
"""

from __future__ import annotations
import time
import logging
from contextlib import contextmanager
from typing import Dict, Any, Iterator, Optional

log = logging.getLogger("sharesview.metrics")


class LoadMetrics:
    def __init__(self):
        self.path: str = ""
        self.cik: Optional[str] = None
        self.upstream_status: Optional[int] = None
        self.payload_bytes: Optional[int] = None
        self.outcome: str = ""
        self.stage_timings: Dict[str, float] = {}
        self._t0 = time.perf_counter()

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        started = time.perf_counter()
        try:
            yield
        finally:
            self.stage_timings[name] = (time.perf_counter() - started) * 1000

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "cik": self.cik,
            "upstream_status": self.upstream_status,
            "payload_bytes": self.payload_bytes,
            "outcome": self.outcome,
            "stage_timings_ms": dict(self.stage_timings),
            "elapsed_ms": (time.perf_counter() - self._t0) * 1000,
        }

    def log_summary(self) -> None:
        d = self.to_dict()
        stages = " ".join(f"{k}={v:.0f}ms" for k, v in d["stage_timings_ms"].items())
        log.info(
            "load %s -> %s cik=%s status=%s bytes=%s in %.0fms [%s]",
            d["path"], d["outcome"], d["cik"], d["upstream_status"],
            d["payload_bytes"], d["elapsed_ms"], stages,
        )
