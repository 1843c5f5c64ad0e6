"""
CIK query-parameter handling.
"""

from __future__ import annotations
import re
from typing import Optional

CIK_WIDTH = 10
_CIK_RE = re.compile(r"^[0-9]{1,10}$")


def resolve_cik(raw: Optional[str]) -> Optional[str]:
    """Return *raw* if it is 1-10 ASCII digits, else None (use the default dataset)."""
    if not raw:
        return None
    # fullmatch so a trailing newline is not accepted the way `$` would
    if _CIK_RE.fullmatch(raw) is None:
        return None
    return raw


def pad_cik(cik: str) -> str:
    return cik.rjust(CIK_WIDTH, "0")
