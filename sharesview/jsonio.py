"""
Strict JSON decoding: ``NaN``, ``Infinity`` and ``-Infinity`` are rejected
like any other syntax error.
"""

from __future__ import annotations
import json
from typing import Any, Union


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def loads_strict(data: Union[str, bytes]) -> Any:
    return json.loads(data, parse_constant=_reject_constant)
