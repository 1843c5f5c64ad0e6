"""
Data models for the shares-outstanding page.

Outcomes travel as values: the fetcher and normalizer return either a
result or a ``Failure`` and the presentation layer matches on the type.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class ViewState(str, Enum):
    LOADING = "loading"
    CONTENT = "content"
    ERROR = "error"


class ErrorKind(str, Enum):
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_PAYLOAD = "malformed_payload"
    EMPTY_WINDOW = "empty_window"
    STATIC_LOAD_FAILURE = "static_load_failure"


@dataclass
class Observation:
    fy: Any  # int from the API; static data.json is trusted as-is
    val: Union[int, float]


@dataclass
class ExtremaResult:
    entity_name: str
    max: Observation
    min: Observation


@dataclass
class Failure:
    kind: ErrorKind
    detail: str
    cik: Optional[str] = None
    status: Optional[int] = None

    @property
    def user_message(self) -> str:
        if self.kind == ErrorKind.STATIC_LOAD_FAILURE:
            return "Failed to load initial company data."
        if self.kind == ErrorKind.TRANSPORT_FAILURE:
            if self.status is not None:
                return f"Failed to fetch data for CIK {self.cik}. Status: {self.status}"
            return (
                f"An error occurred while fetching data for CIK {self.cik}. "
                "Please check the CIK and try again."
            )
        # malformed payload and empty window look the same to the user
        return (
            f"Could not process data for CIK {self.cik}. "
            "The data might be in an unexpected format or missing required fields."
        )


LoadOutcome = Union[ExtremaResult, Failure]
