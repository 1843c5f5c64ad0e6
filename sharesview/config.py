"""
Runtime settings read from the environment (and ``.env`` at the project root).
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ENV_PATH = _PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=_ENV_PATH, override=True)

DEFAULT_SEC_API_BASE = "https://data.sec.gov/api/xbrl/companyconcept"
DEFAULT_RELAY_URL = "https://api.allorigins.win/raw"
DEFAULT_USER_AGENT = "SharesView/1.0 (admin@sharesview.app)"
DEFAULT_DATA_PATH = _PROJECT_ROOT / "data" / "data.json"


@dataclass
class Settings:
    sec_api_base: str = DEFAULT_SEC_API_BASE
    relay_url: str = DEFAULT_RELAY_URL
    user_agent: str = DEFAULT_USER_AGENT
    http_timeout: Optional[float] = None  # None -> httpx default
    data_path: Path = DEFAULT_DATA_PATH
    log_level: str = "INFO"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"HTTP_TIMEOUT must be a number of seconds, got {raw!r}")


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        sec_api_base=os.getenv("SEC_API_BASE", DEFAULT_SEC_API_BASE).rstrip("/"),
        relay_url=os.getenv("RELAY_URL", DEFAULT_RELAY_URL),
        user_agent=os.getenv("SEC_USER_AGENT", DEFAULT_USER_AGENT),
        http_timeout=_parse_timeout(os.getenv("HTTP_TIMEOUT")),
        data_path=Path(os.getenv("SHARES_DATA_PATH", str(DEFAULT_DATA_PATH))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
