"""
Reads the bundled default dataset (``data/data.json``).
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Union

from sharesview.jsonio import loads_strict
from sharesview.models import ErrorKind, Failure

log = logging.getLogger("sharesview.static_loader")


def load_static_data(path: Path) -> Union[Any, Failure]:
    """Return the decoded JSON at *path*, or a static-load Failure."""
    try:
        return loads_strict(path.read_bytes())
    except FileNotFoundError:
        log.error("default dataset not found: %s", path)
        return Failure(ErrorKind.STATIC_LOAD_FAILURE, f"{path} not found")
    except (OSError, ValueError) as e:
        log.error("default dataset unreadable: %s: %s", path, e)
        return Failure(ErrorKind.STATIC_LOAD_FAILURE, f"{path}: {e}")
