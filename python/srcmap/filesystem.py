"""Filesystem existence probe used by existence-verified lookups."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable


logger = logging.getLogger(__name__)

ExistsProbe = Callable[[str], bool]


def path_exists(path: str) -> bool:
    """Report whether *path* exists; probe failures count as missing."""
    if not path:
        return False
    try:
        return Path(path).exists()
    except (OSError, ValueError) as exc:
        logger.debug("exists probe failed for %s: %s", path, exc)
        return False


__all__ = ["ExistsProbe", "path_exists"]
