"""Persistent command history for the srcmap-dbg prompt."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

LOGGER = logging.getLogger("srcmap_dbg.history")


class HistoryStore:
    """File-backed command history with a size limit.

    Adjacent duplicates are collapsed.  Write failures are logged and the
    in-memory history keeps working.
    """

    def __init__(self, path: Optional[str], *, limit: int = 1000) -> None:
        self.limit = max(1, int(limit or 1))
        self.path = Path(path).expanduser() if path else None
        self.entries: List[str] = []
        if self.path:
            self._load()

    def _load(self) -> None:
        if not self.path:
            return
        try:
            data = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        except OSError as exc:
            LOGGER.debug("history load failed for %s: %s", self.path, exc)
            return
        lines = [line.strip() for line in data.splitlines() if line.strip()]
        self.entries = lines[-self.limit :]

    def append(self, line: str) -> None:
        text = line.strip()
        if not text:
            return
        if self.entries and self.entries[-1] == text:
            return
        self.entries.append(text)
        if len(self.entries) > self.limit:
            self.entries = self.entries[-self.limit :]
        self._persist()

    def extend(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.append(line)

    def _persist(self) -> None:
        if not self.path:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("\n".join(self.entries) + "\n", encoding="utf-8")
        except OSError as exc:
            LOGGER.warning("history write failed for %s: %s", self.path, exc)

    def snapshot(self) -> List[str]:
        return list(self.entries)
