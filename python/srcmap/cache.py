"""Remap result cache keyed on the mapping list's modification counter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from .mapping import PathMappingList


logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    invalidations: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"hits": self.hits, "misses": self.misses, "invalidations": self.invalidations}


@dataclass
class RemapCache:
    """Memoizes path lookups until the mapping list changes.

    Every query compares ``mapping_list.mod_id`` with the id the cache was
    filled at; a mismatch drops all cached results.  Only path strings are
    cached.
    """

    mapping_list: PathMappingList
    stats: CacheStats = field(default_factory=CacheStats)
    _entries: Dict[Tuple[str, str], Optional[str]] = field(default_factory=dict, init=False, repr=False)
    _mod_id: int = field(default=-1, init=False, repr=False)

    def _sync(self) -> None:
        current = self.mapping_list.mod_id
        if current == self._mod_id:
            return
        if self._entries:
            logger.debug("remap cache invalidated (mod_id %d -> %d)", self._mod_id, current)
            self.stats.invalidations += 1
        self._entries.clear()
        self._mod_id = current

    def _query(self, kind: str, path: str, compute: Callable[[str], Optional[str]]) -> Optional[str]:
        self._sync()
        key = (kind, path)
        cached = self._entries.get(key, _MISSING)
        if cached is not _MISSING:
            self.stats.hits += 1
            return cached  # type: ignore[return-value]
        self.stats.misses += 1
        result = compute(path)
        self._entries[key] = result
        return result

    def remap_path(self, path: str) -> Optional[str]:
        return self._query("remap", path, self.mapping_list.remap_path)

    def reverse_remap_path(self, path: str) -> Optional[str]:
        return self._query("reverse", path, self.mapping_list.reverse_remap_path)

    def find_file(self, path: str) -> Optional[str]:
        return self._query("find", path, self.mapping_list.find_file)

    def invalidate(self) -> None:
        """Drop every cached result, e.g. after files appeared on disk."""
        if self._entries:
            self.stats.invalidations += 1
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["CacheStats", "RemapCache"]
