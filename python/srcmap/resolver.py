from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .filesystem import ExistsProbe, path_exists
from .mapping import PathMappingList
from .paths import append_path_component, is_relative, normalize_path


logger = logging.getLogger(__name__)


class SourceResolver:
    """
    Locate the local copy of a source file named in debug info.

    The mapping list is consulted first (existence-verified), then the
    requested path itself, then each search root for relative requests.
    """

    def __init__(
        self,
        mapping_list: PathMappingList,
        *,
        search_roots: Optional[Iterable[Path | str]] = None,
        exists: Optional[ExistsProbe] = None,
    ) -> None:
        self.mapping_list = mapping_list
        self.search_roots: List[str] = [str(root) for root in (search_roots or [])]
        self._exists: ExistsProbe = exists or path_exists

    def add_search_root(self, root: Path | str) -> None:
        value = str(root)
        if value not in self.search_roots:
            self.search_roots.append(value)

    def candidates(self, requested: str | Path) -> List[str]:
        """Ordered candidate paths probed by :meth:`resolve` after the mapping lookup."""
        style = self.mapping_list.style
        raw = normalize_path(str(requested), style)
        if not raw:
            return []
        ordered: List[str] = [raw]
        remapped = self.mapping_list.remap_path(raw)
        if remapped:
            ordered.append(remapped)
        if is_relative(raw, style):
            for root in self.search_roots:
                ordered.append(append_path_component(root, raw, style))
                if remapped and is_relative(remapped, style):
                    ordered.append(append_path_component(root, remapped, style))
        return list(dict.fromkeys(ordered))

    def resolve(self, requested: str | Path) -> str:
        """
        Resolve a requested path to an existing filesystem location.
        Raises FileNotFoundError when no candidate exists.
        """
        raw = normalize_path(str(requested), self.mapping_list.style)
        if not raw:
            raise FileNotFoundError("Empty path cannot be resolved")
        found = self.mapping_list.find_file(raw)
        if found:
            return found
        for candidate in self.candidates(raw):
            if self._exists(candidate):
                return candidate
        logger.debug("no local file for %s", requested)
        raise FileNotFoundError(requested)


__all__ = ["SourceResolver"]
