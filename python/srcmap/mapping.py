"""Ordered list of path-prefix substitutions.

A :class:`PathMappingList` holds ``(prefix, replacement)`` pairs.  Both
sides are normalized when stored so that later prefix comparisons against
normalized paths (as read from debug info) succeed.  Lookups walk the list
in order and the first matching pair wins; order is a user-visible priority
and is never re-sorted by prefix length.

Mutations bump :attr:`PathMappingList.mod_id` and, when asked to, invoke the
``on_changed`` callback bound at construction.  Copies never carry the
callback: a copy is a detached value that can be inspected or edited without
notifying the owner of the original.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from .filesystem import ExistsProbe, path_exists
from .paths import PathStyle, append_path_component, is_relative, normalize_path


logger = logging.getLogger(__name__)

ChangedCallback = Callable[["PathMappingList"], None]
DumpSink = Callable[[str], None]

NOT_FOUND: Optional[int] = None


@dataclass(frozen=True)
class PathMapping:
    prefix: str
    replacement: str

    def __iter__(self) -> Iterator[str]:
        yield self.prefix
        yield self.replacement

    def format(self) -> str:
        return f"{self.prefix} -> {self.replacement}"


class PathMappingList:
    """First-match-wins list of normalized prefix/replacement pairs."""

    def __init__(
        self,
        on_changed: Optional[ChangedCallback] = None,
        *,
        style: Optional[PathStyle] = None,
        exists: Optional[ExistsProbe] = None,
    ) -> None:
        self._pairs: List[PathMapping] = []
        self._on_changed = on_changed
        self._mod_id = 0
        self.style = style if style is not None else PathStyle.native()
        self._exists: ExistsProbe = exists or path_exists

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def copy(self) -> "PathMappingList":
        """Return a detached copy: same pairs, fresh counter, no callback."""
        clone = PathMappingList(style=self.style, exists=self._exists)
        clone._pairs = list(self._pairs)
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo) -> "PathMappingList":
        return self.copy()

    def assign_from(self, other: "PathMappingList") -> None:
        """Take *other*'s pairs and counter, dropping this list's callback."""
        if other is self:
            return
        self._pairs = list(other._pairs)
        self._on_changed = None
        self._mod_id = other._mod_id

    def snapshot(self) -> List[PathMapping]:
        return list(self._pairs)

    def to_list(self) -> List[List[str]]:
        return [[entry.prefix, entry.replacement] for entry in self._pairs]

    @property
    def mod_id(self) -> int:
        return self._mod_id

    @property
    def has_callback(self) -> bool:
        return self._on_changed is not None

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[PathMapping]:
        return iter(list(self._pairs))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathMappingList):
            return NotImplemented
        return self._pairs == other._pairs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PathMappingList({self.to_list()!r}, mod_id={self._mod_id})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def _make_pair(self, prefix: str, replacement: str) -> PathMapping:
        return PathMapping(normalize_path(prefix, self.style), normalize_path(replacement, self.style))

    def _valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._pairs)

    def _changed(self, notify: bool) -> None:
        self._mod_id += 1
        logger.debug("path mappings changed (mod_id=%d, size=%d)", self._mod_id, len(self._pairs))
        if notify and self._on_changed is not None:
            self._on_changed(self)

    def append(self, prefix: str, replacement: str, *, notify: bool = True) -> None:
        self._pairs.append(self._make_pair(prefix, replacement))
        self._changed(notify)

    def append_list(self, other: "PathMappingList", *, notify: bool = True) -> None:
        """Append every pair of *other*, in order."""
        if not other._pairs:
            return
        if other.style is self.style:
            self._pairs.extend(list(other._pairs))
        else:
            self._pairs.extend(self._make_pair(*entry) for entry in other._pairs)
        self._changed(notify)

    def insert(self, prefix: str, replacement: str, index: int, *, notify: bool = True) -> None:
        """Insert before *index*; an out-of-range index appends."""
        pair = self._make_pair(prefix, replacement)
        if self._valid_index(index):
            self._pairs.insert(index, pair)
        else:
            self._pairs.append(pair)
        self._changed(notify)

    def replace(self, prefix: str, replacement: str, index: int, *, notify: bool = True) -> bool:
        if not self._valid_index(index):
            return False
        self._pairs[index] = self._make_pair(prefix, replacement)
        self._changed(notify)
        return True

    def replace_path(self, path: str, new_replacement: str, *, notify: bool = True) -> bool:
        """Overwrite the replacement of the first pair whose prefix is *path*."""
        index = self.find_index_for_path(path)
        if index is None:
            return False
        prefix = self._pairs[index].prefix
        self._pairs[index] = PathMapping(prefix, normalize_path(new_replacement, self.style))
        self._changed(notify)
        return True

    def remove(self, index: int, *, notify: bool = True) -> bool:
        if not self._valid_index(index):
            return False
        del self._pairs[index]
        self._changed(notify)
        return True

    def remove_path(self, path: str, *, notify: bool = True) -> bool:
        index = self.find_index_for_path(path)
        if index is None:
            return False
        del self._pairs[index]
        self._changed(notify)
        return True

    def clear(self, *, notify: bool = True) -> None:
        if not self._pairs:
            return
        self._pairs.clear()
        self._changed(notify)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def find_index_for_path(self, path: str) -> Optional[int]:
        """Index of the first pair whose prefix equals normalized *path*."""
        wanted = normalize_path(path, self.style)
        for index, entry in enumerate(self._pairs):
            if entry.prefix == wanted:
                return index
        return NOT_FOUND

    def get_paths_at_index(self, index: int) -> Optional[Tuple[str, str]]:
        if not self._valid_index(index):
            return None
        entry = self._pairs[index]
        return entry.prefix, entry.replacement

    def remap_path(self, path: str) -> Optional[str]:
        """Rewrite *path* using the first pair whose prefix it starts with.

        A literal prefix match is tried first.  Failing that, a prefix of
        ``"."`` matches relative paths only and consumes nothing, so
        ``("." -> "/tmp")`` turns ``"foo/bar.c"`` into ``"/tmp/foo/bar.c"``
        while leaving absolute paths unmatched.
        """
        if not self._pairs or not path:
            return None
        path_is_relative: Optional[bool] = None
        for entry in self._pairs:
            prefix = entry.prefix
            if path.startswith(prefix):
                remainder = path[len(prefix):]
            elif prefix == ".":
                if path_is_relative is None:
                    path_is_relative = is_relative(path, self.style)
                if not path_is_relative:
                    continue
                remainder = path
            else:
                continue
            return append_path_component(entry.replacement, remainder, self.style)
        return None

    def reverse_remap_path(self, path: str) -> Optional[str]:
        """Rewrite a replacement-side *path* back to the prefix side."""
        full_path = normalize_path(path, self.style)
        if not full_path:
            return None
        for entry in self._pairs:
            if not full_path.startswith(entry.replacement):
                continue
            remainder = full_path[len(entry.replacement):]
            return append_path_component(entry.prefix, remainder, self.style)
        return None

    def find_file(self, path: str) -> Optional[str]:
        """Like :meth:`remap_path` but only accept rewrites that exist.

        Prefix and path must agree on relativity.  Scanning continues past
        pairs whose rewrite does not exist.
        """
        if not self._pairs:
            return None
        orig_path = normalize_path(path, self.style)
        if not orig_path:
            return None
        orig_is_relative = is_relative(orig_path, self.style)
        for entry in self._pairs:
            prefix = entry.prefix
            if len(orig_path) < len(prefix):
                continue
            if prefix == ".":
                prefix_is_relative = True
                prefix = ""
            else:
                prefix_is_relative = is_relative(prefix, self.style)
            if prefix_is_relative != orig_is_relative:
                continue
            if not orig_path.startswith(prefix):
                continue
            candidate = append_path_component(entry.replacement, orig_path[len(prefix):], self.style)
            if self._exists(candidate):
                return candidate
            logger.debug("mapping %s skipped: %s does not exist", entry.format(), candidate)
        return None

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def dump(self, sink: Optional[DumpSink] = None, index: Optional[int] = None) -> None:
        """Write the pairs to *sink* (``print`` by default).

        Without *index* every pair is written as ``[i] "prefix" -> "replacement"``.
        With an in-range *index* only that pair is written, unquoted.
        """
        write = sink or print
        if index is None:
            for position, entry in enumerate(self._pairs):
                write(f'[{position}] "{entry.prefix}" -> "{entry.replacement}"')
            return
        if self._valid_index(index):
            write(self._pairs[index].format())


__all__ = [
    "ChangedCallback",
    "DumpSink",
    "NOT_FOUND",
    "PathMapping",
    "PathMappingList",
]
