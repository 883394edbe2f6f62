"""Shell context: the mapping list and the settings around it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from srcmap import (
    PathMappingList,
    RemapCache,
    SourceMapError,
    SourceResolver,
    load_mappings,
    save_mappings,
)
from srcmap.filesystem import ExistsProbe

LOGGER = logging.getLogger("srcmap_dbg.context")


@dataclass
class DebuggerContext:
    """Holds shared shell state."""

    json_output: bool = False
    map_file: Optional[Path] = None
    autosave: bool = False
    aliases: Dict[str, str] = field(default_factory=dict)
    search_roots: List[str] = field(default_factory=list)
    exists: Optional[ExistsProbe] = field(default=None, repr=False)
    mappings: PathMappingList = field(init=False, repr=False)
    cache: RemapCache = field(init=False, repr=False)
    _resolver: Optional[SourceResolver] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.mappings = PathMappingList(self._on_mappings_changed, exists=self.exists)
        self.cache = RemapCache(self.mappings)

    def _on_mappings_changed(self, mappings: PathMappingList) -> None:
        LOGGER.debug("source map now has %d entries (mod_id=%d)", len(mappings), mappings.mod_id)
        if self.autosave and self.map_file:
            try:
                save_mappings(mappings, self.map_file)
            except SourceMapError as exc:
                LOGGER.warning("autosave failed: %s", exc)

    @property
    def resolver(self) -> SourceResolver:
        if self._resolver is None:
            self._resolver = SourceResolver(self.mappings, search_roots=self.search_roots, exists=self.exists)
        return self._resolver

    def add_search_root(self, root: str) -> str:
        candidate = Path(root).expanduser()
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        value = str(candidate)
        if value not in self.search_roots:
            self.search_roots.append(value)
        self._resolver = None
        return value

    def set_map_file(self, path: Optional[str]) -> None:
        if path is None:
            self.map_file = None
            return
        self.map_file = Path(path).expanduser()

    def load_map_file(self, path: Optional[str] = None) -> int:
        """Append mappings from *path* (or the configured map file). Returns the count added."""
        target = Path(path).expanduser() if path else self.map_file
        if target is None:
            raise SourceMapError("no map file configured")
        before = len(self.mappings)
        # loading must not autosave over the file being read
        load_mappings(target, self.mappings, notify=False)
        if path:
            self.map_file = target
        return len(self.mappings) - before

    def save_map_file(self, path: Optional[str] = None) -> Path:
        target = Path(path).expanduser() if path else self.map_file
        if target is None:
            raise SourceMapError("no map file configured")
        saved = save_mappings(self.mappings, target)
        if path:
            self.map_file = saved
        return saved

    def resolve_alias(self, name: str) -> str:
        return self.aliases.get(name, name)

    def set_alias(self, alias: str, command: str) -> None:
        if alias == command:
            self.aliases.pop(alias, None)
            return
        self.aliases[alias] = command

    def list_aliases(self) -> Dict[str, str]:
        return dict(self.aliases)

    def prefix_completions(self, prefix: str = "") -> List[str]:
        prefixes = [entry.prefix for entry in self.mappings]
        if not prefix:
            return prefixes
        return [value for value in prefixes if value.startswith(prefix)]
