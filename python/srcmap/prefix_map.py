"""Prefix-map strings and JSON settings files for path mappings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .mapping import PathMappingList


logger = logging.getLogger(__name__)

SETTINGS_VERSION = 1


class SourceMapError(Exception):
    """Raised when a settings file cannot be read or is malformed."""


def parse_prefix_map(mapping: Optional[str]) -> List[Tuple[str, str]]:
    """
    Parse a clang-style prefix map string (\"old=new[:old=new...]\").

    The compiler records paths under ``old`` as ``new``, so each part yields
    a ``(new, old)`` pair: debug-info prefix first, local replacement second.
    Parts without ``=`` or with an empty ``old`` are skipped.
    """
    if not mapping:
        return []
    pairs: List[Tuple[str, str]] = []
    for part in mapping.split(":"):
        if "=" not in part:
            continue
        old, new = part.split("=", 1)
        if old == "":
            continue
        pairs.append((new or ".", old))
    return pairs


def _coerce_pairs(raw: Any, origin: Path) -> List[Tuple[str, str]]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise SourceMapError(f"{origin}: 'source_map' must be a list")
    pairs: List[Tuple[str, str]] = []
    for idx, entry in enumerate(raw):
        if isinstance(entry, dict):
            prefix = entry.get("prefix")
            replacement = entry.get("replacement")
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            prefix, replacement = entry
        else:
            raise SourceMapError(f"{origin}: entry {idx} is not a [prefix, replacement] pair")
        if not isinstance(prefix, str) or not isinstance(replacement, str):
            raise SourceMapError(f"{origin}: entry {idx} must contain strings")
        pairs.append((prefix, replacement))
    return pairs


def load_mappings(
    path: Path | str,
    mapping_list: Optional[PathMappingList] = None,
    *,
    notify: bool = True,
) -> PathMappingList:
    """Append the pairs stored in a settings file to *mapping_list*."""
    origin = Path(path)
    try:
        data = json.loads(origin.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SourceMapError(f"cannot read {origin}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SourceMapError(f"{origin}: invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SourceMapError(f"{origin}: expected a JSON object")
    version = data.get("version", SETTINGS_VERSION)
    if version != SETTINGS_VERSION:
        raise SourceMapError(f"{origin}: unsupported version {version!r}")

    pairs = _coerce_pairs(data.get("source_map"), origin)
    prefix_map = data.get("prefix_map")
    if prefix_map is not None and not isinstance(prefix_map, str):
        raise SourceMapError(f"{origin}: 'prefix_map' must be a string")
    pairs.extend(parse_prefix_map(prefix_map))

    target = mapping_list if mapping_list is not None else PathMappingList()
    staged = PathMappingList(style=target.style)
    for prefix, replacement in pairs:
        staged.append(prefix, replacement, notify=False)
    target.append_list(staged, notify=notify)
    logger.debug("loaded %d mapping(s) from %s", len(pairs), origin)
    return target


def settings_payload(mapping_list: PathMappingList) -> Dict[str, Any]:
    return {"version": SETTINGS_VERSION, "source_map": mapping_list.to_list()}


def save_mappings(mapping_list: PathMappingList, path: Path | str) -> Path:
    """Write *mapping_list* to a settings file and return its path."""
    target = Path(path)
    try:
        if not target.parent.exists():
            target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(settings_payload(mapping_list), indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise SourceMapError(f"cannot write {target}: {exc}") from exc
    return target


__all__ = [
    "SETTINGS_VERSION",
    "SourceMapError",
    "load_mappings",
    "parse_prefix_map",
    "save_mappings",
    "settings_payload",
]
