"""Path string primitives: normalization, relativity and joining.

None of these helpers touch the filesystem.  They operate on plain strings
so that stored mapping prefixes and paths read from debug info compare
byte-for-byte once both have been normalized.
"""

from __future__ import annotations

import enum
import ntpath
import os
from typing import List, Optional, Tuple


class PathStyle(enum.Enum):
    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def native(cls) -> "PathStyle":
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @property
    def separator(self) -> str:
        return "\\" if self is PathStyle.WINDOWS else "/"


def _resolve_style(style: Optional[PathStyle]) -> PathStyle:
    return style if style is not None else PathStyle.native()


def _split_root(path: str, style: PathStyle) -> Tuple[str, str, str]:
    """Split *path* into (drive, root, rest) using *style* separators."""
    if style is PathStyle.WINDOWS:
        path = path.replace("/", "\\")
        drive, rest = ntpath.splitdrive(path)
    else:
        drive, rest = "", path
    sep = style.separator
    if rest.startswith(sep):
        return drive, sep, rest.lstrip(sep)
    return drive, "", rest


def normalize_path(path: Optional[str], style: Optional[PathStyle] = None) -> str:
    """Return the canonical form of *path*.

    Redundant separators and ``.`` components are dropped, ``..`` folds
    against the preceding component and trailing separators are removed.
    A path that collapses to nothing becomes ``"."``; the empty string stays
    empty.  Normalizing twice yields the same string.
    """
    if not path:
        return ""
    style = _resolve_style(style)
    drive, root, rest = _split_root(path, style)
    sep = style.separator
    parts: List[str] = []
    for part in rest.split(sep):
        if part in ("", "."):
            continue
        if part == "..":
            if parts and parts[-1] != "..":
                parts.pop()
                continue
            if root:
                # cannot climb above the root
                continue
        parts.append(part)
    if style is PathStyle.WINDOWS and not (drive or root) and parts and parts[0][1:2] == ":":
        # "C:" left in front by folding would re-parse as a drive
        parts.insert(0, ".")
    result = drive + root + sep.join(parts)
    return result or "."


def is_relative(path: Optional[str], style: Optional[PathStyle] = None) -> bool:
    """True when *path* has no root directory."""
    if not path:
        return True
    _, root, _ = _split_root(path, _resolve_style(style))
    return not root


def append_path_component(base: Optional[str], component: Optional[str], style: Optional[PathStyle] = None) -> str:
    """Join *component* onto *base* and normalize the result.

    Unlike ``os.path.join`` a leading separator on *component* does not
    discard *base*: ``("/tmp", "/foo/bar.c")`` gives ``"/tmp/foo/bar.c"``.
    """
    style = _resolve_style(style)
    if not component:
        return normalize_path(base, style)
    if not base:
        return normalize_path(component, style)
    sep = style.separator
    if style is PathStyle.WINDOWS:
        component = component.replace("/", "\\")
    return normalize_path(base + sep + component.lstrip(sep), style)


__all__ = [
    "PathStyle",
    "normalize_path",
    "is_relative",
    "append_path_component",
]
