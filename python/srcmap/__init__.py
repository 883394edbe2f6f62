"""
srcmap - Source path remapping for debugger front-ends.

Debug info records the paths a binary was built from; the files usually
live somewhere else on the machine doing the debugging.  This package keeps
an ordered list of prefix substitutions and rewrites paths between the two
naming schemes.  Each module is implemented in its own file:

    paths.py       → normalization, relativity and joining of path strings
    filesystem.py  → existence probe for verified lookups
    mapping.py     → PathMappingList (ordered, first-match-wins pairs)
    prefix_map.py  → clang prefix-map strings and JSON settings files
    cache.py       → remap results cached against the modification counter
    resolver.py    → source lookup across mappings and search roots
"""

from .paths import PathStyle, append_path_component, is_relative, normalize_path  # noqa: F401
from .filesystem import ExistsProbe, path_exists  # noqa: F401
from .mapping import NOT_FOUND, ChangedCallback, PathMapping, PathMappingList  # noqa: F401
from .prefix_map import (  # noqa: F401
    SourceMapError,
    load_mappings,
    parse_prefix_map,
    save_mappings,
)
from .cache import CacheStats, RemapCache  # noqa: F401
from .resolver import SourceResolver  # noqa: F401

__all__ = [
    "PathStyle",
    "normalize_path",
    "is_relative",
    "append_path_component",
    "ExistsProbe",
    "path_exists",
    "NOT_FOUND",
    "ChangedCallback",
    "PathMapping",
    "PathMappingList",
    "SourceMapError",
    "load_mappings",
    "parse_prefix_map",
    "save_mappings",
    "CacheStats",
    "RemapCache",
    "SourceResolver",
]

__version__ = "0.1.0-dev"
