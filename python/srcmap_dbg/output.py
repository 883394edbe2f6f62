"""Output helpers for srcmap-dbg."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Sequence

from srcmap import PathMapping

from .context import DebuggerContext


def _json_dump(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, indent=2, sort_keys=True)


def emit_result(ctx: DebuggerContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Emit a successful command result."""
    if ctx.json_output:
        payload: Dict[str, Any] = {"status": "ok"}
        if data is not None:
            payload["result"] = data
        else:
            payload["message"] = message
        print(_json_dump(payload))
    else:
        print(message)


def emit_error(ctx: DebuggerContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Emit an error message respecting JSON mode."""
    payload: Dict[str, Any] = {"status": "error", "error": message}
    if data:
        payload["details"] = dict(data)
    if ctx.json_output:
        print(_json_dump(payload))
    else:
        print(f"error: {message}")


def mapping_rows(entries: Sequence[PathMapping]) -> list[Dict[str, Any]]:
    return [
        {"index": idx, "prefix": entry.prefix, "replacement": entry.replacement}
        for idx, entry in enumerate(entries)
    ]


def render_mapping_table(ctx: DebuggerContext) -> None:
    """Print the source map the way ``settings show target.source-map`` does."""
    if not len(ctx.mappings):
        print("  source map: (empty)")
        return
    print("  source map:")
    ctx.mappings.dump(lambda line: print(f"    {line}"))


__all__ = [
    "emit_result",
    "emit_error",
    "mapping_rows",
    "render_mapping_table",
]
