"""Status command."""

from __future__ import annotations

from typing import List

from .base import Command
from ..context import DebuggerContext
from ..output import emit_result


class StatusCommand(Command):
    def __init__(self) -> None:
        super().__init__("status", "Show source map status", aliases=("info",))

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        data = {
            "mappings": len(ctx.mappings),
            "mod_id": ctx.mappings.mod_id,
            "map_file": str(ctx.map_file) if ctx.map_file else None,
            "autosave": ctx.autosave,
            "search_roots": list(ctx.search_roots),
            "cache": ctx.cache.stats.as_dict(),
        }
        emit_result(ctx, message=f"Source map: {data['mappings']} mapping(s), mod_id={data['mod_id']}", data=data)
        if not ctx.json_output:
            print(f"  map file: {data['map_file'] or '(unset)'}{' (autosave)' if ctx.autosave else ''}")
            if ctx.search_roots:
                print(f"  search roots: {', '.join(ctx.search_roots)}")
            stats = data["cache"]
            print(f"  cache: {stats['hits']} hit(s), {stats['misses']} miss(es)")
        return 0
