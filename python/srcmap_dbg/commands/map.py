"""Source map editing command."""

from __future__ import annotations

import argparse
from typing import List, Optional

from srcmap import SourceMapError, parse_prefix_map

from .base import Command
from ..context import DebuggerContext
from ..output import emit_error, emit_result, mapping_rows, render_mapping_table


def _parse_index(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


class MapCommand(Command):
    def __init__(self) -> None:
        super().__init__("map", "Edit the source path map", aliases=("source-map",))
        parser = argparse.ArgumentParser(prog="map", add_help=False)
        sub = parser.add_subparsers(dest="subcmd")
        sub.required = True

        add = sub.add_parser("add")
        add.add_argument("prefix")
        add.add_argument("replacement")

        insert = sub.add_parser("insert")
        insert.add_argument("index", type=int)
        insert.add_argument("prefix")
        insert.add_argument("replacement")

        replace = sub.add_parser("replace")
        replace.add_argument("index", type=int)
        replace.add_argument("prefix")
        replace.add_argument("replacement")

        set_ = sub.add_parser("set")
        set_.add_argument("prefix")
        set_.add_argument("replacement")

        remove = sub.add_parser("remove")
        remove.add_argument("target", help="Entry index, or prefix with --prefix")
        remove.add_argument("--prefix", action="store_true", help="Treat target as a prefix")

        sub.add_parser("clear")

        lst = sub.add_parser("list")
        lst.add_argument("index", nargs="?", type=int)

        load = sub.add_parser("load")
        load.add_argument("path", nargs="?")

        save = sub.add_parser("save")
        save.add_argument("path", nargs="?")

        prefix_map = sub.add_parser("prefix-map")
        prefix_map.add_argument("value", help="old=new[:old=new...]")

        self._parser = parser

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        args = self.parse_args(self._parser, argv)
        if args is None:
            return 1
        action = args.subcmd
        if action == "add":
            ctx.mappings.append(args.prefix, args.replacement)
            return self._report_entry(ctx, len(ctx.mappings) - 1, "added")
        if action == "insert":
            return self._handle_insert(ctx, args.index, args.prefix, args.replacement)
        if action == "replace":
            return self._handle_replace(ctx, args.index, args.prefix, args.replacement)
        if action == "set":
            return self._handle_set(ctx, args.prefix, args.replacement)
        if action == "remove":
            return self._handle_remove(ctx, args.target, by_prefix=args.prefix)
        if action == "clear":
            count = len(ctx.mappings)
            ctx.mappings.clear()
            emit_result(ctx, message=f"Cleared {count} mapping(s)", data={"removed": count})
            return 0
        if action == "list":
            return self._handle_list(ctx, args.index)
        if action == "load":
            return self._handle_load(ctx, args.path)
        if action == "save":
            return self._handle_save(ctx, args.path)
        if action == "prefix-map":
            return self._handle_prefix_map(ctx, args.value)
        return 1

    def _report_entry(self, ctx: DebuggerContext, index: int, verb: str) -> int:
        paths = ctx.mappings.get_paths_at_index(index)
        if paths is None:
            emit_error(ctx, message=f"no mapping at index {index}")
            return 1
        prefix, replacement = paths
        emit_result(
            ctx,
            message=f"[{index}] {prefix} -> {replacement} ({verb})",
            data={"index": index, "prefix": prefix, "replacement": replacement, "mod_id": ctx.mappings.mod_id},
        )
        return 0

    def _handle_insert(self, ctx: DebuggerContext, index: int, prefix: str, replacement: str) -> int:
        if index < 0:
            emit_error(ctx, message=f"invalid index {index}")
            return 1
        position = min(index, len(ctx.mappings))
        ctx.mappings.insert(prefix, replacement, index)
        return self._report_entry(ctx, position, "inserted")

    def _handle_replace(self, ctx: DebuggerContext, index: int, prefix: str, replacement: str) -> int:
        if not ctx.mappings.replace(prefix, replacement, index):
            emit_error(ctx, message=f"index {index} out of range (size {len(ctx.mappings)})")
            return 1
        return self._report_entry(ctx, index, "replaced")

    def _handle_set(self, ctx: DebuggerContext, prefix: str, replacement: str) -> int:
        if not ctx.mappings.replace_path(prefix, replacement):
            emit_error(ctx, message=f"no mapping for prefix {prefix}")
            return 1
        index = ctx.mappings.find_index_for_path(prefix)
        return self._report_entry(ctx, index if index is not None else -1, "updated")

    def _handle_remove(self, ctx: DebuggerContext, target: str, *, by_prefix: bool) -> int:
        index = None if by_prefix else _parse_index(target)
        if index is not None:
            removed = ctx.mappings.remove(index)
            label = f"index {index}"
        else:
            removed = ctx.mappings.remove_path(target)
            label = f"prefix {target}"
        if not removed:
            emit_error(ctx, message=f"no mapping for {label}")
            return 1
        emit_result(ctx, message=f"Removed mapping for {label}", data={"removed": target, "size": len(ctx.mappings)})
        return 0

    def _handle_list(self, ctx: DebuggerContext, index: Optional[int]) -> int:
        if index is not None:
            if ctx.mappings.get_paths_at_index(index) is None:
                emit_error(ctx, message=f"index {index} out of range (size {len(ctx.mappings)})")
                return 1
            if ctx.json_output:
                return self._report_entry(ctx, index, "listed")
            ctx.mappings.dump(index=index)
            return 0
        if ctx.json_output:
            emit_result(ctx, message="source map", data={"mappings": mapping_rows(ctx.mappings.snapshot()), "mod_id": ctx.mappings.mod_id})
        else:
            render_mapping_table(ctx)
        return 0

    def _handle_load(self, ctx: DebuggerContext, path: Optional[str]) -> int:
        try:
            added = ctx.load_map_file(path)
        except SourceMapError as exc:
            emit_error(ctx, message=str(exc))
            return 1
        emit_result(ctx, message=f"Loaded {added} mapping(s) from {ctx.map_file}", data={"added": added, "path": str(ctx.map_file)})
        return 0

    def _handle_save(self, ctx: DebuggerContext, path: Optional[str]) -> int:
        try:
            target = ctx.save_map_file(path)
        except SourceMapError as exc:
            emit_error(ctx, message=str(exc))
            return 1
        emit_result(ctx, message=f"Saved {len(ctx.mappings)} mapping(s) to {target}", data={"path": str(target), "count": len(ctx.mappings)})
        return 0

    def _handle_prefix_map(self, ctx: DebuggerContext, value: str) -> int:
        pairs = parse_prefix_map(value)
        if not pairs:
            emit_error(ctx, message=f"no old=new pairs in {value!r}")
            return 1
        for prefix, replacement in pairs:
            ctx.mappings.append(prefix, replacement)
        emit_result(ctx, message=f"Added {len(pairs)} mapping(s)", data={"added": len(pairs), "size": len(ctx.mappings)})
        return 0
