"""Path translation commands."""

from __future__ import annotations

import argparse
from typing import Callable, List, Optional

from .base import Command
from ..context import DebuggerContext
from ..output import emit_error, emit_result


class _TranslateCommand(Command):
    """Shared shape: one path in, one rewritten path (or a miss) out."""

    miss_message = "no mapping applies to {path}"

    def __init__(self, name: str, description: str, *, aliases=()) -> None:
        super().__init__(name, description, aliases=aliases)
        parser = argparse.ArgumentParser(prog=name, add_help=False)
        parser.add_argument("path")
        self._parser = parser

    def translate(self, ctx: DebuggerContext) -> Callable[[str], Optional[str]]:
        raise NotImplementedError

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        args = self.parse_args(self._parser, argv)
        if args is None:
            return 1
        result = self.translate(ctx)(args.path)
        if result is None:
            emit_error(ctx, message=self.miss_message.format(path=args.path), data={"path": args.path})
            return 1
        emit_result(ctx, message=f"{args.path} -> {result}", data={"path": args.path, "result": result})
        return 0


class RemapCommand(_TranslateCommand):
    def __init__(self) -> None:
        super().__init__("remap", "Rewrite a debug-info path to a local path")

    def translate(self, ctx: DebuggerContext) -> Callable[[str], Optional[str]]:
        return ctx.cache.remap_path


class ReverseCommand(_TranslateCommand):
    def __init__(self) -> None:
        super().__init__("reverse", "Rewrite a local path back to its debug-info form", aliases=("unmap",))

    def translate(self, ctx: DebuggerContext) -> Callable[[str], Optional[str]]:
        return ctx.cache.reverse_remap_path


class FindCommand(_TranslateCommand):
    miss_message = "no mapping yields an existing file for {path}"

    def __init__(self) -> None:
        super().__init__("find", "Rewrite a path and require the result to exist")

    def translate(self, ctx: DebuggerContext) -> Callable[[str], Optional[str]]:
        # existence can change without the map changing
        return ctx.mappings.find_file


class ResolveCommand(Command):
    def __init__(self) -> None:
        super().__init__("resolve", "Locate a source file via mappings and search roots")
        parser = argparse.ArgumentParser(prog="resolve", add_help=False)
        parser.add_argument("path")
        parser.add_argument("--root", action="append", default=[], help="Extra search root")
        parser.add_argument("--candidates", action="store_true", help="List probed candidates")
        self._parser = parser

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        args = self.parse_args(self._parser, argv)
        if args is None:
            return 1
        for root in args.root:
            ctx.add_search_root(root)
        resolver = ctx.resolver
        candidates = resolver.candidates(args.path)
        if args.candidates and not ctx.json_output:
            print("candidates:")
            for entry in candidates:
                print(f"  {entry}")
        try:
            found = resolver.resolve(args.path)
        except FileNotFoundError:
            emit_error(ctx, message=f"cannot locate {args.path}", data={"path": args.path, "candidates": candidates})
            return 1
        emit_result(ctx, message=f"{args.path} -> {found}", data={"path": args.path, "result": found, "candidates": candidates})
        return 0
