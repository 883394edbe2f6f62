"""srcmap-dbg CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from srcmap import SourceMapError, parse_prefix_map

from .commands import CommandRegistry, build_registry
from .context import DebuggerContext
from .dispatch import execute_line, run_script
from .history import HistoryStore
from .repl import DebuggerREPL

LOG = logging.getLogger("srcmap_dbg.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _mapping_arg(text: str) -> tuple[str, str]:
    if "=" not in text:
        raise argparse.ArgumentTypeError(f"expected PREFIX=REPLACEMENT, got {text!r}")
    prefix, replacement = text.split("=", 1)
    if not prefix:
        raise argparse.ArgumentTypeError(f"empty prefix in {text!r}")
    return prefix, replacement


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Source path map shell")
    parser.add_argument("--json", action="store_true", help="Emit JSON output when supported")
    parser.add_argument("--log-level", default=os.environ.get("SRCMAP_LOG", "INFO"), help="Logging level (default INFO)")
    parser.add_argument(
        "--map-file",
        default=os.environ.get("SRCMAP_FILE"),
        help="JSON settings file loaded at startup (env SRCMAP_FILE)",
    )
    parser.add_argument(
        "--map",
        dest="mappings",
        action="append",
        default=[],
        type=_mapping_arg,
        metavar="PREFIX=REPLACEMENT",
        help="Append a mapping (repeatable)",
    )
    parser.add_argument("--prefix-map", help="Append mappings from a clang-style old=new[:old=new] string")
    parser.add_argument("--search-root", action="append", default=[], help="Directory searched by 'resolve' (repeatable)")
    parser.add_argument("--autosave", action="store_true", help="Rewrite the map file after every change")
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        help="Execute a command non-interactively (repeatable; quote the command string)",
    )
    parser.add_argument("--script", help="Execute commands from a script file, then exit")
    parser.add_argument(
        "--history",
        type=Path,
        default=Path.home() / ".srcmap-dbg-history",
        help="Path to command history file",
    )
    return parser


def build_context(args: argparse.Namespace) -> DebuggerContext:
    ctx = DebuggerContext(json_output=args.json, autosave=args.autosave)
    for root in args.search_root:
        ctx.add_search_root(root)
    if args.map_file:
        ctx.set_map_file(args.map_file)
        if ctx.map_file is not None and ctx.map_file.exists():
            ctx.load_map_file()
    pairs = list(args.mappings) + parse_prefix_map(args.prefix_map)
    for prefix, replacement in pairs:
        ctx.mappings.append(prefix, replacement, notify=False)
    return ctx


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    try:
        ctx = build_context(args)
    except SourceMapError as exc:
        print(f"error: {exc}")
        return 1
    LOG.debug("starting with %d mapping(s)", len(ctx.mappings))
    registry = build_registry()
    if args.script:
        return _run_script(ctx, registry, args.script)
    if args.command:
        return _run_commands(ctx, registry, args.command)
    repl = DebuggerREPL(ctx, registry, history_store=HistoryStore(str(args.history)))
    try:
        return repl.run()
    except SystemExit as exc:
        return int(exc.code or 0)
    except KeyboardInterrupt:
        print()
        return 0


def _run_commands(ctx: DebuggerContext, registry: CommandRegistry, commands: List[str]) -> int:
    for command_line in commands:
        try:
            rc = execute_line(ctx, registry, command_line)
        except SystemExit as exc:
            return int(exc.code or 0)
        if rc != 0:
            return rc
    return 0


def _run_script(ctx: DebuggerContext, registry: CommandRegistry, path: str) -> int:
    try:
        return run_script(ctx, registry, path)
    except SystemExit as exc:
        return int(exc.code or 0)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
