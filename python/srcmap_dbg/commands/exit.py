"""Exit command."""

from __future__ import annotations

import logging
from typing import List

from srcmap import SourceMapError

from .base import Command
from ..context import DebuggerContext
from ..output import emit_error

LOGGER = logging.getLogger("srcmap_dbg.commands.exit")


class ExitCommand(Command):
    def __init__(self) -> None:
        super().__init__("exit", "Exit the shell (saves the map file with --autosave)", aliases=("quit", "q"))

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        if ctx.autosave and ctx.map_file:
            try:
                ctx.save_map_file()
            except SourceMapError as exc:
                LOGGER.debug("final save failed: %s", exc)
                emit_error(ctx, message=f"could not save {ctx.map_file}: {exc}")
        raise SystemExit(0)
