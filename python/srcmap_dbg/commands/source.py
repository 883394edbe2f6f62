"""Run a command script."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING, List

from .base import Command
from ..context import DebuggerContext
from ..dispatch import run_script

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry


class SourceCommand(Command):
    def __init__(self) -> None:
        super().__init__("source", "Run commands from a script file")
        parser = argparse.ArgumentParser(prog="source", add_help=False)
        parser.add_argument("path")
        self._parser = parser
        self._registry: CommandRegistry | None = None

    def bind(self, registry: "CommandRegistry") -> None:
        self._registry = registry

    def run(self, ctx: DebuggerContext, argv: List[str]) -> int:
        args = self.parse_args(self._parser, argv)
        if args is None or self._registry is None:
            return 1
        return run_script(ctx, self._registry, args.path)
