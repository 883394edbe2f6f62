"""Command dispatch shared by the REPL, ``-c`` and script files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .context import DebuggerContext
from .parser import is_parse_error, iter_script_commands, split_command

if TYPE_CHECKING:  # pragma: no cover
    from .commands import CommandRegistry

LOGGER = logging.getLogger("srcmap_dbg.dispatch")


def execute_line(ctx: DebuggerContext, registry: "CommandRegistry", line: str) -> int:
    """Run one command line and return its exit code."""
    argv = split_command(line.strip())
    if not argv:
        return 0
    if is_parse_error(argv):
        print(f"Parse error: {argv[1].split(':', 1)[-1]}")
        return 1
    cmd_name, *cmd_args = argv
    cmd_name = ctx.resolve_alias(cmd_name)
    command = registry.get(cmd_name)
    if not command:
        print(f"Unknown command: {cmd_name}")
        return 1
    try:
        return command.run(ctx, cmd_args)
    except SystemExit:
        raise
    except Exception as exc:
        LOGGER.exception("command failed")
        print(f"Command '{cmd_name}' failed: {exc}")
        return 1


def run_script(ctx: DebuggerContext, registry: "CommandRegistry", path: str) -> int:
    """Execute the commands in *path*, stopping at the first failure."""
    script = Path(path).expanduser()
    try:
        text = script.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"error: cannot read script {script}: {exc}")
        return 1
    for number, line in iter_script_commands(text.splitlines()):
        rc = execute_line(ctx, registry, line)
        if rc != 0:
            print(f"error: {script}:{number}: '{line}' failed (rc={rc})")
            return rc
    return 0
