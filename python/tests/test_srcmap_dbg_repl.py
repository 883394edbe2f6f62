"""REPL loop tests for srcmap-dbg (prompt replaced by a scripted stub)."""

from __future__ import annotations

from typing import Iterable, List

import pytest

from srcmap_dbg.commands import build_registry
from srcmap_dbg.context import DebuggerContext
from srcmap_dbg.history import HistoryStore
from srcmap_dbg.repl import DebuggerREPL


class ScriptedSession:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: List[str] = list(lines)

    def prompt(self) -> str:
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


def test_repl_dispatches_and_records_history(tmp_path):
    ctx = DebuggerContext()
    history = HistoryStore(str(tmp_path / "history"))
    session = ScriptedSession(["map add /a /x", "", "map add \\", "/b /y", "remap /a/f.c"])
    repl = DebuggerREPL(ctx, build_registry(), history_store=history, session=session)  # type: ignore[arg-type]
    assert repl.run() == 0
    assert ctx.mappings.to_list() == [["/a", "/x"], ["/b", "/y"]]
    assert history.snapshot() == ["map add /a /x", "map add  /b /y", "remap /a/f.c"]


def test_repl_exit_command_raises_system_exit():
    ctx = DebuggerContext()
    repl = DebuggerREPL(ctx, build_registry(), session=ScriptedSession(["exit", "map add /a /x"]))  # type: ignore[arg-type]
    with pytest.raises(SystemExit) as excinfo:
        repl.run()
    assert excinfo.value.code == 0
    assert len(ctx.mappings) == 0
