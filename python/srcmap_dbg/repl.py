"""Interactive REPL for srcmap-dbg."""

from __future__ import annotations

import logging
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout

from .commands import CommandRegistry
from .completion import DebuggerCompleter
from .context import DebuggerContext
from .dispatch import execute_line
from .history import HistoryStore

LOGGER = logging.getLogger("srcmap_dbg.repl")


class DebuggerREPL:
    """prompt_toolkit REPL with backslash line continuation."""

    prompt = "(srcmap) "

    def __init__(
        self,
        ctx: DebuggerContext,
        registry: CommandRegistry,
        *,
        history_store: Optional[HistoryStore] = None,
        session: Optional[PromptSession] = None,
    ) -> None:
        self.ctx = ctx
        self.registry = registry
        self.history_store = history_store
        self._session = session

    def _build_session(self) -> PromptSession:
        history = InMemoryHistory()
        if self.history_store:
            for entry in self.history_store.snapshot():
                history.append_string(entry)
        completer = DebuggerCompleter(self.ctx, self.registry)
        return PromptSession(self.prompt, history=history, completer=completer, complete_while_typing=True)

    def run(self) -> int:
        session = self._session or self._build_session()
        buffer: List[str] = []
        while True:
            try:
                with patch_stdout():
                    line = session.prompt()
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
            if self._handle_multiline(buffer, line):
                continue
            payload = " ".join(buffer) if buffer else line
            buffer.clear()
            self._record_history(payload)
            self._dispatch(payload)

    def _dispatch(self, line: str) -> int:
        if not line.strip():
            return 0
        rc = execute_line(self.ctx, self.registry, line)
        LOGGER.debug("%r -> rc=%d", line, rc)
        return rc

    @staticmethod
    def _handle_multiline(buffer: List[str], line: str) -> bool:
        stripped = line.rstrip()
        if stripped.endswith("\\"):
            buffer.append(stripped[:-1])
            return True
        if buffer:
            buffer.append(stripped)
        return False

    def _record_history(self, entry: str) -> None:
        stripped = entry.strip()
        if stripped and self.history_store:
            self.history_store.append(stripped)
