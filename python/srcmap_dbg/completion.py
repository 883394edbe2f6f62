"""prompt_toolkit completer for srcmap-dbg."""

from __future__ import annotations

import shlex
from typing import Iterable, List

from prompt_toolkit.completion import CompleteEvent, Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

from .commands import CommandRegistry
from .context import DebuggerContext

MAP_SUBCOMMANDS = ("add", "clear", "insert", "list", "load", "prefix-map", "remove", "replace", "save", "set")
_PREFIX_SUBCMDS = {"remove", "set"}
_FILE_SUBCMDS = {"load", "save"}
PATH_COMMANDS = {"source", "remap", "reverse", "find", "resolve"}


def _normalise_tokens(text: str) -> List[str]:
    if not text:
        return []
    try:
        tokens = shlex.split(text, posix=True)
        trailing = text[-1].isspace()
    except ValueError:
        tokens = text.strip().split()
        trailing = text.endswith((" ", "\t"))
    if trailing:
        tokens.append("")
    return tokens


class DebuggerCompleter(Completer):
    """Completes command names, map subcommands, mapped prefixes and files."""

    def __init__(self, ctx: DebuggerContext, registry: CommandRegistry) -> None:
        self.ctx = ctx
        self.registry = registry
        self._path = PathCompleter(expanduser=True)

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        tokens = _normalise_tokens(document.text_before_cursor)
        if len(tokens) <= 1:
            prefix = tokens[0] if tokens else ""
            yield from self._complete(self._command_names(), prefix)
            return
        prefix = tokens[-1]
        command = self.ctx.resolve_alias(tokens[0])
        if command in ("map", "source-map"):
            yield from self._map_completions(tokens, prefix, document, complete_event)
            return
        if command in PATH_COMMANDS and len(tokens) == 2:
            yield from self._complete(self.ctx.prefix_completions(prefix), prefix)
            yield from self._path_completions(prefix, complete_event)

    def _map_completions(
        self,
        tokens: List[str],
        prefix: str,
        document: Document,
        complete_event: CompleteEvent,
    ) -> Iterable[Completion]:
        if len(tokens) == 2:
            yield from self._complete(MAP_SUBCOMMANDS, prefix)
            return
        subcmd = tokens[1]
        if subcmd in _PREFIX_SUBCMDS and len(tokens) == 3:
            yield from self._complete(self.ctx.prefix_completions(prefix), prefix)
            return
        if subcmd in _FILE_SUBCMDS and len(tokens) == 3:
            yield from self._path_completions(prefix, complete_event)

    def _path_completions(self, prefix: str, complete_event: CompleteEvent) -> Iterable[Completion]:
        sub_document = Document(prefix, cursor_position=len(prefix))
        yield from self._path.get_completions(sub_document, complete_event)

    def _command_names(self) -> List[str]:
        names: List[str] = []
        for command in self.registry.list_commands():
            names.append(command.name)
            names.extend(command.aliases)
        names.extend(self.ctx.aliases)
        return sorted(set(names))

    @staticmethod
    def _complete(candidates: Iterable[str], prefix: str) -> Iterable[Completion]:
        for entry in sorted(dict.fromkeys(c for c in candidates if c.startswith(prefix))):
            yield Completion(entry, start_position=-len(prefix))
