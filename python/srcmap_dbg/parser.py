"""Command-line and script parsing helpers for srcmap-dbg."""

from __future__ import annotations

import shlex
from typing import Iterable, Iterator, List, Tuple

PARSE_ERROR = "#parse-error"


def split_command(line: str) -> List[str]:
    """Split a command line into argv tokens using shlex rules.

    Unbalanced quotes yield ``[line, "#parse-error:<reason>"]`` so callers
    can report the problem instead of crashing.
    """
    if not line:
        return []
    try:
        return shlex.split(line, comments=False, posix=True)
    except ValueError as exc:
        return [line.strip(), f"{PARSE_ERROR}:{exc}"]


def is_parse_error(argv: List[str]) -> bool:
    return len(argv) == 2 and argv[1].startswith(PARSE_ERROR)


def iter_script_commands(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, command)`` from script text.

    Blank lines and ``#`` comments are skipped; a trailing backslash joins
    the next line.
    """
    pending: List[str] = []
    start = 0
    for number, raw in enumerate(lines, start=1):
        stripped = raw.strip()
        if not pending and (not stripped or stripped.startswith("#")):
            continue
        if not pending:
            start = number
        if stripped.endswith("\\"):
            pending.append(stripped[:-1].strip())
            continue
        pending.append(stripped)
        yield start, " ".join(part for part in pending if part)
        pending = []
    if pending:
        yield start, " ".join(part for part in pending if part)
