"""Completion tests for srcmap-dbg."""

from __future__ import annotations

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from srcmap_dbg.commands import build_registry
from srcmap_dbg.completion import DebuggerCompleter
from srcmap_dbg.context import DebuggerContext


def _complete(ctx: DebuggerContext, text: str) -> set[str]:
    completer = DebuggerCompleter(ctx, build_registry())
    doc = Document(text, cursor_position=len(text))
    return {c.text for c in completer.get_completions(doc, CompleteEvent())}


def _build_context() -> DebuggerContext:
    ctx = DebuggerContext()
    ctx.mappings.append("/build/src", "/home/me/src")
    ctx.mappings.append("/build/include", "/home/me/include")
    return ctx


def test_command_completion_offers_map():
    results = _complete(_build_context(), "ma")
    assert "map" in results


def test_command_completion_includes_user_aliases():
    ctx = _build_context()
    ctx.set_alias("sm", "map")
    assert "sm" in _complete(ctx, "s")


def test_map_subcommand_completion():
    results = _complete(_build_context(), "map re")
    assert results == {"remove", "replace"}


def test_prefix_completion_for_map_remove():
    results = _complete(_build_context(), "map remove /build/i")
    assert results == {"/build/include"}


def test_prefix_completion_follows_aliases():
    ctx = _build_context()
    ctx.set_alias("sm", "map")
    assert "/build/src" in _complete(ctx, "sm set /build/s")


def test_path_completion_for_map_load(tmp_path):
    (tmp_path / "demo.json").write_text("{}", encoding="utf-8")
    results = _complete(_build_context(), f"map load {tmp_path.as_posix()}/")
    assert "demo.json" in results


def test_remap_offers_known_prefixes():
    assert "/build/src" in _complete(_build_context(), "remap /build/s")
