"""
Pytest configuration and fixtures for srcmap tests.
"""
from pathlib import Path
from typing import Callable, Iterable, Set

import pytest

from srcmap import PathMappingList, PathStyle


@pytest.fixture
def fake_exists() -> Callable[[Iterable[str]], Callable[[str], bool]]:
    """Build an existence probe that only knows the given paths."""

    def factory(paths: Iterable[str]) -> Callable[[str], bool]:
        known: Set[str] = set(paths)
        return lambda candidate: candidate in known

    return factory


@pytest.fixture
def posix_list() -> Callable[..., PathMappingList]:
    """PathMappingList factory pinned to POSIX semantics."""

    def factory(*pairs, **kwargs) -> PathMappingList:
        kwargs.setdefault("style", PathStyle.POSIX)
        mappings = PathMappingList(**kwargs)
        for prefix, replacement in pairs:
            mappings.append(prefix, replacement, notify=False)
        return mappings

    return factory


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """
    Small on-disk tree:

        <tmp>/checkout/src/main.c
        <tmp>/checkout/include/util.h
    """
    root = tmp_path / "checkout"
    (root / "src").mkdir(parents=True)
    (root / "include").mkdir()
    (root / "src" / "main.c").write_text("int main(void) { return 0; }\n", encoding="utf-8")
    (root / "include" / "util.h").write_text("#pragma once\n", encoding="utf-8")
    return root
