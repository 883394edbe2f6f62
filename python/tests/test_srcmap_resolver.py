import pytest

from srcmap import SourceResolver


def test_resolve_prefers_mapping(source_tree, posix_list):
    mappings = posix_list(("/ci/checkout", str(source_tree)))
    resolver = SourceResolver(mappings)
    assert resolver.resolve("/ci/checkout/src/main.c") == str(source_tree / "src" / "main.c")


def test_resolve_uses_existing_request(source_tree, posix_list):
    resolver = SourceResolver(posix_list())
    target = source_tree / "include" / "util.h"
    assert resolver.resolve(target) == str(target)


def test_resolve_searches_roots_for_relative_paths(source_tree, posix_list):
    resolver = SourceResolver(posix_list(), search_roots=[source_tree])
    assert resolver.resolve("./src/main.c") == str(source_tree / "src" / "main.c")


def test_resolve_joins_roots_with_remapped_relative_path(source_tree, posix_list):
    mappings = posix_list(("gen", "src"))
    resolver = SourceResolver(mappings, search_roots=[str(source_tree)])
    assert resolver.resolve("gen/main.c") == str(source_tree / "src" / "main.c")


def test_candidates_order(posix_list, fake_exists):
    mappings = posix_list(("gen", "src"))
    resolver = SourceResolver(mappings, search_roots=["/r1"], exists=fake_exists([]))
    assert resolver.candidates("gen/a.c") == ["gen/a.c", "src/a.c", "/r1/gen/a.c", "/r1/src/a.c"]
    assert resolver.candidates("") == []


def test_resolve_raises_when_nothing_exists(posix_list, fake_exists):
    resolver = SourceResolver(posix_list(("/a", "/x"), exists=fake_exists([])), exists=fake_exists([]))
    with pytest.raises(FileNotFoundError):
        resolver.resolve("/a/f.c")
    with pytest.raises(FileNotFoundError):
        resolver.resolve("")


def test_add_search_root_deduplicates(posix_list):
    resolver = SourceResolver(posix_list())
    resolver.add_search_root("/r1")
    resolver.add_search_root("/r1")
    assert resolver.search_roots == ["/r1"]
