import pytest

from srcmap.paths import PathStyle, append_path_component, is_relative, normalize_path

POSIX = PathStyle.POSIX
WINDOWS = PathStyle.WINDOWS


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        (".", "."),
        ("./", "."),
        ("./foo/bar.c", "foo/bar.c"),
        ("/a//b///c", "/a/b/c"),
        ("/a/b/", "/a/b"),
        ("/a/./b/../c", "/a/c"),
        ("a/../..", ".."),
        ("/..", "/"),
        ("/", "/"),
        ("foo/..", "."),
    ],
)
def test_normalize_posix(raw, expected):
    assert normalize_path(raw, POSIX) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "",
        ".",
        "./foo/bar.c",
        "/a//b/../c/",
        "../../x",
        "a/./b/",
        "//server/share",
        "C:/x",
        "./C:.",
        "foo/../C:/x",
        "a/../C:",
    ],
)
def test_normalize_is_idempotent(raw):
    for style in (POSIX, WINDOWS):
        once = normalize_path(raw, style)
        assert normalize_path(once, style) == once


def test_normalize_windows_separators_and_drive():
    assert normalize_path("C:/build/./src//main.c", WINDOWS) == "C:\\build\\src\\main.c"
    assert normalize_path("C:\\build\\..\\x", WINDOWS) == "C:\\x"


def test_normalize_none_is_empty():
    assert normalize_path(None, POSIX) == ""


def test_is_relative():
    assert is_relative("foo/bar.c", POSIX)
    assert is_relative(".", POSIX)
    assert is_relative("", POSIX)
    assert not is_relative("/usr/src", POSIX)
    assert not is_relative("C:\\src", WINDOWS)
    assert is_relative("src\\main.c", WINDOWS)


def test_append_keeps_base_for_rooted_component():
    assert append_path_component("/tmp", "/foo/bar.c", POSIX) == "/tmp/foo/bar.c"
    assert append_path_component("/new/root", "foo/bar.c", POSIX) == "/new/root/foo/bar.c"


def test_append_with_empty_sides():
    assert append_path_component("/tmp/", "", POSIX) == "/tmp"
    assert append_path_component("", "./foo", POSIX) == "foo"
    assert append_path_component("/", "x", POSIX) == "/x"


def test_append_windows():
    assert append_path_component("D:\\src", "/lib/a.c", WINDOWS) == "D:\\src\\lib\\a.c"


def test_normalize_windows_keeps_folded_drive_lookalike_relative():
    assert normalize_path("foo/../C:/x", WINDOWS) == ".\\C:\\x"
    assert is_relative(normalize_path("foo/../C:/x", WINDOWS), WINDOWS)
    assert normalize_path("./C:.", WINDOWS) == ".\\C:."
