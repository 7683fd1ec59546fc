"""Tests for slash inspection helpers."""

import pytest

from winpath.features.filepath.domain.slashes import (
    first_delimiter,
    has_mixed_slashes,
    has_trailing_slash,
    split_segments,
)


def test_has_mixed_slashes() -> None:
    assert has_mixed_slashes("a\\b/c")
    assert not has_mixed_slashes("a/b/c")
    assert not has_mixed_slashes("a\\b\\c")
    assert not has_mixed_slashes("")


@pytest.mark.parametrize(
    ("path", "expected"),
    [("a\\", True), ("a/", True), ("a", False), ("", False), ("\\a", False)],
)
def test_has_trailing_slash(path: str, expected: bool) -> None:
    assert has_trailing_slash(path) is expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a//b\\c/", ["a", "b", "c"]),
        ("", []),
        ("///", []),
        ("\\\\server\\share", ["server", "share"]),
        ("not a path", ["not a path"]),
    ],
)
def test_split_segments(path: str, expected: list[str]) -> None:
    assert split_segments(path) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a/b\\c", "/"),
        ("a\\b/c", "\\"),
        ("\\\\server/share", "/"),
        ("dir/", "/"),
        ("abc", None),
        ("/abc", None),
        ("", None),
    ],
)
def test_first_delimiter(path: str, expected: str | None) -> None:
    """The delimiter is the slash after the first component, skipping leading slashes."""

    assert first_delimiter(path) == expected
