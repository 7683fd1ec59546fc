"""Tests for "." and ".." resolution."""

import pytest

from winpath.features.filepath.domain.errors import SegmentResolutionError
from winpath.features.filepath.usecases.resolver import resolve_path, resolve_segments


@pytest.mark.parametrize(
    ("segments", "expected"),
    [
        (["a", "..", "b"], ["b"]),
        (["a", "b", ".", "c"], ["a", "b", "c"]),
        (["a", ".."], []),
        ([".", "."], []),
        ([], []),
        (["a", "b", "..", "..", "c"], ["c"]),
    ],
)
def test_resolve_segments(segments: list[str], expected: list[str]) -> None:
    resolved = resolve_segments(segments)
    assert resolved == expected
    assert "." not in resolved
    assert ".." not in resolved


def test_too_many_parent_segments() -> None:
    with pytest.raises(SegmentResolutionError) as excinfo:
        _ = resolve_segments(["..", "a"])
    assert excinfo.value.segments == ("..", "a")
    assert excinfo.value.path is None


def test_resolve_windows_path() -> None:
    assert resolve_path(r"c:\a\..\b") == r"c:\b"
    assert resolve_path("file:///c:/a/./b") == "file:///c:/a/b"


def test_resolve_unc_path_keeps_share_and_trailing_slash() -> None:
    assert resolve_path("\\\\server\\c$\\a\\.\\b\\..\\c\\") == "\\\\server\\c$\\a\\c\\"


def test_resolve_unknown_path() -> None:
    assert resolve_path("a\\.\\b") == "a\\b"
    assert resolve_path("./a") == "a"


def test_resolve_path_error_names_the_path() -> None:
    with pytest.raises(SegmentResolutionError, match="x/../..") as excinfo:
        _ = resolve_path("x/../..")
    assert excinfo.value.path == "x/../.."
