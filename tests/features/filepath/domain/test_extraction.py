"""Tests for drive, domain and local path extraction."""

import pytest

from winpath.features.filepath.domain.extraction import (
    UncParts,
    WindowsParts,
    extract_domain_name,
    extract_drive_letter,
    extract_unc_parts,
    extract_windows_parts,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (r"c:\local\path", WindowsParts("c", r"\local\path")),
        ("file:///c:/local/path", WindowsParts("c", "/local/path")),
        (r"FileSystem::d:\a", WindowsParts("d", r"\a")),
        ("c:", WindowsParts("c", "")),
        ("ab:x", WindowsParts("ab", "x")),
        ("relative", WindowsParts(None, None)),
        (r"\\server\share", WindowsParts(None, None)),
    ],
)
def test_extract_windows_parts(path: str, expected: WindowsParts) -> None:
    assert extract_windows_parts(path) == expected


def test_empty_drive_letter_is_not_absent() -> None:
    """A colon with nothing before it yields an empty, present drive letter."""

    parts = extract_windows_parts(r":\x")
    assert parts.drive_letter == ""
    assert parts.drive_letter is not None
    assert parts.local_path == r"\x"


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (r"\\domain.name\c$\local\path", UncParts("domain.name", "c", r"\local\path")),
        (r"\\domain.name\local\path", UncParts("domain.name", None, r"\local\path")),
        ("file://domain.name/c$/local/path", UncParts("domain.name", "c", "/local/path")),
        (r"FileSystem::\\server\d$", UncParts("server", "d", "")),
        (r"\\server", UncParts("server", None, "")),
        (r"\\server\share$\x", UncParts("server", None, r"\share$\x")),
        (r"\\server\x\c$", UncParts("server", None, r"\x\c$")),
        (r"c:\x", UncParts(None, None, None)),
    ],
)
def test_extract_unc_parts(path: str, expected: UncParts) -> None:
    assert extract_unc_parts(path) == expected


def test_empty_domain_name_is_not_absent() -> None:
    """Three leading slashes give an empty domain, distinct from a missing one."""

    parts = extract_unc_parts("\\\\\\x")
    assert parts.domain_name == ""
    assert parts.local_path == r"\x"
    assert extract_unc_parts("x").domain_name is None


def test_single_part_helpers() -> None:
    assert extract_drive_letter(r"c:\x") == "c"
    assert extract_drive_letter("x") is None
    assert extract_domain_name(r"\\host\x") == "host"
    assert extract_domain_name(r"c:\x") is None
