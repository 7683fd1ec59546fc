"""Tests for one-shot type and scheme conversion."""

import pytest

from winpath.features.filepath.domain.errors import ArgumentCombinationError
from winpath.features.filepath.domain.models import FilePathType, Scheme
from winpath.features.filepath.usecases.converter import reformat_path


def test_administrative_share_to_windows() -> None:
    converted = reformat_path("\\\\domain.name\\c$\\local\\path", FilePathType.WINDOWS)
    assert converted == "c:\\local\\path"


def test_unc_without_drive_letter_cannot_become_windows() -> None:
    with pytest.raises(ArgumentCombinationError, match="no drive letter"):
        _ = reformat_path("\\\\domain.name\\local\\path", FilePathType.WINDOWS)


def test_windows_cannot_become_unc() -> None:
    with pytest.raises(ArgumentCombinationError, match="no domain name") as excinfo:
        _ = reformat_path(r"c:\local\path", FilePathType.UNC)
    assert excinfo.value.file_path_type is FilePathType.UNC


def test_scheme_only_conversion_keeps_type() -> None:
    assert reformat_path(r"c:\local\path", scheme=Scheme.FILE_URI) == "file:///c:/local/path"
    assert (
        reformat_path("file://domain.name/c$/x/", scheme=Scheme.LONG_PREFIXED)
        == "Microsoft.PowerShell.Core\\FileSystem::\\\\domain.name\\c$\\x\\"
    )
    assert (
        reformat_path(r"FileSystem::\\host\share", scheme=Scheme.PLAIN) == r"\\host\share"
    )


def test_defaults_reproduce_the_input_notation() -> None:
    assert reformat_path("file:///d:/a/b") == "file:///d:/a/b"
    assert reformat_path("a/b/c") == "a/b/c"


def test_unknown_paths_take_a_new_delimiter() -> None:
    assert reformat_path("a/b/c", delimiter="\\") == r"a\b\c"


def test_unknown_target_needs_a_delimiter() -> None:
    with pytest.raises(ArgumentCombinationError):
        _ = reformat_path(r"c:\a", FilePathType.UNKNOWN)
    assert reformat_path(r"c:\a\b", FilePathType.UNKNOWN, delimiter="/") == "a/b"
