"""Tests for CLI functionality."""

import json
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from winpath.config.config import Config
from winpath.ui.cli import CommandProcessor, main


@pytest.fixture(autouse=True)
def isolated_config(mocker: MockerFixture) -> MagicMock:
    """Keep CLI runs away from the real configuration and log files."""

    mock_config = mocker.patch("winpath.ui.cli.args.parser.Config")
    mock_config.load.return_value = Config()
    _ = mocker.patch("winpath.ui.cli.args.parser.setup_logger")
    return mock_config


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    """Create a mock logger.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock logger instance.
    """
    return mocker.patch("winpath.ui.cli.cli.logger")


def _run(args: list[str]) -> None:
    CommandProcessor.process_command(args)


def test_classify(capsys: pytest.CaptureFixture[str]) -> None:
    _run(["classify", r"FileSystem::\\host\c$\x"])

    out = capsys.readouterr().out.splitlines()
    assert out == ["type: unc", "scheme: short-prefixed"]


def test_classify_unknown(capsys: pytest.CaptureFixture[str]) -> None:
    _run(["classify", "just/relative"])

    out = capsys.readouterr().out.splitlines()
    assert out == ["type: unknown", "scheme: unknown"]


def test_validate_success(capsys: pytest.CaptureFixture[str]) -> None:
    _run(["validate", r"c:\dir\file.txt"])
    assert capsys.readouterr().out.strip() == "valid"


def test_validate_failure_exits_with_reason(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(["validate", r"c:\dir\CON"])

    assert excinfo.value.code == 1
    assert capsys.readouterr().out.strip() == "invalid: invalid segment: reserved device name (CON)"


def test_validate_unc_failure_reports_unc_reason(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        _run(["validate", r"\\bad_host!\share"])

    assert "invalid domain name" in capsys.readouterr().out


def test_validate_fragment(capsys: pytest.CaptureFixture[str]) -> None:
    _run(["validate", "--fragment", "a/../b"])
    assert capsys.readouterr().out.strip() == "valid"

    with pytest.raises(SystemExit):
        _run(["validate", "--fragment", "../b"])
    assert "climbs above" in capsys.readouterr().out


def test_parse_json(capsys: pytest.CaptureFixture[str]) -> None:
    _run(["parse", "--json", "file:///c:/dir/"])

    fields = json.loads(capsys.readouterr().out)
    assert fields["file_path_type"] == "windows"
    assert fields["scheme"] == "file-uri"
    assert fields["segments"] == ["dir"]
    assert fields["trailing_slash"] is True
    assert fields["domain_name"] is None


def test_parse_table(capsys: pytest.CaptureFixture[str]) -> None:
    _run(["parse", "a/b"])

    out = capsys.readouterr().out
    assert "file_path_type" in out
    assert "<absent>" in out


def test_format(capsys: pytest.CaptureFixture[str]) -> None:
    _run(["format", "--type", "unc", "--domain", "host", "--drive", "c", "a", "b"])
    assert capsys.readouterr().out.strip() == r"\\host\c$\a\b"


def test_format_argument_error(mock_logger: MagicMock) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(["format", "--type", "unknown", "a"])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once()


def test_reformat(capsys: pytest.CaptureFixture[str]) -> None:
    _run(["reformat", r"\\domain.name\c$\local\path", "--type", "windows"])
    assert capsys.readouterr().out.strip() == r"c:\local\path"


def test_join_uses_configured_delimiter(
    capsys: pytest.CaptureFixture[str], isolated_config: MagicMock
) -> None:
    isolated_config.load.return_value = Config(default_delimiter="/")

    _run(["join", "$root", "a", "b"])
    assert capsys.readouterr().out.strip() == "$root/a/b"


def test_resolve(capsys: pytest.CaptureFixture[str]) -> None:
    _run(["resolve", r"c:\a\..\b"])
    assert capsys.readouterr().out.strip() == r"c:\b"

    _run(["resolve", "--segments", "a", ".", "b", "..", "c"])
    assert capsys.readouterr().out.splitlines() == ["a", "c"]


def test_resolve_error(mock_logger: MagicMock) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(["resolve", "x/../.."])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once()


def test_keyboard_interrupt(mocker: MockerFixture, mock_logger: MagicMock) -> None:
    _ = mocker.patch.object(CommandProcessor, "_execute", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as excinfo:
        _run(["classify", "x"])

    assert excinfo.value.code == 130
    mock_logger.info.assert_called_once()


def test_unexpected_error(mocker: MockerFixture, mock_logger: MagicMock) -> None:
    _ = mocker.patch.object(CommandProcessor, "_execute", side_effect=RuntimeError("boom"))

    with pytest.raises(SystemExit) as excinfo:
        _run(["classify", "x"])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "boom")


def test_main_returns_zero(mocker: MockerFixture) -> None:
    _ = mocker.patch("sys.argv", ["winpath", "classify", "c:"])
    assert main() == 0
