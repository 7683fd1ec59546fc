"""Test configuration management."""

from pathlib import Path

import pytest

from winpath.config.config import Config
from winpath.config.paths import default_config_path


def test_default_config(portable_repo_root: Path) -> None:
    """Test default configuration creation at portable repo location."""
    _ = portable_repo_root
    config = Config()
    assert config.log_file is None
    assert config.default_delimiter == "\\"
    assert config.output_format == "text"

    config.save()
    assert default_config_path().exists()


def test_load_creates_default_file(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    assert not default_config_path().exists()

    loaded = Config.load()

    assert default_config_path().exists()
    assert loaded.default_delimiter == "\\"


def test_save_load_toml(portable_repo_root: Path) -> None:
    """Backslashes and paths survive a save and reload."""
    _ = portable_repo_root
    original = Config(
        log_file=Path("/test/logs/winpath.log"),
        default_delimiter="\\",
        output_format="json",
    )
    original.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.log_file == Path("/test/logs/winpath.log")
    assert loaded.default_delimiter == "\\"
    assert loaded.output_format == "json"


def test_saved_file_is_commented(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    Config(default_delimiter="/").save()

    content = default_config_path().read_text(encoding="utf-8")
    assert content.startswith("# winpath Configuration File")
    assert 'default_delimiter = "/"' in content
    assert "log_file =" not in content.replace("# Example: log_file =", "")


def test_empty_log_file_loads_as_none(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text('log_file = "  "\n', encoding="utf-8")

    assert Config.load().log_file is None


def test_unknown_keys_are_ignored(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text('output_format = "json"\nbase_path = "/music"\n', encoding="utf-8")

    loaded = Config.load()

    assert loaded.output_format == "json"
    assert not hasattr(loaded, "base_path")


def test_malformed_toml_raises(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text("output_format = \n", encoding="utf-8")

    with pytest.raises(ValueError):
        _ = Config.load()


def test_singleton_behavior(portable_repo_root: Path) -> None:
    """Repeated loads return the cached instance."""
    _ = portable_repo_root
    first = Config.load()
    first.output_format = "json"

    second = Config.load()

    assert second is first
    assert second.output_format == "json"
