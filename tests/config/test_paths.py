"""Tests for configuration path resolution helpers."""

from pathlib import Path

from winpath.config.paths import (
    default_config_dir,
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = portable_repo_root / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "winpath.log"


def test_default_config_path(portable_repo_root: Path) -> None:
    assert default_config_dir() == portable_repo_root / "config"
    assert default_config_path() == portable_repo_root / "config" / "config.toml"


def test_config_dir_environment_override(portable_repo_root: Path, tmp_path: Path) -> None:
    override = tmp_path / "elsewhere"
    env = {"WINPATH_CONFIG_DIR": str(override)}

    assert default_config_dir(env) == override.resolve()
    assert default_config_path(env) == (override / "config.toml").resolve()
    assert default_config_dir({"WINPATH_CONFIG_DIR": "   "}) == portable_repo_root / "config"


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env={"ANY": str(tmp_path / "env")},
        env_var="ANY",
        default_factory=lambda: tmp_path / "default",
    )
    assert resolved == (tmp_path / "explicit").resolve()
