"""Tests for config discovery and data-directory resolution."""

from pathlib import Path

import pytest

from skillmgr.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    find_config,
    resolve_data_dir,
)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[storage]\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[storage]\n")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("[server]\nport = 9000\n")
        (tmp_path / CONFIG_FILENAME).write_text("[storage]\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[storage]\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestResolveDataDir:
    def test_relative(self, tmp_path: Path) -> None:
        assert resolve_data_dir(Path("data"), tmp_path) == tmp_path / "data"

    def test_absolute(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere"
        assert resolve_data_dir(target, Path("/unused")) == target

    def test_dot(self, tmp_path: Path) -> None:
        assert resolve_data_dir(Path("."), tmp_path) == tmp_path
