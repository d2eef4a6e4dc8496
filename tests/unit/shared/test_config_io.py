"""Tests for config I/O utilities."""

from pathlib import Path

import pytest

from searchscope.domain.config import FilesConfig, SearchConfig, SearchScopeConfig
from searchscope.shared.config_io import (
    config_to_data,
    get_folder_config_path,
    get_global_config_path,
    load_config_data,
    save_config,
)


class TestConfigPaths:
    def test_global_path_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("platform.system", lambda: "Linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_global_config_path() == tmp_path / "searchscope" / "config.toml"

    def test_global_path_falls_back_to_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("platform.system", lambda: "Linux")
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_global_config_path() == tmp_path / ".config" / "searchscope" / "config.toml"

    def test_global_path_windows_appdata(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("platform.system", lambda: "Windows")
        monkeypatch.setenv("APPDATA", str(tmp_path))
        assert get_global_config_path() == tmp_path / "searchscope" / "config.toml"

    def test_folder_path(self):
        assert get_folder_config_path(Path("/ws/app")) == Path("/ws/app/.searchscope/config.toml")


class TestLoadConfigData:
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config_data(tmp_path / "config.toml")

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text("[search\n")
        with pytest.raises(ValueError, match="Invalid TOML"):
            load_config_data(path)


class TestSaveAndLoad:
    def test_saved_config_loads_back_equal(self, tmp_path: Path):
        config = SearchScopeConfig(
            search=SearchConfig(use_ripgrep=False, exclude={"**/dist": True, "**/tmp": False}),
            files=FilesConfig(encoding="latin1", exclude={}),
        )
        path = tmp_path / "nested" / "config.toml"

        save_config(config, path)

        assert path.exists()
        loaded = SearchScopeConfig.from_partial(SearchScopeConfig.default(), load_config_data(path))
        assert loaded.search == config.search
        assert loaded.files.encoding == "latin1"
        assert loaded.editor == config.editor

    def test_partial_file_keeps_defaults(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text("[search]\nfollow_symlinks = false\n")

        loaded = SearchScopeConfig.from_partial(SearchScopeConfig.default(), load_config_data(path))

        assert loaded.search.follow_symlinks is False
        assert loaded.search.exclude == SearchScopeConfig.default().search.exclude
        assert loaded.files == SearchScopeConfig.default().files

    def test_config_to_data_sections(self):
        data = config_to_data(SearchScopeConfig.default())
        assert set(data) == {"search", "files", "editor"}
        assert data["search"]["exclude"]["**/node_modules"] is True
        assert data["files"]["encoding"] == "utf8"
