"""Tests for common.config module."""

from pathlib import Path

import pytest

from common import config as config_module
from common.config import AppConfig, ConfigSingleton, _parse_config, find_config_path, load_config


class TestFindConfigPath:
    def test_returns_named_config(self, tmp_path: Path) -> None:
        (tmp_path / "dev.yaml").write_text("{}")
        assert find_config_path("dev", tmp_path) == tmp_path / "dev.yaml"

    def test_env_var_used_when_name_missing(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "staging.yaml").write_text("{}")
        monkeypatch.setenv("NEWS_CONFIG", "staging")
        assert find_config_path(None, tmp_path, env_var="NEWS_CONFIG") == tmp_path / "staging.yaml"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            find_config_path("nope", tmp_path)


class TestParseConfig:
    def test_defaults(self) -> None:
        config = _parse_config({}, api_key=None)
        assert config.upstream.page_size == 100
        assert config.fetch.default_category == "general"
        assert config.fetch.fallback_query == "news"
        assert config.fetch.default_window_days == 7
        assert config.search.detect_locations is False

    def test_overrides(self) -> None:
        config = _parse_config(
            {"upstream": {"page_size": 20}, "search": {"detect_locations": True}},
            api_key="secret",
        )
        assert config.upstream.page_size == 20
        assert config.upstream.api_key == "secret"
        assert config.search.detect_locations is True


class TestLoadConfig:
    def test_reads_yaml_and_env_key(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "local.yaml").write_text("upstream:\n  request_timeout: 3\n")
        monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path)
        monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
        monkeypatch.setenv("NEWS_API_KEY", "abc")

        config = load_config("local")

        assert config.upstream.request_timeout == 3
        assert config.upstream.api_key == "abc"

    def test_empty_env_key_is_none(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "local.yaml").write_text("")
        monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path)
        monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
        monkeypatch.setenv("NEWS_API_KEY", "")

        assert load_config("local").upstream.api_key is None


class TestConfigSingleton:
    def test_lazy_load_and_reset(self) -> None:
        calls = []

        def loader() -> AppConfig:
            calls.append(1)
            return AppConfig()

        manager = ConfigSingleton(loader)
        first = manager.get()
        assert manager.get() is first
        manager.reset()
        manager.get()
        assert len(calls) == 2

    def test_set_overrides_loader(self) -> None:
        manager = ConfigSingleton(lambda: AppConfig())
        custom = AppConfig()
        manager.set(custom)
        assert manager.get() is custom
