"""Shared configuration utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Generic, TypeVar

import yaml
from dotenv import load_dotenv

T = TypeVar('T')

CONFIG_DIR = Path(os.environ.get(
    "NEWS_CONFIG_DIR",
    Path(__file__).resolve().parent.parent.parent / "configs",
))


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "prod",
    env_var: str | None = None,
) -> Path:
    """Find config file path, checking env var and defaults.

    Args:
        config_name: Name of config (without .yaml) or None for default
        config_dir: Directory containing config files
        default_name: Default config name if config_name is None
        env_var: Environment variable to check for config name

    Returns:
        Path to the config file

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    config_path = config_dir / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


class ConfigSingleton(Generic[T]):
    """Lazily loaded process-wide config; set() swaps in a fixed one for tests."""

    def __init__(self, loader: Callable[[], T]):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        """Get the config, loading it lazily if needed."""
        if self._config is None:
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        """Set the config directly."""
        self._config = config

    def reset(self) -> None:
        """Reset the config, forcing reload on next get()."""
        self._config = None


@dataclass(frozen=True)
class UpstreamConfig:
    base_url: str = "https://newsapi.org/v2"
    api_key: str | None = None  # from NEWS_API_KEY, never from YAML
    page_size: int = 100
    request_timeout: int = 10
    user_agent: str = "news-aggregator/1.0"


@dataclass(frozen=True)
class FetchConfig:
    default_category: str = "general"
    fallback_query: str = "news"
    default_window_days: int = 7


@dataclass(frozen=True)
class SearchConfig:
    detect_locations: bool = False


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass(frozen=True)
class AppConfig:
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def _parse_config(data: dict, api_key: str | None) -> AppConfig:
    """Parse config dictionary into AppConfig."""
    upstream_raw = data.get("upstream", {})
    fetch_raw = data.get("fetch", {})
    search_raw = data.get("search", {})
    server_raw = data.get("server", {})

    return AppConfig(
        upstream=UpstreamConfig(
            base_url=upstream_raw.get("base_url", "https://newsapi.org/v2"),
            api_key=api_key,
            page_size=upstream_raw.get("page_size", 100),
            request_timeout=upstream_raw.get("request_timeout", 10),
            user_agent=upstream_raw.get("user_agent", "news-aggregator/1.0"),
        ),
        fetch=FetchConfig(
            default_category=fetch_raw.get("default_category", "general"),
            fallback_query=fetch_raw.get("fallback_query", "news"),
            default_window_days=fetch_raw.get("default_window_days", 7),
        ),
        search=SearchConfig(
            detect_locations=search_raw.get("detect_locations", False),
        ),
        server=ServerConfig(
            host=server_raw.get("host", "0.0.0.0"),
            port=server_raw.get("port", 8000),
        ),
    )


def load_config(config_name: str | None = None) -> AppConfig:
    """Load configuration from YAML, with the upstream credential from the environment.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses NEWS_CONFIG env var or "prod".

    Returns:
        AppConfig instance
    """
    load_dotenv()
    path = find_config_path(config_name, CONFIG_DIR, env_var="NEWS_CONFIG")
    api_key = os.environ.get("NEWS_API_KEY") or None
    return _parse_config(load_yaml(path), api_key)


_manager: ConfigSingleton[AppConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
