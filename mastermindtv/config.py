"""
Configuration management for Mastermind TV.

Handles loading, validation, and access to application configuration.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

# Global configuration instance
_config: Optional["MastermindConfig"] = None

DEFAULT_SOURCE_URL = (
    "https://gist.githubusercontent.com/pedra90z/0dcf405f58abe4b327ddff457f40bc35"
    "/raw/d0f4721acb0def74da1381ada390752c65b697f8/gistfile1.txt"
)


class ServerConfig(BaseModel):
    """Server configuration."""
    host: str = "0.0.0.0"
    port: int = 63819
    debug: bool = False
    log_level: str = "INFO"


class SourceConfig(BaseModel):
    """Remote channel document configuration."""
    url: str = DEFAULT_SOURCE_URL
    timeout: Optional[float] = None  # None = httpx transport default


class CacheConfig(BaseModel):
    """Channel cache configuration."""
    ttl_seconds: int = 3600 * 4
    serve_stale_on_error: bool = False


class CatalogConfig(BaseModel):
    """The single catalog published by the add-on."""
    type: str = "tv"
    id: str = "vivo-fibra-tv"
    name: str = "Vivo Fibra TV"
    genres: list[str] = Field(default_factory=lambda: [
        "FILMES E SÉRIES",
        "ESPORTES",
        "NOTÍCIAS",
        "VARIEDADES",
        "INFANTIL",
        "DOCUMENTÁRIOS",
        "MÚSICA",
    ])


class AddonConfig(BaseModel):
    """Static add-on metadata, published once in the manifest."""
    id: str = "community.iptvbrasil.mastermind.online"
    version: str = "1.1.0"
    name: str = "Mastermind IPTV"
    description: str = (
        "Se não estiver atualizado, mande listas m3u em gist para carvalhoclay@icloud.com"
    )
    id_prefixes: list[str] = Field(default_factory=lambda: ["vf-"])
    logo: str = "https://i.imgur.com/DxrcqNW_d.webp?maxwidth=520&shape=thumb&fidelity=high"
    background: str = (
        "https://t.ctcdn.com.br/8DxJzUzINYD_PWZP1pi8BXISznA=/768x432/smart/i992757.jpeg"
    )
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    stream_title: str = "Assistir"
    description_template: str = "Assista ao canal {name} ao vivo."


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    file: str = "logs/mastermindtv.log"
    max_size: str = "10MB"
    backup_count: int = 5
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    to_file: bool = True


class MastermindConfig(BaseModel):
    """Main Mastermind TV configuration."""
    server: ServerConfig = Field(default_factory=ServerConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    addon: AddonConfig = Field(default_factory=AddonConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> MastermindConfig:
    """
    Load configuration from file.

    Args:
        config_path: Path to config file. Defaults to config.yaml in project root.

    Returns:
        Loaded and validated configuration.
    """
    global _config

    if config_path is None:
        possible_paths = [
            Path("config.yaml"),
            Path(__file__).parent.parent / "config.yaml",
        ]
        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data: dict[str, Any] = {}

    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

    # Apply environment variable overrides
    env_overrides = _get_env_overrides()
    _deep_merge(config_data, env_overrides)

    _config = MastermindConfig(**config_data)
    return _config


def get_config() -> MastermindConfig:
    """
    Get the current configuration.

    Returns:
        Current configuration (loads default if not yet loaded).
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    # Bare PORT first so the prefixed variable wins when both are set
    env_map = {
        "PORT": ("server", "port"),
        "MASTERMINDTV_HOST": ("server", "host"),
        "MASTERMINDTV_PORT": ("server", "port"),
        "MASTERMINDTV_DEBUG": ("server", "debug"),
        "MASTERMINDTV_LOG_LEVEL": ("logging", "level"),
        "MASTERMINDTV_SOURCE_URL": ("source", "url"),
        "MASTERMINDTV_CACHE_TTL": ("cache", "ttl_seconds"),
    }

    for env_var, path in env_map.items():
        value = os.environ.get(env_var)
        if value is not None:
            _set_nested(overrides, path, _parse_env_value(value))

    return overrides


def _parse_env_value(value: str) -> Any:
    """Parse environment variable value to appropriate type."""
    if value.lower() in ("true", "yes"):
        return True
    if value.lower() in ("false", "no"):
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def _set_nested(d: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    """Set a nested dictionary value from a path tuple."""
    for key in path[:-1]:
        d = d.setdefault(key, {})
    d[path[-1]] = value


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Deep merge override into base dictionary."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value

