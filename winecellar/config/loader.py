"""Configuration loader for the wine cellar.

Loads configuration from a TOML file. Environment variables can override
any configuration value, and the deployment variables ``PORT``,
``RDB_HOST``, ``RDB_PORT`` and ``RDB_DB`` override everything else.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from winecellar.config.schema import WineCellarConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "WINECELLAR"

# Deployment variables, applied last
DEPLOYMENT_ENV_MAPPINGS = {
    "PORT": ("server", "port"),
    "RDB_HOST": ("database", "host"),
    "RDB_PORT": ("database", "port"),
    "RDB_DB": ("database", "db"),
}

INT_KEYS = ("port", "connect_timeout_ms")
BOOL_KEYS = ("enabled", "fail_soft", "access_log")


def get_config_search_paths() -> list[Path]:
    """Get the list of paths to search for configuration files.

    Returns paths in priority order (first found wins):
    1. ./config.toml (project root - for development)
    2. ~/.config/winecellar/config.toml (user config)
    3. /etc/winecellar/config.toml (system config)
    """
    return [
        Path.cwd() / "config.toml",
        Path.home() / ".config" / "winecellar" / "config.toml",
        Path("/etc/winecellar/config.toml"),
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file from search paths."""
    for path in get_config_search_paths():
        if path.exists() and path.is_file():
            logger.debug("Found config file: %s", path)
            return path
    return None


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def _convert(key: str, value: str) -> Any:
    """Convert a raw environment string to the type expected for ``key``."""
    if key in INT_KEYS:
        return int(value)
    if key in BOOL_KEYS:
        return value.lower() in ("true", "1", "yes")
    return value


def _set(config_dict: dict[str, Any], section: str, key: str, value: Any) -> None:
    config_dict.setdefault(section, {})[key] = value


def apply_env_overrides(config_dict: dict[str, Any], prefix: str = ENV_PREFIX) -> None:
    """Apply environment variable overrides to configuration dictionary.

    Environment variables are mapped as follows:
    - WINECELLAR_SERVER_HOST -> config_dict["server"]["host"]
    - WINECELLAR_DATABASE_DB -> config_dict["database"]["db"]
    - etc.

    Note: This modifies config_dict in place.
    """
    env_mappings = {
        # Server
        f"{prefix}_SERVER_HOST": ("server", "host"),
        f"{prefix}_SERVER_PORT": ("server", "port"),
        f"{prefix}_SERVER_STATIC_DIR": ("server", "static_dir"),
        # Database
        f"{prefix}_DATABASE_HOST": ("database", "host"),
        f"{prefix}_DATABASE_PORT": ("database", "port"),
        f"{prefix}_DATABASE_DB": ("database", "db"),
        f"{prefix}_DATABASE_CONNECT_TIMEOUT_MS": ("database", "connect_timeout_ms"),
        # Seeding
        f"{prefix}_SEED_ENABLED": ("seed", "enabled"),
        f"{prefix}_SEED_FAIL_SOFT": ("seed", "fail_soft"),
        # Logging
        f"{prefix}_LOG_LEVEL": ("logging", "level"),
        f"{prefix}_LOGGING_ACCESS_LOG": ("logging", "access_log"),
    }

    for env_var, (section, key) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            _set(config_dict, section, key, _convert(key, value))


def apply_deployment_overrides(config_dict: dict[str, Any]) -> None:
    """Apply the ``PORT`` and ``RDB_*`` deployment variables.

    Empty or non-numeric port values are ignored so the previous value
    (or the default) stays in effect.

    Note: This modifies config_dict in place.
    """
    for env_var, (section, key) in DEPLOYMENT_ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if not value:
            continue
        try:
            _set(config_dict, section, key, _convert(key, value))
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r", env_var, value)


def load_config(config_file: Path | None = None) -> WineCellarConfig:
    """Load configuration from TOML file with environment variable overrides.

    Args:
        config_file: Optional path to config file. If not provided,
                     searches default locations.

    Returns:
        WineCellarConfig instance with all settings loaded.
    """
    config_dict: dict[str, Any] = {}

    if config_file is None:
        config_file = find_config_file()

    if config_file and config_file.exists():
        logger.info("Loading config from: %s", config_file)
        config_dict = load_toml_file(config_file)
    else:
        logger.info("No config file found, using defaults with env overrides")

    apply_env_overrides(config_dict)
    apply_deployment_overrides(config_dict)

    return WineCellarConfig(**config_dict)
