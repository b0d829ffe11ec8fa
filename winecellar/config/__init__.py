"""Wine cellar configuration module.

Configuration is loaded from the following locations (in order of priority):
1. PORT, RDB_HOST, RDB_PORT and RDB_DB environment variables (highest priority)
2. WINECELLAR_* environment variables
3. ./config.toml (project root - for development)
4. ~/.config/winecellar/config.toml (user config)
5. /etc/winecellar/config.toml (system config)
"""

from winecellar.config.schema import (
    DatabaseConfig,
    LoggingConfig,
    SeedConfig,
    ServerConfig,
    WineCellarConfig,
)
from winecellar.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "DatabaseConfig",
    "LoggingConfig",
    "SeedConfig",
    "ServerConfig",
    "Settings",
    "WineCellarConfig",
    "get_settings",
    "reset_settings",
]
