"""Global settings instance for the wine cellar.

The settings object wraps the structured WineCellarConfig and exposes a
flat interface for the values the application reads most often.
"""

from pathlib import Path

from winecellar.config.loader import load_config
from winecellar.config.schema import WineCellarConfig


class Settings:
    """Flat accessor over the loaded WineCellarConfig."""

    def __init__(self, config: WineCellarConfig | None = None):
        """Initialize settings.

        Args:
            config: Optional WineCellarConfig instance. If not provided, loads from file.
        """
        self._config = config or load_config()

    @property
    def config(self) -> WineCellarConfig:
        """Get the full configuration object."""
        return self._config

    # Application
    @property
    def app_name(self) -> str:
        return self._config.app_name

    # Server
    @property
    def host(self) -> str:
        return self._config.server.host

    @property
    def port(self) -> int:
        return self._config.server.port

    @property
    def static_dir(self) -> Path:
        return self._config.server.static_dir

    # Database
    @property
    def db_host(self) -> str:
        return self._config.database.host

    @property
    def db_port(self) -> int:
        return self._config.database.port

    @property
    def db_name(self) -> str:
        return self._config.database.db

    # Logging
    @property
    def log_level(self) -> str:
        return self._config.logging.level

    def __repr__(self) -> str:
        return f"<Settings(app_name={self.app_name!r}, port={self.port}, db={self.db_name!r})>"


# Global settings instance - lazily initialized
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    The settings are loaded once and cached for subsequent calls.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance.

    This is primarily useful for testing to reload configuration.
    """
    global _settings
    _settings = None
