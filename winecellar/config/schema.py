"""Pydantic models for wine cellar configuration.

These models define the structure of the config.toml file.
"""

from pathlib import Path

from pydantic import BaseModel, Field

# Static assets shipped with the package
DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "public"


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: Path = Field(default_factory=lambda: DEFAULT_STATIC_DIR)


class DatabaseConfig(BaseModel):
    """MongoDB connection configuration."""

    host: str = "localhost"
    port: int = 28015
    db: str = "winecellar"
    # Bounds the startup ping only, store operations have no timeout
    connect_timeout_ms: int = 5000


class SeedConfig(BaseModel):
    """Sample data seeding configuration."""

    enabled: bool = True
    # Swallow seed-phase errors and keep serving
    fail_soft: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    access_log: bool = True


class WineCellarConfig(BaseModel):
    """Main configuration loaded from config.toml."""

    app_name: str = "Wine Cellar"
    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
