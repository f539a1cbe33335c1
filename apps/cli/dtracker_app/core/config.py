"""Configuration Management System

Provides centralized configuration for the dtracker application.
Handles configuration for:

Core Components:
- Storage location and storage key
- Dashboard expiry window
- Export defaults
- Logging

Features:
- Environment-based configuration (``DTRACKER_`` prefix) with override support
- Type validation and enforcement
- Dynamic path resolution

Example:
    from dtracker_app.core.config import settings

    data_dir = settings.data_dir_path
    window = settings.EXPIRY_WINDOW_DAYS
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration management service."""

    model_config = SettingsConfigDict(env_prefix="DTRACKER_")

    VERSION: str = "1.0.0"

    # Base directory for resolving relative paths
    BASE_DIR: Path = Path(__file__).parent.parent.parent

    # Resource paths from environment variables
    DATA_DIR: str = "data"
    LOG_DIR: str = "logs"

    # Logging settings
    LOG_LEVEL: str = "INFO"

    # Inventory settings
    STORAGE_KEY: str = "dtracker_equipment_data"
    EXPIRY_WINDOW_DAYS: int = 30
    EXPORT_FILENAME: str = "equipment_list.csv"

    def __init__(self, **kwargs):
        """Initialize settings and create required directories."""
        super().__init__(**kwargs)

        self.log_dir_path.mkdir(parents=True, exist_ok=True)
        self.data_dir_path.mkdir(parents=True, exist_ok=True)

    @property
    def log_dir_path(self) -> Path:
        """Resolve log directory path.

        If LOG_DIR is absolute, uses it directly.
        If relative, resolves from BASE_DIR.
        """
        path = Path(self.LOG_DIR)
        return path if path.is_absolute() else self.BASE_DIR / path

    @property
    def data_dir_path(self) -> Path:
        """Resolve the directory holding the persisted equipment document."""
        path = Path(self.DATA_DIR)
        return path if path.is_absolute() else self.BASE_DIR / path


# Initialize global settings
settings = Settings()
