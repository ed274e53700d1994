"""Application settings configuration.

Settings are read from ``settings.yml`` and validated with pydantic. A
missing, empty or invalid file falls back to the defaults.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger("ProductFeed.Settings")

DEFAULT_BASE_URL = "https://dummyjson.com"


class ApiSettings(BaseModel):
    """Remote product API settings"""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Product API root URL")
    timeout_seconds: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return v


class DisplaySettings(BaseModel):
    """Display-related settings"""

    model_config = ConfigDict(frozen=True)

    page_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Number of products to load per page (1-100)",
    )
    prefetch_threshold: int = Field(
        default=3,
        ge=0,
        description="Load the next page when this many rows remain below the viewport",
    )
    default_width: int = Field(default=420, ge=200)
    default_height: int = Field(default=800, ge=200)


class AppSettings(BaseModel):
    """Main settings model"""

    model_config = ConfigDict(frozen=True)

    api: ApiSettings = Field(default_factory=ApiSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "AppSettings":
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(Path(path))
        if not config:
            return cls()

        try:
            return cls(**config)
        except (ValidationError, TypeError) as e:
            logger.warning(f"Invalid settings in {path}, using defaults: {e}")
            return cls()

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            logger.debug(f"Settings file not found at {path}, using defaults")
            return {}
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing settings YAML: {e}")
            return {}
        return data if isinstance(data, dict) else {}


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to ./settings.yml
        """
        if config_path is None:
            config_path = Path("settings.yml")

        self.config_path = config_path
        self.settings = AppSettings.load(self.config_path)

    def reload(self) -> None:
        """Reload settings from file"""
        self.settings = AppSettings.load(self.config_path)

    @property
    def page_size(self) -> int:
        return self.settings.display.page_size

    @property
    def base_url(self) -> str:
        return self.settings.api.base_url


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings() -> SettingsManager:
    """Get the global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager
