"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Environment variables (GROWTHLOG_*) override the YAML preferences file
- Easy to test with a temporary config directory
"""

import os
from pathlib import Path
from typing import Optional
import yaml

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from growthlog.domain.models import UserPreferences

SETTINGS_FILENAME = "settings.yaml"


def default_config_dir(app_name: str = "growthlog") -> Path:
    """Per-user configuration directory (%APPDATA% on Windows, ~/.config elsewhere)"""
    if os.name == 'nt':  # Windows
        base = Path(os.getenv('APPDATA', Path.home()))
    else:  # Linux/Mac
        base = Path.home() / '.config'
    return base / app_name.lower()


class Settings(BaseSettings):
    """
    Application settings with multiple sources:
    1. Default values (hardcoded)
    2. YAML preferences file (config/settings.yaml, then <config_dir>/settings.yaml)
    3. Environment variables (highest priority)
    """
    model_config = SettingsConfigDict(
        env_prefix='GROWTHLOG_',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    app_name: str = "growthlog"
    config_dir: Optional[Path] = None

    # When set, main.py writes the session's entries to this database on exit
    database_url: Optional[str] = None

    preferences: UserPreferences = Field(default_factory=UserPreferences)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.config_dir is None:
            self.config_dir = default_config_dir(self.app_name)
        self._load_yaml_config()

    @property
    def settings_file(self) -> Path:
        return self.config_dir / SETTINGS_FILENAME

    def _load_yaml_config(self):
        """Replace the default preferences with the first YAML file found"""
        config_file = Path("config") / SETTINGS_FILENAME
        if not config_file.exists():
            config_file = self.settings_file

        if config_file.exists():
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
                if config_data:
                    self.preferences = UserPreferences(**config_data)

    def save_preferences(self) -> Path:
        """Write the current preferences to <config_dir>/settings.yaml"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self.preferences.model_dump(mode='json'), f, default_flow_style=False)
        return self.settings_file


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings():
    """Reload settings from file"""
    global _settings
    _settings = Settings()
    return _settings
