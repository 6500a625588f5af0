"""Settings management for servicecfg."""

import os
import sys
from pathlib import Path
from typing import Any

import yaml

from servicecfg.models.settings import StoreSettings


def default_settings_path() -> Path:
    """Return the platform-specific location of settings.yaml."""
    if sys.platform == "win32":
        # Windows: %APPDATA%\servicecfg
        config_dir = Path(os.getenv("APPDATA", str(Path.home()))) / "servicecfg"
    elif sys.platform == "darwin":
        # macOS: ~/Library/Application Support/servicecfg
        config_dir = Path.home() / "Library" / "Application Support" / "servicecfg"
    else:
        # Linux/Unix: ~/.config/servicecfg
        config_dir = Path.home() / ".config" / "servicecfg"
    return config_dir / "settings.yaml"


class SettingsManager:
    """Manages servicecfg settings with YAML file and environment variable support."""

    def __init__(self, settings_path: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            settings_path: Path to settings file. If None, uses SERVICECFG_CONFIG_PATH
                           environment variable or defaults to platform-specific config directory
        """
        if settings_path is None:
            env_path = os.getenv("SERVICECFG_CONFIG_PATH")
            settings_path = Path(env_path).expanduser() if env_path else default_settings_path()

        self.settings_path = settings_path
        self._settings: StoreSettings | None = None

    def load(self) -> StoreSettings:
        """Load settings from file and apply environment variable overrides.

        Returns:
            Loaded settings
        """
        data: dict[str, Any] = {}

        # 1. Load from YAML file if it exists
        if self.settings_path.exists():
            with open(self.settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        # 2. Create settings object (applies defaults)
        settings = StoreSettings(**data)

        # 3. Apply environment variable overrides
        return self._apply_env_overrides(settings)

    def save(self, settings: StoreSettings) -> None:
        """Save settings to YAML file.

        Args:
            settings: Settings to save
        """
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.settings_path, "w", encoding="utf-8") as f:
            yaml.dump(
                settings.model_dump(mode="json"),
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )

    def _apply_env_overrides(self, settings: StoreSettings) -> StoreSettings:
        """Apply environment variable overrides.

        Supported variables:
            - SERVICECFG_ROOT_DIR=~/custom/path
            - SERVICECFG_LOG_LEVEL=DEBUG
            - SERVICECFG_CODEC_INDENT=4

        Args:
            settings: Base settings

        Returns:
            Settings with environment overrides applied
        """
        if root_dir := os.getenv("SERVICECFG_ROOT_DIR"):
            settings.storage.root_dir = Path(root_dir).expanduser()

        if log_level := os.getenv("SERVICECFG_LOG_LEVEL"):
            if log_level in ("INFO", "DEBUG", "TRACE"):
                settings.logging.level = log_level  # type: ignore[assignment]

        if indent := os.getenv("SERVICECFG_CODEC_INDENT"):
            try:
                value = int(indent)
            except ValueError:
                value = -1
            if value >= 0:
                settings.codec.indent = value

        return settings

    def get_settings(self) -> StoreSettings:
        """Get settings, loading them on first access."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def reload(self) -> StoreSettings:
        """Reload settings from file."""
        self._settings = self.load()
        return self._settings


# Global settings manager instance
_settings_manager = SettingsManager()


def get_settings() -> StoreSettings:
    """Get global servicecfg settings."""
    return _settings_manager.get_settings()


def reload_settings() -> StoreSettings:
    """Reload settings from file.

    Returns:
        Reloaded settings
    """
    return _settings_manager.reload()


def save_settings(settings: StoreSettings) -> None:
    """Save settings to file.

    Args:
        settings: Settings to save
    """
    _settings_manager.save(settings)
