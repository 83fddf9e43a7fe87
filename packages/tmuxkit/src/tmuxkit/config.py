"""Configuration management for tmuxkit.

Handles server connection defaults from tmuxkit.toml:

    [default]
    binary = "tmux"
    socket_name = "work"
    session = "main"
    log_level = "DEBUG"
"""

from pathlib import Path
from typing import Optional
import tomllib

CONFIG_FILENAME = "tmuxkit.toml"


def _find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find tmuxkit.toml in current or parent directories."""
    current = start or Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILENAME
        if config_file.exists():
            return config_file

    return None


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file."""
    if path is None:
        path = _find_config_file()

    if path is None or not path.exists():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


class ConfigManager:
    """Manages configuration for tmuxkit.

    Args:
        path: Explicit config file. Searched for from the working directory
            upwards when omitted.
    """

    def __init__(self, path: Optional[Path] = None):
        self._config_file = path or _find_config_file()
        self.data = _load_config(self._config_file)
        self._default_config = self.data.get("default", {})

    @property
    def config_file(self) -> Optional[Path]:
        return self._config_file

    @property
    def binary(self) -> str:
        """tmux executable to run."""
        return self._default_config.get("binary", "tmux")

    @property
    def socket_name(self) -> Optional[str]:
        return self._default_config.get("socket_name")

    @property
    def socket_path(self) -> Optional[str]:
        return self._default_config.get("socket_path")

    @property
    def session(self) -> Optional[str]:
        """Session commands act on when none is given."""
        return self._default_config.get("session")

    @property
    def log_level(self) -> str:
        return str(self._default_config.get("log_level", "INFO")).upper()


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
