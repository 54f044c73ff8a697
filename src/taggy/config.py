"""Configuration management for taggy.

The library operations never read configuration on their own; they take a
WriteOptions value. The command line loads a Config from
~/.taggy/.taggy_config.toml and passes its options along.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict

try:
    import tomli_w
except ImportError:
    tomli_w = None  # type: ignore


class WriteOptions(BaseModel):
    """Settings applied when tags are persisted.

    Attributes:
        id3v2_version: ID3v2 minor version to write (3 or 4). Version 3 has no full
            original release date frame, so only its year is kept (TORY)
    """

    model_config = ConfigDict(frozen=True)

    id3v2_version: Literal[3, 4] = 4


def get_config_dir() -> Path:
    """Get the configuration directory (~/.taggy on all platforms)."""
    return Path.home() / ".taggy"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / ".taggy_config.toml"


class Config:
    """Configuration manager for taggy settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "write": {
            # ID3v2 version written to MPEG, AAC, WAV and AIFF files: 3 or 4
            "id3v2_version": 4,
        },
        "output": {
            # Print JSON instead of tables by default
            "json": False,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use instead of the default location
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
                # Merge with defaults (in case new keys were added)
                self._merge_config(self.data, loaded_data)
            self._dirty = False
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logging.error("Error loading config %s: %s", self.config_path, e)
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        if tomli_w is None:
            logging.warning("TOML writer not available, config not saved")
            return False

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logging.error("Error saving config %s: %s", self.config_path, e)
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has been modified."""
        return self._dirty

    # Write settings
    def get_id3v2_version(self) -> int:
        """Get the ID3v2 version to write (defaults to 4)."""
        return self.data.get("write", {}).get("id3v2_version", 4)

    def set_id3v2_version(self, version: int) -> None:
        """Set the ID3v2 version to write.

        Raises:
            ValueError: If version is not 3 or 4
        """
        if version not in (3, 4):
            raise ValueError("ID3v2 version must be 3 or 4")
        self.data.setdefault("write", {})["id3v2_version"] = version
        self._dirty = True

    def get_write_options(self) -> WriteOptions:
        """Build the WriteOptions described by this configuration."""
        return WriteOptions(id3v2_version=self.get_id3v2_version())

    # Output settings
    def get_json_output(self) -> bool:
        """Get whether commands print JSON by default."""
        return bool(self.data.get("output", {}).get("json", False))

    def set_json_output(self, enabled: bool) -> None:
        """Set whether commands print JSON by default."""
        self.data.setdefault("output", {})["json"] = enabled
        self._dirty = True
