"""Configuration manager for oracle_cli."""

from typing import Dict, Any, Optional
from pathlib import Path
import datetime
import getpass
import os
import sys

import yaml

from ..constants import (
    CONFIG_DIR, API_KEY_ENV_VAR, DEFAULT_ENDPOINT, DEFAULT_MODEL,
    DEFAULT_TEMPERATURE, DEFAULT_REQUEST_TIMEOUT, DEFAULT_ENABLE_COMMANDS,
    DEFAULT_ENABLE_DEBUG
)
from ..utils.logging import logger
from ..utils.helpers import ensure_directory_exists, safe_file_write, atomic_file_write
from .templates import CONFIG_TEMPLATE


class ConfigManager:
    """Manages configuration loading, validation and API-key storage for oracle."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the configuration manager.

        Args:
            config_dir: Custom configuration directory path
        """
        self.config_dir = config_dir or CONFIG_DIR
        self.config_file = self.config_dir / "config.yaml"
        self.first_run_file = self.config_dir / ".first_run_complete"

        self._config: Optional[Dict[str, Any]] = None

    def initialize(self) -> None:
        """Create the config directory and template if needed, then load the config."""
        ensure_directory_exists(self.config_dir)
        if not self.config_file.exists():
            if safe_file_write(self.config_file, CONFIG_TEMPLATE, "config template"):
                logger.system(f"Configuration template generated at {self.config_file}")
        self._config = self._load_config()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read the raw YAML mapping from the config file."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file, 'r') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML file {self.config_file}: {e}")
            sys.exit(1)
        except IOError as e:
            logger.error(f"Could not read {self.config_file}: {e}")
            sys.exit(1)

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            logger.error(f"{self.config_file} is not a valid YAML dictionary.")
            sys.exit(1)
        return config_data

    def _load_config(self) -> Dict[str, Any]:
        """Load the configuration file and fill in validated defaults."""
        config_data = self._read_yaml()

        api_key = config_data.get("api_key")
        config_data["api_key"] = str(api_key).strip() if api_key else ""

        for key, default in (("model", DEFAULT_MODEL), ("endpoint", DEFAULT_ENDPOINT)):
            value = config_data.get(key)
            if not isinstance(value, str) or not value.strip():
                if value is not None:
                    logger.warning(f"{key} in {self.config_file} must be a non-empty string. Defaulting to {default}.")
                value = default
            config_data[key] = value.strip()
        config_data["endpoint"] = config_data["endpoint"].rstrip("/")

        temperature = config_data.get("temperature", DEFAULT_TEMPERATURE)
        if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
            logger.warning(f"temperature in {self.config_file} must be a number. Defaulting to {DEFAULT_TEMPERATURE}.")
            temperature = DEFAULT_TEMPERATURE
        config_data["temperature"] = float(temperature)

        timeout = config_data.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)
        if isinstance(timeout, bool) or not (isinstance(timeout, int) and timeout > 0):
            logger.warning(f"request_timeout in {self.config_file} must be a positive integer. "
                           f"Defaulting to {DEFAULT_REQUEST_TIMEOUT}.")
            timeout = DEFAULT_REQUEST_TIMEOUT
        config_data["request_timeout"] = timeout

        shell = config_data.get("shell")
        config_data["shell"] = shell if isinstance(shell, str) and shell.strip() else None

        for key, default in (("enable_commands", DEFAULT_ENABLE_COMMANDS), ("enable_debug", DEFAULT_ENABLE_DEBUG)):
            value = config_data.get(key, default)
            if not isinstance(value, bool):
                logger.warning(f"{key} in {self.config_file} must be true/false. Defaulting to {str(default).lower()}.")
                value = default
            config_data[key] = value

        patterns = config_data.get("extra_dangerous_patterns") or []
        if not isinstance(patterns, list):
            logger.warning(f"'extra_dangerous_patterns' in {self.config_file} is not a list. Ignoring it.")
            patterns = []
        config_data["extra_dangerous_patterns"] = [str(p) for p in patterns if p]

        logger.debug(f"Configuration loaded from {self.config_file}")
        return config_data

    @property
    def config(self) -> Dict[str, Any]:
        """Get the current configuration."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call initialize() first.")
        return self._config.copy()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call initialize() first.")
        return self._config.get(key, default)

    def get_api_key(self, flag_api_key: Optional[str] = None) -> str:
        """Resolve the API key from the flag, the environment, then the config file.

        Returns:
            The API key, or an empty string when none is configured
        """
        if flag_api_key:
            return flag_api_key

        env_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
        if env_key:
            return env_key

        return self.get("api_key", "")

    def set_api_key(self, api_key: str) -> bool:
        """Save the API key to the config file.

        Returns:
            True if the key was written, False otherwise
        """
        config_data = self._read_yaml()
        config_data["api_key"] = api_key

        ensure_directory_exists(self.config_dir)
        content = yaml.safe_dump(config_data, sort_keys=False, default_flow_style=False)
        if not atomic_file_write(self.config_file, content):
            return False

        if self._config is not None:
            self._config["api_key"] = api_key
        logger.debug(f"API key saved to {self.config_file}")
        return True

    def is_first_run(self) -> bool:
        """Whether oracle has not completed its first-run setup yet."""
        return not self.first_run_file.exists()

    def mark_first_run_complete(self) -> bool:
        """Create the first-run marker file."""
        try:
            user = getpass.getuser()
        except (KeyError, OSError):
            user = "unknown"
        timestamp = datetime.datetime.now().isoformat(timespec="seconds")
        return safe_file_write(self.first_run_file, f"First run completed by {user} at {timestamp}\n",
                               "first-run marker")


def create_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Create and initialize a configuration manager.

    Args:
        config_dir: Custom configuration directory path

    Returns:
        Initialized ConfigManager instance
    """
    manager = ConfigManager(config_dir)
    manager.initialize()
    return manager
