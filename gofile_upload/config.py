#!/usr/bin/env python3
"""
Configuration management for the GoFile uploader.
Holds runtime defaults using a singleton pattern. Nothing is read from or
written to disk; each invocation starts from the same defaults.
"""

from typing import Dict, Any, Optional


class Config:
    _instance: Optional["Config"] = None
    _initialized = False

    # Default configuration settings
    DEFAULT_CONFIG = {
        "connect_timeout": 10,  # seconds to establish a connection
        "max_retries": 3,  # connection attempts per upload
        "retry_delay": 2,  # seconds between attempts
        "snippet_length": 500,  # characters of a response body shown on error
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._load_defaults()
            self._initialized = True

    def _load_defaults(self) -> Dict[str, Any]:
        """
        Build a fresh copy of the default settings.

        Returns:
            Dict: Configuration settings
        """
        return self.DEFAULT_CONFIG.copy()

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key doesn't exist

        Returns:
            The configuration value or default if not found
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value for the rest of the process.

        Args:
            key: Configuration key
            value: Value to set
        """
        self._config[key] = value

    def reset(self) -> None:
        """Restore every setting to its default."""
        self._config = self._load_defaults()


# Create a single instance of the Config class
config = Config()
