"""
Upload Configuration Handler

Manages the optional YAML configuration file for upload settings.
Provides defaults (from config.settings) and validation.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from config.settings import (
    HTTP_TIMEOUT,
    MAX_UPLOAD_SIZE_BYTES,
    REGISTRY_DATA_METHOD,
    REGISTRY_SERVER_URL,
    UPLOAD_CONFIG_FILE,
    UPLOAD_WORKERS,
)
from core.network import parse_endpoint
from registry.constants import SUPPORTED_DATA_METHODS


class UploadConfig:
    """
    Upload configuration with YAML file support.

    Reads from config/upload.yaml if it exists,
    otherwise uses defaults from config.settings.

    Usage:
        config = UploadConfig()
        threshold = config.max_upload_size_bytes
        server = config.server_url
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = UPLOAD_CONFIG_FILE)

        Raises:
            ValueError: If a configured value is invalid
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or UPLOAD_CONFIG_FILE)

        # Load configuration (defaults + file overrides)
        self._config = self._load_config()

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            "server_url": REGISTRY_SERVER_URL,
            "data_method": REGISTRY_DATA_METHOD,
            "http_timeout": HTTP_TIMEOUT,
            "max_upload_size_bytes": MAX_UPLOAD_SIZE_BYTES,
            "upload_workers": UPLOAD_WORKERS,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        config = self._get_defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    file_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                self.logger.warning(
                    f"Failed to load config from {self.config_path}: {e}. "
                    f"Using defaults."
                )
                file_config = {}

            if not isinstance(file_config, dict):
                raise ValueError(
                    f"Upload config must be a mapping: {self.config_path}"
                )

            unknown = set(file_config) - set(config)
            if unknown:
                self.logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")

            # File overrides defaults
            config.update({k: v for k, v in file_config.items() if k in config})
            self.logger.info(f"Loaded upload config from {self.config_path}")
        else:
            self.logger.debug(
                f"Config file not found at {self.config_path}. Using defaults."
            )

        self._validate_config(config)
        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        # Empty URL means "not configured"; the registry factory decides
        # whether that is an error (http) or a mock fallback (auto/mock)
        server_url = config["server_url"] or ""
        if server_url and parse_endpoint(str(server_url)) is None:
            raise ValueError(f"Invalid server_url: {server_url!r}")
        config["server_url"] = server_url

        method = str(config["data_method"]).upper()
        if method not in SUPPORTED_DATA_METHODS:
            raise ValueError(
                f"data_method must be one of {SUPPORTED_DATA_METHODS}, got {method}"
            )
        config["data_method"] = method

        if _to_number(config, "max_upload_size_bytes", int) <= 0:
            raise ValueError("max_upload_size_bytes must be positive")

        if _to_number(config, "http_timeout", float) <= 0:
            raise ValueError("http_timeout must be positive")

        if _to_number(config, "upload_workers", int) < 1:
            raise ValueError("upload_workers must be at least 1")

    def set(self, key: str, value: Any) -> None:
        """
        Override a configuration value at runtime.

        Raises:
            KeyError: If key is not a known setting
            ValueError: If the resulting configuration is invalid
        """
        if key not in self._config:
            raise KeyError(f"Unknown upload setting: {key}")

        updated = dict(self._config)
        updated[key] = value
        self._validate_config(updated)
        self._config = updated

    def to_dict(self) -> Dict[str, Any]:
        """Get a copy of all settings (for logging/display)"""
        return dict(self._config)

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def server_url(self) -> str:
        """Base URL of the Video Registry (empty if not configured)"""
        return str(self._config["server_url"])

    @property
    def data_method(self) -> str:
        """HTTP method for data uploads"""
        return self._config["data_method"]

    @property
    def http_timeout(self) -> float:
        """Per-request HTTP timeout in seconds"""
        return float(self._config["http_timeout"])

    @property
    def max_upload_size_bytes(self) -> int:
        """Files at or above this size are not uploaded"""
        return int(self._config["max_upload_size_bytes"])

    @property
    def upload_workers(self) -> int:
        """Thread pool size for background uploads"""
        return int(self._config["upload_workers"])


def _to_number(config: Dict[str, Any], key: str, convert: Callable[[Any], Any]) -> Any:
    """Convert a raw (YAML/CLI) value, reporting bad types as ValueError"""
    value = config[key]
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        return convert(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key} must be a number, got {value!r}") from e
