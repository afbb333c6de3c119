"""Configuration Management for the Carvoyant client

Loads client settings from an optional YAML file and applies environment
variable overrides on top. Settings are validated with pydantic and are
immutable once loaded.
"""

import os
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError, validator

from .errors import ConfigurationError


DEFAULT_CONFIG_FILE = "carvoyant.yaml"


class LoggingSettings(BaseModel):
    """Configuration for logging."""
    enabled: bool = Field(default=False)
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_to_console: bool = Field(default=True)
    file_path: Optional[str] = None
    backup_count: int = Field(default=5, ge=1, le=20)

    @validator('level', pre=True)
    def normalize_level(cls, v):
        """Accept lower-case level names"""
        return v.upper() if isinstance(v, str) else v

    class Config:
        frozen = True


class ClientSettings(BaseModel):
    """Connection and credential settings for a Carvoyant client."""
    api_url: Optional[str] = None
    access_token: Optional[SecretStr] = None
    api_key: Optional[SecretStr] = None
    security_token: Optional[SecretStr] = None
    timeout: int = Field(default=30, ge=1, le=300)
    verify_ssl: bool = Field(default=True)
    user_agent: str = Field(default="carvoyant-python/0.1.0")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @validator('api_url')
    def validate_api_url(cls, v):
        """Require an absolute http(s) URL"""
        if v is not None and not v.startswith(('http://', 'https://')):
            raise ValueError("api_url must start with http:// or https://")
        return v.rstrip('/') if v else v

    class Config:
        frozen = True

    def credentials(self) -> Dict[str, Optional[str]]:
        """Return the plain-text credentials for building an auth strategy"""
        def reveal(secret: Optional[SecretStr]) -> Optional[str]:
            return secret.get_secret_value() if secret is not None else None

        return {
            'access_token': reveal(self.access_token),
            'api_key': reveal(self.api_key),
            'security_token': reveal(self.security_token)
        }


class ConfigManager:
    """Loads ``ClientSettings`` from YAML and the environment."""

    # Environment variable -> settings path
    ENV_VARIABLES: Dict[str, Tuple[str, ...]] = {
        'CARVOYANT_API_URL': ('api_url',),
        'CARVOYANT_ACCESS_TOKEN': ('access_token',),
        'CARVOYANT_API_KEY': ('api_key',),
        'CARVOYANT_SECURITY_TOKEN': ('security_token',),
        'CARVOYANT_TIMEOUT': ('timeout',),
        'CARVOYANT_VERIFY_SSL': ('verify_ssl',),
        'CARVOYANT_LOGGING_ENABLED': ('logging', 'enabled'),
        'CARVOYANT_LOGGING_LEVEL': ('logging', 'level'),
        'CARVOYANT_LOGGING_FILE_PATH': ('logging', 'file_path'),
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to a YAML configuration file. Defaults to
                ``$CARVOYANT_CONFIG`` or ``carvoyant.yaml`` in the working directory.
        """
        self.config_path = Path(config_path) if config_path else self._get_default_config_path()
        self._settings: Optional[ClientSettings] = None
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

    def _get_default_config_path(self) -> Path:
        """Get the default configuration file path."""
        return Path(os.getenv('CARVOYANT_CONFIG', DEFAULT_CONFIG_FILE))

    def load_config(self) -> ClientSettings:
        """Load and validate settings, file first and environment second.

        Returns:
            Validated client settings

        Raises:
            ConfigurationError: If the file cannot be parsed or validation fails
        """
        with self._lock:
            if self._settings is not None:
                return self._settings

            config_data: Dict[str, Any] = {}

            if self.config_path.exists():
                self.logger.info(f"Loading config from {self.config_path}")
                self._deep_merge(config_data, self._load_yaml_file(self.config_path))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {sorted(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            try:
                self._settings = ClientSettings(**config_data)
            except ValidationError as e:
                self.logger.error(f"Configuration validation failed: {e}")
                raise ConfigurationError(f"Invalid configuration: {e}")

            return self._settings

    def reload_config(self) -> ClientSettings:
        """Discard cached settings and load them again."""
        with self._lock:
            self._settings = None
        return self.load_config()

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Returns:
            Configuration dictionary
        """
        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a mapping at the top of {file_path}")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Example: CARVOYANT_LOGGING_LEVEL -> logging.level
        """
        overrides: Dict[str, Any] = {}

        for env_name, config_path in self.ENV_VARIABLES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue

            current = overrides
            for part in config_path[:-1]:
                current = current.setdefault(part, {})
            # pydantic coerces numeric and boolean strings for typed fields
            current[config_path[-1]] = value

        return overrides

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        for key, value in update_dict.items():
            if isinstance(value, dict) and isinstance(base_dict.get(key), dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value
