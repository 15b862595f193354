"""Configuration manager with YAML override support."""

import copy
import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml

from . import defaults

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'SOMLATTICE_CONFIG'
CONFIG_FILE_NAME = 'somlattice.yml'


class ConfigError(Exception):
    """Exception raised for configuration errors."""
    pass


class Config:
    """Configuration manager: defaults deep-merged with an optional YAML file."""

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        self.settings = self.load_defaults()
        self.config_path: Optional[Path] = None

        if config_file is None:
            config_file = self._find_config_file()
        elif not Path(config_file).exists():
            raise ConfigError(f"Configuration file not found: {config_file}")

        if config_file is not None:
            self._load_yaml_config(Path(config_file))
            self.config_path = Path(config_file)
            logger.info(f"Loaded configuration from {config_file}")
        else:
            logger.debug("No somlattice.yml found - using defaults only")

        self._validate()

    def _find_config_file(self) -> Optional[Path]:
        """Find somlattice.yml via environment variable, project root or cwd."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            if not Path(env_path).is_file():
                raise ConfigError(f"{CONFIG_ENV_VAR} points to a missing file: {env_path}")
            return Path(env_path)

        potential_locations = [
            defaults.PROJECT_ROOT / CONFIG_FILE_NAME,
            Path.cwd() / CONFIG_FILE_NAME,
        ]
        for location in potential_locations:
            if location.is_file():
                return location

        return None

    def load_defaults(self) -> Dict[str, Any]:
        """Load default configuration settings."""
        return {
            'paths': copy.deepcopy(defaults.PATHS),
            'som': copy.deepcopy(defaults.SOM),
            'logging': copy.deepcopy(defaults.LOGGING),
        }

    def _load_yaml_config(self, config_file: Path):
        """Load and merge configuration from a YAML file."""
        try:
            with open(config_file, 'r') as file:
                yaml_config = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML configuration {config_file}: {e}") from e

        if yaml_config is None:
            return
        if not isinstance(yaml_config, dict):
            raise ConfigError(
                f"Configuration file must contain a YAML mapping, got {type(yaml_config).__name__}"
            )
        self._deep_merge(self.settings, yaml_config)

    def _deep_merge(self, base: dict, override: dict):
        """Deep merge override into base dictionary."""
        for key, value in override.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _validate(self):
        """Validate merged settings."""
        for section in ('paths', 'som', 'logging'):
            if not isinstance(self.settings.get(section), dict):
                raise ConfigError(f"Configuration section '{section}' must be a mapping")

        som = self.settings['som']
        for key in ('xdim', 'ydim'):
            value = som.get(key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"som.{key} must be a positive integer, got {value!r}")

        if str(som.get('topology')).lower() != 'rectangular':
            raise ConfigError(f"som.topology must be 'rectangular', got {som.get('topology')!r}")

        if str(som.get('normalization')).lower() not in ('minmax', 'zscore', 'none'):
            raise ConfigError(
                f"som.normalization must be one of minmax, zscore, none, got {som.get('normalization')!r}"
            )

        if not isinstance(som.get('toroidal'), bool):
            raise ConfigError(f"som.toroidal must be true or false, got {som.get('toroidal')!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        value = self.settings
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    @property
    def paths(self) -> Dict[str, Any]:
        return self.settings['paths']

    @property
    def som(self) -> Dict[str, Any]:
        return self.settings['som']

    @property
    def logging(self) -> Dict[str, Any]:
        return self.settings['logging']

    def __repr__(self) -> str:
        return f"Config(path={self.config_path})"


_config_instance: Optional[Config] = None


def get_config() -> Config:
    """Get the shared configuration instance, loading it on first use."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def get_som_defaults() -> Dict[str, Any]:
    """Get the ``som`` section of the shared configuration."""
    return get_config().som
