from .config import Config, ConfigError, get_config, get_som_defaults

__all__ = ['Config', 'ConfigError', 'get_config', 'get_som_defaults']
