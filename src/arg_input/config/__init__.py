from .loader import ConfigError, load_config, load_yaml_config
from .models import AppConfig, InputConfig, LoggingConfig, OutputConfig

# Config exports are intentionally small.
__all__ = [
    "AppConfig",
    "ConfigError",
    "InputConfig",
    "LoggingConfig",
    "OutputConfig",
    "load_config",
    "load_yaml_config",
]
