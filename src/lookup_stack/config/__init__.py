from .composition import build_log_sink, build_lookup, load_data, load_stack_config
from .loader import ConfigError, load_yaml_config
from .models import LoggingConfig, PathLayer, PrefixLayer, StackConfig, validate_stack_config

__all__ = [
    "ConfigError",
    "load_yaml_config",
    "LoggingConfig",
    "PathLayer",
    "PrefixLayer",
    "StackConfig",
    "validate_stack_config",
    "load_stack_config",
    "load_data",
    "build_log_sink",
    "build_lookup",
]
