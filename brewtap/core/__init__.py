"""Core types: results, exit codes and release configuration."""

from .config import ConfigError, ConfigOverrides, ReleaseConfig, resolve_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "ConfigOverrides",
    "ReleaseConfig",
    "resolve_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
