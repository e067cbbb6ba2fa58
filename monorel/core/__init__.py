"""Core types shared by every layer."""

from .config import ConfigError, ReleaseSettings, load_settings
from .errors import ExitCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "ReleaseSettings",
    "load_settings",
    # errors
    "ExitCode",
    # result
    "Err",
    "Ok",
    "Result",
]
