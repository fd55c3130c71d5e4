"""Core configuration, logging and error types."""

from .config import Settings, get_settings
from .errors import RuleConfigurationError, UnknownValidatorError
from .logging import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "RuleConfigurationError",
    "UnknownValidatorError",
    "configure_logging",
]
