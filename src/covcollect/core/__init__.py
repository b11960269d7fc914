"""Core module exports."""

from covcollect.core.errors import (
    ConfigError,
    CovCollectError,
    ErrorCode,
    NoInputError,
    ProfileParseError,
    TooManyInputsError,
    UnsupportedModeError,
    ValidationError,
)
from covcollect.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ConfigError",
    "CovCollectError",
    "ErrorCode",
    "NoInputError",
    "ProfileParseError",
    "TooManyInputsError",
    "UnsupportedModeError",
    "ValidationError",
    # Logging
    "configure_logging",
    "get_logger",
]
