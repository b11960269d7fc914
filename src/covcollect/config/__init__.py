"""Config module exports."""

from covcollect.config.loader import load_config
from covcollect.config.models import (
    CovCollectConfig,
    LoggingConfig,
    LogOutputConfig,
    ReportConfig,
)

__all__ = [
    "load_config",
    "CovCollectConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ReportConfig",
]
