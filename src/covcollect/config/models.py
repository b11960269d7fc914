"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (COVCOLLECT__SECTION__KEY)
3. YAML file (--config PATH, or .covcollect.yaml in the working directory)
4. Built-in defaults (this file)

Environment Variable Format:
    COVCOLLECT__<SECTION>__<KEY>=<VALUE>

Examples:
    COVCOLLECT__LOGGING__LEVEL=DEBUG
    COVCOLLECT__REPORT__OUTPUT_FORMAT=json
    COVCOLLECT__REPORT__NO_DATA_LABEL="n/a"
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        COVCOLLECT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Anything below WARNING is diagnostic chatter on stderr.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ReportConfig(BaseModel):
    """Package report configuration.

    Env vars:
        COVCOLLECT__REPORT__OUTPUT_FORMAT: text or json
        COVCOLLECT__REPORT__NO_DATA_LABEL: Label for packages without statements
    """

    output_format: Literal["text", "json"] = Field(
        default="text",
        description="Aligned text lines or a structured JSON summary.",
    )
    no_data_label: str = Field(
        default="no data",
        description="Shown instead of a percentage for packages with zero statements.",
    )

    @field_validator("no_data_label")
    @classmethod
    def validate_no_data_label(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("no_data_label must not be blank")
        return v


class CovCollectConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
