"""covcollect error types with typed error codes.

Error code ranges:
- 1xxx: Profile input
- 2xxx: Validation
- 3xxx: Config
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Profile input (1xxx)
    PROFILE_PARSE_ERROR = 1001
    PROFILE_NOT_FOUND = 1002

    # Validation (2xxx)
    NO_PROFILES = 2001
    TOO_MANY_PROFILES = 2002
    UNSUPPORTED_MODE = 2003

    # Config (3xxx)
    CONFIG_PARSE_ERROR = 3001
    CONFIG_INVALID_VALUE = 3002
    CONFIG_FILE_NOT_FOUND = 3003


@dataclass(frozen=True, slots=True)
class CovCollectError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'NO_PROFILES')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ProfileParseError(CovCollectError):
    """A cover profile could not be read or is malformed."""

    @classmethod
    def not_found(cls, path: str) -> "ProfileParseError":
        return cls(
            code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"cover profile not found: {path}",
            details={"path": path},
        )

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "ProfileParseError":
        return cls(
            code=ErrorCode.PROFILE_PARSE_ERROR,
            message=f"failed to read cover profile {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def bad_mode_line(cls, source: str, line: str) -> "ProfileParseError":
        return cls(
            code=ErrorCode.PROFILE_PARSE_ERROR,
            message=f"{source}: bad mode line: {line!r}",
            details={"source": source, "line": line},
        )

    @classmethod
    def mixed_modes(cls, source: str, lineno: int, mode: str, expected: str) -> "ProfileParseError":
        return cls(
            code=ErrorCode.PROFILE_PARSE_ERROR,
            message=f"{source}:{lineno}: mode {mode!r} does not match earlier mode {expected!r}",
            details={"source": source, "line_number": lineno, "mode": mode, "expected": expected},
        )

    @classmethod
    def bad_line(cls, source: str, lineno: int, line: str) -> "ProfileParseError":
        return cls(
            code=ErrorCode.PROFILE_PARSE_ERROR,
            message=f"{source}:{lineno}: line {line!r} doesn't match expected format",
            details={"source": source, "line_number": lineno, "line": line},
        )


class ValidationError(CovCollectError):
    """The collected profiles cannot be aggregated."""


class NoInputError(ValidationError):
    @classmethod
    def create(cls) -> "NoInputError":
        return cls(code=ErrorCode.NO_PROFILES, message="no cover profiles provided")


class TooManyInputsError(ValidationError):
    @classmethod
    def create(cls, count: int) -> "TooManyInputsError":
        return cls(
            code=ErrorCode.TOO_MANY_PROFILES,
            message="only one cover profile is supported",
            details={"count": count},
        )


class UnsupportedModeError(ValidationError):
    @classmethod
    def create(cls, mode: str, file_name: str) -> "UnsupportedModeError":
        return cls(
            code=ErrorCode.UNSUPPORTED_MODE,
            message=f"coverage collector only supports set mode, got {mode!r}",
            details={"mode": mode, "file": file_name},
        )


class ConfigError(CovCollectError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )
