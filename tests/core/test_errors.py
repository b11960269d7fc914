"""Tests for error types and codes."""

import pytest

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


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.PROFILE_PARSE_ERROR, 1000),
            (ErrorCode.PROFILE_NOT_FOUND, 1000),
            (ErrorCode.NO_PROFILES, 2000),
            (ErrorCode.TOO_MANY_PROFILES, 2000),
            (ErrorCode.UNSUPPORTED_MODE, 2000),
            (ErrorCode.CONFIG_PARSE_ERROR, 3000),
            (ErrorCode.CONFIG_INVALID_VALUE, 3000),
            (ErrorCode.CONFIG_FILE_NOT_FOUND, 3000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestCovCollectError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = CovCollectError(
            code=ErrorCode.NO_PROFILES,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "NO_PROFILES",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        error = CovCollectError(code=ErrorCode.UNSUPPORTED_MODE, message="Something broke")
        assert str(error) == "[2003] UNSUPPORTED_MODE: Something broke"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        with pytest.raises(CovCollectError):
            raise NoInputError.create()


class TestValidationErrors:
    """Factory tests for the validation errors."""

    def test_no_input(self) -> None:
        err = NoInputError.create()
        assert isinstance(err, ValidationError)
        assert err.code == ErrorCode.NO_PROFILES
        assert err.message == "no cover profiles provided"

    def test_too_many_inputs(self) -> None:
        err = TooManyInputsError.create(3)
        assert err.code == ErrorCode.TOO_MANY_PROFILES
        assert err.details == {"count": 3}

    def test_unsupported_mode(self) -> None:
        err = UnsupportedModeError.create("atomic", "pkg/a.go")
        assert err.code == ErrorCode.UNSUPPORTED_MODE
        assert "'atomic'" in err.message
        assert err.details == {"mode": "atomic", "file": "pkg/a.go"}


class TestProfileParseError:
    """ProfileParseError factory tests."""

    def test_not_found(self) -> None:
        err = ProfileParseError.not_found("cover.out")
        assert err.code == ErrorCode.PROFILE_NOT_FOUND
        assert "cover.out" in err.message

    def test_bad_line(self) -> None:
        err = ProfileParseError.bad_line("cover.out", 7, "junk")
        assert err.code == ErrorCode.PROFILE_PARSE_ERROR
        assert err.message == "cover.out:7: line 'junk' doesn't match expected format"
        assert err.details["line_number"] == 7

    def test_mixed_modes(self) -> None:
        err = ProfileParseError.mixed_modes("cover.out", 4, "count", "set")
        assert err.details["mode"] == "count"
        assert err.details["expected"] == "set"


class TestConfigError:
    """ConfigError factory method tests."""

    def test_parse_error(self) -> None:
        err = ConfigError.parse_error("/path/config.yaml", "invalid syntax")
        assert err.code == ErrorCode.CONFIG_PARSE_ERROR
        assert "/path/config.yaml" in err.message
        assert err.details["reason"] == "invalid syntax"

    def test_invalid_value(self) -> None:
        err = ConfigError.invalid_value("report.output_format", "xml", "bad literal")
        assert err.code == ErrorCode.CONFIG_INVALID_VALUE
        assert err.details == {
            "field": "report.output_format",
            "value": "xml",
            "reason": "bad literal",
        }

    def test_file_not_found(self) -> None:
        err = ConfigError.file_not_found("/etc/missing.yaml")
        assert err.code == ErrorCode.CONFIG_FILE_NOT_FOUND
        assert err.message == "Config file not found: /etc/missing.yaml"
        assert err.to_dict()["details"] == {"path": "/etc/missing.yaml"}
