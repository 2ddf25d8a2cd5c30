"""
Service result types shared by every service.

- ServiceResult: success with data, or failure with a ServiceError
- ServiceError: code, message and optional details
- ErrorCode: string codes the entry points report

Core functions raise JestChecksError subclasses. Services turn them into a
failed ServiceResult with `ServiceResult.from_exception`, and the CLI and MCP
handlers decide how to surface it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from ..errors import ConfigurationError, JestChecksError, ResultsParseError, ResultsSchemaError

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Error codes; string values so they serialize as-is."""
    # Inputs
    VALIDATION_ERROR = "validation_error"
    CONFIGURATION_ERROR = "configuration_error"

    # Result file
    FILE_NOT_FOUND = "file_not_found"
    PARSE_ERROR = "parse_error"
    SCHEMA_ERROR = "schema_error"

    # Coverage comment
    COVERAGE_UNAVAILABLE = "coverage_unavailable"

    # GitHub
    GITHUB_AUTH_ERROR = "github_auth_error"
    GITHUB_NOT_FOUND = "github_not_found"
    GITHUB_API_ERROR = "github_api_error"

    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ServiceError:
    """
    Structured error information.

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message, printed by the entry points
        details: Optional context (path, field, HTTP status, deleted ids)
    """
    code: ErrorCode
    message: str
    details: dict | None = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_exception(cls, exc: JestChecksError) -> ServiceError:
        """Translate a core exception into a ServiceError."""
        if isinstance(exc, ResultsParseError):
            code = ErrorCode.FILE_NOT_FOUND if exc.reason == "file not found" else ErrorCode.PARSE_ERROR
            return cls(code, str(exc), {"path": exc.path})
        if isinstance(exc, ResultsSchemaError):
            return cls(ErrorCode.SCHEMA_ERROR, str(exc), {"field": exc.field} if exc.field else None)
        if isinstance(exc, ConfigurationError):
            return cls(ErrorCode.CONFIGURATION_ERROR, str(exc))
        return cls(ErrorCode.INTERNAL_ERROR, str(exc))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Outcome of a service call: data on success, error on failure.

    Usage:
        loaded = service.load("jest.results.json")
        if not loaded.success:
            return loaded.propagate()
        publish(loaded.data)
    """
    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: T) -> ServiceResult[T]:
        """Create a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        code: ErrorCode,
        message: str,
        details: dict | None = None
    ) -> ServiceResult[T]:
        """Create a failed result."""
        return cls(success=False, error=ServiceError(code=code, message=message, details=details))

    @classmethod
    def from_exception(cls, exc: JestChecksError) -> ServiceResult[T]:
        """Create a failed result from a core exception."""
        return cls(success=False, error=ServiceError.from_exception(exc))

    def propagate(self) -> ServiceResult:
        """Pass this failure up from a step whose data type differs from the caller's."""
        if self.success:
            raise ValueError("Cannot propagate a successful result")
        return ServiceResult(success=False, error=self.error)

    def unwrap(self) -> T:
        """
        Get the data, raising if failed.

        Raises:
            JestChecksError: If result is a failure
        """
        if not self.success:
            raise JestChecksError(self.error.message if self.error else "Unknown error")
        return self.data
