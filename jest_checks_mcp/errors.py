"""Exceptions raised by the core pipeline.

Services catch these and turn them into a failed ServiceResult.
"""


class JestChecksError(Exception):
    """Base class for all errors raised by jest_checks_mcp."""


class ConfigurationError(JestChecksError):
    """Operator input is missing or malformed (e.g. no GitHub token)."""


class ResultsParseError(JestChecksError):
    """The Jest result file is missing, unreadable, or not valid JSON."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read Jest results from {path}: {reason}")


class ResultsSchemaError(JestChecksError):
    """The Jest result document lacks a required field or breaks an invariant."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
