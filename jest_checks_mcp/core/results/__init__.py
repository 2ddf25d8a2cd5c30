"""Results module - parse Jest JSON output into a normalized model."""

from .models import Assertion, Location, Result, TestFileResult
from .parser import parse_results, result_from_dict

__all__ = [
    "parse_results",
    "result_from_dict",
    "Result",
    "TestFileResult",
    "Assertion",
    "Location",
]
