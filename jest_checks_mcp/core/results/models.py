"""Data models for a parsed Jest run."""

from dataclasses import dataclass, field
from typing import Literal

# Statuses Jest reports per assertion
AssertionStatus = Literal[
    "passed",
    "failed",
    "skipped",
    "pending",
    "todo",
    "disabled",
    "focused",
]


@dataclass(frozen=True)
class Location:
    """Source position of an assertion (Jest's --testLocationInResults)."""
    line: int
    column: int = 0


@dataclass(frozen=True)
class Assertion:
    """A single `it`/`test` block result."""
    status: str
    title: str
    ancestor_titles: tuple[str, ...] = ()
    location: Location | None = None
    failure_messages: tuple[str, ...] = ()

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @property
    def full_title(self) -> str:
        """Describe-block chain plus own title, e.g. 'Auth > login > rejects bad password'."""
        return " > ".join([*self.ancestor_titles, self.title])


@dataclass(frozen=True)
class TestFileResult:
    """Results of one test file."""
    __test__ = False  # not a pytest test class

    file_path: str
    message: str = ""
    assertion_results: tuple[Assertion, ...] = ()

    @property
    def failed_assertions(self) -> list[Assertion]:
        return [a for a in self.assertion_results if a.failed]


@dataclass(frozen=True)
class Result:
    """Complete Jest run (the --json document)."""
    success: bool
    num_total_tests: int
    num_passed_tests: int
    num_failed_tests: int
    num_total_test_suites: int
    num_passed_test_suites: int
    num_failed_test_suites: int
    test_results: tuple[TestFileResult, ...] = ()
    coverage_map: dict | None = field(default=None, compare=False)

    @property
    def failed_assertion_count(self) -> int:
        return sum(len(r.failed_assertions) for r in self.test_results)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON response."""
        return {
            "success": self.success,
            "tests": {
                "total": self.num_total_tests,
                "passed": self.num_passed_tests,
                "failed": self.num_failed_tests,
            },
            "suites": {
                "total": self.num_total_test_suites,
                "passed": self.num_passed_test_suites,
                "failed": self.num_failed_test_suites,
            },
            "failed_assertions": self.failed_assertion_count,
            "has_coverage": self.coverage_map is not None,
        }
