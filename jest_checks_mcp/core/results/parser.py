"""Results Parser - Read Jest's --json output into a Result."""

import json
from pathlib import Path

from ...errors import ResultsParseError, ResultsSchemaError
from .models import Assertion, Location, Result, TestFileResult

# Count fields every Jest result document carries
COUNT_FIELDS = (
    ("numTotalTests", "num_total_tests"),
    ("numPassedTests", "num_passed_tests"),
    ("numFailedTests", "num_failed_tests"),
    ("numTotalTestSuites", "num_total_test_suites"),
    ("numPassedTestSuites", "num_passed_test_suites"),
    ("numFailedTestSuites", "num_failed_test_suites"),
)


def parse_results(path: str | Path) -> Result:
    """Read and parse a Jest result file.

    Raises:
        ResultsParseError: file missing, unreadable or not JSON
        ResultsSchemaError: required fields absent or inconsistent
    """
    path = Path(path)

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ResultsParseError(str(path), "file not found") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ResultsParseError(str(path), str(e)) from e

    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise ResultsParseError(str(path), f"invalid JSON ({e})") from e

    return result_from_dict(document)


def result_from_dict(document: object) -> Result:
    """Build a Result from an already-decoded Jest document."""

    if not isinstance(document, dict):
        raise ResultsSchemaError("Jest results must be a JSON object")

    success = document.get("success")
    if not isinstance(success, bool):
        raise ResultsSchemaError("Missing or invalid 'success' field", field="success")

    counts = {}
    for key, attr in COUNT_FIELDS:
        value = document.get(key)
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            raise ResultsSchemaError(f"Missing or invalid '{key}' field", field=key)
        if value < 0:
            raise ResultsSchemaError(f"'{key}' must not be negative", field=key)
        counts[attr] = value

    _check_totals(counts, "tests")
    _check_totals(counts, "test_suites")

    coverage_map = document.get("coverageMap")
    if coverage_map is not None and not isinstance(coverage_map, dict):
        raise ResultsSchemaError("'coverageMap' must be an object", field="coverageMap")

    return Result(
        success=success,
        test_results=tuple(
            _parse_file_result(entry) for entry in _optional_list(document, "testResults")
        ),
        coverage_map=coverage_map,
        **counts,
    )


def _check_totals(counts: dict[str, int], kind: str) -> None:
    """passed + failed may not exceed total."""
    passed = counts[f"num_passed_{kind}"]
    failed = counts[f"num_failed_{kind}"]
    total = counts[f"num_total_{kind}"]

    if passed + failed > total:
        raise ResultsSchemaError(
            f"Inconsistent {kind.replace('_', ' ')} counts: "
            f"{passed} passed + {failed} failed > {total} total"
        )


def _parse_file_result(entry: object) -> TestFileResult:
    """Parse one entry of `testResults`."""

    if not isinstance(entry, dict):
        raise ResultsSchemaError("'testResults' entries must be objects", field="testResults")

    # Jest calls the file path `name`
    file_path = entry.get("name") or entry.get("testFilePath") or ""
    if not isinstance(file_path, str):
        raise ResultsSchemaError("'name' must be a string", field="name")

    return TestFileResult(
        file_path=file_path,
        message=_optional_str(entry, "message"),
        assertion_results=tuple(
            _parse_assertion(a) for a in _optional_list(entry, "assertionResults")
        ),
    )


def _parse_assertion(entry: object) -> Assertion:
    """Parse one entry of `assertionResults`."""

    if not isinstance(entry, dict):
        raise ResultsSchemaError(
            "'assertionResults' entries must be objects", field="assertionResults"
        )

    location = None
    raw_location = entry.get("location")
    if isinstance(raw_location, dict) and _is_int(raw_location.get("line")):
        column = raw_location.get("column")
        location = Location(
            line=raw_location["line"],
            column=column if _is_int(column) else 0,
        )

    return Assertion(
        status=_optional_str(entry, "status"),
        title=_optional_str(entry, "title"),
        ancestor_titles=_string_list(entry, "ancestorTitles"),
        location=location,
        failure_messages=_string_list(entry, "failureMessages"),
    )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _optional_str(entry: dict, key: str) -> str:
    """A string field; absent means empty."""
    if key not in entry:
        return ""
    value = entry[key]
    if not isinstance(value, str):
        raise ResultsSchemaError(f"'{key}' must be a string", field=key)
    return value


def _optional_list(entry: dict, key: str) -> list:
    """A list field; absent or null means empty."""
    value = entry.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResultsSchemaError(f"'{key}' must be an array", field=key)
    return value


def _string_list(entry: dict, key: str) -> tuple[str, ...]:
    values = _optional_list(entry, key)
    if not all(isinstance(value, str) for value in values):
        raise ResultsSchemaError(f"'{key}' must contain only strings", field=key)
    return tuple(values)
