"""
Shared constants used across the project.
"""

from typing import Final

# Marker prefix of the sticky coverage comment (also how we find our old ones)
COVERAGE_HEADER: Final[str] = ":loop: **Code coverage**\n\n"

# Columns of the coverage table, in order
COVERAGE_COLUMNS: Final[tuple[str, ...]] = (
    "Filename", "Statements", "Branches", "Functions", "Lines"
)
COVERAGE_METRICS: Final[tuple[str, ...]] = (
    "statements", "branches", "functions", "lines"
)

# Check run output
CHECK_TITLE_PASSED: Final[str] = "Jest tests passed"
CHECK_TITLE_FAILED: Final[str] = "Jest tests failed"

# GitHub accepts at most 50 annotations per check run request
MAX_ANNOTATIONS: Final[int] = 50

# Only the first page of PR comments is inspected
COMMENTS_PER_PAGE: Final[int] = 100

# Identity that posts (and may delete) coverage comments
DEFAULT_BOT_LOGIN: Final[str] = "github-actions[bot]"

# Jest invocation
RESULTS_FILENAME: Final[str] = "jest.results.json"
ARGS_PLACEHOLDER: Final[str] = "{{args}}"
DEFAULT_TEST_COMMAND: Final[str] = "npx jest {{args}}"
DEFAULT_CHECK_NAME: Final[str] = "Jest"
