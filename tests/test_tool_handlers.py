"""
Tests for the MCP Tool Handlers.

- summarize_results.py
- publish_test_results.py
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from jest_checks_mcp.handlers.core.summarize_results import (
    TOOL_DEFINITION as SUMMARIZE_TOOL,
    handle as handle_summarize,
)
from jest_checks_mcp.handlers.github.publish_test_results import (
    TOOL_DEFINITION as PUBLISH_TOOL,
    format_publish_report,
    handle as handle_publish,
)
from jest_checks_mcp.services import (
    CheckRunInfo,
    CommentInfo,
    CoverageStatus,
    ErrorCode,
    PublishReport,
    ServiceResult,
)

BASE_DIR = "/home/runner/work/app"


def make_report(**overrides):
    report = {
        "tests_passed": True,
        "check_run": CheckRunInfo(id=1, url="https://github.com/octo/app/runs/1"),
        "annotations": 0,
        "truncated_annotations": 0,
        "coverage": CoverageStatus.DISABLED,
    }
    report.update(overrides)
    return PublishReport(**report)


# =============================================================================
# Tool Definition Tests
# =============================================================================

class TestToolDefinitions:
    """Tests for TOOL_DEFINITION objects."""

    def test_summarize_tool_definition(self):
        """summarize_test_results tool has correct structure."""
        assert SUMMARIZE_TOOL.name == "summarize_test_results"
        assert "summarize" in SUMMARIZE_TOOL.description.lower()
        assert SUMMARIZE_TOOL.inputSchema["required"] == ["results_file"]

    def test_publish_tool_definition(self):
        """publish_test_results tool has correct structure."""
        assert PUBLISH_TOOL.name == "publish_test_results"
        assert "check run" in PUBLISH_TOOL.description.lower()
        assert set(PUBLISH_TOOL.inputSchema["required"]) == {"results_file", "repository", "head_sha"}


# =============================================================================
# summarize_test_results
# =============================================================================

class TestSummarizeHandler:
    """Tests for the summarize_test_results handler."""

    @pytest.mark.asyncio
    async def test_missing_results_file(self):
        result = await handle_summarize({})

        assert result[0].text == "Error: results_file is required"

    @pytest.mark.asyncio
    async def test_file_not_found(self, tmp_path):
        result = await handle_summarize({"results_file": str(tmp_path / "nope.json")})

        assert result[0].text.startswith("Error: ")
        assert "file not found" in result[0].text

    @pytest.mark.asyncio
    async def test_passing_run(self, jest_document, write_results):
        path = write_results(jest_document())

        result = await handle_summarize({"results_file": str(path), "base_dir": BASE_DIR})

        text = result[0].text
        assert "JEST RESULTS: ✅ PASSED" in text
        assert "3 tests passing in 2 suites." in text
        assert "Failures" not in text

    @pytest.mark.asyncio
    async def test_failing_run_lists_failures(self, failing_document, write_results):
        path = write_results(failing_document)

        result = await handle_summarize({"results_file": str(path), "base_dir": BASE_DIR})

        text = result[0].text
        assert "JEST RESULTS: ❌ FAILED" in text
        assert "Failures (3)" in text
        assert "[src/auth.test.js:12] Auth > login > rejects bad password" in text
        assert "[src/cart.test.js] totals items" in text

    @pytest.mark.asyncio
    async def test_reports_check_title_and_output(self, failing_document, write_results):
        """The report carries the check title and the ANSI-free failure output."""
        path = write_results(failing_document)

        result = await handle_summarize({"results_file": str(path), "base_dir": BASE_DIR})

        text = result[0].text
        assert "📋 Jest tests failed" in text
        assert "📝 Output:" in text
        assert "● Auth › login › rejects bad password" in text
        assert "\u001b[" not in text

    @pytest.mark.asyncio
    async def test_passing_run_has_title_and_no_output(self, jest_document, write_results):
        result = await handle_summarize({"results_file": str(write_results(jest_document()))})

        assert "📋 Jest tests passed" in result[0].text
        assert "Output:" not in result[0].text

    @pytest.mark.asyncio
    async def test_coverage_table_included(self, jest_document, write_results, math_coverage):
        document = jest_document(coverageMap={math_coverage["path"]: math_coverage})

        result = await handle_summarize({
            "results_file": str(write_results(document)),
            "base_dir": BASE_DIR,
        })

        assert "Code coverage" in result[0].text
        assert "src/math.js" in result[0].text

    @pytest.mark.asyncio
    async def test_unusable_coverage_warned(self, jest_document, write_results):
        document = jest_document(coverageMap={f"{BASE_DIR}/a.js": {"path": "a.js"}})

        result = await handle_summarize({"results_file": str(write_results(document))})

        assert "no file could be summarized" in result[0].text


# =============================================================================
# publish_test_results
# =============================================================================

class TestPublishHandler:
    """Tests for the publish_test_results handler."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["results_file", "repository", "head_sha"])
    async def test_missing_required_input(self, missing):
        arguments = {"results_file": "jest.results.json", "repository": "octo/app", "head_sha": "abc"}
        del arguments[missing]

        result = await handle_publish(arguments)

        assert result[0].text == f"Error: {missing} is required"

    @pytest.mark.asyncio
    async def test_requires_token(self, monkeypatch):
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)

        result = await handle_publish({
            "results_file": "jest.results.json",
            "repository": "octo/app",
            "head_sha": "abc",
        })

        assert "GitHub token required" in result[0].text

    @pytest.mark.asyncio
    async def test_publishes_with_arguments(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "tok")
        service = MagicMock()
        service.publish = AsyncMock(return_value=ServiceResult.ok(make_report()))

        with patch(
            "jest_checks_mcp.handlers.github.publish_test_results.create_publishing_service",
            return_value=service,
        ) as factory:
            result = await handle_publish({
                "results_file": "jest.results.json",
                "repository": "octo/app",
                "head_sha": "abc",
                "pr_number": 7,
                "coverage_comment": True,
                "base_dir": BASE_DIR,
            })

        factory.assert_called_once_with(token="tok", repository="octo/app")
        service.publish.assert_awaited_once_with(
            results_file="jest.results.json",
            base_dir=BASE_DIR,
            head_sha="abc",
            check_name="Jest",
            coverage_comment=True,
            pr_number=7,
        )
        assert "RESULTS PUBLISHED" in result[0].text

    @pytest.mark.asyncio
    async def test_service_error(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "tok")
        service = MagicMock()
        service.publish = AsyncMock(return_value=ServiceResult.fail(
            ErrorCode.GITHUB_AUTH_ERROR, "Failed to create check run: Bad credentials"
        ))

        with patch(
            "jest_checks_mcp.handlers.github.publish_test_results.create_publishing_service",
            return_value=service,
        ):
            result = await handle_publish({
                "results_file": "jest.results.json",
                "repository": "octo/app",
                "head_sha": "abc",
            })

        assert result[0].text == "Error: Failed to create check run: Bad credentials"


class TestFormatPublishReport:
    """Report text."""

    def test_passed_without_comment(self):
        text = format_publish_report(make_report())

        assert "✅ Tests passed" in text
        assert "https://github.com/octo/app/runs/1" in text
        assert "Coverage comment: disabled" in text

    def test_failed_with_comment_and_truncation(self):
        text = format_publish_report(make_report(
            tests_passed=False,
            annotations=50,
            truncated_annotations=5,
            coverage=CoverageStatus.POSTED,
            comment=CommentInfo(id=9, url="https://github.com/octo/app/pull/7#issuecomment-9"),
        ))

        assert "❌ Tests failed" in text
        assert "5 annotation(s) dropped" in text
        assert "issuecomment-9" in text

    def test_not_a_pull_request(self):
        text = format_publish_report(make_report(coverage=CoverageStatus.NOT_A_PULL_REQUEST))

        assert "not a pull request" in text
