"""
Publish Test Results Tool - Publish a Jest run to GitHub.

This tool:
1. Creates a completed check run with failure annotations
2. Optionally replaces the sticky coverage comment on the pull request

Uses PublishingService backed by GitHubService.
"""

from __future__ import annotations

import os

from mcp.types import TextContent, Tool

from ...constants import DEFAULT_CHECK_NAME
from ...services import PublishReport, create_publishing_service

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="publish_test_results",
    description=(
        "Publish a Jest JSON result file to GitHub as a check run with line "
        "annotations for each failed test, and optionally a coverage comment "
        "on the pull request (replacing the previous one)."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "results_file": {
                "type": "string",
                "description": "Path to the Jest JSON result file"
            },
            "repository": {
                "type": "string",
                "description": "Repository as 'owner/name' or GitHub URL"
            },
            "head_sha": {
                "type": "string",
                "description": "Commit SHA the check run is attached to"
            },
            "pr_number": {
                "type": "integer",
                "description": "Pull request number for the coverage comment"
            },
            "check_name": {
                "type": "string",
                "description": f"Check run name (default: {DEFAULT_CHECK_NAME})"
            },
            "coverage_comment": {
                "type": "boolean",
                "description": "Post the coverage table as a PR comment (default: false)"
            },
            "base_dir": {
                "type": "string",
                "description": "Directory stripped from reported paths (default: current directory)"
            }
        },
        "required": ["results_file", "repository", "head_sha"]
    }
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """
    Handle publish_test_results tool call.

    Args:
        arguments: Tool arguments

    Returns:
        List with single TextContent containing result
    """
    results_file = arguments.get("results_file", "")
    repository = arguments.get("repository", "")
    head_sha = arguments.get("head_sha", "")

    # Validate required inputs
    if not results_file:
        return [TextContent(type="text", text="Error: results_file is required")]
    if not repository:
        return [TextContent(type="text", text="Error: repository is required")]
    if not head_sha:
        return [TextContent(type="text", text="Error: head_sha is required")]

    token = os.getenv("GITHUB_TOKEN")
    if not token:
        return [TextContent(
            type="text",
            text="Error: GitHub token required to publish results. Set GITHUB_TOKEN environment variable."
        )]

    service = create_publishing_service(token=token, repository=repository)

    result = await service.publish(
        results_file=results_file,
        base_dir=arguments.get("base_dir") or os.getcwd(),
        head_sha=head_sha,
        check_name=arguments.get("check_name") or DEFAULT_CHECK_NAME,
        coverage_comment=bool(arguments.get("coverage_comment", False)),
        pr_number=arguments.get("pr_number"),
    )

    if not result.success:
        return [TextContent(type="text", text=f"Error: {result.error.message}")]

    return [TextContent(type="text", text=format_publish_report(result.data))]


# =============================================================================
# Helper Functions
# =============================================================================

def format_publish_report(report: PublishReport) -> str:
    """Format a PublishReport as readable text."""
    status = "✅ Tests passed" if report.tests_passed else "❌ Tests failed"

    lines = [
        "📤 RESULTS PUBLISHED",
        "=" * 50,
        "",
        status,
        "",
        f"🔗 Check run: {report.check_run.url}",
        f"📌 Annotations: {report.annotations}",
    ]

    if report.truncated_annotations:
        lines.append(f"⚠️ {report.truncated_annotations} annotation(s) dropped (GitHub limit)")

    if report.comment:
        lines.append(f"💬 Coverage comment: {report.comment.url}")
    else:
        lines.append(f"💬 Coverage comment: {report.coverage.value.replace('_', ' ')}")

    return "\n".join(lines) + "\n"
