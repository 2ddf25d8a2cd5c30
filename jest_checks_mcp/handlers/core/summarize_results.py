"""MCP handler for summarize_test_results (delegates to ResultsService)."""

from __future__ import annotations

import os

from mcp.types import TextContent, Tool

from ...services import ResultsService, ResultsSummary

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="summarize_test_results",
    description=(
        "Summarize a Jest JSON result file (jest --json --testLocationInResults). "
        "Returns pass/fail counts, failure annotations with file and line, "
        "and the per-file coverage table when coverage was collected."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "results_file": {
                "type": "string",
                "description": "Path to the Jest JSON result file"
            },
            "base_dir": {
                "type": "string",
                "description": "Directory stripped from reported paths (default: current directory)"
            }
        },
        "required": ["results_file"]
    }
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """Summarize a result file and return it as readable text."""

    results_file = arguments.get("results_file", "")
    base_dir = arguments.get("base_dir") or os.getcwd()

    if not results_file:
        return [TextContent(type="text", text="Error: results_file is required")]

    service = ResultsService()
    result = service.summarize(results_file, base_dir)

    if not result.success:
        return [TextContent(type="text", text=f"Error: {result.error.message}")]

    return [TextContent(type="text", text=format_summary_report(result.data))]


# =============================================================================
# Response Formatting
# =============================================================================

def format_summary_report(summary: ResultsSummary) -> str:
    """Format a ResultsSummary as readable text."""
    status = "✅ PASSED" if summary.result.success else "❌ FAILED"

    lines = [
        f"🧪 JEST RESULTS: {status}",
        "=" * 50,
        "",
        f"📋 {summary.title}",
        summary.summary,
        "",
    ]

    if summary.text:
        lines.append("📝 Output:")
        lines.append(summary.text)
        lines.append("")

    if summary.annotations:
        lines.append(f"🐛 Failures ({len(summary.annotations)}):")
        for i, annotation in enumerate(summary.annotations, 1):
            loc = f"{annotation.path}:{annotation.start_line}" if annotation.start_line else annotation.path
            lines.append(f"  {i}. [{loc}] {annotation.title}")
        lines.append("")

    if summary.coverage_table is False:
        lines.append("⚠️ Coverage map present but no file could be summarized")
    elif summary.coverage_table:
        lines.append(summary.coverage_table)

    return "\n".join(lines).rstrip() + "\n"
