"""Registry for core MCP tool definitions and handlers."""

from .summarize_results import (
    TOOL_DEFINITION as SUMMARIZE_TEST_RESULTS_TOOL,
    handle as handle_summarize_test_results,
)

# All core tool definitions
TOOLS = [
    SUMMARIZE_TEST_RESULTS_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "summarize_test_results": handle_summarize_test_results,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "SUMMARIZE_TEST_RESULTS_TOOL",
    # Handlers
    "HANDLERS",
    "handle_summarize_test_results",
]
