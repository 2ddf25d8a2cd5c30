"""Registry for GitHub MCP tool definitions and handlers."""

from .publish_test_results import (
    TOOL_DEFINITION as PUBLISH_TEST_RESULTS_TOOL,
)
from .publish_test_results import (
    handle as handle_publish_test_results,
)

# All GitHub tool definitions
TOOLS = [
    PUBLISH_TEST_RESULTS_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "publish_test_results": handle_publish_test_results,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "PUBLISH_TEST_RESULTS_TOOL",
    # Handlers
    "HANDLERS",
    "handle_publish_test_results",
]
