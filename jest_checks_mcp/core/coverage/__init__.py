"""Coverage module - summarize Jest's coverage map into a Markdown table."""

from .summary import FileSummary, Metric, percent, summarize_file
from .table import format_pct, get_coverage_table, markdown_table

__all__ = [
    "get_coverage_table",
    "markdown_table",
    "format_pct",
    "summarize_file",
    "percent",
    "FileSummary",
    "Metric",
]
