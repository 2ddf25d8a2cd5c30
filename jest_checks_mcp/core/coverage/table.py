"""Render the coverage map as the Markdown table posted on pull requests."""

from __future__ import annotations

import logging
from typing import Literal

from ...constants import COVERAGE_COLUMNS, COVERAGE_HEADER, COVERAGE_METRICS
from ..paths import strip_base_dir
from ..results import Result
from .summary import FileSummary, summarize_file

logger = logging.getLogger(__name__)

# Column alignment: filename left, percentages right
ALIGNMENT = ("l", "r", "r", "r", "r")


def get_coverage_table(result: Result, base_dir: str) -> str | Literal[False]:
    """Build the coverage comment body.

    Returns:
        "" when the run has no coverage map (coverage not requested),
        False when the map has entries but none could be summarized,
        otherwise the header followed by the Markdown table.
    """
    if not result.coverage_map:
        return ""

    rows = [list(COVERAGE_COLUMNS)]

    for filename, data in result.coverage_map.items():
        summary = summarize_file(data)
        if summary is None:
            logger.debug(f"Skipping coverage entry without summary: {filename}")
            continue
        rows.append(coverage_row(strip_base_dir(filename, base_dir), summary))

    if len(rows) == 1:
        logger.warning("No entries found in coverage data")
        return False

    return COVERAGE_HEADER + markdown_table(rows, ALIGNMENT)


def coverage_row(display_path: str, summary: FileSummary) -> list[str]:
    """One table row: path followed by the four percentages."""
    return [display_path] + [
        format_pct(getattr(summary, metric).pct) for metric in COVERAGE_METRICS
    ]


def format_pct(value: float | int | str) -> str:
    """Print a percentage the way Istanbul's JSON carries it ("100%", "66.66%")."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}%"


def markdown_table(rows: list[list[str]], align: tuple[str, ...]) -> str:
    """Format rows as a padded Markdown table; first row is the header."""

    widths = [
        max(3, *(len(row[i]) for row in rows))
        for i in range(len(rows[0]))
    ]

    def format_row(row: list[str]) -> str:
        cells = [
            cell.rjust(width) if a == "r" else cell.ljust(width)
            for cell, width, a in zip(row, widths, align)
        ]
        return "| " + " | ".join(cells) + " |"

    separators = []
    for width, a in zip(widths, align):
        if a == "r":
            separators.append("-" * (width - 1) + ":")
        else:
            separators.append(":" + "-" * (width - 1))

    lines = [format_row(rows[0]), "| " + " | ".join(separators) + " |"]
    lines.extend(format_row(row) for row in rows[1:])

    return "\n".join(lines)
