"""Per-file coverage summaries.

Jest serializes its coverage map as Istanbul file coverage objects
(statementMap/fnMap/branchMap plus hit counters s/f/b). Some setups emit an
already summarized form instead (statements/branches/functions/lines with a
`pct`). Both are accepted; anything else cannot be summarized.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Keys an Istanbul FileCoverage object must have to be summarized
RAW_COVERAGE_KEYS = ("statementMap", "s", "f", "b")


@dataclass(frozen=True)
class Metric:
    """Covered/total counts for one metric and the resulting percentage."""
    total: int
    covered: int
    pct: float | int | str

    @classmethod
    def from_counts(cls, covered: int, total: int) -> Metric:
        return cls(total=total, covered=covered, pct=percent(covered, total))


@dataclass(frozen=True)
class FileSummary:
    """The four coverage metrics of one file."""
    statements: Metric
    branches: Metric
    functions: Metric
    lines: Metric


def percent(covered: int, total: int) -> float:
    """Istanbul's percentage: floored to two decimals, 100 when nothing to cover."""
    if total > 0:
        return math.floor(1000 * 100 * covered / total / 10) / 100
    return 100.0


def summarize_file(data: object) -> FileSummary | None:
    """Summarize one coverage map entry, or None when it can't be summarized."""

    if not isinstance(data, dict):
        return None

    # FileCoverage instances without toJSON serialize as {"data": {...}}
    if "data" in data and isinstance(data["data"], dict):
        data = data["data"]

    if all(isinstance(data.get(key), dict) for key in RAW_COVERAGE_KEYS):
        return _summarize_raw(data)

    return _summary_from_totals(data)


def _summarize_raw(data: dict) -> FileSummary | None:
    """Compute the summary from Istanbul hit counters; None if a counter is malformed."""

    statement_hits = data["s"]
    function_hits = data["f"]
    branch_hits = data["b"]

    if not all(isinstance(counts, list) for counts in branch_hits.values()):
        return None

    branch_counts = [count for counts in branch_hits.values() for count in counts]

    if not all(
        _is_count(count)
        for count in (*statement_hits.values(), *function_hits.values(), *branch_counts)
    ):
        return None

    return FileSummary(
        statements=_from_hits(statement_hits.values()),
        branches=_from_hits(branch_counts),
        functions=_from_hits(function_hits.values()),
        lines=_from_hits(_line_hits(data["statementMap"], statement_hits).values()),
    )


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _from_hits(hits) -> Metric:
    hits = list(hits)
    return Metric.from_counts(
        covered=sum(1 for count in hits if count > 0),
        total=len(hits),
    )


def _line_hits(statement_map: dict, statement_hits: dict) -> dict[int, int]:
    """Hit count per line: the highest count of any statement starting on it.

    Counters without a statementMap entry are skipped.
    """

    lines: dict[int, int] = {}
    for key, count in statement_hits.items():
        try:
            line = statement_map[key]["start"]["line"]
        except (KeyError, TypeError):
            continue
        if line not in lines or lines[line] < count:
            lines[line] = count
    return lines


def _summary_from_totals(data: dict) -> FileSummary | None:
    """Accept an entry that already carries statements/branches/functions/lines."""

    metrics = {}
    for name in ("statements", "branches", "functions", "lines"):
        metric = data.get(name)
        if not isinstance(metric, dict) or "pct" not in metric:
            return None
        metrics[name] = Metric(
            total=metric.get("total", 0),
            covered=metric.get("covered", 0),
            pct=metric["pct"],
        )

    return FileSummary(**metrics)
