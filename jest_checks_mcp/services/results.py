"""Results service.

Loads a Jest result file and derives the offline artifacts (check output and
coverage table) without talking to GitHub.
"""


from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..constants import CHECK_TITLE_FAILED, CHECK_TITLE_PASSED
from ..core.checks import Annotation, build_annotations, format_summary, get_output_text
from ..core.coverage import get_coverage_table
from ..core.results import Result, parse_results
from ..errors import ResultsParseError, ResultsSchemaError
from .base import ServiceResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultsSummary:
    """Everything derivable from a result file alone."""
    result: Result
    title: str
    summary: str
    text: str | None
    annotations: list[Annotation]
    coverage_table: str | Literal[False]

    def to_dict(self) -> dict:
        return {
            **self.result.to_dict(),
            "title": self.title,
            "summary": self.summary,
            "text": self.text,
            "annotations": [a.to_dict() for a in self.annotations],
            "coverage_table": self.coverage_table,
        }


class ResultsService:
    """Parse Jest result files and summarize them."""

    def load(self, results_file: str | Path) -> ServiceResult[Result]:
        """Parse `results_file` into a Result."""

        try:
            result = parse_results(results_file)
        except (ResultsParseError, ResultsSchemaError) as e:
            return ServiceResult.from_exception(e)

        logger.info(
            f"Parsed {len(result.test_results)} test file(s): "
            f"{result.num_passed_tests}/{result.num_total_tests} tests passed"
        )
        return ServiceResult.ok(result)

    def summarize(
        self,
        results_file: str | Path,
        base_dir: str
    ) -> ServiceResult[ResultsSummary]:
        """Load the file and build summary, annotations and coverage table."""

        loaded = self.load(results_file)
        if not loaded.success:
            return loaded.propagate()

        result = loaded.data
        return ServiceResult.ok(ResultsSummary(
            result=result,
            title=CHECK_TITLE_PASSED if result.success else CHECK_TITLE_FAILED,
            summary=format_summary(result),
            text=get_output_text(result),
            annotations=build_annotations(result, base_dir),
            coverage_table=get_coverage_table(result, base_dir),
        ))
