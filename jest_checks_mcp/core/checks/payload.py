"""Check Payload Builder - compose the check run request for a Jest run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...constants import CHECK_TITLE_FAILED, CHECK_TITLE_PASSED, MAX_ANNOTATIONS
from ..results import Result
from .annotations import Annotation, build_annotations
from .ansi import strip_ansi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckOutput:
    """The `output` object of a check run."""
    title: str
    summary: str
    text: str | None = None
    annotations: list[Annotation] = field(default_factory=list)
    truncated_annotations: int = 0

    def to_dict(self) -> dict:
        output = {
            "title": self.title,
            "summary": self.summary,
            "annotations": [a.to_dict() for a in self.annotations],
        }
        if self.text is not None:
            output["text"] = self.text
        return output


@dataclass(frozen=True)
class CheckPayload:
    """A completed check run for one commit."""
    name: str
    head_sha: str
    conclusion: str
    output: CheckOutput
    status: str = "completed"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "head_sha": self.head_sha,
            "status": self.status,
            "conclusion": self.conclusion,
            "output": self.output.to_dict(),
        }


def build_check_payload(
    result: Result,
    base_dir: str,
    head_sha: str,
    check_name: str,
    max_annotations: int = MAX_ANNOTATIONS
) -> CheckPayload:
    """Build the check run request.

    Annotations beyond `max_annotations` are dropped from the end, so the
    ones kept are always the first failures in file/assertion order.
    """
    annotations = build_annotations(result, base_dir)
    dropped = max(0, len(annotations) - max_annotations)
    if dropped:
        logger.warning(
            f"{len(annotations)} failures found; only the first {max_annotations} "
            f"are annotated ({dropped} dropped)"
        )
        annotations = annotations[:max_annotations]

    payload = CheckPayload(
        name=check_name,
        head_sha=head_sha,
        conclusion="success" if result.success else "failure",
        output=CheckOutput(
            title=CHECK_TITLE_PASSED if result.success else CHECK_TITLE_FAILED,
            summary=format_summary(result),
            text=get_output_text(result),
            annotations=annotations,
            truncated_annotations=dropped,
        ),
    )

    logger.debug(f"Check payload: {payload.to_dict()}")
    return payload


def format_summary(result: Result) -> str:
    """One-line summary of test and suite counts."""

    if result.success:
        suites = result.num_passed_test_suites
        plural = "s" if suites > 1 else ""
        return f"{result.num_passed_tests} tests passing in {suites} suite{plural}."

    # The suites numerator is the failed *tests* count; kept for output compatibility
    return (
        f"Failed tests: {result.num_failed_tests}/{result.num_total_tests}. "
        f"Failed suites: {result.num_failed_tests}/{result.num_total_test_suites}."
    )


def get_output_text(result: Result) -> str | None:
    """Raw failure output of every file, in a code block. None on success."""

    if result.success:
        return None

    messages = [strip_ansi(r.message) for r in result.test_results]
    return as_markdown_code("\n".join(m for m in messages if m))


def as_markdown_code(text: str) -> str:
    """Wrap text in a fenced code block."""
    return "```\n" + text.rstrip() + "\n```"
