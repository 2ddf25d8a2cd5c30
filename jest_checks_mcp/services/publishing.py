"""Publishing service.

Runs the publish pipeline for one Jest result file:
1. Parse the results
2. Create the check run (with annotations)
3. Optionally replace the sticky coverage comment

Stops at the first failed step. Completed steps are not rolled back.
"""


from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from .. import workflow
from ..constants import DEFAULT_BOT_LOGIN
from ..core.checks import build_check_payload
from ..core.coverage import get_coverage_table
from .base import ServiceResult
from .comments import CoverageCommentService
from .platform import CheckRunInfo, CommentInfo, PlatformClient
from .results import ResultsService

logger = logging.getLogger(__name__)


class CoverageStatus(str, Enum):
    """What happened to the coverage comment."""
    DISABLED = "disabled"
    NOT_COLLECTED = "not_collected"
    UNAVAILABLE = "unavailable"
    NOT_A_PULL_REQUEST = "not_a_pull_request"
    POSTED = "posted"


@dataclass(frozen=True)
class PublishReport:
    """Outcome of a successful publish."""
    tests_passed: bool
    check_run: CheckRunInfo
    annotations: int
    truncated_annotations: int
    coverage: CoverageStatus
    comment: CommentInfo | None = None

    def to_dict(self) -> dict:
        return {
            "tests_passed": self.tests_passed,
            "check_run_url": self.check_run.url,
            "annotations": self.annotations,
            "truncated_annotations": self.truncated_annotations,
            "coverage": self.coverage.value,
            "comment_url": self.comment.url if self.comment else None,
        }


class PublishingService:
    """Publish a Jest run as a check run and an optional coverage comment."""

    def __init__(
        self,
        client: PlatformClient,
        results_service: ResultsService | None = None,
        bot_login: str = DEFAULT_BOT_LOGIN
    ):
        self._client = client
        self._results = results_service or ResultsService()
        self._comments = CoverageCommentService(client, bot_login=bot_login)

    async def publish(
        self,
        results_file: str | Path,
        base_dir: str,
        head_sha: str,
        check_name: str,
        coverage_comment: bool = False,
        pr_number: int | None = None
    ) -> ServiceResult[PublishReport]:
        """Parse `results_file` and publish it."""

        # Step 1: Parse
        with workflow.group("Parsing results"):
            loaded = self._results.load(results_file)
        if not loaded.success:
            return loaded.propagate()
        result = loaded.data

        # Step 2: Check run
        with workflow.group("Adding check result"):
            payload = build_check_payload(result, base_dir, head_sha, check_name)
            created = await asyncio.to_thread(self._client.create_check_run, payload)
        if not created.success:
            return created.propagate()
        logger.info(f"Created check run: {created.data.url}")

        report = PublishReport(
            tests_passed=result.success,
            check_run=created.data,
            annotations=len(payload.output.annotations),
            truncated_annotations=payload.output.truncated_annotations,
            coverage=CoverageStatus.DISABLED,
        )

        if not coverage_comment:
            return ServiceResult.ok(report)

        # Step 3: Coverage comment
        with workflow.group("Adding coverage comment"):
            table = get_coverage_table(result, base_dir)

            if table is False:
                logger.warning("Coverage data has no usable entries; not touching the coverage comment")
                return ServiceResult.ok(replace(report, coverage=CoverageStatus.UNAVAILABLE))

            if not table:
                logger.info("No coverage collected; skipping coverage comment")
                return ServiceResult.ok(replace(report, coverage=CoverageStatus.NOT_COLLECTED))

            if not pr_number:
                logger.info("Not running on a pull request; skipping coverage comment")
                return ServiceResult.ok(replace(report, coverage=CoverageStatus.NOT_A_PULL_REQUEST))

            posted = await self._comments.reconcile(pr_number, table)

        if not posted.success:
            return posted.propagate()

        return ServiceResult.ok(
            replace(report, coverage=CoverageStatus.POSTED, comment=posted.data)
        )
