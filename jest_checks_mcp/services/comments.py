"""Coverage comment service.

Keeps at most one coverage comment per pull request: earlier comments posted
by the automation identity under the coverage header are deleted before the
new one goes up.

Only the first page of comments (COMMENTS_PER_PAGE) is inspected, so an old
coverage comment buried deeper in a very long thread is left alone.
"""


from __future__ import annotations

import asyncio
import logging

from ..constants import COVERAGE_HEADER, DEFAULT_BOT_LOGIN
from .base import ErrorCode, ServiceResult
from .platform import CommentInfo, CommentRecord, PlatformClient

logger = logging.getLogger(__name__)


class CoverageCommentService:
    """Replace the sticky coverage comment on a pull request."""

    def __init__(
        self,
        client: PlatformClient,
        bot_login: str = DEFAULT_BOT_LOGIN,
        header: str = COVERAGE_HEADER
    ):
        self._client = client
        self._bot_login = bot_login
        self._header = header

    def is_previous_comment(self, comment: CommentRecord) -> bool:
        """Ours if authored by the automation identity AND under the coverage header."""
        return comment.author == self._bot_login and comment.body.startswith(self._header)

    async def reconcile(self, issue_number: int, body: str) -> ServiceResult[CommentInfo]:
        """Delete previous coverage comments, then post `body`.

        An empty body leaves existing comments untouched. If any deletion
        fails, nothing is posted.
        """
        if not body:
            return ServiceResult.fail(
                ErrorCode.COVERAGE_UNAVAILABLE,
                "No coverage table to post; existing comments left untouched"
            )

        deleted = await self.delete_previous_comments(issue_number)
        if not deleted.success:
            return deleted.propagate()

        result = await asyncio.to_thread(
            self._client.create_issue_comment, issue_number, body
        )
        if result.success:
            logger.info(f"Posted coverage comment: {result.data.url}")
        return result

    async def delete_previous_comments(self, issue_number: int) -> ServiceResult[list[int]]:
        """Delete every previous coverage comment, concurrently.

        Waits for all deletions; fails if any of them failed.
        """
        listed = await asyncio.to_thread(self._client.list_issue_comments, issue_number)
        if not listed.success:
            return listed.propagate()

        previous = [c for c in listed.data if self.is_previous_comment(c)]
        if not previous:
            return ServiceResult.ok([])

        logger.info(f"Deleting {len(previous)} previous coverage comment(s)")

        outcomes = await asyncio.gather(
            *(
                asyncio.to_thread(self._client.delete_issue_comment, c.id)
                for c in previous
            ),
            return_exceptions=True,
        )

        deleted = []
        errors = []
        for comment, outcome in zip(previous, outcomes):
            if isinstance(outcome, BaseException):
                errors.append(f"comment {comment.id}: {outcome}")
            elif not outcome.success:
                errors.append(f"comment {comment.id}: {outcome.error.message}")
            else:
                deleted.append(comment.id)

        if errors:
            return ServiceResult.fail(
                ErrorCode.GITHUB_API_ERROR,
                f"Failed to delete {len(errors)} previous coverage comment(s): "
                + "; ".join(errors),
                details={"deleted": deleted}
            )

        return ServiceResult.ok(deleted)
