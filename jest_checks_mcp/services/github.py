"""GitHub service helpers.

Thin PyGithub wrappers for the calls the publisher makes: create a check run,
list/delete/create pull request comments. Implements PlatformClient.
"""


from __future__ import annotations

import logging
import re
from typing import Final

from github import Auth, Github, GithubException

from ..constants import COMMENTS_PER_PAGE
from ..core.checks import CheckPayload
from .base import ErrorCode, ServiceResult
from .platform import CheckRunInfo, CommentInfo, CommentRecord

logger = logging.getLogger(__name__)

REPOSITORY_PATTERNS: Final[tuple[str, ...]] = (
    r"^([\w.-]+)/([\w.-]+)$",
    r"github\.com[/:]([^/]+)/([^/.]+?)(?:\.git)?/?$",
)


class GitHubService:
    """GitHub operations on a single repository."""

    def __init__(
        self,
        token: str,
        repository: str,
        per_page: int = COMMENTS_PER_PAGE,
        client: Github | None = None
    ):
        self._token = token
        self._repository = repository
        self._per_page = per_page
        self._client = client
        self._repo = None  # Lazy initialization
        self._issues = {}
        self._comments = {}

    @property
    def has_token(self) -> bool:
        """Check if authentication token is available."""
        return bool(self._token)

    def _get_client(self) -> Github:
        """Get or create GitHub client (lazy initialization)."""
        if self._client is None:
            self._client = Github(auth=Auth.Token(self._token), per_page=self._per_page)
        return self._client

    def _get_repo(self):
        if self._repo is None:
            self._repo = self._get_client().get_repo(self.full_name)
        return self._repo

    def _get_issue(self, issue_number: int):
        if issue_number not in self._issues:
            self._issues[issue_number] = self._get_repo().get_issue(issue_number)
        return self._issues[issue_number]

    @property
    def full_name(self) -> str:
        """'owner/name' of the target repository."""
        parsed = parse_repository(self._repository)
        if not parsed:
            return self._repository
        return "/".join(parsed)

    # =========================================================================
    # Check Runs
    # =========================================================================

    def create_check_run(self, payload: CheckPayload) -> ServiceResult[CheckRunInfo]:
        """Create a completed check run on the payload's commit."""

        validation_error = self._validate()
        if validation_error:
            return validation_error

        try:
            check_run = self._get_repo().create_check_run(
                name=payload.name,
                head_sha=payload.head_sha,
                status=payload.status,
                conclusion=payload.conclusion,
                output=payload.output.to_dict(),
            )
        except Exception as e:
            return self._api_failure(e, "create check run")

        return ServiceResult.ok(CheckRunInfo(id=check_run.id, url=check_run.html_url))

    # =========================================================================
    # Comments
    # =========================================================================

    def list_issue_comments(self, issue_number: int) -> ServiceResult[list[CommentRecord]]:
        """Return the first page of comments on an issue or pull request."""

        validation_error = self._validate()
        if validation_error:
            return validation_error

        try:
            comments = self._get_issue(issue_number).get_comments().get_page(0)
            records = []
            for comment in comments:
                self._comments[comment.id] = comment
                records.append(CommentRecord(
                    id=comment.id,
                    author=comment.user.login if comment.user else "",
                    body=comment.body or "",
                ))
        except Exception as e:
            return self._api_failure(e, f"list comments on #{issue_number}")

        return ServiceResult.ok(records)

    def delete_issue_comment(self, comment_id: int) -> ServiceResult[int]:
        """Delete an issue comment.

        Comments seen by list_issue_comments are deleted directly; any other id
        is fetched from the repository first.
        """

        validation_error = self._validate()
        if validation_error:
            return validation_error

        try:
            comment = self._comments.get(comment_id)
            if comment is None:
                comment = self._get_repo().get_issue_comment(comment_id)
            comment.delete()
        except Exception as e:
            return self._api_failure(e, f"delete comment {comment_id}")

        self._comments.pop(comment_id, None)
        return ServiceResult.ok(comment_id)

    def create_issue_comment(self, issue_number: int, body: str) -> ServiceResult[CommentInfo]:
        """Post a comment on an issue or pull request."""

        validation_error = self._validate()
        if validation_error:
            return validation_error

        try:
            comment = self._get_issue(issue_number).create_comment(body)
        except Exception as e:
            return self._api_failure(e, f"post comment on #{issue_number}")

        return ServiceResult.ok(CommentInfo(id=comment.id, url=comment.html_url))

    # =========================================================================
    # Helpers
    # =========================================================================

    def _validate(self) -> ServiceResult | None:
        """Token and repository must be present before any call."""

        if not self._token:
            return ServiceResult.fail(
                ErrorCode.GITHUB_AUTH_ERROR,
                "GitHub token required. Set GITHUB_TOKEN environment variable."
            )

        if not parse_repository(self._repository):
            return ServiceResult.fail(
                ErrorCode.VALIDATION_ERROR,
                f"Invalid GitHub repository: {self._repository!r}"
            )

        return None

    def _api_failure(self, error: Exception, action: str) -> ServiceResult:
        """Map a PyGithub error to a failed ServiceResult."""

        status = error.status if isinstance(error, GithubException) else None
        logger.error(f"GitHub API call failed ({action}): {error}")

        if status in (401, 403):
            return ServiceResult.fail(
                ErrorCode.GITHUB_AUTH_ERROR,
                f"Failed to {action}: authentication failed. Check your GITHUB_TOKEN permissions.",
                details={"status": status}
            )
        if status == 404:
            return ServiceResult.fail(
                ErrorCode.GITHUB_NOT_FOUND,
                f"Failed to {action}: not found or no access in {self.full_name}",
                details={"status": status}
            )
        return ServiceResult.fail(
            ErrorCode.GITHUB_API_ERROR,
            f"Failed to {action}: {error}",
            details={"status": status} if status else None
        )


def parse_repository(value: str) -> tuple[str, str] | None:
    """Parse 'owner/name' or a GitHub URL into (owner, name)."""

    for pattern in REPOSITORY_PATTERNS:
        match = re.search(pattern, value or "")
        if match:
            return match.group(1), match.group(2)

    return None
