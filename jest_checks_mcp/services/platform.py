"""Platform client interface.

The publishing services only need four operations from the code host. They
depend on this protocol; GitHubService implements it, tests pass a fake.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..core.checks import CheckPayload
from .base import ServiceResult


@dataclass(frozen=True)
class CheckRunInfo:
    """Information about a created check run."""
    id: int
    url: str


@dataclass(frozen=True)
class CommentRecord:
    """An existing issue/PR comment."""
    id: int
    author: str
    body: str


@dataclass(frozen=True)
class CommentInfo:
    """Information about a posted comment."""
    id: int
    url: str


class PlatformClient(Protocol):
    """Operations the publisher performs against the code host."""

    def create_check_run(self, payload: CheckPayload) -> ServiceResult[CheckRunInfo]:
        ...

    def list_issue_comments(self, issue_number: int) -> ServiceResult[list[CommentRecord]]:
        """First page of comments on the issue or pull request."""
        ...

    def delete_issue_comment(self, comment_id: int) -> ServiceResult[int]:
        ...

    def create_issue_comment(
        self,
        issue_number: int,
        body: str
    ) -> ServiceResult[CommentInfo]:
        ...
